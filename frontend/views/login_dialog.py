# frontend/views/login_dialog.py
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QFrame, QLabel, QLineEdit, QPushButton, QVBoxLayout

from frontend.services.auth_service import AuthService


class LoginDialog(QDialog):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Sign in - Back-office")
        self.resize(520, 440)
        self.auth = AuthService()
        self.user = None

        self.setStyleSheet("""
            QDialog { background: #f3f4f6; font-family: 'Segoe UI', Arial, sans-serif; }
            QFrame#Card { background: rgba(255,255,255,0.96); border-radius: 14px; padding: 24px; }
            QLabel#Title { font-size: 28px; font-weight: 800; color: #111827; }
            QLabel#Sub { color:#6b7280; font-size: 13px; margin: 4px 0 16px; }
            QLineEdit { padding: 12px; font-size: 14px; border:1px solid #d1d5db; border-radius:8px; background:#fff; }
            QLineEdit:focus { border-color: #2563eb; }
            QPushButton#Primary { background:#2563eb; color:#fff; padding: 12px; border-radius:8px; font-weight:600; }
            QPushButton#Primary:hover { background:#1d4ed8; }
            QLabel#Error { color:#dc2626; font-size:13px; padding:8px; background:#fef2f2; border-radius:8px; }
        """)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(40, 40, 40, 40)
        card = QFrame(objectName="Card")
        layout = QVBoxLayout(card)
        layout.setSpacing(10)

        title = QLabel("Welcome back", objectName="Title")
        title.setAlignment(Qt.AlignCenter)
        sub = QLabel("Sign in to manage requests, finance and sales", objectName="Sub")
        sub.setAlignment(Qt.AlignCenter)

        self.username = QLineEdit(placeholderText="Username")
        self.password = QLineEdit(placeholderText="Password")
        self.password.setEchoMode(QLineEdit.Password)
        self.password.returnPressed.connect(self.do_login)

        self.error = QLabel(objectName="Error")
        self.error.setWordWrap(True)
        self.error.hide()

        btn = QPushButton("Sign in", objectName="Primary")
        btn.clicked.connect(self.do_login)

        for w in (title, sub, self.username, self.password, self.error, btn):
            layout.addWidget(w)
        outer.addWidget(card)

    def do_login(self):
        ok, user, err = self.auth.login(self.username.text(), self.password.text())
        if not ok:
            self.error.setText(err or "Login failed")
            self.error.show()
            return
        self.user = user
        self.accept()
