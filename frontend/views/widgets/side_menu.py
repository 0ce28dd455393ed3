# frontend/views/widgets/side_menu.py
from typing import List, Tuple

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget

MenuSection = Tuple[str, List[Tuple[str, str]]]   # (section title, [(page key, label)])


class SideMenu(QFrame):
    page_requested = Signal(str)
    logout_requested = Signal()

    def __init__(self, sections: List[MenuSection], parent=None):
        super().__init__(parent)
        self.setObjectName("sideMenu")
        self.setFixedWidth(240)
        self.buttons = {}

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(12, 16, 12, 16)
        layout.setSpacing(4)
        for title, items in sections:
            layout.addWidget(QLabel(title, objectName="menuSection"))
            for key, text in items:
                btn = QPushButton(text, objectName="menuItem")
                btn.setCheckable(True)
                btn.clicked.connect(lambda _=False, k=key: self.select(k))
                self.buttons[key] = btn
                layout.addWidget(btn)
        layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(container)
        outer.addWidget(scroll)

        logout = QPushButton("Log out", objectName="menuItem")
        logout.clicked.connect(self.logout_requested.emit)
        outer.addWidget(logout)

        self.setStyleSheet("""
            QFrame#sideMenu { background:#fff; border-right:1px solid #e5e7eb; }
            QLabel#menuSection { font-size:12px; font-weight:700; color:#6b7280; padding:12px 8px 4px; }
            QPushButton#menuItem {
                background:transparent; border:none; border-radius:8px; padding:10px 12px;
                text-align:left; font-size:14px; color:#374151;
            }
            QPushButton#menuItem:hover { background:#dbeafe; color:#1d4ed8; }
            QPushButton#menuItem:checked { background:#bfdbfe; color:#1e40af; font-weight:600; }
        """)

    def select(self, key: str):
        for k, btn in self.buttons.items():
            btn.setChecked(k == key)
        self.page_requested.emit(key)
