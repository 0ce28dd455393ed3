# frontend/main.py
"""
Desktop back-office client.

Run:
    python -m frontend.main
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from frontend.views.login_dialog import LoginDialog
from frontend.views.main_window import MainWindow


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    while True:
        login = LoginDialog()
        if login.exec() != LoginDialog.Accepted or not login.user:
            return 0
        w = MainWindow(current_user=login.user)
        w.show()
        app.exec()
        # logging out returns to the login dialog, closing the window quits
        if not w.logged_out:
            return 0


if __name__ == "__main__":
    sys.exit(main())
