# frontend/views/main_window.py
from typing import Callable, Dict

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from frontend.services.auth_service import AuthService
from frontend.views.pages import (
    cash_page, dashboard_page, financial_pages, journal_page, receivables_page, reports_page, requests_pages,
    sales_pages,
)
from frontend.views.widgets.side_menu import SideMenu

MENU = [
    ("REQUESTS", [
        ("service_types", "Service Types"),
        ("requests", "Requests"),
        ("staff", "Staff"),
    ]),
    ("FINANCIAL", [
        ("dashboard", "Dashboard"),
        ("accounts", "Chart of Accounts"),
        ("journal", "Journal Entries"),
        ("suppliers", "Suppliers"),
        ("supplier_invoices", "Supplier Invoices"),
        ("pending_payments", "Pending Payments"),
        ("receivables", "Receivables"),
        ("receipts", "Unconfirmed Receipts"),
        ("cash", "Cash & Equivalents"),
        ("assets", "Assets"),
        ("depreciation", "Depreciation History"),
        ("equity", "Equity Entries"),
        ("categories", "Categories"),
        ("products", "Products"),
    ]),
    ("SALES", [
        ("clients", "Clients"),
        ("sales_reps", "Sales Reps"),
        ("managers", "Managers"),
        ("notices", "Notices"),
        ("tasks", "Calendar Tasks"),
        ("feedback_reports", "Feedback Reports"),
        ("visibility_reports", "Visibility Reports"),
    ]),
]

PAGE_FACTORIES: Dict[str, Callable[[], QWidget]] = {
    "service_types": requests_pages.service_types_page,
    "requests": requests_pages.RequestsPage,
    "staff": requests_pages.staff_page,
    "dashboard": dashboard_page.DashboardPage,
    "accounts": financial_pages.accounts_page,
    "journal": journal_page.JournalEntriesPage,
    "suppliers": financial_pages.suppliers_page,
    "supplier_invoices": financial_pages.supplier_invoices_page,
    "pending_payments": financial_pages.PendingPaymentsPage,
    "receivables": receivables_page.ReceivablesPage,
    "receipts": receivables_page.ReceiptsPage,
    "cash": cash_page.CashAccountsPage,
    "assets": financial_pages.AssetsPage,
    "depreciation": financial_pages.depreciation_history_page,
    "equity": financial_pages.EquityEntriesPage,
    "categories": financial_pages.CategoriesPage,
    "products": financial_pages.products_page,
    "clients": sales_pages.clients_page,
    "sales_reps": sales_pages.SalesRepsPage,
    "managers": sales_pages.managers_page,
    "notices": sales_pages.NoticesPage,
    "tasks": sales_pages.TasksPage,
    "feedback_reports": reports_page.feedback_reports_page,
    "visibility_reports": reports_page.visibility_reports_page,
}


class MainWindow(QMainWindow):
    def __init__(self, current_user: dict):
        super().__init__()
        self.current_user = current_user
        self.pages: Dict[str, QWidget] = {}
        self.logged_out = False
        self.setWindowTitle("Back-office")
        self.resize(1280, 800)

        central = QWidget(self)
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        header = QFrame(objectName="Header")
        header.setFixedHeight(64)
        h = QHBoxLayout(header)
        h.setContentsMargins(24, 12, 24, 12)
        h.addWidget(QLabel("Back-office", objectName="Title"))
        h.addStretch()
        user_label = QLabel(f"{current_user.get('username')} ({current_user.get('role')})", objectName="User")
        user_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        h.addWidget(user_label)
        root.addWidget(header)

        body = QHBoxLayout()
        body.setSpacing(0)
        self.menu = SideMenu(MENU)
        self.menu.page_requested.connect(self.show_page)
        self.menu.logout_requested.connect(self.logout)
        self.stack = QStackedWidget(objectName="ContentStack")
        welcome = QLabel("Choose a page from the menu", objectName="Muted")
        welcome.setAlignment(Qt.AlignCenter)
        self.stack.addWidget(welcome)
        body.addWidget(self.menu)
        body.addWidget(self.stack)
        root.addLayout(body)

        self.setStyleSheet("""
            QFrame#Header { background: #ffffff; border-bottom: 1px solid #e5e7eb; }
            QLabel#Title { font-size: 22px; font-weight: bold; color: #111; }
            QLabel#User { color: #6b7280; }
            QLabel#Muted { color: #9ca3af; font-size: 16px; }
            QStackedWidget#ContentStack { background: #f9fafb; }
        """)

    def show_page(self, key: str):
        page = self.pages.get(key)
        if page is None:
            page = PAGE_FACTORIES[key]()
            self.pages[key] = page
            self.stack.addWidget(page)
        self.stack.setCurrentWidget(page)

    def logout(self):
        AuthService().logout()
        self.logged_out = True
        self.close()
