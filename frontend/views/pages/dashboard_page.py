# frontend/views/pages/dashboard_page.py
import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from frontend.services import api_client
from frontend.services.api_client import ApiError
from frontend.views.widgets.resource_table_page import format_cell

logger = logging.getLogger(__name__)

# (key in the stats payload, caption)
CARDS = [
    ("cashBalance", "Cash balance"),
    ("totalReceivables", "Receivables outstanding"),
    ("totalPayables", "Payables outstanding"),
    ("totalAssets", "Assets at cost"),
    ("pendingReceipts", "Unconfirmed receipts"),
    ("pendingPayments", "Pending payments"),
    ("lowStockItems", "Products at reorder level"),
]


class DashboardPage(QWidget):
    """Headline financial figures, refetched every time the page is shown."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.values = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        head = QHBoxLayout()
        head.addWidget(QLabel("Dashboard", objectName="PageTitle"))
        head.addStretch()
        refresh = QPushButton("Refresh")
        refresh.clicked.connect(self.load)
        head.addWidget(refresh)
        layout.addLayout(head)

        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        grid = QGridLayout()
        grid.setSpacing(12)
        for i, (key, caption) in enumerate(CARDS):
            card = QFrame(objectName="statCard")
            box = QVBoxLayout(card)
            box.addWidget(QLabel(caption, objectName="Caption"))
            value = QLabel("-", objectName="Value")
            value.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
            box.addWidget(value)
            self.values[key] = value
            grid.addWidget(card, i // 4, i % 4)
        layout.addLayout(grid)
        layout.addStretch()

        self.setStyleSheet("""
            QLabel#PageTitle { font-size:20px; font-weight:700; color:#111827; }
            QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }
            QFrame#statCard { background:#ffffff; border:1px solid #e5e7eb; border-radius:8px; }
            QLabel#Caption { color:#6b7280; }
            QLabel#Value { font-size:22px; font-weight:700; color:#111827; }
        """)

    def showEvent(self, event):
        super().showEvent(event)
        self.load()

    def load(self):
        self.error_label.hide()
        try:
            stats = api_client.get_dashboard_stats() or {}
        except ApiError as e:
            logger.warning("Loading dashboard stats failed: %s", e)
            self.error_label.setText(str(e))
            self.error_label.show()
            return
        for key, label in self.values.items():
            label.setText(format_cell(stats.get(key)))
