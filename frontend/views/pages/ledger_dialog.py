# frontend/views/pages/ledger_dialog.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox, QDateEdit, QDialog, QHBoxLayout, QHeaderView, QLabel, QPushButton,
    QTableWidget, QTableWidgetItem, QVBoxLayout,
)

from frontend.services import api_client, ledger_service
from frontend.services.api_client import ApiError
from frontend.views.widgets.resource_table_page import format_cell

COLUMNS = [("entryDate", "Date"), ("entryNumber", "Entry"), ("reference", "Reference"),
           ("description", "Description"), ("debitAmount", "Debit"), ("creditAmount", "Credit"),
           ("runningBalance", "Balance")]


class LedgerDialog(QDialog):
    """Running-balance ledger of one account with an optional date range."""

    def __init__(self, account: dict, cash: bool = False, parent=None):
        super().__init__(parent)
        self.account = account
        self.cash = cash
        self.setWindowTitle(f"Ledger: {account.get('accountCode', '')} {account.get('accountName', '')}")
        self.resize(900, 560)

        layout = QVBoxLayout(self)
        filters = QHBoxLayout()
        self.use_range = QCheckBox("Date range")
        self.start = QDateEdit(QDate.currentDate().addMonths(-1), calendarPopup=True)
        self.end = QDateEdit(QDate.currentDate(), calendarPopup=True)
        for d in (self.start, self.end):
            d.setDisplayFormat("yyyy-MM-dd")
        btn = QPushButton("Apply")
        btn.clicked.connect(self.load)
        for w in (self.use_range, QLabel("From"), self.start, QLabel("To"), self.end, btn):
            filters.addWidget(w)
        filters.addStretch()
        layout.addLayout(filters)

        self.error_label = QLabel(objectName="Error")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.summary = QLabel()
        layout.addWidget(self.summary)

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels([h for _, h in COLUMNS])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        layout.addWidget(self.table)

        self.setStyleSheet("QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }")
        self.load()

    def load(self):
        start = end = None
        if self.use_range.isChecked():
            start = self.start.date().toString("yyyy-MM-dd")
            end = self.end.date().toString("yyyy-MM-dd")
        try:
            ledger = api_client.get_account_ledger(self.account["id"], start, end, cash=self.cash)
        except ApiError as e:
            self.error_label.setText(str(e))
            self.error_label.show()
            return
        self.error_label.hide()

        s = ledger_service.summarize(ledger)
        self.summary.setText(
            f"Opening {s['startingBalance']:,.2f}   Debits {s['totalDebit']:,.2f}   "
            f"Credits {s['totalCredit']:,.2f}   Closing {s['endingBalance']:,.2f}   "
            f"Net change {s['netChange']:,.2f}"
        )
        rows = ledger.get("transactions") or []
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c, (key, _) in enumerate(COLUMNS):
                self.table.setItem(r, c, QTableWidgetItem(format_cell(row.get(key))))
