# frontend/views/pages/equity_bulk_dialog.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox, QDateEdit, QDialog, QDialogButtonBox, QDoubleSpinBox, QHBoxLayout, QHeaderView,
    QLabel, QLineEdit, QPushButton, QTableWidget, QVBoxLayout,
)

from frontend.services import api_client
from frontend.services.api_client import ApiError
from frontend.views.pages import choices

EQUITY_TYPE = 13


class EquityBulkDialog(QDialog):
    """Several equity contributions sent as one all-or-nothing batch."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Equity entries")
        self.resize(860, 420)
        self.account_choices = []

        layout = QVBoxLayout(self)
        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.table = QTableWidget(0, 5)
        self.table.setHorizontalHeaderLabels(["Equity account", "Amount", "Date", "Reference", "Description"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self.table)

        row_buttons = QHBoxLayout()
        add = QPushButton("Add row")
        add.clicked.connect(self.add_row)
        remove = QPushButton("Remove row")
        remove.clicked.connect(self.remove_row)
        self.total_label = QLabel()
        row_buttons.addWidget(add)
        row_buttons.addWidget(remove)
        row_buttons.addStretch()
        row_buttons.addWidget(self.total_label)
        layout.addLayout(row_buttons)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.setStyleSheet("QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }")

        try:
            self.account_choices = choices.accounts(EQUITY_TYPE)
        except ApiError as e:
            self._error(str(e))
        self.add_row()

    def _error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def add_row(self):
        r = self.table.rowCount()
        self.table.insertRow(r)
        account = QComboBox()
        for label, value in self.account_choices:
            account.addItem(label, value)
        amount = QDoubleSpinBox()
        amount.setRange(0, 1e12)
        amount.setDecimals(2)
        amount.valueChanged.connect(self._update_total)
        when = QDateEdit(QDate.currentDate(), calendarPopup=True)
        when.setDisplayFormat("yyyy-MM-dd")
        for c, w in enumerate((account, amount, when, QLineEdit(), QLineEdit())):
            self.table.setCellWidget(r, c, w)
        self._update_total()

    def remove_row(self):
        if self.table.rowCount() > 1:
            self.table.removeRow(self.table.currentRow() if self.table.currentRow() >= 0 else self.table.rowCount() - 1)
            self._update_total()

    def entries(self):
        out = []
        for r in range(self.table.rowCount()):
            amount = self.table.cellWidget(r, 1).value()
            if amount <= 0:
                continue
            out.append({
                "accountId": self.table.cellWidget(r, 0).currentData(),
                "amount": round(amount, 2),
                "entryDate": self.table.cellWidget(r, 2).date().toString("yyyy-MM-dd"),
                "reference": self.table.cellWidget(r, 3).text().strip() or None,
                "description": self.table.cellWidget(r, 4).text().strip() or None,
            })
        return out

    def _update_total(self):
        total = sum(e["amount"] for e in self.entries())
        self.total_label.setText(f"Total: {total:,.2f}")

    def _on_save(self):
        entries = self.entries()
        if not entries:
            self._error("Enter an amount for at least one row")
            return
        if any(not e["accountId"] for e in entries):
            self._error("Every row needs an equity account")
            return
        try:
            api_client.bulk_equity_entries(entries)
        except ApiError as e:
            self._error(str(e))
            return
        self.accept()
