# frontend/views/pages/journal_page.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QDialog, QDialogButtonBox, QDoubleSpinBox, QFormLayout,
    QHBoxLayout, QHeaderView, QLabel, QLineEdit, QMessageBox, QPushButton, QTableWidget, QVBoxLayout,
)

from frontend.services import api_client, journal_service
from frontend.services.api_client import ApiError
from frontend.views.pages import choices
from frontend.views.widgets.resource_table_page import ResourceTablePage

PATH = "/api/financial/journal-entries"


class JournalEntryDialog(QDialog):
    """New manual entry; totals update as amounts are typed and Save is blocked until they balance."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New journal entry")
        self.resize(900, 520)
        self.account_choices = []

        layout = QVBoxLayout(self)
        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        form = QFormLayout()
        self.entry_date = QDateEdit(QDate.currentDate(), calendarPopup=True)
        self.entry_date.setDisplayFormat("yyyy-MM-dd")
        self.reference = QLineEdit()
        self.description = QLineEdit()
        self.post_now = QCheckBox("Post immediately")
        form.addRow("Date *", self.entry_date)
        form.addRow("Reference *", self.reference)
        form.addRow("Description *", self.description)
        form.addRow("", self.post_now)
        layout.addLayout(form)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Account", "Debit", "Credit", "Memo"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self.table)

        line_buttons = QHBoxLayout()
        add = QPushButton("Add line")
        add.clicked.connect(self.add_line)
        remove = QPushButton("Remove line")
        remove.clicked.connect(self.remove_line)
        self.totals_label = QLabel(objectName="Totals")
        line_buttons.addWidget(add)
        line_buttons.addWidget(remove)
        line_buttons.addStretch()
        line_buttons.addWidget(self.totals_label)
        layout.addLayout(line_buttons)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.setStyleSheet("""
            QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }
            QLabel#Totals { font-weight:600; }
        """)

        try:
            self.account_choices = choices.accounts()
        except ApiError as e:
            self._error(str(e))
        self.add_line()
        self.add_line()

    def _error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def add_line(self):
        r = self.table.rowCount()
        self.table.insertRow(r)
        account = QComboBox()
        account.addItem("Select account", None)
        for label, value in self.account_choices:
            account.addItem(label, value)
        debit, credit = QDoubleSpinBox(), QDoubleSpinBox()
        for spin in (debit, credit):
            spin.setRange(0, 1e12)
            spin.setDecimals(2)
            spin.valueChanged.connect(self._update_totals)
        for c, w in enumerate((account, debit, credit, QLineEdit())):
            self.table.setCellWidget(r, c, w)
        self._update_totals()

    def remove_line(self):
        if self.table.rowCount() > 2:
            row = self.table.currentRow()
            self.table.removeRow(row if row >= 0 else self.table.rowCount() - 1)
            self._update_totals()

    def lines(self):
        return [
            {
                "accountId": self.table.cellWidget(r, 0).currentData(),
                "debitAmount": self.table.cellWidget(r, 1).value(),
                "creditAmount": self.table.cellWidget(r, 2).value(),
                "description": self.table.cellWidget(r, 3).text().strip() or None,
            }
            for r in range(self.table.rowCount())
        ]

    def entry(self) -> dict:
        return {
            "entryDate": self.entry_date.date().toString("yyyy-MM-dd"),
            "reference": self.reference.text().strip(),
            "description": self.description.text().strip(),
            "lines": self.lines(),
            "post": self.post_now.isChecked(),
        }

    def _update_totals(self):
        lines = self.lines()
        debit, credit = journal_service.calculate_totals(lines)
        state = "balanced" if journal_service.is_balanced(lines) else "out of balance"
        self.totals_label.setText(f"Debits {debit:,.2f}   Credits {credit:,.2f}   ({state})")

    def _on_save(self):
        try:
            journal_service.submit_entry(self.entry())
        except ApiError as e:
            self._error(str(e))
            return
        self.accept()


class JournalEntriesPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Journal Entries", PATH,
            columns=[("entryNumber", "Entry"), ("entryDate", "Date"), ("reference", "Reference"),
                     ("description", "Description"), ("totalDebit", "Debit"), ("totalCredit", "Credit"),
                     ("status", "Status")],
            can_edit=False, parent=parent,
        )
        self.btn_add.setVisible(True)
        self.add_action("Post", self.post_entry)

    def on_add(self):
        if JournalEntryDialog(self).exec() == QDialog.Accepted:
            self.load()

    def post_entry(self, row: dict):
        if row.get("status") == "posted":
            QMessageBox.information(self, "Journal", "This entry is already posted")
            return
        try:
            api_client.post_journal_entry(row["id"])
        except ApiError as e:
            self.show_error(str(e))
            return
        self.load()
