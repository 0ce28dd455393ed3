# frontend/views/pages/receivables_page.py
from PySide6.QtCore import QDate, Qt
from PySide6.QtWidgets import (
    QComboBox, QDateEdit, QDialog, QDialogButtonBox, QDoubleSpinBox, QFormLayout, QHeaderView,
    QLabel, QLineEdit, QMessageBox, QTableWidget, QTableWidgetItem, QVBoxLayout,
)

from frontend.services import api_client, receivables_service
from frontend.services.api_client import ApiError
from frontend.views.pages import choices
from frontend.views.widgets.resource_table_page import ResourceTablePage, format_cell

FIN = "/api/financial"


class BulkPaymentDialog(QDialog):
    """One amount per pending invoice of a client, sent as a single batch."""

    def __init__(self, client: dict, invoices: list, parent=None):
        super().__init__(parent)
        self.client = client
        self.invoices = invoices
        self.setWindowTitle(f"Receive payment: {client['name']}")
        self.resize(820, 520)

        layout = QVBoxLayout(self)
        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        form = QFormLayout()
        self.payment_date = QDateEdit(QDate.currentDate(), calendarPopup=True)
        self.payment_date.setDisplayFormat("yyyy-MM-dd")
        self.method = QComboBox()
        for label, value in choices.PAYMENT_METHODS:
            self.method.addItem(label, value)
        self.account = QComboBox()
        self.reference = QLineEdit()
        self.notes = QLineEdit()
        form.addRow("Payment date", self.payment_date)
        form.addRow("Method", self.method)
        form.addRow("Received into", self.account)
        form.addRow("Reference", self.reference)
        form.addRow("Notes", self.notes)
        layout.addLayout(form)

        self.table = QTableWidget(len(invoices), 5)
        self.table.setHorizontalHeaderLabels(["Invoice", "Date", "Due", "Balance", "Amount"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.amount_inputs = {}
        for r, inv in enumerate(invoices):
            for c, key in enumerate(("invoiceNumber", "invoiceDate", "dueDate", "balance")):
                self.table.setItem(r, c, QTableWidgetItem(format_cell(inv.get(key))))
            spin = QDoubleSpinBox()
            spin.setDecimals(2)
            spin.setRange(0, receivables_service.invoice_balance(inv))
            spin.valueChanged.connect(lambda v, i=inv, s=spin: self._on_amount(i, s, v))
            self.amount_inputs[inv["id"]] = spin
            self.table.setCellWidget(r, 4, spin)
        layout.addWidget(self.table)

        self.total_label = QLabel(alignment=Qt.AlignRight)
        layout.addWidget(self.total_label)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.setStyleSheet("QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }")

        try:
            for label, value in choices.cash_accounts():
                self.account.addItem(label, value)
        except ApiError as e:
            self._error(str(e))
        self._update_total()

    def _error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def _on_amount(self, invoice: dict, spin: QDoubleSpinBox, value: float):
        clamped = receivables_service.clamp_amount(invoice, value)
        if clamped != round(value, 2):
            spin.setValue(clamped)
        self._update_total()

    def amounts(self):
        return {invoice_id: spin.value() for invoice_id, spin in self.amount_inputs.items()}

    def _update_total(self):
        self.total_label.setText(f"Total: {receivables_service.bulk_total(self.amounts()):,.2f}")

    def _on_save(self):
        if self.account.currentData() is None:
            self._error("Choose the account the money was received into")
            return
        payload = receivables_service.build_bulk_payload(
            self.client["id"], self.amounts(),
            payment_date=self.payment_date.date().toString("yyyy-MM-dd"),
            account_id=self.account.currentData(),
            payment_method=self.method.currentData(),
            reference=self.reference.text().strip(),
            notes=self.notes.text().strip(),
        )
        try:
            result = receivables_service.submit_bulk_payment(payload)
        except ApiError as e:
            self._error(str(e))
            return
        QMessageBox.information(self, "Payment recorded",
                                f"{len(result['receipts'])} receipt(s), total {result['totalAmount']:,.2f}")
        self.accept()


class ReceivablesPage(ResourceTablePage):
    """Pending invoices of one client, with the bulk payment dialog."""

    def __init__(self, parent=None):
        super().__init__(
            "Receivables", f"{FIN}/invoices",
            columns=[("invoiceNumber", "Invoice"), ("clientName", "Client"), ("invoiceDate", "Date"),
                     ("dueDate", "Due"), ("totalAmount", "Total"), ("amountPaid", "Paid"),
                     ("balance", "Balance"), ("status", "Status")],
            can_add=False, can_edit=False, can_delete=False, parent=parent,
        )
        self.params = {"pendingOnly": "true"}
        self.client_box = QComboBox()
        self.client_box.addItem("All clients", None)
        self.client_box.currentIndexChanged.connect(self._on_client)
        self.add_widget(self.client_box)
        self.add_action("Receive payment", self.receive_payment)

    def load(self):
        if self.client_box.count() == 1:
            try:
                for label, value in choices.clients():
                    self.client_box.addItem(label, value)
            except ApiError as e:
                self.show_error(str(e))
                return
        super().load()

    def _on_client(self):
        client_id = self.client_box.currentData()
        self.params = {"pendingOnly": "true"}
        if client_id:
            self.params["clientId"] = client_id
        super().load()

    def receive_payment(self, row: dict):
        client = {"id": row["clientId"], "name": row.get("clientName") or ""}
        try:
            invoices = api_client.get_pending_invoices(client["id"])
        except ApiError as e:
            self.show_error(str(e))
            return
        if BulkPaymentDialog(client, invoices, self).exec() == QDialog.Accepted:
            self.load()


class ReceiptsPage(ResourceTablePage):
    """Receipts recorded but not yet posted to the ledger."""

    def __init__(self, parent=None):
        super().__init__(
            "Unconfirmed Receipts", f"{FIN}/receipts",
            columns=[("receiptNumber", "Receipt"), ("clientName", "Client"), ("invoiceNumber", "Invoice"),
                     ("receiptDate", "Date"), ("paymentMethod", "Method"), ("amount", "Amount"),
                     ("status", "Status")],
            can_add=False, can_edit=False, can_delete=False, parent=parent,
        )
        self.params = {"status": "in pay"}
        self.add_action("Confirm", self.confirm)

    def confirm(self, row: dict):
        try:
            api_client.confirm_receipt(row["id"])
        except ApiError as e:
            self.show_error(str(e))
            return
        self.load()
