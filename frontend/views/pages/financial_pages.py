# frontend/views/pages/financial_pages.py
from PySide6.QtWidgets import QMessageBox, QPushButton

from frontend.services import api_client
from frontend.services.api_client import ApiError
from frontend.views.pages import choices
from frontend.views.pages.equity_bulk_dialog import EquityBulkDialog
from frontend.views.pages.ledger_dialog import LedgerDialog
from frontend.views.widgets.form_dialog import FieldSpec, FormDialog
from frontend.views.widgets.resource_table_page import ResourceTablePage

FIN = "/api/financial"


def accounts_page():
    page = ResourceTablePage(
        "Chart of Accounts", f"{FIN}/accounts",
        columns=[("accountCode", "Code"), ("accountName", "Name"), ("accountType", "Type"),
                 ("description", "Description"), ("isActive", "Active")],
        fields=[
            FieldSpec("accountCode", "Code", required=True),
            FieldSpec("accountName", "Name", required=True),
            FieldSpec("accountType", "Type", "choice", required=True, choices=choices.ACCOUNT_TYPES),
            FieldSpec("parentAccountId", "Parent account", "choice", choices=choices.accounts),
            FieldSpec("description", "Description", "multiline"),
            FieldSpec("isActive", "Active", "bool"),
        ],
    )
    page.add_action("Ledger", lambda row: LedgerDialog(row, parent=page).exec())
    return page


def suppliers_page():
    return ResourceTablePage(
        "Suppliers", f"{FIN}/suppliers",
        columns=[("supplierCode", "Code"), ("companyName", "Company"), ("contactPerson", "Contact"),
                 ("phone", "Phone"), ("email", "Email"), ("paymentTerms", "Terms (days)"),
                 ("isActive", "Active")],
        fields=[
            FieldSpec("supplierCode", "Code", required=True),
            FieldSpec("companyName", "Company", required=True),
            FieldSpec("contactPerson", "Contact person"),
            FieldSpec("email", "Email"),
            FieldSpec("phone", "Phone"),
            FieldSpec("address", "Address", "multiline"),
            FieldSpec("taxId", "Tax ID"),
            FieldSpec("paymentTerms", "Payment terms (days)", "int", default=30),
            FieldSpec("creditLimit", "Credit limit", "number"),
            FieldSpec("isActive", "Active", "bool"),
        ],
    )


def supplier_invoices_page():
    return ResourceTablePage(
        "Supplier Invoices", f"{FIN}/supplier-invoices",
        columns=[("invoiceNumber", "Invoice"), ("supplierName", "Supplier"), ("invoiceDate", "Date"),
                 ("dueDate", "Due"), ("totalAmount", "Total"), ("amountPaid", "Paid"), ("balance", "Balance")],
        fields=[
            FieldSpec("supplierId", "Supplier", "choice", required=True, choices=choices.suppliers),
            FieldSpec("invoiceNumber", "Invoice number", required=True),
            FieldSpec("invoiceDate", "Invoice date", "date", required=True),
            FieldSpec("dueDate", "Due date", "date"),
            FieldSpec("totalAmount", "Total amount", "number", required=True),
            FieldSpec("notes", "Notes", "multiline"),
        ],
        can_edit=False, can_delete=False,
    )


class PendingPaymentsPage(ResourceTablePage):
    """Supplier payments waiting for confirmation; confirming posts them to the ledger."""

    def __init__(self, parent=None):
        super().__init__(
            "Pending Supplier Payments", f"{FIN}/payments",
            columns=[("paymentNumber", "Payment"), ("supplierName", "Supplier"), ("paymentDate", "Date"),
                     ("paymentMethod", "Method"), ("referenceNumber", "Reference"), ("amount", "Amount"),
                     ("status", "Status")],
            fields=[
                FieldSpec("supplierId", "Supplier", "choice", required=True, choices=choices.suppliers),
                FieldSpec("paymentDate", "Payment date", "date", required=True),
                FieldSpec("paymentMethod", "Method", "choice", required=True, choices=choices.PAYMENT_METHODS),
                FieldSpec("accountId", "Paid from", "choice", choices=choices.cash_accounts),
                FieldSpec("amount", "Amount", "number", required=True),
                FieldSpec("referenceNumber", "Reference"),
                FieldSpec("notes", "Notes", "multiline"),
            ],
            can_edit=False, parent=parent,
        )
        self.params = {"status": "in pay"}
        self.add_action("Confirm", self.confirm)

    def confirm(self, row: dict):
        try:
            api_client.confirm_supplier_payment(row["id"])
        except ApiError as e:
            self.show_error(str(e))
            return
        QMessageBox.information(self, "Payment confirmed", f"{row['paymentNumber']} was posted")
        self.load()


class AssetsPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Assets", f"{FIN}/assets-with-depreciation",
            columns=[("name", "Asset"), ("assetType", "Type"), ("purchaseDate", "Purchased"),
                     ("purchaseValue", "Cost"), ("accumulatedDepreciation", "Depreciation"),
                     ("netBookValue", "Net book value")],
            fields=[
                FieldSpec("name", "Name", required=True),
                FieldSpec("assetType", "Type"),
                FieldSpec("purchaseDate", "Purchase date", "date", required=True),
                FieldSpec("purchaseValue", "Purchase value", "number", required=True),
                FieldSpec("description", "Description", "multiline"),
            ],
            can_edit=False, parent=parent,
        )
        self.add_action("Depreciate", self.depreciate)

    def item_path(self, row: dict) -> str:
        return f"{FIN}/assets/{row['id']}"

    def on_add(self):
        dlg = FormDialog("Add Asset", self.fields,
                         submit=lambda v: api_client.post(f"{FIN}/assets", v), parent=self)
        if dlg.exec() == FormDialog.Accepted:
            self.load()

    def depreciate(self, row: dict):
        fields = [
            FieldSpec("amount", f"Amount (max {row.get('netBookValue', 0):,.2f})", "number", required=True),
            FieldSpec("date", "Date", "date", required=True),
            FieldSpec("depreciationAccountId", "Accumulated depreciation account", "choice",
                      required=True, choices=choices.depreciation_accounts),
            FieldSpec("description", "Description"),
        ]
        dlg = FormDialog(f"Depreciate {row['name']}", fields,
                         submit=lambda v: api_client.record_depreciation(dict(v, assetId=row["id"])),
                         parent=self)
        if dlg.exec() == FormDialog.Accepted:
            self.load()


def depreciation_history_page():
    return ResourceTablePage(
        "Depreciation History", f"{FIN}/depreciation-history",
        columns=[("date", "Date"), ("assetName", "Asset"), ("amount", "Amount"),
                 ("accountName", "Account"), ("description", "Description")],
        can_add=False, can_edit=False, can_delete=False,
    )


class EquityEntriesPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Equity Entries", f"{FIN}/equity-entries",
            columns=[("entryDate", "Date"), ("accountCode", "Code"), ("accountName", "Account"),
                     ("amount", "Amount"), ("reference", "Reference"), ("description", "Description")],
            can_add=False, can_edit=False, can_delete=False, parent=parent,
        )
        bulk = QPushButton("Add entries")
        bulk.clicked.connect(self.open_bulk)
        self.add_widget(bulk)

    def open_bulk(self):
        if EquityBulkDialog(self).exec() == EquityBulkDialog.Accepted:
            self.load()


class CategoriesPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Categories", f"{FIN}/categories",
            columns=[("id", "ID"), ("name", "Name"), ("optionsText", "Price options")],
            fields=[FieldSpec("name", "Name", required=True)], parent=parent,
        )
        self.add_action("Add price option", self.add_option)
        self.add_action("Remove price options", self.clear_options)

    def fetch(self):
        rows, pagination = super().fetch()
        for row in rows:
            row["optionsText"] = ", ".join(f"{o['label']}: {o['value']:,.2f}" for o in row.get("priceOptions") or [])
        return rows, pagination

    def add_option(self, row: dict):
        fields = [FieldSpec("label", "Label", required=True), FieldSpec("value", "Price", "number", required=True)]
        dlg = FormDialog(f"Price option for {row['name']}", fields,
                         submit=lambda v: api_client.post(f"{FIN}/categories/{row['id']}/price-options", v),
                         parent=self)
        if dlg.exec() == FormDialog.Accepted:
            self.load()

    def clear_options(self, row: dict):
        options = row.get("priceOptions") or []
        if not options or QMessageBox.question(self, "Price options",
                                               f"Remove {len(options)} price option(s)?") != QMessageBox.Yes:
            return
        try:
            for option in options:
                api_client.delete(f"{FIN}/price-options/{option['id']}")
        except ApiError as e:
            self.show_error(str(e))
        self.load()


def products_page():
    fields = [
        FieldSpec("productCode", "Code", required=True),
        FieldSpec("productName", "Name", required=True),
        FieldSpec("categoryId", "Category", "choice", choices=choices.categories),
        FieldSpec("unitOfMeasure", "Unit", default="pcs"),
        FieldSpec("costPrice", "Cost price", "number"),
        FieldSpec("sellingPrice", "Selling price", "number"),
        FieldSpec("reorderLevel", "Reorder level", "int"),
        FieldSpec("currentStock", "Current stock", "int"),
        FieldSpec("imageUrl", "Image URL"),
        FieldSpec("description", "Description", "multiline"),
        FieldSpec("isActive", "Active", "bool"),
    ]
    return ResourceTablePage(
        "Products", f"{FIN}/products",
        columns=[("productCode", "Code"), ("productName", "Name"), ("categoryName", "Category"),
                 ("sellingPrice", "Price"), ("currentStock", "Stock"), ("reorderLevel", "Reorder at"),
                 ("isActive", "Active")],
        fields=fields,
    )
