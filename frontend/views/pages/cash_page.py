# frontend/views/pages/cash_page.py
from frontend.services import api_client
from frontend.views.pages.ledger_dialog import LedgerDialog
from frontend.views.widgets.form_dialog import FieldSpec, FormDialog
from frontend.views.widgets.resource_table_page import ResourceTablePage


class CashAccountsPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Cash & Equivalents", "/api/financial/cash-equivalents/accounts",
            columns=[("accountCode", "Code"), ("accountName", "Account"), ("balance", "Balance")],
            can_add=False, can_edit=False, can_delete=False, parent=parent,
        )
        self.add_action("Ledger", lambda row: LedgerDialog(row, cash=True, parent=self).exec())
        self.add_action("Opening balance", self.opening_balance)

    def opening_balance(self, row: dict):
        fields = [
            FieldSpec("amount", "Amount", "number", required=True),
            FieldSpec("date", "Date", "date", required=True),
            FieldSpec("description", "Description"),
        ]
        dlg = FormDialog(
            f"Opening balance: {row['accountName']}", fields,
            submit=lambda v: api_client.post("/api/financial/cash-equivalents/opening-balance",
                                             dict(v, accountId=row["id"])),
            parent=self,
        )
        if dlg.exec() == FormDialog.Accepted:
            self.load()
