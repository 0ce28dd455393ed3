# frontend/views/pages/choices.py
"""Option lists for FormDialog choice fields, fetched when a dialog opens."""
from frontend.services import api_client

ACCOUNT_TYPES = [
    ("Asset", 1), ("Liability", 2), ("Revenue", 4), ("Expense", 5),
    ("Cash equivalent", 9), ("Equity", 13), ("Accumulated depreciation", 17),
]
PAYMENT_METHODS = [("Cash", "cash"), ("Bank transfer", "bank_transfer"), ("Cheque", "cheque"),
                   ("Mobile money", "mobile_money"), ("Card", "card")]
MANAGER_TYPES = [("Retail", "Retail"), ("Key Account", "Key Account"), ("Distribution", "Distribution")]
TASK_STATUSES = [("Pending", "Pending"), ("In Progress", "In Progress"), ("Completed", "Completed")]
ACTIVE_STATUS = [("Active", 1), ("Inactive", 0)]


def service_types():
    return [(t["name"], t["id"]) for t in api_client.get("/api/service-types")]


def accounts(account_type=None):
    return [(f"{a['accountCode']} {a['accountName']}", a["id"]) for a in api_client.get_accounts(account_type)]


def cash_accounts():
    return [(f"{a['accountCode']} {a['accountName']}", a["id"]) for a in api_client.get_cash_accounts()]


def depreciation_accounts():
    rows = api_client.get("/api/financial/depreciation-accounts")
    return [(f"{a['accountCode']} {a['accountName']}", a["id"]) for a in rows]


def suppliers():
    return [(s["companyName"], s["id"]) for s in api_client.get("/api/financial/suppliers")]


def categories():
    return [(c["name"], c["id"]) for c in api_client.get("/api/financial/categories")]


def countries():
    return [(c["name"], c["id"]) for c in api_client.get_countries()]


def country_names():
    return [(c["name"], c["name"]) for c in api_client.get_countries()]


def regions():
    return [(r["name"], r["id"]) for r in api_client.get_regions()]


def client_types():
    return [(t["name"], t["id"]) for t in api_client.get("/api/clients/types")]


def clients():
    rows, _ = api_client.get_clients(page=1, limit=100)
    return [(c["name"], c["id"]) for c in rows]


def assets():
    return [(a["name"], a["id"]) for a in api_client.get("/api/financial/assets")]
