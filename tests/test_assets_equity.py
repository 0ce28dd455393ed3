# tests/test_assets_equity.py
import pytest

FIN = "/api/financial"


@pytest.fixture
def vehicle(client, ledger):
    return client.post(f"{FIN}/assets", json={
        "name": "Delivery Van", "assetType": "vehicle", "purchaseDate": "2024-01-01", "purchaseValue": 1000,
    }).json()["data"]


def depreciate(client, ledger, asset_id, amount, account="1510"):
    return client.post(f"{FIN}/depreciation", json={
        "assetId": asset_id, "amount": amount, "date": "2024-12-31",
        "depreciationAccountId": ledger[account],
    })


def test_depreciation_reduces_net_book_value_and_posts(client, ledger, vehicle):
    res = depreciate(client, ledger, vehicle["id"], 400)
    assert res.status_code == 201
    rec = res.json()["data"]
    assert rec["description"] == "Depreciation of Delivery Van"

    asset = client.get(f"{FIN}/assets/{vehicle['id']}").json()["data"]
    assert (asset["accumulatedDepreciation"], asset["netBookValue"]) == (400, 600)

    entry = client.get(f"{FIN}/journal-entries/{rec['journalEntryId']}").json()["data"]
    assert entry["status"] == "posted"
    assert [(l["accountCode"], l["debitAmount"], l["creditAmount"]) for l in entry["lines"]] == [
        ("6100", 400, 0), ("1510", 0, 400),
    ]


def test_depreciation_cannot_exceed_net_book_value(client, ledger, vehicle):
    assert depreciate(client, ledger, vehicle["id"], 700).status_code == 201
    res = depreciate(client, ledger, vehicle["id"], 300.5)
    assert res.status_code == 400
    assert res.json()["error"] == "Depreciation amount exceeds net book value (300.00)"
    assert depreciate(client, ledger, vehicle["id"], 300).status_code == 201


def test_depreciation_needs_an_accumulated_depreciation_account(client, ledger, vehicle):
    res = depreciate(client, ledger, vehicle["id"], 10, account="1100")
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid depreciation account"
    accounts = client.get(f"{FIN}/depreciation-accounts").json()["data"]
    assert [a["accountCode"] for a in accounts] == ["1510"]


def test_asset_with_depreciation_cannot_be_deleted(client, ledger, vehicle):
    depreciate(client, ledger, vehicle["id"], 10)
    assert client.delete(f"{FIN}/assets/{vehicle['id']}").status_code == 400
    history = client.get(f"{FIN}/depreciation-history").json()["data"]
    assert [(h["assetName"], h["amount"]) for h in history] == [("Delivery Van", 10)]


def test_equity_entry_credits_the_equity_account(client, ledger):
    res = client.post(f"{FIN}/equity-entries", json={
        "accountId": ledger["3100"], "amount": 5000, "entryDate": "2025-01-02",
    })
    assert res.status_code == 201
    entry = res.json()["data"]
    assert entry["accountCode"] == "3100"
    assert entry["description"] == "Capital contribution to Owner Capital"

    cash = {a["accountCode"]: a["balance"] for a in client.get(f"{FIN}/cash-equivalents/accounts").json()["data"]}
    assert cash["1100"] == 5000


def test_single_equity_entry_error_has_no_line_prefix(client, ledger):
    res = client.post(f"{FIN}/equity-entries", json={
        "accountId": ledger["1100"], "amount": 10, "entryDate": "2025-01-02",
    })
    assert res.status_code == 400
    assert res.json()["error"] == "Account must be an equity account"


def test_bulk_equity_entries_are_all_or_nothing(client, ledger):
    res = client.post(f"{FIN}/equity-entries/bulk", json={"entries": [
        {"accountId": ledger["3100"], "amount": 100, "entryDate": "2025-01-02"},
        {"accountId": ledger["1200"], "amount": 50, "entryDate": "2025-01-02"},
    ]})
    assert res.status_code == 400
    assert res.json()["error"] == "Entry 2: Account must be an equity account"
    assert client.get(f"{FIN}/equity-entries").json()["data"] == []
    assert client.get(f"{FIN}/journal-entries").json()["data"] == []

    ok = client.post(f"{FIN}/equity-entries/bulk", json={"entries": [
        {"accountId": ledger["3100"], "amount": 100, "entryDate": "2025-01-02"},
        {"accountId": ledger["3000"], "amount": 50, "entryDate": "2025-01-03"},
    ]})
    assert ok.status_code == 201
    assert len(ok.json()["data"]) == 2


def test_opening_balance_feeds_the_cash_ledger(client, ledger):
    res = client.post(f"{FIN}/cash-equivalents/opening-balance", json={
        "accountId": ledger["1110"], "amount": 2500, "date": "2025-01-01",
    })
    assert res.status_code == 201
    assert res.json()["data"]["reference"] == "OPENING"

    ledger_view = client.get(f"{FIN}/cash-equivalents/accounts/{ledger['1110']}/ledger").json()["data"]
    assert ledger_view["closingBalance"] == 2500
    assert [t["runningBalance"] for t in ledger_view["transactions"]] == [2500]


def test_opening_balance_requires_a_cash_account(client, ledger):
    res = client.post(f"{FIN}/cash-equivalents/opening-balance", json={
        "accountId": ledger["3100"], "amount": 10, "date": "2025-01-01",
    })
    assert res.status_code == 400
    assert client.get(f"{FIN}/cash-equivalents/accounts/{ledger['3100']}/ledger").status_code == 404


def test_dashboard_stats(client, ledger, outlet, vehicle):
    client.post(f"{FIN}/invoices", json={"clientId": outlet.id, "invoiceDate": "2025-01-01", "totalAmount": 120})
    client.post(f"{FIN}/products", json={
        "productCode": "P-1", "productName": "Soap", "reorderLevel": 5, "currentStock": 2,
    })
    client.post(f"{FIN}/cash-equivalents/opening-balance", json={
        "accountId": ledger["1100"], "amount": 300, "date": "2025-01-01",
    })
    stats = client.get(f"{FIN}/dashboard/stats").json()["data"]
    assert stats["totalReceivables"] == 120
    assert stats["totalPayables"] == 0
    assert stats["totalAssets"] == 1000
    assert stats["cashBalance"] == 300
    assert stats["lowStockItems"] == 1
    assert stats["pendingReceipts"] == 0
