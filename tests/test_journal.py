# tests/test_journal.py
import pytest

PATH = "/api/financial/journal-entries"


def lines(*pairs):
    return [{"accountId": a, "debitAmount": d, "creditAmount": c} for a, d, c in pairs]


@pytest.fixture
def cash_and_equity(ledger):
    return ledger["1100"], ledger["3100"]


def test_balanced_entry_is_saved_as_draft(client, cash_and_equity):
    cash, equity = cash_and_equity
    res = client.post(PATH, json={
        "entryDate": "2025-01-10", "reference": "CAP-1", "description": "Capital",
        "lines": lines((cash, 500, 0), (equity, 0, 500)),
    })
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["entryNumber"] == "JE-000001"
    assert data["status"] == "draft"
    assert (data["totalDebit"], data["totalCredit"]) == (500, 500)
    assert [(l["accountCode"], l["debitAmount"], l["creditAmount"]) for l in data["lines"]] == [
        ("1100", 500, 0), ("3100", 0, 500),
    ]


def test_unbalanced_entry_names_both_totals(client, cash_and_equity):
    cash, equity = cash_and_equity
    res = client.post(PATH, json={"entryDate": "2025-01-10", "lines": lines((cash, 100, 0), (equity, 0, 90))})
    assert res.status_code == 400
    assert res.json()["error"] == "Debits (100.00) must equal credits (90.00)"
    assert client.get(PATH).json()["data"] == []


def test_balance_is_checked_before_accounts(client, ledger):
    res = client.post(PATH, json={
        "entryDate": "2025-01-10", "reference": "R1", "description": "Test",
        "lines": [{"debitAmount": 100, "creditAmount": 0}, {"debitAmount": 0, "creditAmount": 90}],
    })
    assert res.status_code == 400
    assert res.json()["error"] == "Debits (100.00) must equal credits (90.00)"


@pytest.mark.parametrize("bad_lines, message", [
    ([(1, 0, 0)], "A journal entry needs at least two lines"),
    ([(None, 100, 0), (1, 0, 100)], "Line 1: account is required"),
    ([(1, 100, 100), (1, 0, 0)], "Line 1: enter either a debit or a credit, not both"),
    ([(1, 100, 0), (1, 0, 100), (1, 0, 0)], "Line 3: enter a debit or a credit amount"),
    ([(1, 100, 0), (999, 0, 100)], "Account not found: 999"),
])
def test_line_rules(client, ledger, bad_lines, message):
    res = client.post(PATH, json={"entryDate": "2025-01-10", "lines": lines(*bad_lines)})
    assert res.status_code == 400
    assert res.json()["error"] == message


def test_posting_locks_the_entry(client, cash_and_equity):
    cash, equity = cash_and_equity
    entry = client.post(PATH, json={"entryDate": "2025-01-10",
                                    "lines": lines((cash, 50, 0), (equity, 0, 50))}).json()["data"]

    edited = client.put(f"{PATH}/{entry['id']}", json={"description": "Top-up"}).json()["data"]
    assert edited["description"] == "Top-up"
    assert len(edited["lines"]) == 2

    posted = client.patch(f"{PATH}/{entry['id']}/post")
    assert posted.json()["data"]["status"] == "posted"
    assert client.patch(f"{PATH}/{entry['id']}/post").json()["error"] == "Journal entry is already posted"
    assert client.put(f"{PATH}/{entry['id']}", json={"description": "x"}).json()["error"] == \
        "Only draft entries can be edited"
    assert client.delete(f"{PATH}/{entry['id']}").status_code == 400


def test_replacing_lines_revalidates(client, cash_and_equity):
    cash, equity = cash_and_equity
    entry = client.post(PATH, json={"entryDate": "2025-01-10",
                                    "lines": lines((cash, 50, 0), (equity, 0, 50))}).json()["data"]
    bad = client.put(f"{PATH}/{entry['id']}", json={"lines": lines((cash, 70, 0), (equity, 0, 50))})
    assert bad.status_code == 400

    good = client.put(f"{PATH}/{entry['id']}", json={"lines": lines((cash, 70, 0), (equity, 0, 70))})
    assert good.json()["data"]["totalDebit"] == 70


def test_draft_can_be_deleted(client, cash_and_equity):
    cash, equity = cash_and_equity
    entry = client.post(PATH, json={"entryDate": "2025-01-10",
                                    "lines": lines((cash, 5, 0), (equity, 0, 5))}).json()["data"]
    assert client.delete(f"{PATH}/{entry['id']}").status_code == 204
    assert client.get(f"{PATH}/{entry['id']}").status_code == 404


def test_account_ledger_runs_over_posted_entries_only(client, cash_and_equity):
    cash, equity = cash_and_equity
    for day, amount, post in (("2025-01-05", 100, True), ("2025-01-20", 40, True), ("2025-01-25", 999, False)):
        client.post(PATH, json={"entryDate": day, "lines": lines((cash, amount, 0), (equity, 0, amount)),
                                "post": post})
    client.post(PATH, json={"entryDate": "2025-02-01", "post": True,
                            "lines": lines((equity, 30, 0), (cash, 0, 30))})

    full = client.get(f"/api/financial/accounts/{cash}/ledger").json()["data"]
    assert [t["runningBalance"] for t in full["transactions"]] == [100, 140, 110]
    assert full["openingBalance"] == 0
    assert full["closingBalance"] == 110

    window = client.get(f"/api/financial/accounts/{cash}/ledger",
                        params={"start_date": "2025-01-10", "end_date": "2025-01-31"}).json()["data"]
    assert window["openingBalance"] == 100
    assert [t["debitAmount"] for t in window["transactions"]] == [40]
    assert window["closingBalance"] == 140


def test_accounts_crud_and_guards(client, ledger):
    res = client.post("/api/financial/accounts", json={"accountCode": "1100", "accountName": "Dup", "accountType": 9})
    assert res.status_code == 400
    assert res.json()["error"] == "Account code already exists"

    child = client.post("/api/financial/accounts", json={
        "accountCode": "1101", "accountName": "Petty cash", "accountType": 9, "parentAccountId": ledger["1100"],
    }).json()["data"]
    assert client.delete(f"/api/financial/accounts/{ledger['1100']}").json()["error"] == "Account has sub-accounts"

    assert [a["accountCode"] for a in client.get("/api/financial/accounts",
                                                  params={"accountType": 9}).json()["data"]] == ["1100", "1101", "1110"]
    assert client.delete(f"/api/financial/accounts/{child['id']}").status_code == 204


def test_account_with_lines_cannot_be_deleted(client, cash_and_equity):
    cash, equity = cash_and_equity
    client.post(PATH, json={"entryDate": "2025-01-10", "lines": lines((cash, 5, 0), (equity, 0, 5))})
    res = client.delete(f"/api/financial/accounts/{equity}")
    assert res.status_code == 409
    assert res.json()["error"] == "Account has journal entries"
