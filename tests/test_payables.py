# tests/test_payables.py
import pytest

FIN = "/api/financial"


@pytest.fixture
def supplier(client):
    return client.post(f"{FIN}/suppliers", json={
        "supplierCode": "SUP-01", "companyName": "Acme Packaging", "paymentTerms": 30,
    }).json()["data"]


def test_supplier_code_is_unique(client, supplier):
    res = client.post(f"{FIN}/suppliers", json={"supplierCode": "SUP-01", "companyName": "Other"})
    assert res.status_code == 400


def test_payment_is_numbered_and_pending(client, ledger, supplier):
    first = client.post(f"{FIN}/payments", json={
        "supplierId": supplier["id"], "paymentDate": "2025-02-01", "amount": 250,
    })
    assert first.status_code == 201
    data = first.json()["data"]
    assert data["paymentNumber"] == "PAY-000001"
    assert data["status"] == "in pay"
    assert data["supplierName"] == "Acme Packaging"

    second = client.post(f"{FIN}/payments", json={
        "supplierId": supplier["id"], "paymentDate": "2025-02-02", "amount": 10,
    }).json()["data"]
    assert second["paymentNumber"] == "PAY-000002"

    pending = client.get(f"{FIN}/payments", params={"status": "in pay"}).json()["data"]
    assert {p["id"] for p in pending} == {data["id"], second["id"]}


def test_confirming_a_payment_posts_it(client, ledger, supplier):
    invoice = client.post(f"{FIN}/supplier-invoices", json={
        "supplierId": supplier["id"], "invoiceNumber": "A-77", "invoiceDate": "2025-01-15", "totalAmount": 1000,
    }).json()["data"]
    payment = client.post(f"{FIN}/payments", json={
        "supplierId": supplier["id"], "supplierInvoiceId": invoice["id"], "paymentDate": "2025-02-01",
        "amount": 400, "accountId": ledger["1110"], "paymentMethod": "bank_transfer",
    }).json()["data"]

    res = client.post(f"{FIN}/payables/confirm-payment", json={"paymentId": payment["id"]})
    assert res.status_code == 200
    confirmed = res.json()["data"]
    assert confirmed["status"] == "confirmed"
    assert confirmed["journalEntryId"]

    entry = client.get(f"{FIN}/journal-entries/{confirmed['journalEntryId']}").json()["data"]
    assert entry["status"] == "posted"
    assert [(l["accountCode"], l["debitAmount"], l["creditAmount"]) for l in entry["lines"]] == [
        ("2000", 400, 0), ("1110", 0, 400),
    ]
    assert client.get(f"{FIN}/supplier-invoices/{invoice['id']}").json()["data"]["balance"] == 600

    again = client.post(f"{FIN}/payables/confirm-payment", json={"paymentId": payment["id"]})
    assert again.status_code == 400
    assert again.json()["error"] == "Payment is already confirmed"
    assert client.delete(f"{FIN}/payments/{payment['id']}").status_code == 400


def test_payment_without_account_comes_out_of_cash(client, ledger, supplier):
    payment = client.post(f"{FIN}/payments", json={
        "supplierId": supplier["id"], "paymentDate": "2025-02-01", "amount": 75,
    }).json()["data"]
    client.post(f"{FIN}/payables/confirm-payment", json={"paymentId": payment["id"]})
    cash = client.get(f"{FIN}/accounts/{ledger['1100']}/ledger").json()["data"]
    assert cash["closingBalance"] == -75


def test_invoice_must_belong_to_supplier(client, ledger, supplier):
    other = client.post(f"{FIN}/suppliers", json={"supplierCode": "SUP-02", "companyName": "Beta"}).json()["data"]
    invoice = client.post(f"{FIN}/supplier-invoices", json={
        "supplierId": other["id"], "invoiceNumber": "B-1", "invoiceDate": "2025-01-15", "totalAmount": 10,
    }).json()["data"]
    res = client.post(f"{FIN}/payments", json={
        "supplierId": supplier["id"], "supplierInvoiceId": invoice["id"], "paymentDate": "2025-02-01", "amount": 5,
    })
    assert res.status_code == 400
    assert res.json()["error"] == "Invoice does not belong to this supplier"


def test_payables_aging(client, ledger, supplier):
    for number, due, amount in (("X-1", "2025-03-01", 100), ("X-2", "2025-01-15", 50), ("X-3", "2024-11-20", 25)):
        client.post(f"{FIN}/supplier-invoices", json={
            "supplierId": supplier["id"], "invoiceNumber": number, "invoiceDate": "2024-10-01",
            "dueDate": due, "totalAmount": amount,
        })
    rows = client.get(f"{FIN}/payables/aging", params={"asOf": "2025-02-01"}).json()["data"]
    assert len(rows) == 1
    row = rows[0]
    assert row["partyName"] == "Acme Packaging"
    assert (row["current"], row["1-30"], row["31-60"], row["61-90"], row["90+"]) == (100, 50, 0, 25, 0)
    assert row["total"] == 175


def test_payment_cannot_exceed_what_is_owed(client, ledger, supplier):
    invoice = client.post(f"{FIN}/supplier-invoices", json={
        "supplierId": supplier["id"], "invoiceNumber": "C-9", "invoiceDate": "2025-01-15", "totalAmount": 100,
    }).json()["data"]
    payment = {"supplierId": supplier["id"], "supplierInvoiceId": invoice["id"], "paymentDate": "2025-02-01"}

    too_much = client.post(f"{FIN}/payments", json={**payment, "amount": 500})
    assert too_much.status_code == 400
    assert too_much.json()["error"] == "Amount 500.00 exceeds outstanding balance 100.00 for invoice C-9"
    assert client.get(f"{FIN}/payments").json()["data"] == []

    first = client.post(f"{FIN}/payments", json={**payment, "amount": 60}).json()["data"]
    second = client.post(f"{FIN}/payments", json={**payment, "amount": 50})
    assert second.json()["error"] == "Amount 50.00 exceeds outstanding balance 40.00 for invoice C-9"

    raised = client.put(f"{FIN}/payments/{first['id']}", json={"amount": 120})
    assert raised.status_code == 400
    assert raised.json()["error"] == "Amount 120.00 exceeds outstanding balance 100.00 for invoice C-9"
    assert client.put(f"{FIN}/payments/{first['id']}", json={"amount": 100}).status_code == 200

    assert client.post(f"{FIN}/payables/confirm-payment", json={"paymentId": first["id"]}).status_code == 200
    assert client.get(f"{FIN}/supplier-invoices/{invoice['id']}").json()["data"]["balance"] == 0
