# tests/test_receivables.py
import pytest

from backend.models.client_model import Client

FIN = "/api/financial"


@pytest.fixture
def invoices(client, ledger, outlet):
    made = []
    for amount, due in ((300, "2025-02-15"), (200, "2025-01-10")):
        made.append(client.post(f"{FIN}/invoices", json={
            "clientId": outlet.id, "invoiceDate": "2025-01-01", "dueDate": due, "totalAmount": amount,
        }).json()["data"])
    return made


def bulk(client, outlet, ledger, payments):
    return client.post(f"{FIN}/receivables/bulk-payment", json={
        "clientId": outlet.id, "paymentDate": "2025-02-01", "paymentMethod": "cash",
        "accountId": ledger["1100"], "payments": payments,
    })


def test_invoices_are_numbered_and_raise_client_balance(client, invoices, outlet):
    assert [i["invoiceNumber"] for i in invoices] == ["INV-000001", "INV-000002"]
    assert all(i["status"] == "unpaid" and i["balance"] == i["totalAmount"] for i in invoices)
    assert client.get(f"/api/clients/{outlet.id}").json()["data"]["balance"] == 500


def test_bulk_payment_creates_one_receipt_per_nonzero_line(client, ledger, outlet, invoices):
    res = bulk(client, outlet, ledger, [
        {"invoiceId": invoices[0]["id"], "amount": 100},
        {"invoiceId": invoices[1]["id"], "amount": 0},
    ])
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["totalAmount"] == 100
    assert [(r["receiptNumber"], r["status"], r["invoiceNumber"]) for r in data["receipts"]] == [
        ("RCT-000001", "in pay", "INV-000001"),
    ]


def test_bulk_payment_is_all_or_nothing(client, ledger, outlet, invoices):
    res = bulk(client, outlet, ledger, [
        {"invoiceId": invoices[0]["id"], "amount": 100},
        {"invoiceId": invoices[1]["id"], "amount": 250},
    ])
    assert res.status_code == 400
    assert res.json()["error"] == "Amount 250.00 exceeds outstanding balance 200.00 for invoice INV-000002"
    assert client.get(f"{FIN}/receipts").json()["data"] == []


def test_pending_receipts_count_against_the_outstanding_balance(client, ledger, outlet, invoices):
    assert bulk(client, outlet, ledger, [{"invoiceId": invoices[1]["id"], "amount": 150}]).status_code == 201
    second = bulk(client, outlet, ledger, [{"invoiceId": invoices[1]["id"], "amount": 60}])
    assert second.status_code == 400
    assert "outstanding balance 50.00" in second.json()["error"]


def test_bulk_payment_needs_a_positive_line(client, ledger, outlet, invoices):
    res = bulk(client, outlet, ledger, [{"invoiceId": invoices[0]["id"], "amount": 0}])
    assert res.status_code == 400
    assert res.json()["error"] == "Enter an amount for at least one invoice"


def test_invoice_of_another_client_is_rejected(client, db, ledger, outlet, invoices, geo):
    other = Client(name="Other", contact="1", country_id=geo["kenya"], region_id=geo["nairobi"], balance=0)
    db.add(other)
    db.commit()
    res = client.post(f"{FIN}/receivables/bulk-payment", json={
        "clientId": other.id, "paymentDate": "2025-02-01", "accountId": ledger["1100"],
        "payments": [{"invoiceId": invoices[0]["id"], "amount": 10}],
    })
    assert res.status_code == 400
    assert res.json()["error"] == f"Invoice {invoices[0]['id']} does not belong to this client"


def test_confirming_a_receipt_settles_the_invoice_and_posts(client, ledger, outlet, invoices):
    receipt = bulk(client, outlet, ledger, [{"invoiceId": invoices[1]["id"], "amount": 200}]).json()["data"]["receipts"][0]

    res = client.post(f"{FIN}/receivables/confirm-payment", json={"receiptId": receipt["id"]})
    assert res.status_code == 200
    confirmed = res.json()["data"]
    assert confirmed["status"] == "confirmed"

    invoice = client.get(f"{FIN}/invoices/{invoices[1]['id']}").json()["data"]
    assert (invoice["amountPaid"], invoice["balance"], invoice["status"]) == (200, 0, "paid")
    assert client.get(f"/api/clients/{outlet.id}").json()["data"]["balance"] == 300

    entry = client.get(f"{FIN}/journal-entries/{confirmed['journalEntryId']}").json()["data"]
    assert [(l["accountCode"], l["debitAmount"], l["creditAmount"]) for l in entry["lines"]] == [
        ("1100", 200, 0), ("1200", 0, 200),
    ]

    pending = client.get(f"{FIN}/invoices", params={"clientId": outlet.id, "pendingOnly": "true"}).json()["data"]
    assert [i["id"] for i in pending] == [invoices[0]["id"]]

    again = client.post(f"{FIN}/receivables/confirm-payment", json={"receiptId": receipt["id"]})
    assert again.json()["error"] == "Payment is already confirmed"


def test_partial_payment_status(client, ledger, outlet, invoices):
    receipt = bulk(client, outlet, ledger, [{"invoiceId": invoices[0]["id"], "amount": 50}]).json()["data"]["receipts"][0]
    client.post(f"{FIN}/receivables/confirm-payment", json={"receiptId": receipt["id"]})
    assert client.get(f"{FIN}/invoices/{invoices[0]['id']}").json()["data"]["status"] == "partially paid"


def test_receivables_aging(client, ledger, outlet, invoices):
    rows = client.get(f"{FIN}/receivables/aging", params={"asOf": "2025-02-01"}).json()["data"]
    assert len(rows) == 1
    assert rows[0]["partyName"] == "Mama Mboga Stores"
    assert (rows[0]["current"], rows[0]["1-30"]) == (300, 200)
    assert rows[0]["total"] == 500
