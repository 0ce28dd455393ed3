# tests/test_ledger_service.py
from datetime import date
from types import SimpleNamespace

import pytest

from backend.models.receivable_model import Receipt
from backend.services import ledger_service
from backend.services.ledger_service import LedgerError

AS_OF = date(2025, 6, 30)


@pytest.mark.parametrize("due, bucket", [
    (None, "current"),
    (date(2025, 7, 1), "current"),
    (AS_OF, "current"),
    (date(2025, 6, 29), "days_1_30"),
    (date(2025, 5, 31), "days_1_30"),
    (date(2025, 5, 30), "days_31_60"),
    (date(2025, 4, 1), "days_61_90"),
    (date(2025, 3, 31), "days_over_90"),
])
def test_aging_bucket(due, bucket):
    assert ledger_service.aging_bucket(due, AS_OF) == bucket


def test_aging_report_groups_by_party_and_skips_settled_rows():
    rows = ledger_service.aging_report([
        (2, "Zed", date(2025, 6, 1), 40.0),
        (1, "Amy", None, 10.0),
        (1, "Amy", date(2025, 1, 1), 5.0),
        (3, "Paid Up", date(2025, 1, 1), 0.0),
    ], AS_OF)
    assert [r["party_name"] for r in rows] == ["Amy", "Zed"]
    assert (rows[0]["current"], rows[0]["days_over_90"], rows[0]["total"]) == (10.0, 5.0, 15.0)
    assert rows[1]["days_1_30"] == 40.0


def test_next_number_continues_from_the_last_issued(db, outlet, ledger):
    assert ledger_service.next_number(db, Receipt, Receipt.receipt_number, "RCT") == "RCT-000001"
    db.add(Receipt(receipt_number="RCT-000041", client_id=outlet.id, invoice_id=1,
                   receipt_date=date(2025, 1, 1), payment_method="cash", account_id=ledger["1100"],
                   amount=1, status="in pay"))
    db.flush()
    assert ledger_service.next_number(db, Receipt, Receipt.receipt_number, "RCT") == "RCT-000042"


def test_missing_system_account_is_a_ledger_error(db):
    with pytest.raises(LedgerError, match="Ledger account 1100 is not configured"):
        ledger_service.cash_account(db)


def test_running_balance_ignores_drafts(db, ledger):
    ledger_service.post_transfer(db, date(2025, 1, 1), ledger["1100"], ledger["3000"], 100)
    ledger_service.create_journal_entry(db, date(2025, 1, 2), [
        SimpleNamespace(account_id=ledger["1100"], debit_amount=50, credit_amount=0),
        SimpleNamespace(account_id=ledger["3000"], debit_amount=0, credit_amount=50),
    ])
    ledger_service.post_transfer(db, date(2025, 1, 3), ledger["6100"], ledger["1100"], 30)

    view = ledger_service.running_ledger(db, ledger["1100"])
    assert [t["running_balance"] for t in view["transactions"]] == [100, 70]
    assert ledger_service.account_balance(db, ledger["1100"]) == 70
    assert ledger_service.account_balance(db, ledger["1100"], before=date(2025, 1, 3)) == 100
