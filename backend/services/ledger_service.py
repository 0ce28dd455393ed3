# backend/services/ledger_service.py
"""
Double-entry helpers shared by the financial routers.

Nothing here commits: callers add their own rows, call these helpers and
commit once, so an automatic posting and the record that caused it land in
the same transaction.
"""
import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.config.settings import get_settings
from backend.models.account_model import ChartOfAccount
from backend.models.journal_model import JournalEntry, JournalEntryLine

logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = 0.01

AGING_BUCKETS = ("current", "days_1_30", "days_31_60", "days_61_90", "days_over_90")


class LedgerError(Exception):
    """A posting rule was violated; surfaced to the client as a 400."""


def next_number(db: Session, model, column, prefix: str) -> str:
    """PREFIX-000001, PREFIX-000002, ... based on the highest number issued so far."""
    last = (
        db.query(column)
        .filter(column.like(f"{prefix}-%"))
        .order_by(model.id.desc())
        .first()
    )
    seq = 1
    if last and last[0]:
        try:
            seq = int(last[0].rsplit("-", 1)[1]) + 1
        except ValueError:
            seq = db.query(func.count(model.id)).scalar() + 1
    return f"{prefix}-{seq:06d}"


def account_by_code(db: Session, code: str) -> ChartOfAccount:
    account = db.query(ChartOfAccount).filter(ChartOfAccount.account_code == code).first()
    if account is None:
        raise LedgerError(f"Ledger account {code} is not configured")
    return account


def cash_account(db: Session) -> ChartOfAccount:
    return account_by_code(db, get_settings().cash_account_code)


def receivables_account(db: Session) -> ChartOfAccount:
    return account_by_code(db, get_settings().receivables_account_code)


def payables_account(db: Session) -> ChartOfAccount:
    return account_by_code(db, get_settings().payables_account_code)


def opening_equity_account(db: Session) -> ChartOfAccount:
    return account_by_code(db, get_settings().opening_equity_account_code)


def depreciation_expense_account(db: Session) -> ChartOfAccount:
    return account_by_code(db, get_settings().depreciation_expense_account_code)


def totals(lines: Iterable) -> Tuple[float, float]:
    debit = credit = 0.0
    for line in lines:
        debit += float(line.debit_amount or 0)
        credit += float(line.credit_amount or 0)
    return round(debit, 2), round(credit, 2)


def validate_lines(db: Session, lines: Sequence) -> Tuple[float, float]:
    """
    Apply the journal rules to `lines` (objects with account_id,
    debit_amount, credit_amount) and return (total_debit, total_credit).
    """
    total_debit, total_credit = totals(lines)
    if abs(total_debit - total_credit) > BALANCE_TOLERANCE:
        raise LedgerError(
            f"Debits ({total_debit:.2f}) must equal credits ({total_credit:.2f})"
        )
    if len(lines) < 2:
        raise LedgerError("A journal entry needs at least two lines")

    for i, line in enumerate(lines, start=1):
        if not line.account_id:
            raise LedgerError(f"Line {i}: account is required")
        debit = float(line.debit_amount or 0)
        credit = float(line.credit_amount or 0)
        if debit > 0 and credit > 0:
            raise LedgerError(f"Line {i}: enter either a debit or a credit, not both")
        if debit <= 0 and credit <= 0:
            raise LedgerError(f"Line {i}: enter a debit or a credit amount")

    account_ids = {line.account_id for line in lines}
    found = {
        row[0]
        for row in db.query(ChartOfAccount.id).filter(ChartOfAccount.id.in_(list(account_ids)))
    }
    missing = sorted(account_ids - found)
    if missing:
        raise LedgerError(f"Account not found: {missing[0]}")
    return total_debit, total_credit


def build_lines(lines: Sequence) -> List[JournalEntryLine]:
    return [
        JournalEntryLine(
            account_id=line.account_id,
            debit_amount=round(float(line.debit_amount or 0), 2),
            credit_amount=round(float(line.credit_amount or 0), 2),
            description=getattr(line, "description", None),
        )
        for line in lines
    ]


def create_journal_entry(
    db: Session,
    entry_date: date,
    lines: Sequence,
    reference: Optional[str] = None,
    description: Optional[str] = None,
    status: str = "draft",
    created_by: Optional[int] = None,
) -> JournalEntry:
    total_debit, total_credit = validate_lines(db, lines)
    entry = JournalEntry(
        entry_number=next_number(db, JournalEntry, JournalEntry.entry_number, "JE"),
        entry_date=entry_date,
        reference=reference,
        description=description,
        total_debit=total_debit,
        total_credit=total_credit,
        status=status,
        created_by=created_by,
    )
    entry.lines = build_lines(lines)
    db.add(entry)
    db.flush()
    logger.info("Journal entry %s created (%s, %.2f)", entry.entry_number, status, total_debit)
    return entry


def post_transfer(
    db: Session,
    entry_date: date,
    debit_account_id: int,
    credit_account_id: int,
    amount: float,
    reference: Optional[str] = None,
    description: Optional[str] = None,
) -> JournalEntry:
    """Posted two-line entry moving `amount` from the credit account to the debit account."""
    lines = [
        JournalEntryLine(account_id=debit_account_id, debit_amount=amount, credit_amount=0,
                         description=description),
        JournalEntryLine(account_id=credit_account_id, debit_amount=0, credit_amount=amount,
                         description=description),
    ]
    return create_journal_entry(
        db, entry_date, lines, reference=reference, description=description, status="posted"
    )


def _posted_lines(db: Session, account_id: int):
    return (
        db.query(JournalEntryLine, JournalEntry)
        .join(JournalEntry, JournalEntryLine.journal_entry_id == JournalEntry.id)
        .filter(JournalEntryLine.account_id == account_id, JournalEntry.status == "posted")
    )


def account_balance(db: Session, account_id: int, before: Optional[date] = None) -> float:
    """Debit minus credit over posted lines, optionally only those dated before `before`."""
    q = (
        db.query(
            func.coalesce(func.sum(JournalEntryLine.debit_amount), 0),
            func.coalesce(func.sum(JournalEntryLine.credit_amount), 0),
        )
        .join(JournalEntry, JournalEntryLine.journal_entry_id == JournalEntry.id)
        .filter(JournalEntryLine.account_id == account_id, JournalEntry.status == "posted")
    )
    if before is not None:
        q = q.filter(JournalEntry.entry_date < before)
    debit, credit = q.one()
    return round(float(debit) - float(credit), 2)


def running_ledger(db: Session, account_id: int, start_date: Optional[date] = None,
                   end_date: Optional[date] = None) -> dict:
    opening = account_balance(db, account_id, before=start_date) if start_date else 0.0
    q = _posted_lines(db, account_id)
    if start_date:
        q = q.filter(JournalEntry.entry_date >= start_date)
    if end_date:
        q = q.filter(JournalEntry.entry_date <= end_date)
    rows = q.order_by(JournalEntry.entry_date, JournalEntry.id, JournalEntryLine.id).all()

    balance = opening
    transactions = []
    for line, entry in rows:
        debit = float(line.debit_amount or 0)
        credit = float(line.credit_amount or 0)
        balance = round(balance + debit - credit, 2)
        transactions.append({
            "id": line.id,
            "journal_entry_id": entry.id,
            "entry_number": entry.entry_number,
            "entry_date": entry.entry_date,
            "reference": entry.reference,
            "description": line.description or entry.description,
            "debit_amount": debit,
            "credit_amount": credit,
            "running_balance": balance,
        })
    return {"opening_balance": opening, "closing_balance": balance, "transactions": transactions}


def aging_bucket(due_date: Optional[date], as_of: date) -> str:
    if due_date is None or due_date >= as_of:
        return "current"
    overdue = (as_of - due_date).days
    if overdue <= 30:
        return "days_1_30"
    if overdue <= 60:
        return "days_31_60"
    if overdue <= 90:
        return "days_61_90"
    return "days_over_90"


def aging_report(items: Iterable[Tuple[int, str, Optional[date], float]], as_of: date) -> List[dict]:
    """
    Group (party_id, party_name, due_date, outstanding) rows into aging
    buckets per party. Fully settled rows are ignored.
    """
    report = {}
    for party_id, party_name, due_date, outstanding in items:
        if outstanding <= BALANCE_TOLERANCE:
            continue
        row = report.setdefault(party_id, {
            "party_id": party_id, "party_name": party_name,
            **{bucket: 0.0 for bucket in AGING_BUCKETS}, "total": 0.0,
        })
        bucket = aging_bucket(due_date, as_of)
        row[bucket] = round(row[bucket] + outstanding, 2)
        row["total"] = round(row["total"] + outstanding, 2)
    return sorted(report.values(), key=lambda r: r["party_name"] or "")
