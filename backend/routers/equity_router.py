# backend/routers/equity_router.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.account_model import AccountType, ChartOfAccount
from backend.models.asset_model import EquityEntry
from backend.schemas.assets import EquityBulkCreate, EquityEntryCreate, EquityEntryOut
from backend.services import ledger_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/equity-entries", tags=["financial"])


def _to_out(e: EquityEntry) -> EquityEntryOut:
    out = EquityEntryOut.model_validate(e)
    if e.account is not None:
        out.account_code = e.account.account_code
        out.account_name = e.account.account_name
    return out


def _stage_entry(db: Session, body: EquityEntryCreate, line_no: int = 0) -> EquityEntry:
    prefix = f"Entry {line_no}: " if line_no else ""
    account = db.get(ChartOfAccount, body.account_id)
    if account is None or account.account_type != AccountType.EQUITY:
        raise HTTPException(status_code=400, detail=f"{prefix}Account must be an equity account")
    description = body.description or f"Capital contribution to {account.account_name}"
    journal = ledger_service.post_transfer(
        db,
        body.entry_date,
        debit_account_id=ledger_service.cash_account(db).id,
        credit_account_id=account.id,
        amount=body.amount,
        reference=body.reference,
        description=description,
    )
    entry = EquityEntry(**body.model_dump(), journal_entry_id=journal.id)
    entry.description = description
    db.add(entry)
    db.flush()
    return entry


@router.get("")
def list_equity_entries(db: Session = Depends(get_db)):
    rows = db.query(EquityEntry).order_by(EquityEntry.entry_date.desc(), EquityEntry.id.desc()).all()
    return ok([_to_out(e) for e in rows])


@router.post("", status_code=201)
def create_equity_entry(body: EquityEntryCreate, db: Session = Depends(get_db)):
    entry = _stage_entry(db, body)
    commit_or_500(db, "Error creating equity entry")
    db.refresh(entry)
    return ok(_to_out(entry))


@router.post("/bulk", status_code=201)
def create_equity_entries_bulk(body: EquityBulkCreate, db: Session = Depends(get_db)):
    """All entries or none."""
    try:
        entries: List[EquityEntry] = [
            _stage_entry(db, item, line_no=i) for i, item in enumerate(body.entries, start=1)
        ]
    except HTTPException:
        db.rollback()
        raise
    commit_or_500(db, "Error creating equity entries")
    for e in entries:
        db.refresh(e)
    logger.info("%d equity entries created", len(entries))
    return ok([_to_out(e) for e in entries])
