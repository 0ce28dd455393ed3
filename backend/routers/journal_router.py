# backend/routers/journal_router.py
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from backend.core.crud import get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.journal_model import JournalEntry
from backend.schemas.journal import JournalEntryCreate, JournalEntryOut, JournalEntryUpdate, JournalLineOut
from backend.services import ledger_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/journal-entries", tags=["financial"])

NOT_FOUND = "Journal entry not found"


def _to_out(entry: JournalEntry, with_lines: bool = True) -> JournalEntryOut:
    out = JournalEntryOut.model_validate(entry)
    if with_lines:
        out.lines = [
            JournalLineOut(
                id=line.id,
                account_id=line.account_id,
                account_code=line.account.account_code if line.account else None,
                account_name=line.account.account_name if line.account else None,
                debit_amount=line.debit_amount,
                credit_amount=line.credit_amount,
                description=line.description,
            )
            for line in entry.lines
        ]
    else:
        out.lines = None
    return out


def _draft_or_400(entry: JournalEntry, action: str) -> None:
    if entry.status != "draft":
        raise HTTPException(status_code=400, detail=f"Only draft entries can be {action}")


@router.get("")
def list_journal_entries(
    status: Optional[str] = Query(default=None),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    q = db.query(JournalEntry)
    if status:
        q = q.filter(JournalEntry.status == status)
    if start_date:
        q = q.filter(JournalEntry.entry_date >= start_date)
    if end_date:
        q = q.filter(JournalEntry.entry_date <= end_date)
    entries = q.order_by(JournalEntry.entry_date.desc(), JournalEntry.id.desc()).all()
    return ok([_to_out(e, with_lines=False) for e in entries])


@router.get("/{entry_id}")
def get_journal_entry(entry_id: int, db: Session = Depends(get_db)):
    return ok(_to_out(get_or_404(db, JournalEntry, entry_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_journal_entry(body: JournalEntryCreate, db: Session = Depends(get_db)):
    entry = ledger_service.create_journal_entry(
        db,
        body.entry_date,
        body.lines,
        reference=body.reference,
        description=body.description,
        status="posted" if body.post else "draft",
    )
    commit_or_500(db, "Error creating journal entry")
    db.refresh(entry)
    return ok(_to_out(entry))


@router.put("/{entry_id}")
def update_journal_entry(entry_id: int, body: JournalEntryUpdate, db: Session = Depends(get_db)):
    entry = get_or_404(db, JournalEntry, entry_id, NOT_FOUND)
    _draft_or_400(entry, "edited")
    values = patch_values(body)
    lines = values.pop("lines", None)
    for key, value in values.items():
        setattr(entry, key, value)
    if lines is not None:
        # replaced wholesale
        entry.total_debit, entry.total_credit = ledger_service.validate_lines(db, body.lines)
        entry.lines = ledger_service.build_lines(body.lines)
    commit_or_500(db, "Error updating journal entry")
    db.refresh(entry)
    return ok(_to_out(entry))


@router.patch("/{entry_id}/post")
def post_journal_entry(entry_id: int, db: Session = Depends(get_db)):
    entry = get_or_404(db, JournalEntry, entry_id, NOT_FOUND)
    if entry.status == "posted":
        raise HTTPException(status_code=400, detail="Journal entry is already posted")
    _draft_or_400(entry, "posted")
    # re-check in case the lines were edited after creation
    ledger_service.validate_lines(db, entry.lines)
    entry.status = "posted"
    commit_or_500(db, "Error posting journal entry")
    db.refresh(entry)
    logger.info("Journal entry %s posted", entry.entry_number)
    return ok(_to_out(entry))


@router.delete("/{entry_id}", status_code=204)
def delete_journal_entry(entry_id: int, db: Session = Depends(get_db)):
    entry = get_or_404(db, JournalEntry, entry_id, NOT_FOUND)
    _draft_or_400(entry, "deleted")
    db.delete(entry)
    commit_or_500(db, "Error deleting journal entry")
    return Response(status_code=204)
