# backend/routers/accounts_router.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.account_model import ChartOfAccount
from backend.models.journal_model import JournalEntryLine
from backend.schemas.accounts import AccountCreate, AccountOut, AccountUpdate, LedgerOut
from backend.services import ledger_service

router = APIRouter(prefix="/accounts", tags=["financial"])

NOT_FOUND = "Account not found"


def _code_taken(db: Session, code: str, exclude_id: Optional[int] = None) -> bool:
    q = db.query(ChartOfAccount.id).filter(ChartOfAccount.account_code == code)
    if exclude_id is not None:
        q = q.filter(ChartOfAccount.id != exclude_id)
    return q.first() is not None


def _check_parent(db: Session, parent_id: Optional[int]) -> None:
    if parent_id is not None and db.get(ChartOfAccount, parent_id) is None:
        raise HTTPException(status_code=400, detail="Parent account not found")


def ledger_response(db: Session, account: ChartOfAccount, start_date: Optional[date],
                    end_date: Optional[date]) -> dict:
    ledger = ledger_service.running_ledger(db, account.id, start_date, end_date)
    return ok(LedgerOut(account=AccountOut.model_validate(account), **ledger))


@router.get("")
def list_accounts(
    account_type: Optional[int] = Query(default=None, alias="accountType"),
    parent_account_id: Optional[int] = Query(default=None, alias="parentAccountId"),
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    db: Session = Depends(get_db),
):
    q = db.query(ChartOfAccount)
    if account_type is not None:
        q = q.filter(ChartOfAccount.account_type == account_type)
    if parent_account_id is not None:
        q = q.filter(ChartOfAccount.parent_account_id == parent_account_id)
    if is_active is not None:
        q = q.filter(ChartOfAccount.is_active == is_active)
    return ok([AccountOut.model_validate(a) for a in q.order_by(ChartOfAccount.account_code).all()])


@router.get("/{account_id}")
def get_account(account_id: int, db: Session = Depends(get_db)):
    return ok(AccountOut.model_validate(get_or_404(db, ChartOfAccount, account_id, NOT_FOUND)))


@router.get("/{account_id}/ledger")
def account_ledger(
    account_id: int,
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    db: Session = Depends(get_db),
):
    account = get_or_404(db, ChartOfAccount, account_id, NOT_FOUND)
    return ledger_response(db, account, start_date, end_date)


@router.post("", status_code=201)
def create_account(body: AccountCreate, db: Session = Depends(get_db)):
    if _code_taken(db, body.account_code):
        raise HTTPException(status_code=400, detail="Account code already exists")
    _check_parent(db, body.parent_account_id)
    account = ChartOfAccount(**body.model_dump())
    db.add(account)
    commit_or_500(db, "Error creating account")
    db.refresh(account)
    return ok(AccountOut.model_validate(account))


@router.put("/{account_id}")
def update_account(account_id: int, body: AccountUpdate, db: Session = Depends(get_db)):
    account = get_or_404(db, ChartOfAccount, account_id, NOT_FOUND)
    values = patch_values(body)
    if "account_code" in values and _code_taken(db, values["account_code"], exclude_id=account_id):
        raise HTTPException(status_code=400, detail="Account code already exists")
    if values.get("parent_account_id") == account_id:
        raise HTTPException(status_code=400, detail="An account cannot be its own parent")
    _check_parent(db, values.get("parent_account_id"))
    apply_patch(account, body, values)
    commit_or_500(db, "Error updating account")
    db.refresh(account)
    return ok(AccountOut.model_validate(account))


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: int, db: Session = Depends(get_db)):
    account = get_or_404(db, ChartOfAccount, account_id, NOT_FOUND)
    if db.query(JournalEntryLine.id).filter(JournalEntryLine.account_id == account_id).first():
        raise HTTPException(status_code=409, detail="Account has journal entries")
    if db.query(ChartOfAccount.id).filter(ChartOfAccount.parent_account_id == account_id).first():
        raise HTTPException(status_code=409, detail="Account has sub-accounts")
    db.delete(account)
    commit_or_500(db, "Error deleting account")
    return Response(status_code=204)
