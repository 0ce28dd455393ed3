# backend/routers/cash_router.py
"""Cash and cash-equivalent accounts plus the dashboard figures."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.core.crud import get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.account_model import AccountType, ChartOfAccount
from backend.models.asset_model import Asset
from backend.models.product_model import Product
from backend.models.receivable_model import Receipt, SalesInvoice
from backend.models.supplier_model import SupplierInvoice, SupplierPayment
from backend.routers.accounts_router import ledger_response
from backend.schemas.accounts import CashAccountOut
from backend.schemas.assets import DashboardStats, OpeningBalanceCreate
from backend.schemas.journal import JournalEntryOut
from backend.services import ledger_service

router = APIRouter(tags=["financial"])


def _cash_accounts(db: Session):
    return (
        db.query(ChartOfAccount)
        .filter(ChartOfAccount.account_type == AccountType.CASH_EQUIVALENT,
                ChartOfAccount.is_active.is_(True))
        .order_by(ChartOfAccount.account_code)
        .all()
    )


def _cash_account_or_404(db: Session, account_id: int) -> ChartOfAccount:
    account = get_or_404(db, ChartOfAccount, account_id, "Account not found")
    if account.account_type != AccountType.CASH_EQUIVALENT:
        raise HTTPException(status_code=404, detail="Account not found")
    return account


@router.get("/cash-equivalents/accounts")
def list_cash_accounts(db: Session = Depends(get_db)):
    return ok([
        CashAccountOut(
            id=a.id,
            account_code=a.account_code,
            account_name=a.account_name,
            balance=ledger_service.account_balance(db, a.id),
        )
        for a in _cash_accounts(db)
    ])


@router.get("/cash-equivalents/accounts/{account_id}/ledger")
def cash_account_ledger(
    account_id: int,
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    db: Session = Depends(get_db),
):
    return ledger_response(db, _cash_account_or_404(db, account_id), start_date, end_date)


@router.post("/cash-equivalents/opening-balance", status_code=201)
def record_opening_balance(body: OpeningBalanceCreate, db: Session = Depends(get_db)):
    account = db.get(ChartOfAccount, body.account_id)
    if account is None or account.account_type != AccountType.CASH_EQUIVALENT:
        raise HTTPException(status_code=400, detail="Account must be a cash or cash-equivalent account")
    entry = ledger_service.post_transfer(
        db,
        body.date,
        debit_account_id=account.id,
        credit_account_id=ledger_service.opening_equity_account(db).id,
        amount=body.amount,
        reference="OPENING",
        description=body.description or f"Opening balance for {account.account_name}",
    )
    commit_or_500(db, "Error recording opening balance")
    db.refresh(entry)
    return ok(JournalEntryOut.model_validate(entry))


@router.get("/dashboard/stats")
def dashboard_stats(db: Session = Depends(get_db)):
    receivables = db.query(
        func.coalesce(func.sum(SalesInvoice.total_amount - SalesInvoice.amount_paid), 0)
    ).scalar()
    payables = db.query(
        func.coalesce(func.sum(SupplierInvoice.total_amount - SupplierInvoice.amount_paid), 0)
    ).scalar()
    assets = db.query(func.coalesce(func.sum(Asset.purchase_value), 0)).scalar()
    cash = sum(ledger_service.account_balance(db, a.id) for a in _cash_accounts(db))
    stats = DashboardStats(
        total_receivables=round(float(receivables), 2),
        total_payables=round(float(payables), 2),
        total_assets=round(float(assets), 2),
        cash_balance=round(cash, 2),
        low_stock_items=db.query(Product).filter(
            Product.is_active.is_(True), Product.current_stock <= Product.reorder_level
        ).count(),
        pending_payments=db.query(SupplierPayment).filter(SupplierPayment.status == "in pay").count(),
        pending_receipts=db.query(Receipt).filter(Receipt.status == "in pay").count(),
    )
    return ok(stats)
