# backend/routers/assets_router.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.core.crud import get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.account_model import AccountType, ChartOfAccount
from backend.models.asset_model import Asset, DepreciationRecord
from backend.schemas.accounts import AccountOut
from backend.schemas.assets import (
    AssetCreate, AssetOut, AssetWithDepreciationOut, DepreciationCreate, DepreciationOut,
)
from backend.services import ledger_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["financial"])

NOT_FOUND = "Asset not found"


def accumulated_depreciation(db: Session, asset_id: int) -> float:
    total = (
        db.query(func.coalesce(func.sum(DepreciationRecord.amount), 0))
        .filter(DepreciationRecord.asset_id == asset_id)
        .scalar()
    )
    return round(float(total), 2)


def _with_depreciation(db: Session, asset: Asset) -> AssetWithDepreciationOut:
    accumulated = accumulated_depreciation(db, asset.id)
    return AssetWithDepreciationOut(
        **AssetOut.model_validate(asset).model_dump(),
        accumulated_depreciation=accumulated,
        net_book_value=round(asset.purchase_value - accumulated, 2),
    )


def _depreciation_out(rec: DepreciationRecord) -> DepreciationOut:
    out = DepreciationOut.model_validate(rec)
    out.asset_name = rec.asset.name if rec.asset else None
    out.account_name = rec.account.account_name if rec.account else None
    return out


@router.get("/assets")
def list_assets(db: Session = Depends(get_db)):
    rows = db.query(Asset).order_by(Asset.purchase_date.desc(), Asset.id.desc()).all()
    return ok([AssetOut.model_validate(a) for a in rows])


@router.get("/assets-with-depreciation")
def list_assets_with_depreciation(db: Session = Depends(get_db)):
    rows = db.query(Asset).order_by(Asset.name).all()
    return ok([_with_depreciation(db, a) for a in rows])


@router.get("/assets/{asset_id}")
def get_asset(asset_id: int, db: Session = Depends(get_db)):
    return ok(_with_depreciation(db, get_or_404(db, Asset, asset_id, NOT_FOUND)))


@router.post("/assets", status_code=201)
def create_asset(body: AssetCreate, db: Session = Depends(get_db)):
    asset = Asset(**body.model_dump())
    db.add(asset)
    commit_or_500(db, "Error creating asset")
    db.refresh(asset)
    return ok(AssetOut.model_validate(asset))


@router.delete("/assets/{asset_id}", status_code=204)
def delete_asset(asset_id: int, db: Session = Depends(get_db)):
    asset = get_or_404(db, Asset, asset_id, NOT_FOUND)
    if db.query(DepreciationRecord.id).filter(DepreciationRecord.asset_id == asset_id).first():
        raise HTTPException(status_code=400, detail="Asset has depreciation records")
    db.delete(asset)
    commit_or_500(db, "Error deleting asset")
    return Response(status_code=204)


@router.get("/depreciation-accounts")
def list_depreciation_accounts(db: Session = Depends(get_db)):
    rows = (
        db.query(ChartOfAccount)
        .filter(ChartOfAccount.account_type == AccountType.ACCUMULATED_DEPRECIATION,
                ChartOfAccount.is_active.is_(True))
        .order_by(ChartOfAccount.account_code)
        .all()
    )
    return ok([AccountOut.model_validate(a) for a in rows])


@router.post("/depreciation", status_code=201)
def record_depreciation(body: DepreciationCreate, db: Session = Depends(get_db)):
    asset = db.get(Asset, body.asset_id)
    if asset is None:
        raise HTTPException(status_code=400, detail="Invalid asset")
    account = db.get(ChartOfAccount, body.depreciation_account_id)
    if account is None or account.account_type != AccountType.ACCUMULATED_DEPRECIATION:
        raise HTTPException(status_code=400, detail="Invalid depreciation account")

    net_book_value = round(asset.purchase_value - accumulated_depreciation(db, asset.id), 2)
    if body.amount > net_book_value + ledger_service.BALANCE_TOLERANCE:
        raise HTTPException(
            status_code=400,
            detail=f"Depreciation amount exceeds net book value ({net_book_value:.2f})",
        )

    description = body.description or f"Depreciation of {asset.name}"
    entry = ledger_service.post_transfer(
        db,
        body.date,
        debit_account_id=ledger_service.depreciation_expense_account(db).id,
        credit_account_id=account.id,
        amount=body.amount,
        reference=f"DEP-{asset.id}",
        description=description,
    )
    rec = DepreciationRecord(
        asset_id=asset.id,
        amount=round(body.amount, 2),
        date=body.date,
        description=description,
        depreciation_account_id=account.id,
        journal_entry_id=entry.id,
    )
    db.add(rec)
    commit_or_500(db, "Error recording depreciation")
    db.refresh(rec)
    logger.info("Depreciation %.2f recorded for asset %s", rec.amount, asset.id)
    return ok(_depreciation_out(rec))


@router.get("/depreciation-history")
def depreciation_history(db: Session = Depends(get_db)):
    rows = (
        db.query(DepreciationRecord)
        .order_by(DepreciationRecord.date.desc(), DepreciationRecord.id.desc())
        .all()
    )
    return ok([_depreciation_out(r) for r in rows])
