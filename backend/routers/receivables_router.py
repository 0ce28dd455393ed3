# backend/routers/receivables_router.py
"""Client invoices, receipts and the receivables postings."""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.core.crud import get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.account_model import ChartOfAccount
from backend.models.client_model import Client
from backend.models.receivable_model import Receipt, SalesInvoice
from backend.schemas.receivables import (
    AgingRow, BulkPaymentCreate, BulkPaymentResult, ConfirmReceiptPayload,
    ReceiptOut, ReceivablePaymentCreate, SalesInvoiceCreate, SalesInvoiceOut,
)
from backend.services import ledger_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["financial"])

INVOICE_NOT_FOUND = "Invoice not found"
RECEIPT_NOT_FOUND = "Receipt not found"


def _invoice_out(inv: SalesInvoice) -> SalesInvoiceOut:
    return SalesInvoiceOut(
        id=inv.id,
        invoice_number=inv.invoice_number,
        client_id=inv.client_id,
        client_name=inv.client.name if inv.client else None,
        invoice_date=inv.invoice_date,
        due_date=inv.due_date,
        total_amount=inv.total_amount,
        amount_paid=inv.amount_paid,
        balance=round(inv.total_amount - inv.amount_paid, 2),
        status=inv.status,
        notes=inv.notes,
    )


def _receipt_out(r: Receipt) -> ReceiptOut:
    out = ReceiptOut.model_validate(r)
    out.client_name = r.client.name if r.client else None
    out.invoice_number = r.invoice.invoice_number if r.invoice else None
    return out


def _pending_receipts(db: Session, invoice_id: int) -> float:
    total = (
        db.query(func.coalesce(func.sum(Receipt.amount), 0))
        .filter(Receipt.invoice_id == invoice_id, Receipt.status == "in pay")
        .scalar()
    )
    return float(total)


def _outstanding(db: Session, inv: SalesInvoice) -> float:
    """What can still be received: total less paid less receipts awaiting confirmation."""
    return round(inv.total_amount - inv.amount_paid - _pending_receipts(db, inv.id), 2)


def _invoice_status(inv: SalesInvoice) -> str:
    if inv.amount_paid >= inv.total_amount - ledger_service.BALANCE_TOLERANCE:
        return "paid"
    if inv.amount_paid > 0:
        return "partially paid"
    return "unpaid"


def _check_client_and_account(db: Session, client_id: int, account_id: int) -> None:
    if db.get(Client, client_id) is None:
        raise HTTPException(status_code=400, detail="Invalid client")
    if db.get(ChartOfAccount, account_id) is None:
        raise HTTPException(status_code=400, detail="Account not found")


def _new_receipt(db: Session, client_id: int, invoice_id: int, amount: float, body) -> Receipt:
    """Validate one payment line against its invoice and stage the receipt (flushed, not committed)."""
    inv = db.get(SalesInvoice, invoice_id)
    if inv is None or inv.client_id != client_id:
        raise HTTPException(status_code=400, detail=f"Invoice {invoice_id} does not belong to this client")
    outstanding = _outstanding(db, inv)
    if amount > outstanding + ledger_service.BALANCE_TOLERANCE:
        raise HTTPException(
            status_code=400,
            detail=f"Amount {amount:.2f} exceeds outstanding balance {outstanding:.2f} "
                   f"for invoice {inv.invoice_number}",
        )
    receipt = Receipt(
        receipt_number=ledger_service.next_number(db, Receipt, Receipt.receipt_number, "RCT"),
        client_id=client_id,
        invoice_id=invoice_id,
        receipt_date=body.payment_date,
        payment_method=body.payment_method,
        account_id=body.account_id,
        reference=body.reference,
        amount=round(amount, 2),
        notes=body.notes,
        status="in pay",
    )
    db.add(receipt)
    # numbering and the outstanding check of the next line must see this one
    db.flush()
    return receipt


# ---------- invoices ----------

@router.get("/invoices")
def list_invoices(
    client_id: Optional[int] = Query(default=None, alias="clientId"),
    pending_only: bool = Query(default=False, alias="pendingOnly"),
    db: Session = Depends(get_db),
):
    q = db.query(SalesInvoice)
    if client_id is not None:
        q = q.filter(SalesInvoice.client_id == client_id)
    if pending_only:
        q = q.filter(SalesInvoice.status != "paid")
    rows = q.order_by(SalesInvoice.invoice_date.desc(), SalesInvoice.id.desc()).all()
    return ok([_invoice_out(i) for i in rows])


@router.get("/invoices/{invoice_id}")
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return ok(_invoice_out(get_or_404(db, SalesInvoice, invoice_id, INVOICE_NOT_FOUND)))


@router.post("/invoices", status_code=201)
def create_invoice(body: SalesInvoiceCreate, db: Session = Depends(get_db)):
    client = db.get(Client, body.client_id)
    if client is None:
        raise HTTPException(status_code=400, detail="Invalid client")
    inv = SalesInvoice(
        **body.model_dump(),
        invoice_number=ledger_service.next_number(db, SalesInvoice, SalesInvoice.invoice_number, "INV"),
        amount_paid=0,
        status="unpaid",
    )
    db.add(inv)
    client.balance = round((client.balance or 0) + body.total_amount, 2)
    commit_or_500(db, "Error creating invoice")
    db.refresh(inv)
    return ok(_invoice_out(inv))


# ---------- receipts ----------

@router.get("/receipts")
def list_receipts(
    status: Optional[str] = Query(default=None),
    client_id: Optional[int] = Query(default=None, alias="clientId"),
    db: Session = Depends(get_db),
):
    q = db.query(Receipt)
    if status:
        q = q.filter(Receipt.status == status)
    if client_id is not None:
        q = q.filter(Receipt.client_id == client_id)
    rows = q.order_by(Receipt.receipt_date.desc(), Receipt.id.desc()).all()
    return ok([_receipt_out(r) for r in rows])


@router.get("/receipts/{receipt_id}")
def get_receipt(receipt_id: int, db: Session = Depends(get_db)):
    return ok(_receipt_out(get_or_404(db, Receipt, receipt_id, RECEIPT_NOT_FOUND)))


# ---------- receivables ----------

@router.post("/receivables/payment", status_code=201)
def record_payment(body: ReceivablePaymentCreate, db: Session = Depends(get_db)):
    _check_client_and_account(db, body.client_id, body.account_id)
    receipt = _new_receipt(db, body.client_id, body.invoice_id, body.amount, body)
    commit_or_500(db, "Error recording payment")
    db.refresh(receipt)
    return ok(_receipt_out(receipt))


@router.post("/receivables/bulk-payment", status_code=201)
def record_bulk_payment(body: BulkPaymentCreate, db: Session = Depends(get_db)):
    """
    One receipt per non-zero line, all in one transaction. Any rejected line
    rolls the whole batch back.
    """
    _check_client_and_account(db, body.client_id, body.account_id)
    lines = [line for line in body.payments if line.amount > 0]
    if not lines:
        raise HTTPException(status_code=400, detail="Enter an amount for at least one invoice")

    try:
        receipts = [_new_receipt(db, body.client_id, line.invoice_id, line.amount, body) for line in lines]
    except HTTPException:
        db.rollback()
        raise
    commit_or_500(db, "Error recording bulk payment")
    for r in receipts:
        db.refresh(r)
    total = round(sum(r.amount for r in receipts), 2)
    logger.info("Bulk payment for client %s: %d receipts, %.2f", body.client_id, len(receipts), total)
    return ok(BulkPaymentResult(receipts=[_receipt_out(r) for r in receipts], total_amount=total))


@router.post("/receivables/confirm-payment")
def confirm_receipt(body: ConfirmReceiptPayload, db: Session = Depends(get_db)):
    receipt = get_or_404(db, Receipt, body.receipt_id, RECEIPT_NOT_FOUND)
    if receipt.status == "confirmed":
        raise HTTPException(status_code=400, detail="Payment is already confirmed")

    inv = receipt.invoice
    inv.amount_paid = round(inv.amount_paid + receipt.amount, 2)
    inv.status = _invoice_status(inv)
    client = receipt.client
    client.balance = round((client.balance or 0) - receipt.amount, 2)

    entry = ledger_service.post_transfer(
        db,
        receipt.receipt_date,
        debit_account_id=receipt.account_id,
        credit_account_id=ledger_service.receivables_account(db).id,
        amount=receipt.amount,
        reference=receipt.receipt_number,
        description=f"Payment from {client.name} for {inv.invoice_number}",
    )
    receipt.status = "confirmed"
    receipt.journal_entry_id = entry.id
    commit_or_500(db, "Error confirming payment")
    db.refresh(receipt)
    logger.info("Receipt %s confirmed (%s)", receipt.receipt_number, entry.entry_number)
    return ok(_receipt_out(receipt))


@router.get("/receivables/aging")
def receivables_aging(
    as_of: Optional[date] = Query(default=None, alias="asOf"),
    db: Session = Depends(get_db),
):
    as_of = as_of or date.today()
    invoices = db.query(SalesInvoice).filter(SalesInvoice.status != "paid").all()
    items = (
        (inv.client_id, inv.client.name, inv.due_date, round(inv.total_amount - inv.amount_paid, 2))
        for inv in invoices
    )
    return ok([AgingRow(**row) for row in ledger_service.aging_report(items, as_of)])
