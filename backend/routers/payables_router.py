# backend/routers/payables_router.py
"""Suppliers, their invoices and the payments made against them."""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.account_model import ChartOfAccount
from backend.models.supplier_model import Supplier, SupplierInvoice, SupplierPayment
from backend.schemas.receivables import AgingRow
from backend.schemas.suppliers import (
    ConfirmPaymentPayload, PaymentCreate, PaymentOut, PaymentUpdate,
    SupplierCreate, SupplierInvoiceCreate, SupplierInvoiceOut, SupplierOut, SupplierUpdate,
)
from backend.services import ledger_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["financial"])

SUPPLIER_NOT_FOUND = "Supplier not found"
INVOICE_NOT_FOUND = "Supplier invoice not found"
PAYMENT_NOT_FOUND = "Payment not found"


def _invoice_out(inv: SupplierInvoice) -> SupplierInvoiceOut:
    return SupplierInvoiceOut(
        id=inv.id,
        invoice_number=inv.invoice_number,
        supplier_id=inv.supplier_id,
        supplier_name=inv.supplier.company_name if inv.supplier else None,
        invoice_date=inv.invoice_date,
        due_date=inv.due_date,
        total_amount=inv.total_amount,
        amount_paid=inv.amount_paid,
        balance=round(inv.total_amount - inv.amount_paid, 2),
        notes=inv.notes,
    )


def _payment_out(p: SupplierPayment) -> PaymentOut:
    out = PaymentOut.model_validate(p)
    out.supplier_name = p.supplier.company_name if p.supplier else None
    return out


def _pending_payments(db: Session, invoice_id: int, exclude_id: Optional[int] = None) -> float:
    q = db.query(func.coalesce(func.sum(SupplierPayment.amount), 0)).filter(
        SupplierPayment.supplier_invoice_id == invoice_id, SupplierPayment.status == "in pay"
    )
    if exclude_id is not None:
        q = q.filter(SupplierPayment.id != exclude_id)
    return float(q.scalar())


def _check_amount(amount: float, outstanding: float, inv: SupplierInvoice) -> None:
    if amount > outstanding + ledger_service.BALANCE_TOLERANCE:
        raise HTTPException(
            status_code=400,
            detail=f"Amount {amount:.2f} exceeds outstanding balance {outstanding:.2f} "
                   f"for invoice {inv.invoice_number}",
        )


def _outstanding(db: Session, inv: SupplierInvoice, exclude_id: Optional[int] = None) -> float:
    """What is still owed: total less paid less other payments awaiting confirmation."""
    return round(inv.total_amount - inv.amount_paid - _pending_payments(db, inv.id, exclude_id), 2)


def _check_payment_refs(db: Session, supplier_id: int, invoice_id: Optional[int],
                        account_id: Optional[int]) -> None:
    if invoice_id is not None:
        inv = db.get(SupplierInvoice, invoice_id)
        if inv is None or inv.supplier_id != supplier_id:
            raise HTTPException(status_code=400, detail="Invoice does not belong to this supplier")
    if account_id is not None and db.get(ChartOfAccount, account_id) is None:
        raise HTTPException(status_code=400, detail="Account not found")


# ---------- suppliers ----------

@router.get("/suppliers")
def list_suppliers(
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    db: Session = Depends(get_db),
):
    q = db.query(Supplier)
    if is_active is not None:
        q = q.filter(Supplier.is_active == is_active)
    return ok([SupplierOut.model_validate(s) for s in q.order_by(Supplier.company_name).all()])


@router.get("/suppliers/{supplier_id}")
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    return ok(SupplierOut.model_validate(get_or_404(db, Supplier, supplier_id, SUPPLIER_NOT_FOUND)))


@router.post("/suppliers", status_code=201)
def create_supplier(body: SupplierCreate, db: Session = Depends(get_db)):
    if db.query(Supplier.id).filter(Supplier.supplier_code == body.supplier_code).first():
        raise HTTPException(status_code=400, detail="Supplier code already exists")
    supplier = Supplier(**body.model_dump())
    db.add(supplier)
    commit_or_500(db, "Error creating supplier")
    db.refresh(supplier)
    return ok(SupplierOut.model_validate(supplier))


@router.put("/suppliers/{supplier_id}")
def update_supplier(supplier_id: int, body: SupplierUpdate, db: Session = Depends(get_db)):
    supplier = get_or_404(db, Supplier, supplier_id, SUPPLIER_NOT_FOUND)
    values = patch_values(body)
    if "supplier_code" in values:
        clash = (
            db.query(Supplier.id)
            .filter(Supplier.supplier_code == values["supplier_code"], Supplier.id != supplier_id)
            .first()
        )
        if clash:
            raise HTTPException(status_code=400, detail="Supplier code already exists")
    apply_patch(supplier, body, values)
    commit_or_500(db, "Error updating supplier")
    db.refresh(supplier)
    return ok(SupplierOut.model_validate(supplier))


@router.delete("/suppliers/{supplier_id}", status_code=204)
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)):
    supplier = get_or_404(db, Supplier, supplier_id, SUPPLIER_NOT_FOUND)
    has_history = (
        db.query(SupplierInvoice.id).filter(SupplierInvoice.supplier_id == supplier_id).first()
        or db.query(SupplierPayment.id).filter(SupplierPayment.supplier_id == supplier_id).first()
    )
    if has_history:
        raise HTTPException(status_code=409, detail="Supplier has invoices or payments")
    db.delete(supplier)
    commit_or_500(db, "Error deleting supplier")
    return Response(status_code=204)


# ---------- supplier invoices ----------

@router.get("/supplier-invoices")
def list_supplier_invoices(
    supplier_id: Optional[int] = Query(default=None, alias="supplierId"),
    pending_only: bool = Query(default=False, alias="pendingOnly"),
    db: Session = Depends(get_db),
):
    q = db.query(SupplierInvoice)
    if supplier_id is not None:
        q = q.filter(SupplierInvoice.supplier_id == supplier_id)
    if pending_only:
        q = q.filter(SupplierInvoice.amount_paid < SupplierInvoice.total_amount)
    rows = q.order_by(SupplierInvoice.invoice_date.desc(), SupplierInvoice.id.desc()).all()
    return ok([_invoice_out(i) for i in rows])


@router.get("/supplier-invoices/{invoice_id}")
def get_supplier_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return ok(_invoice_out(get_or_404(db, SupplierInvoice, invoice_id, INVOICE_NOT_FOUND)))


@router.post("/supplier-invoices", status_code=201)
def create_supplier_invoice(body: SupplierInvoiceCreate, db: Session = Depends(get_db)):
    if db.get(Supplier, body.supplier_id) is None:
        raise HTTPException(status_code=400, detail="Invalid supplier")
    if body.due_date and body.due_date < body.invoice_date:
        raise HTTPException(status_code=400, detail="Due date cannot be before the invoice date")
    inv = SupplierInvoice(**body.model_dump(), amount_paid=0)
    db.add(inv)
    commit_or_500(db, "Error creating supplier invoice")
    db.refresh(inv)
    return ok(_invoice_out(inv))


# ---------- payments ----------

@router.get("/payments")
def list_payments(
    status: Optional[str] = Query(default=None),
    supplier_id: Optional[int] = Query(default=None, alias="supplierId"),
    db: Session = Depends(get_db),
):
    q = db.query(SupplierPayment)
    if status:
        q = q.filter(SupplierPayment.status == status)
    if supplier_id is not None:
        q = q.filter(SupplierPayment.supplier_id == supplier_id)
    rows = q.order_by(SupplierPayment.payment_date.desc(), SupplierPayment.id.desc()).all()
    return ok([_payment_out(p) for p in rows])


@router.get("/payments/{payment_id}")
def get_payment(payment_id: int, db: Session = Depends(get_db)):
    return ok(_payment_out(get_or_404(db, SupplierPayment, payment_id, PAYMENT_NOT_FOUND)))


@router.post("/payments", status_code=201)
def create_payment(body: PaymentCreate, db: Session = Depends(get_db)):
    if db.get(Supplier, body.supplier_id) is None:
        raise HTTPException(status_code=400, detail="Invalid supplier")
    _check_payment_refs(db, body.supplier_id, body.supplier_invoice_id, body.account_id)
    if body.supplier_invoice_id is not None:
        inv = db.get(SupplierInvoice, body.supplier_invoice_id)
        _check_amount(body.amount, _outstanding(db, inv), inv)
    payment = SupplierPayment(
        **body.model_dump(),
        payment_number=ledger_service.next_number(
            db, SupplierPayment, SupplierPayment.payment_number, "PAY"
        ),
        status="in pay",
    )
    db.add(payment)
    commit_or_500(db, "Error creating payment")
    db.refresh(payment)
    return ok(_payment_out(payment))


@router.put("/payments/{payment_id}")
def update_payment(payment_id: int, body: PaymentUpdate, db: Session = Depends(get_db)):
    payment = get_or_404(db, SupplierPayment, payment_id, PAYMENT_NOT_FOUND)
    if payment.status != "in pay":
        raise HTTPException(status_code=400, detail="Only pending payments can be edited")
    values = patch_values(body)
    _check_payment_refs(db, payment.supplier_id, None, values.get("account_id"))
    if "amount" in values and payment.invoice is not None:
        _check_amount(values["amount"], _outstanding(db, payment.invoice, exclude_id=payment.id), payment.invoice)
    apply_patch(payment, body, values)
    commit_or_500(db, "Error updating payment")
    db.refresh(payment)
    return ok(_payment_out(payment))


@router.delete("/payments/{payment_id}", status_code=204)
def delete_payment(payment_id: int, db: Session = Depends(get_db)):
    payment = get_or_404(db, SupplierPayment, payment_id, PAYMENT_NOT_FOUND)
    if payment.status != "in pay":
        raise HTTPException(status_code=400, detail="Only pending payments can be deleted")
    db.delete(payment)
    commit_or_500(db, "Error deleting payment")
    return Response(status_code=204)


# ---------- payables ----------

@router.post("/payables/confirm-payment")
def confirm_payment(body: ConfirmPaymentPayload, db: Session = Depends(get_db)):
    payment = get_or_404(db, SupplierPayment, body.payment_id, PAYMENT_NOT_FOUND)
    if payment.status == "confirmed":
        raise HTTPException(status_code=400, detail="Payment is already confirmed")

    if payment.invoice is not None:
        inv = payment.invoice
        _check_amount(payment.amount, round(inv.total_amount - inv.amount_paid, 2), inv)
        payment.invoice.amount_paid = round(payment.invoice.amount_paid + payment.amount, 2)

    credit_account_id = payment.account_id or ledger_service.cash_account(db).id
    entry = ledger_service.post_transfer(
        db,
        payment.payment_date,
        debit_account_id=ledger_service.payables_account(db).id,
        credit_account_id=credit_account_id,
        amount=payment.amount,
        reference=payment.payment_number,
        description=f"Payment to {payment.supplier.company_name}",
    )
    payment.status = "confirmed"
    payment.journal_entry_id = entry.id
    commit_or_500(db, "Error confirming payment")
    db.refresh(payment)
    logger.info("Payment %s confirmed (%s)", payment.payment_number, entry.entry_number)
    return ok(_payment_out(payment))


@router.get("/payables/aging")
def payables_aging(
    as_of: Optional[date] = Query(default=None, alias="asOf"),
    db: Session = Depends(get_db),
):
    as_of = as_of or date.today()
    invoices = (
        db.query(SupplierInvoice)
        .filter(SupplierInvoice.amount_paid < SupplierInvoice.total_amount)
        .all()
    )
    items = (
        (inv.supplier_id, inv.supplier.company_name, inv.due_date,
         round(inv.total_amount - inv.amount_paid, 2))
        for inv in invoices
    )
    return ok([AgingRow(**row) for row in ledger_service.aging_report(items, as_of)])
