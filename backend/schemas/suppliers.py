from datetime import date, datetime
from typing import Literal, NewType, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel, PatchModel

Code = NewType("Code", constr(strip_whitespace=True, min_length=1, max_length=30))
CompanyName = NewType("CompanyName", constr(strip_whitespace=True, min_length=1, max_length=255))
PaymentMethod = Literal["cash", "bank_transfer", "cheque", "mobile_money", "card"]


class SupplierCreate(CamelModel):
    supplier_code: Code
    company_name: CompanyName
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = None
    payment_terms: int = Field(default=30, ge=0)
    credit_limit: float = Field(default=0, ge=0)
    is_active: bool = True


class SupplierUpdate(PatchModel):
    not_null = ("supplier_code", "company_name", "payment_terms", "credit_limit", "is_active")

    supplier_code: Optional[Code] = None
    company_name: Optional[CompanyName] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = None
    payment_terms: Optional[int] = Field(default=None, ge=0)
    credit_limit: Optional[float] = Field(default=None, ge=0)
    is_active: Optional[bool] = None


class SupplierOut(CamelModel):
    id: int
    supplier_code: str
    company_name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = None
    payment_terms: int
    credit_limit: float
    is_active: bool
    created_at: Optional[datetime] = None


class SupplierInvoiceCreate(CamelModel):
    supplier_id: int = Field(gt=0)
    invoice_number: constr(strip_whitespace=True, min_length=1, max_length=50)
    invoice_date: date
    due_date: Optional[date] = None
    total_amount: float = Field(gt=0)
    notes: Optional[str] = None


class SupplierInvoiceOut(CamelModel):
    id: int
    invoice_number: str
    supplier_id: int
    supplier_name: Optional[str] = None
    invoice_date: date
    due_date: Optional[date] = None
    total_amount: float
    amount_paid: float
    balance: float
    notes: Optional[str] = None


class PaymentCreate(CamelModel):
    supplier_id: int = Field(gt=0)
    supplier_invoice_id: Optional[int] = None
    payment_date: date
    payment_method: PaymentMethod = "cash"
    reference_number: Optional[str] = None
    amount: float = Field(gt=0)
    account_id: Optional[int] = None
    notes: Optional[str] = None


class PaymentUpdate(PatchModel):
    not_null = ("payment_date", "payment_method", "amount")

    payment_date: Optional[date] = None
    payment_method: Optional[PaymentMethod] = None
    reference_number: Optional[str] = None
    amount: Optional[float] = Field(default=None, gt=0)
    account_id: Optional[int] = None
    notes: Optional[str] = None


class PaymentOut(CamelModel):
    id: int
    payment_number: str
    supplier_id: int
    supplier_name: Optional[str] = None
    supplier_invoice_id: Optional[int] = None
    payment_date: date
    payment_method: str
    reference_number: Optional[str] = None
    amount: float
    account_id: Optional[int] = None
    notes: Optional[str] = None
    status: str
    journal_entry_id: Optional[int] = None
    created_at: Optional[datetime] = None


class ConfirmPaymentPayload(CamelModel):
    payment_id: int = Field(gt=0)
