from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from backend.core.schemas import CamelModel
from backend.schemas.suppliers import PaymentMethod


class SalesInvoiceCreate(CamelModel):
    client_id: int = Field(gt=0)
    invoice_date: date
    due_date: Optional[date] = None
    total_amount: float = Field(gt=0)
    notes: Optional[str] = None


class SalesInvoiceOut(CamelModel):
    id: int
    invoice_number: str
    client_id: int
    client_name: Optional[str] = None
    invoice_date: date
    due_date: Optional[date] = None
    total_amount: float
    amount_paid: float
    balance: float
    status: str
    notes: Optional[str] = None


class ReceiptOut(CamelModel):
    id: int
    receipt_number: str
    client_id: int
    client_name: Optional[str] = None
    invoice_id: int
    invoice_number: Optional[str] = None
    receipt_date: date
    payment_method: str
    account_id: int
    reference: Optional[str] = None
    amount: float
    notes: Optional[str] = None
    status: str
    journal_entry_id: Optional[int] = None
    created_at: Optional[datetime] = None


class ReceivablePaymentCreate(CamelModel):
    client_id: int = Field(gt=0)
    invoice_id: int = Field(gt=0)
    amount: float = Field(gt=0)
    payment_date: date
    payment_method: PaymentMethod = "cash"
    account_id: int = Field(gt=0)
    reference: Optional[str] = None
    notes: Optional[str] = None


class BulkPaymentLine(CamelModel):
    invoice_id: int = Field(gt=0)
    amount: float = Field(ge=0)


class BulkPaymentCreate(CamelModel):
    client_id: int = Field(gt=0)
    payment_date: date
    payment_method: PaymentMethod = "cash"
    account_id: int = Field(gt=0)
    reference: Optional[str] = None
    notes: Optional[str] = None
    payments: List[BulkPaymentLine] = Field(min_length=1)


class BulkPaymentResult(CamelModel):
    receipts: List[ReceiptOut]
    total_amount: float


class ConfirmReceiptPayload(CamelModel):
    receipt_id: int = Field(gt=0)


class AgingRow(CamelModel):
    party_id: int
    party_name: str
    current: float = 0
    days_1_30: float = Field(default=0, serialization_alias="1-30")
    days_31_60: float = Field(default=0, serialization_alias="31-60")
    days_61_90: float = Field(default=0, serialization_alias="61-90")
    days_over_90: float = Field(default=0, serialization_alias="90+")
    total: float = 0
