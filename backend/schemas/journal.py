from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from backend.core.schemas import CamelModel, PatchModel


class JournalLineIn(CamelModel):
    # account checked by the ledger rules so the message names the line
    account_id: Optional[int] = None
    debit_amount: float = Field(default=0, ge=0)
    credit_amount: float = Field(default=0, ge=0)
    description: Optional[str] = None


class JournalEntryCreate(CamelModel):
    entry_date: date
    reference: Optional[str] = None
    description: Optional[str] = None
    lines: List[JournalLineIn]
    post: bool = False


class JournalEntryUpdate(PatchModel):
    not_null = ("entry_date", "lines")

    entry_date: Optional[date] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    lines: Optional[List[JournalLineIn]] = None


class JournalLineOut(CamelModel):
    id: int
    account_id: int
    account_code: Optional[str] = None
    account_name: Optional[str] = None
    debit_amount: float
    credit_amount: float
    description: Optional[str] = None


class JournalEntryOut(CamelModel):
    id: int
    entry_number: str
    entry_date: date
    reference: Optional[str] = None
    description: Optional[str] = None
    total_debit: float
    total_credit: float
    status: str
    created_at: Optional[datetime] = None
    lines: Optional[List[JournalLineOut]] = None
