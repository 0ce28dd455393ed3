from datetime import date, datetime
from typing import List, NewType, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel, PatchModel

AccountCode = NewType("AccountCode", constr(strip_whitespace=True, min_length=1, max_length=20))
AccountName = NewType("AccountName", constr(strip_whitespace=True, min_length=1, max_length=255))


class AccountCreate(CamelModel):
    account_code: AccountCode
    account_name: AccountName
    account_type: int = Field(gt=0)
    parent_account_id: Optional[int] = None
    description: Optional[str] = None
    is_active: bool = True


class AccountUpdate(PatchModel):
    not_null = ("account_code", "account_name", "account_type", "is_active")

    account_code: Optional[AccountCode] = None
    account_name: Optional[AccountName] = None
    account_type: Optional[int] = Field(default=None, gt=0)
    parent_account_id: Optional[int] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class AccountOut(CamelModel):
    id: int
    account_code: str
    account_name: str
    account_type: int
    parent_account_id: Optional[int] = None
    description: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


class CashAccountOut(CamelModel):
    id: int
    account_code: str
    account_name: str
    balance: float


class LedgerRow(CamelModel):
    id: int
    journal_entry_id: int
    entry_number: str
    entry_date: date
    reference: Optional[str] = None
    description: Optional[str] = None
    debit_amount: float
    credit_amount: float
    running_balance: float


class LedgerOut(CamelModel):
    account: AccountOut
    opening_balance: float
    closing_balance: float
    transactions: List[LedgerRow]
