import datetime as dt
from typing import List, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel


class AssetCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=255)
    asset_type: Optional[str] = None
    purchase_date: dt.date
    purchase_value: float = Field(gt=0)
    description: Optional[str] = None


class AssetOut(CamelModel):
    id: int
    name: str
    asset_type: Optional[str] = None
    purchase_date: dt.date
    purchase_value: float
    description: Optional[str] = None
    created_at: Optional[dt.datetime] = None


class AssetWithDepreciationOut(AssetOut):
    accumulated_depreciation: float
    net_book_value: float


class DepreciationCreate(CamelModel):
    asset_id: int = Field(gt=0)
    amount: float = Field(gt=0)
    date: dt.date
    description: Optional[str] = None
    depreciation_account_id: int = Field(gt=0)


class DepreciationOut(CamelModel):
    id: int
    asset_id: int
    asset_name: Optional[str] = None
    amount: float
    date: dt.date
    description: Optional[str] = None
    depreciation_account_id: int
    account_name: Optional[str] = None
    journal_entry_id: Optional[int] = None


class EquityEntryCreate(CamelModel):
    account_id: int = Field(gt=0)
    amount: float = Field(gt=0)
    entry_date: dt.date
    description: Optional[str] = None
    reference: Optional[str] = None


class EquityBulkCreate(CamelModel):
    entries: List[EquityEntryCreate] = Field(min_length=1)


class EquityEntryOut(CamelModel):
    id: int
    account_id: int
    account_code: Optional[str] = None
    account_name: Optional[str] = None
    amount: float
    entry_date: dt.date
    description: Optional[str] = None
    reference: Optional[str] = None
    journal_entry_id: Optional[int] = None
    created_at: Optional[dt.datetime] = None


class OpeningBalanceCreate(CamelModel):
    account_id: int = Field(gt=0)
    amount: float = Field(gt=0)
    date: dt.date
    description: Optional[str] = None


class DashboardStats(CamelModel):
    total_receivables: float
    total_payables: float
    total_assets: float
    cash_balance: float
    low_stock_items: int
    pending_payments: int
    pending_receipts: int
