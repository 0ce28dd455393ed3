# backend/models/account_model.py
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base


class AccountType:
    """Numeric account_type codes of the chart of accounts."""
    ASSET = 1
    LIABILITY = 2
    REVENUE = 4
    EXPENSE = 5
    CASH_EQUIVALENT = 9
    EQUITY = 13
    ACCUMULATED_DEPRECIATION = 17


class ChartOfAccount(Base):
    __tablename__ = "chart_of_accounts"
    id                = Column(Integer, primary_key=True, index=True)
    account_code      = Column(Unicode(20), unique=True, nullable=False)
    account_name      = Column(Unicode(255), nullable=False)
    account_type      = Column(Integer, nullable=False, index=True)
    parent_account_id = Column(Integer, ForeignKey("chart_of_accounts.id"))
    description       = Column(UnicodeText)
    is_active         = Column(Boolean, nullable=False, default=True)
    created_at        = Column(DateTime, default=datetime.now)
    updated_at        = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    parent = relationship("ChartOfAccount", remote_side=[id])
