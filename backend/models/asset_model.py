# backend/models/asset_model.py
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base
from backend.models.journal_model import Money


class Asset(Base):
    __tablename__ = "assets"
    id             = Column(Integer, primary_key=True, index=True)
    name           = Column(Unicode(255), nullable=False)
    asset_type     = Column(Unicode(100))
    purchase_date  = Column(Date, nullable=False)
    purchase_value = Column(Money, nullable=False)
    description    = Column(UnicodeText)
    created_at     = Column(DateTime, default=datetime.now)

    depreciation = relationship("DepreciationRecord", back_populates="asset", order_by="DepreciationRecord.date")


class DepreciationRecord(Base):
    __tablename__ = "depreciation_records"
    id                      = Column(Integer, primary_key=True, index=True)
    asset_id                = Column(Integer, ForeignKey("assets.id"), nullable=False, index=True)
    amount                  = Column(Money, nullable=False)
    date                    = Column(Date, nullable=False)
    description             = Column(UnicodeText)
    depreciation_account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    journal_entry_id        = Column(Integer, ForeignKey("journal_entries.id"))
    created_at              = Column(DateTime, default=datetime.now)

    asset   = relationship("Asset", back_populates="depreciation")
    account = relationship("ChartOfAccount")


class EquityEntry(Base):
    __tablename__ = "equity_entries"
    id               = Column(Integer, primary_key=True, index=True)
    account_id       = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False, index=True)
    amount           = Column(Money, nullable=False)
    entry_date       = Column(Date, nullable=False)
    description      = Column(UnicodeText)
    reference        = Column(Unicode(100))
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"))
    created_at       = Column(DateTime, default=datetime.now)

    account = relationship("ChartOfAccount")
