# backend/models/journal_model.py
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base

Money = Numeric(14, 2, asdecimal=False)


class JournalEntry(Base):
    __tablename__ = "journal_entries"
    id           = Column(Integer, primary_key=True, index=True)
    entry_number = Column(Unicode(30), unique=True, nullable=False)
    entry_date   = Column(Date, nullable=False, index=True)
    reference    = Column(Unicode(100))
    description  = Column(UnicodeText)
    total_debit  = Column(Money, nullable=False, default=0)
    total_credit = Column(Money, nullable=False, default=0)
    status       = Column(Unicode(20), nullable=False, default="draft")  # draft / posted / cancelled
    created_by   = Column(Integer, ForeignKey("users.id"))
    created_at   = Column(DateTime, default=datetime.now)
    updated_at   = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    lines = relationship(
        "JournalEntryLine",
        cascade="all, delete-orphan",
        back_populates="journal_entry",
        order_by="JournalEntryLine.id",
    )


class JournalEntryLine(Base):
    __tablename__ = "journal_entry_lines"
    id               = Column(Integer, primary_key=True, index=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id", ondelete="CASCADE"), nullable=False, index=True)
    account_id       = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False, index=True)
    debit_amount     = Column(Money, nullable=False, default=0)
    credit_amount    = Column(Money, nullable=False, default=0)
    description      = Column(UnicodeText)

    journal_entry = relationship("JournalEntry", back_populates="lines")
    account       = relationship("ChartOfAccount")
