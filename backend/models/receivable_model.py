# backend/models/receivable_model.py
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base
from backend.models.journal_model import Money


class SalesInvoice(Base):
    __tablename__ = "sales_invoices"
    id             = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(Unicode(30), unique=True, nullable=False)
    client_id      = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    invoice_date   = Column(Date, nullable=False)
    due_date       = Column(Date)
    total_amount   = Column(Money, nullable=False)
    amount_paid    = Column(Money, nullable=False, default=0)
    status         = Column(Unicode(20), nullable=False, default="unpaid")  # unpaid / partially paid / paid
    notes          = Column(UnicodeText)
    created_at     = Column(DateTime, default=datetime.now)

    client = relationship("Client")


class Receipt(Base):
    __tablename__ = "receipts"
    id               = Column(Integer, primary_key=True, index=True)
    receipt_number   = Column(Unicode(30), unique=True, nullable=False)
    client_id        = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    invoice_id       = Column(Integer, ForeignKey("sales_invoices.id"), nullable=False, index=True)
    receipt_date     = Column(Date, nullable=False)
    payment_method   = Column(Unicode(20), nullable=False, default="cash")
    account_id       = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)  # received into
    reference        = Column(Unicode(100))
    amount           = Column(Money, nullable=False)
    notes            = Column(UnicodeText)
    status           = Column(Unicode(20), nullable=False, default="in pay", index=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"))
    created_at       = Column(DateTime, default=datetime.now)

    client  = relationship("Client")
    invoice = relationship("SalesInvoice")
