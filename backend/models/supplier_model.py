# backend/models/supplier_model.py
from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base
from backend.models.journal_model import Money


class Supplier(Base):
    __tablename__ = "suppliers"
    id             = Column(Integer, primary_key=True, index=True)
    supplier_code  = Column(Unicode(30), unique=True, nullable=False)
    company_name   = Column(Unicode(255), nullable=False)
    contact_person = Column(Unicode(255))
    email          = Column(Unicode(255))
    phone          = Column(Unicode(32))
    address        = Column(UnicodeText)
    tax_id         = Column(Unicode(50))
    payment_terms  = Column(Integer, nullable=False, default=30)  # days
    credit_limit   = Column(Money, nullable=False, default=0)
    is_active      = Column(Boolean, nullable=False, default=True)
    created_at     = Column(DateTime, default=datetime.now)
    updated_at     = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class SupplierInvoice(Base):
    __tablename__ = "supplier_invoices"
    id             = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(Unicode(50), nullable=False)
    supplier_id    = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    invoice_date   = Column(Date, nullable=False)
    due_date       = Column(Date)
    total_amount   = Column(Money, nullable=False)
    amount_paid    = Column(Money, nullable=False, default=0)
    notes          = Column(UnicodeText)
    created_at     = Column(DateTime, default=datetime.now)

    supplier = relationship("Supplier")


class SupplierPayment(Base):
    __tablename__ = "payments"
    id                  = Column(Integer, primary_key=True, index=True)
    payment_number      = Column(Unicode(30), unique=True, nullable=False)
    supplier_id         = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    supplier_invoice_id = Column(Integer, ForeignKey("supplier_invoices.id"))
    payment_date        = Column(Date, nullable=False)
    payment_method      = Column(Unicode(20), nullable=False, default="cash")
    reference_number    = Column(Unicode(100))
    amount              = Column(Money, nullable=False)
    account_id          = Column(Integer, ForeignKey("chart_of_accounts.id"))  # paid from
    notes               = Column(UnicodeText)
    status              = Column(Unicode(20), nullable=False, default="in pay", index=True)  # in pay / confirmed
    journal_entry_id    = Column(Integer, ForeignKey("journal_entries.id"))
    created_by          = Column(Integer, ForeignKey("users.id"))
    created_at          = Column(DateTime, default=datetime.now)
    updated_at          = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    supplier = relationship("Supplier")
    invoice  = relationship("SupplierInvoice")
