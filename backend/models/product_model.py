# backend/models/product_model.py
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base
from backend.models.journal_model import Money


class Category(Base):
    __tablename__ = "categories"
    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(Unicode(100), unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    price_options = relationship("PriceOption", cascade="all, delete-orphan", back_populates="category")


class PriceOption(Base):
    __tablename__ = "category_price_options"
    id          = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    label       = Column(Unicode(100), nullable=False)
    value       = Column(Money, nullable=False)

    category = relationship("Category", back_populates="price_options")


class Product(Base):
    __tablename__ = "products"
    id              = Column(Integer, primary_key=True, index=True)
    product_code    = Column(Unicode(50), unique=True, nullable=False)
    product_name    = Column(Unicode(255), nullable=False)
    description     = Column(UnicodeText)
    category_id     = Column(Integer, ForeignKey("categories.id"), index=True)
    unit_of_measure = Column(Unicode(20), nullable=False, default="pcs")
    cost_price      = Column(Money, nullable=False, default=0)
    selling_price   = Column(Money, nullable=False, default=0)
    reorder_level   = Column(Integer, nullable=False, default=0)
    current_stock   = Column(Integer, nullable=False, default=0)
    image_url       = Column(Unicode(500))
    is_active       = Column(Boolean, nullable=False, default=True)
    created_at      = Column(DateTime, default=datetime.now)
    updated_at      = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    category = relationship("Category")
