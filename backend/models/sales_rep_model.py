# backend/models/sales_rep_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode

from backend.database.session import Base

MANAGER_TYPES = ("Retail", "Key Account", "Distribution")


class SalesRep(Base):
    __tablename__ = "sales_reps"
    id           = Column(Integer, primary_key=True, index=True)
    name         = Column(Unicode(255), nullable=False)
    email        = Column(Unicode(255), nullable=False)
    phone_number = Column(Unicode(32), nullable=False)
    country      = Column(Unicode(100))
    region       = Column(Unicode(100))
    route_name   = Column(Unicode(100))
    photo_url    = Column(Unicode(500))
    status       = Column(Integer, nullable=False, default=1)  # 1 active / 0 inactive
    created_at   = Column(DateTime, default=datetime.now)

    assignments = relationship("SalesRepManagerAssignment", cascade="all, delete-orphan",
                               back_populates="sales_rep")


class Manager(Base):
    __tablename__ = "managers"
    id           = Column(Integer, primary_key=True, index=True)
    name         = Column(Unicode(255), nullable=False)
    email        = Column(Unicode(255), nullable=False)
    phone_number = Column(Unicode(32))
    country      = Column(Unicode(100))
    region       = Column(Unicode(100))
    manager_type = Column(Unicode(30))
    created_at   = Column(DateTime, default=datetime.now)


class SalesRepManagerAssignment(Base):
    __tablename__ = "sales_rep_manager_assignments"
    __table_args__ = (UniqueConstraint("sales_rep_id", "manager_id", name="uq_rep_manager"),)
    id           = Column(Integer, primary_key=True, index=True)
    sales_rep_id = Column(Integer, ForeignKey("sales_reps.id", ondelete="CASCADE"), nullable=False, index=True)
    manager_id   = Column(Integer, ForeignKey("managers.id", ondelete="CASCADE"), nullable=False, index=True)
    manager_type = Column(Unicode(30), nullable=False)

    sales_rep = relationship("SalesRep", back_populates="assignments")
    manager   = relationship("Manager")
