# backend/models/staff_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.types import Unicode

from backend.database.session import Base


class Staff(Base):
    __tablename__ = "staff"
    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(Unicode(255), nullable=False)
    photo_url  = Column(Unicode(500))
    position   = Column(Unicode(100))
    department = Column(Unicode(100))
    created_at = Column(DateTime, default=datetime.now)
