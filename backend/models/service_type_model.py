# backend/models/service_type_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base


class ServiceType(Base):
    __tablename__ = "service_types"
    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(Unicode(100), nullable=False)
    description = Column(UnicodeText)
    created_at  = Column(DateTime, default=datetime.now)
