# backend/models/notice_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base

NOTICE_ACTIVE = 0
NOTICE_ARCHIVED = 1


class Notice(Base):
    __tablename__ = "notices"
    id         = Column(Integer, primary_key=True, index=True)
    title      = Column(Unicode(255), nullable=False)
    content    = Column(UnicodeText, nullable=False)
    country_id = Column(Integer, ForeignKey("countries.id"), index=True)  # null = every country
    status     = Column(Integer, nullable=False, default=NOTICE_ACTIVE)
    created_at = Column(DateTime, default=datetime.now)

    country = relationship("Country")
