# backend/models/task_model.py
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Integer
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base

TASK_STATUSES = ("Pending", "In Progress", "Completed")


class CalendarTask(Base):
    __tablename__ = "calendar_tasks"
    id          = Column(Integer, primary_key=True, index=True)
    date        = Column(Date, nullable=False, index=True)
    title       = Column(Unicode(255), nullable=False)
    description = Column(UnicodeText)
    status      = Column(Unicode(20), nullable=False, default="Pending")
    assigned_to = Column(Unicode(255))
    created_at  = Column(DateTime, default=datetime.now)
    updated_at  = Column(DateTime, default=datetime.now, onupdate=datetime.now)
