# backend/models/report_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base


class FeedbackReport(Base):
    __tablename__ = "feedback_reports"
    id           = Column(Integer, primary_key=True, index=True)
    report_id    = Column(Integer, index=True)  # visit/journey the report belongs to
    client_id    = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    sales_rep_id = Column(Integer, ForeignKey("sales_reps.id"), nullable=False, index=True)
    user_id      = Column(Integer, ForeignKey("users.id"))
    comment      = Column(UnicodeText)
    created_at   = Column(DateTime, default=datetime.now, index=True)

    client    = relationship("Client")
    sales_rep = relationship("SalesRep")


class VisibilityReport(Base):
    __tablename__ = "visibility_reports"
    id           = Column(Integer, primary_key=True, index=True)
    report_id    = Column(Integer, index=True)
    client_id    = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    sales_rep_id = Column(Integer, ForeignKey("sales_reps.id"), nullable=False, index=True)
    user_id      = Column(Integer, ForeignKey("users.id"), index=True)
    comment      = Column(UnicodeText)
    image_url    = Column(Unicode(500))
    created_at   = Column(DateTime, default=datetime.now, index=True)

    client    = relationship("Client")
    sales_rep = relationship("SalesRep")
