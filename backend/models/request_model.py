# backend/models/request_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base


class ServiceRequest(Base):
    __tablename__ = "requests"
    id                = Column(Integer, primary_key=True, index=True)
    user_id           = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    user_name         = Column(Unicode(255), nullable=False)
    service_type_id   = Column(Integer, ForeignKey("service_types.id"), nullable=False, index=True)
    pickup_location   = Column(Unicode(255), nullable=False)
    delivery_location = Column(Unicode(255), nullable=False)
    pickup_date       = Column(DateTime, nullable=False)
    description       = Column(UnicodeText)
    priority          = Column(Unicode(20), nullable=False, default="medium")  # low / medium / high
    status            = Column(Unicode(20), nullable=False, default="pending", index=True)
    my_status         = Column(Integer, nullable=False, default=0)
    created_at        = Column(DateTime, default=datetime.now)
    updated_at        = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    service_type = relationship("ServiceType")
    user         = relationship("User")
