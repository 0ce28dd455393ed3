# backend/models/client_model.py
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode, UnicodeText

from backend.database.session import Base
from backend.models.journal_model import Money


class ClientType(Base):
    __tablename__ = "client_types"
    id   = Column(Integer, primary_key=True, index=True)
    name = Column(Unicode(100), unique=True, nullable=False)


class Client(Base):
    __tablename__ = "clients"
    id             = Column(Integer, primary_key=True, index=True)
    name           = Column(Unicode(255), nullable=False, index=True)
    contact        = Column(Unicode(100), nullable=False)
    email          = Column(Unicode(255))
    address        = Column(UnicodeText)
    tax_pin        = Column(Unicode(50))
    latitude       = Column(Float)
    longitude      = Column(Float)
    country_id     = Column(Integer, ForeignKey("countries.id"), nullable=False, index=True)
    region_id      = Column(Integer, ForeignKey("regions.id"), nullable=False, index=True)
    route_id       = Column(Integer, ForeignKey("routes.id"))
    client_type_id = Column(Integer, ForeignKey("client_types.id"))
    balance        = Column(Money, nullable=False, default=0)
    status         = Column(Integer, nullable=False, default=0)  # 0 active / 1 inactive
    created_at     = Column(DateTime, default=datetime.now)

    country     = relationship("Country")
    region      = relationship("Region")
    route       = relationship("Route")
    client_type = relationship("ClientType")
