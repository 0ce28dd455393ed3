# backend/models/region_model.py
from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.types import Unicode

from backend.database.session import Base


class Country(Base):
    __tablename__ = "countries"
    id     = Column(Integer, primary_key=True, index=True)
    name   = Column(Unicode(100), unique=True, nullable=False)
    status = Column(Integer, nullable=False, default=1)  # 1 = in use


class Region(Base):
    __tablename__ = "regions"
    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(Unicode(100), nullable=False)
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=False, index=True)

    country = relationship("Country")


class Route(Base):
    __tablename__ = "routes"
    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(Unicode(100), nullable=False)
    region_id  = Column(Integer, ForeignKey("regions.id"), index=True)
    country_id = Column(Integer, ForeignKey("countries.id"), nullable=False, index=True)

    region  = relationship("Region")
    country = relationship("Country")
