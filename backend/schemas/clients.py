from datetime import datetime
from typing import NewType, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel, PatchModel

NameStr = NewType("NameStr", constr(strip_whitespace=True, min_length=1, max_length=255))
Contact = NewType("Contact", constr(strip_whitespace=True, min_length=1, max_length=100))


class CountryOut(CamelModel):
    id: int
    name: str


class RegionOut(CamelModel):
    id: int
    name: str
    country_id: int


class RouteOut(CamelModel):
    id: int
    name: str
    region_id: Optional[int] = None
    country_id: int


class ClientTypeOut(CamelModel):
    id: int
    name: str


class ClientCreate(CamelModel):
    name: NameStr
    contact: Contact
    email: Optional[str] = None
    address: Optional[str] = None
    tax_pin: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    country_id: int = Field(gt=0)
    region_id: int = Field(gt=0)
    route_id: Optional[int] = None
    client_type_id: Optional[int] = None
    status: int = 0


class ClientUpdate(PatchModel):
    not_null = ("name", "contact", "country_id", "region_id", "status")

    name: Optional[NameStr] = None
    contact: Optional[Contact] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tax_pin: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    country_id: Optional[int] = Field(default=None, gt=0)
    region_id: Optional[int] = Field(default=None, gt=0)
    route_id: Optional[int] = None
    client_type_id: Optional[int] = None
    status: Optional[int] = None


class ClientOut(CamelModel):
    id: int
    name: str
    contact: str
    email: Optional[str] = None
    address: Optional[str] = None
    tax_pin: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    country_id: int
    country_name: Optional[str] = None
    region_id: int
    region_name: Optional[str] = None
    route_id: Optional[int] = None
    client_type_id: Optional[int] = None
    balance: float
    status: int
    created_at: Optional[datetime] = None
