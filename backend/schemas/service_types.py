from datetime import datetime
from typing import NewType, Optional

from pydantic import constr

from backend.core.schemas import CamelModel, PatchModel

NameStr = NewType("NameStr", constr(strip_whitespace=True, min_length=1, max_length=100))


class ServiceTypeCreate(CamelModel):
    name: NameStr
    description: Optional[str] = None


class ServiceTypeUpdate(PatchModel):
    not_null = ("name",)

    name: Optional[NameStr] = None
    description: Optional[str] = None


class ServiceTypeOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
