from datetime import datetime
from typing import Optional

from pydantic import constr

from backend.core.schemas import CamelModel, PatchModel


class StaffCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=255)
    photo_url: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None


class StaffUpdate(PatchModel):
    not_null = ("name",)

    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    photo_url: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None


class StaffOut(CamelModel):
    id: int
    name: str
    photo_url: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    created_at: Optional[datetime] = None
