from datetime import datetime
from typing import List, Literal, NewType, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel, PatchModel

NameStr = NewType("NameStr", constr(strip_whitespace=True, min_length=1, max_length=255))
Email = NewType("Email", constr(strip_whitespace=True, min_length=3, max_length=255))
ManagerType = Literal["Retail", "Key Account", "Distribution"]


class SalesRepCreate(CamelModel):
    name: NameStr
    email: Email
    phone_number: constr(strip_whitespace=True, min_length=1, max_length=32)
    country: Optional[str] = None
    region: Optional[str] = None
    route_name: Optional[str] = None
    photo_url: Optional[str] = None
    status: Literal[0, 1] = 1


class SalesRepUpdate(PatchModel):
    not_null = ("name", "email", "phone_number", "status")

    name: Optional[NameStr] = None
    email: Optional[Email] = None
    phone_number: Optional[constr(strip_whitespace=True, min_length=1, max_length=32)] = None
    country: Optional[str] = None
    region: Optional[str] = None
    route_name: Optional[str] = None
    photo_url: Optional[str] = None
    status: Optional[Literal[0, 1]] = None


class SalesRepOut(CamelModel):
    id: int
    name: str
    email: str
    phone_number: str
    country: Optional[str] = None
    region: Optional[str] = None
    route_name: Optional[str] = None
    photo_url: Optional[str] = None
    status: int
    created_at: Optional[datetime] = None


class StatusPayload(CamelModel):
    status: Literal[0, 1]


class ManagerCreate(CamelModel):
    name: NameStr
    email: Email
    phone_number: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    manager_type: Optional[ManagerType] = None


class ManagerUpdate(PatchModel):
    not_null = ("name", "email")

    name: Optional[NameStr] = None
    email: Optional[Email] = None
    phone_number: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    manager_type: Optional[ManagerType] = None


class ManagerOut(CamelModel):
    id: int
    name: str
    email: str
    phone_number: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    manager_type: Optional[str] = None
    created_at: Optional[datetime] = None


class AssignmentIn(CamelModel):
    manager_id: int = Field(gt=0)
    manager_type: ManagerType


class AssignmentsPayload(CamelModel):
    assignments: List[AssignmentIn] = []


class AssignmentOut(CamelModel):
    manager_id: int
    manager_name: Optional[str] = None
    manager_type: str
