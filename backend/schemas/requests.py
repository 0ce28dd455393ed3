from datetime import datetime
from typing import Literal, NewType, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel, PatchModel, FlexibleDateTime

Location = NewType("Location", constr(strip_whitespace=True, min_length=1, max_length=255))
Priority = Literal["low", "medium", "high"]


class RequestCreate(CamelModel):
    user_id: int = Field(gt=0)
    user_name: constr(strip_whitespace=True, min_length=1, max_length=255)
    service_type_id: int = Field(gt=0)
    pickup_location: Location
    delivery_location: Location
    pickup_date: FlexibleDateTime
    description: Optional[str] = None
    priority: Priority = "medium"
    my_status: int = 0


class RequestUpdate(PatchModel):
    """Every field optional; only the ones sent are written."""
    not_null = ("user_name", "service_type_id", "pickup_location", "delivery_location", "pickup_date",
                "priority", "status", "my_status")

    user_name: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    service_type_id: Optional[int] = Field(default=None, gt=0)
    pickup_location: Optional[Location] = None
    delivery_location: Optional[Location] = None
    pickup_date: Optional[FlexibleDateTime] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[constr(strip_whitespace=True, min_length=1, max_length=20)] = None
    my_status: Optional[int] = None


class RequestOut(CamelModel):
    id: int
    user_id: int
    user_name: str
    service_type_id: int
    service_type_name: Optional[str] = None
    pickup_location: str
    delivery_location: str
    pickup_date: datetime
    description: Optional[str] = None
    priority: str
    status: str
    my_status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
