import datetime as dt
from typing import Literal, Optional

from pydantic import constr

from backend.core.schemas import CamelModel, PatchModel

TaskStatus = Literal["Pending", "In Progress", "Completed"]
Title = constr(strip_whitespace=True, min_length=1, max_length=255)


class TaskCreate(CamelModel):
    date: dt.date
    title: Title
    description: Optional[str] = None
    status: TaskStatus = "Pending"
    assigned_to: Optional[str] = None


class TaskUpdate(PatchModel):
    not_null = ("date", "title", "status")

    date: Optional[dt.date] = None
    title: Optional[Title] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None


class TaskOut(CamelModel):
    id: int
    date: dt.date
    title: str
    description: Optional[str] = None
    status: str
    assigned_to: Optional[str] = None
    created_at: Optional[dt.datetime] = None
