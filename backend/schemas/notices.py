from datetime import datetime
from typing import Literal, Optional

from pydantic import constr

from backend.core.schemas import CamelModel, PatchModel

Title = constr(strip_whitespace=True, min_length=1, max_length=255)


class NoticeCreate(CamelModel):
    title: Title
    content: constr(strip_whitespace=True, min_length=1)
    country_id: Optional[int] = None
    status: Literal[0, 1] = 0


class NoticeUpdate(PatchModel):
    not_null = ("title", "content", "status")

    title: Optional[Title] = None
    content: Optional[constr(strip_whitespace=True, min_length=1)] = None
    country_id: Optional[int] = None
    status: Optional[Literal[0, 1]] = None


class NoticeOut(CamelModel):
    id: int
    title: str
    content: str
    country_id: Optional[int] = None
    country_name: Optional[str] = None
    status: int
    created_at: Optional[datetime] = None
