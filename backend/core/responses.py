# backend/core/responses.py
"""
The single response envelope used by every JSON endpoint:

    {"success": true, "data": ..., "error": null}

Paginated lists add a "pagination" block.
"""
import math
from typing import Any, Optional

from backend.core.schemas import CamelModel


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


def ok(data: Any = None) -> dict:
    return {"success": True, "data": data, "error": None}


def paginated(items: list, page: int, limit: int, total: int) -> dict:
    return {
        "success": True,
        "data": items,
        "pagination": Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        ),
        "error": None,
    }


def fail(message: str, details: Optional[str] = None) -> dict:
    body = {"success": False, "data": None, "error": message}
    if details is not None:
        body["details"] = details
    return body
