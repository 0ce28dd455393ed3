# backend/core/crud.py
"""
Helpers shared by the resource routers: lookup-or-404, partial updates and
delete-or-404. Routers still own their queries and messages.
"""
from typing import Optional, Type, TypeVar

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.core.errors import commit_or_500

M = TypeVar("M")


def get_or_404(db: Session, model: Type[M], obj_id: int, message: str) -> M:
    obj = db.get(model, obj_id)
    if obj is None:
        raise HTTPException(status_code=404, detail=message)
    return obj


def patch_values(patch: BaseModel) -> dict:
    """Only the fields the client actually sent (explicit nulls included)."""
    return patch.model_dump(exclude_unset=True)


def apply_patch(obj, patch: BaseModel, fields: Optional[dict] = None) -> dict:
    """
    Assign the fields present in `patch` to `obj` and return them.
    Untouched columns keep their stored values.
    """
    values = patch_values(patch) if fields is None else fields
    for key, value in values.items():
        setattr(obj, key, value)
    return values


def delete_or_404(db: Session, model, obj_id: int, not_found: str, error_message: str,
                  in_use_message: Optional[str] = None) -> None:
    obj = get_or_404(db, model, obj_id, not_found)
    db.delete(obj)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=in_use_message or "Record is in use")
    commit_or_500(db, error_message)
