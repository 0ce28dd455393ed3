# backend/routers/notices_router.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, delete_or_404, get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.notice_model import Notice
from backend.models.region_model import Country
from backend.schemas.clients import CountryOut
from backend.schemas.notices import NoticeCreate, NoticeOut, NoticeUpdate

router = APIRouter(prefix="/notices", tags=["sales"])

NOT_FOUND = "Notice not found"


def _to_out(n: Notice) -> NoticeOut:
    out = NoticeOut.model_validate(n)
    out.country_name = n.country.name if n.country else None
    return out


def _check_country(db: Session, country_id: Optional[int]) -> None:
    if country_id is not None and db.get(Country, country_id) is None:
        raise HTTPException(status_code=400, detail="Invalid country")


@router.get("/countries")
def list_notice_countries(db: Session = Depends(get_db)):
    rows = db.query(Country).order_by(Country.name).all()
    return ok([CountryOut.model_validate(c) for c in rows])


@router.get("")
def list_notices(
    country_id: Optional[int] = Query(default=None, alias="countryId"),
    status: Optional[int] = Query(default=None),
    db: Session = Depends(get_db),
):
    q = db.query(Notice)
    if country_id is not None:
        q = q.filter(Notice.country_id == country_id)
    if status is not None:
        q = q.filter(Notice.status == status)
    rows = q.order_by(Notice.created_at.desc(), Notice.id.desc()).all()
    return ok([_to_out(n) for n in rows])


@router.get("/{notice_id}")
def get_notice(notice_id: int, db: Session = Depends(get_db)):
    return ok(_to_out(get_or_404(db, Notice, notice_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_notice(body: NoticeCreate, db: Session = Depends(get_db)):
    _check_country(db, body.country_id)
    notice = Notice(**body.model_dump())
    db.add(notice)
    commit_or_500(db, "Error creating notice")
    db.refresh(notice)
    return ok(_to_out(notice))


@router.put("/{notice_id}")
def update_notice(notice_id: int, body: NoticeUpdate, db: Session = Depends(get_db)):
    notice = get_or_404(db, Notice, notice_id, NOT_FOUND)
    values = patch_values(body)
    _check_country(db, values.get("country_id"))
    apply_patch(notice, body, values)
    commit_or_500(db, "Error updating notice")
    db.refresh(notice)
    return ok(_to_out(notice))


@router.delete("/{notice_id}", status_code=204)
def delete_notice(notice_id: int, db: Session = Depends(get_db)):
    delete_or_404(db, Notice, notice_id, NOT_FOUND, "Error deleting notice")
    return Response(status_code=204)
