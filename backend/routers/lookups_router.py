# backend/routers/lookups_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.region_model import Country, Region, Route
from backend.schemas.clients import CountryOut, RegionOut, RouteOut

router = APIRouter(prefix="/sales", tags=["sales"])


@router.get("/countries")
def list_countries(db: Session = Depends(get_db)):
    rows = db.query(Country).order_by(Country.name).all()
    return ok([CountryOut.model_validate(c) for c in rows])


@router.get("/regions")
def list_regions(
    country_id: Optional[int] = Query(default=None, alias="countryId"),
    db: Session = Depends(get_db),
):
    q = db.query(Region)
    if country_id is not None:
        q = q.filter(Region.country_id == country_id)
    return ok([RegionOut.model_validate(r) for r in q.order_by(Region.name).all()])


@router.get("/routes")
def list_routes(
    country_id: Optional[int] = Query(default=None, alias="countryId"),
    db: Session = Depends(get_db),
):
    q = db.query(Route)
    if country_id is not None:
        q = q.filter(Route.country_id == country_id)
    return ok([RouteOut.model_validate(r) for r in q.order_by(Route.name).all()])
