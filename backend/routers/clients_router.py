# backend/routers/clients_router.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok, paginated
from backend.database.session import get_db
from backend.models.client_model import Client, ClientType
from backend.models.receivable_model import SalesInvoice
from backend.models.region_model import Country, Region, Route
from backend.models.report_model import FeedbackReport, VisibilityReport
from backend.schemas.clients import ClientCreate, ClientOut, ClientTypeOut, ClientUpdate

router = APIRouter(prefix="/clients", tags=["clients"])

NOT_FOUND = "Client not found"


def _to_out(c: Client) -> ClientOut:
    out = ClientOut.model_validate(c)
    out.country_name = c.country.name if c.country else None
    out.region_name = c.region.name if c.region else None
    return out


def _check_refs(db: Session, values: dict, client: Optional[Client] = None) -> None:
    """Foreign keys in `values` must exist and the region must sit in the client's country."""
    country_id = values.get("country_id", client.country_id if client else None)
    if "country_id" in values and db.get(Country, values["country_id"]) is None:
        raise HTTPException(status_code=400, detail="Invalid country")
    if "region_id" in values or "country_id" in values:
        region_id = values.get("region_id", client.region_id if client else None)
        region = db.get(Region, region_id) if region_id is not None else None
        if region is None:
            raise HTTPException(status_code=400, detail="Invalid region")
        if region.country_id != country_id:
            raise HTTPException(status_code=400, detail="Region does not belong to the country")
    if values.get("route_id") is not None and db.get(Route, values["route_id"]) is None:
        raise HTTPException(status_code=400, detail="Invalid route")
    if values.get("client_type_id") is not None and db.get(ClientType, values["client_type_id"]) is None:
        raise HTTPException(status_code=400, detail="Invalid client type")


@router.get("/types")
def list_client_types(db: Session = Depends(get_db)):
    rows = db.query(ClientType).order_by(ClientType.name).all()
    return ok([ClientTypeOut.model_validate(t) for t in rows])


@router.get("")
def list_clients(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = Query(default=None),
    country_id: Optional[int] = Query(default=None, alias="countryId"),
    region_id: Optional[int] = Query(default=None, alias="regionId"),
    status: Optional[int] = Query(default=None),
    db: Session = Depends(get_db),
):
    q = db.query(Client)
    if search:
        like = f"%{search.strip()}%"
        q = q.filter(or_(Client.name.ilike(like), Client.contact.ilike(like), Client.email.ilike(like)))
    if country_id is not None:
        q = q.filter(Client.country_id == country_id)
    if region_id is not None:
        q = q.filter(Client.region_id == region_id)
    if status is not None:
        q = q.filter(Client.status == status)
    total = q.count()
    rows = q.order_by(Client.name, Client.id).offset((page - 1) * limit).limit(limit).all()
    return paginated([_to_out(c) for c in rows], page, limit, total)


@router.get("/{client_id}")
def get_client(client_id: int, db: Session = Depends(get_db)):
    return ok(_to_out(get_or_404(db, Client, client_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_client(body: ClientCreate, db: Session = Depends(get_db)):
    values = body.model_dump()
    _check_refs(db, values)
    client = Client(**values, balance=0)
    db.add(client)
    commit_or_500(db, "Error creating client")
    db.refresh(client)
    return ok(_to_out(client))


@router.put("/{client_id}")
def update_client(client_id: int, body: ClientUpdate, db: Session = Depends(get_db)):
    client = get_or_404(db, Client, client_id, NOT_FOUND)
    values = patch_values(body)
    _check_refs(db, values, client)
    apply_patch(client, body, values)
    commit_or_500(db, "Error updating client")
    db.refresh(client)
    return ok(_to_out(client))


@router.delete("/{client_id}", status_code=204)
def delete_client(client_id: int, db: Session = Depends(get_db)):
    client = get_or_404(db, Client, client_id, NOT_FOUND)
    has_history = (
        db.query(SalesInvoice.id).filter(SalesInvoice.client_id == client_id).first()
        or db.query(FeedbackReport.id).filter(FeedbackReport.client_id == client_id).first()
        or db.query(VisibilityReport.id).filter(VisibilityReport.client_id == client_id).first()
    )
    if has_history:
        raise HTTPException(status_code=409, detail="Client has invoices or reports")
    db.delete(client)
    commit_or_500(db, "Error deleting client")
    return Response(status_code=204)
