# backend/routers/requests_router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.request_model import ServiceRequest
from backend.models.service_type_model import ServiceType
from backend.models.user_model import User
from backend.schemas.requests import RequestCreate, RequestOut, RequestUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/requests", tags=["requests"])

NOT_FOUND = "Request not found"


def _to_out(req: ServiceRequest) -> RequestOut:
    out = RequestOut.model_validate(req)
    out.service_type_name = req.service_type.name if req.service_type else None
    return out


@router.get("")
def list_requests(
    status: Optional[str] = Query(default=None),
    my_status: Optional[int] = Query(default=None, alias="myStatus"),
    db: Session = Depends(get_db),
):
    q = db.query(ServiceRequest)
    if status:
        q = q.filter(ServiceRequest.status == status)
    if my_status is not None:
        q = q.filter(ServiceRequest.my_status == my_status)
    rows = q.order_by(ServiceRequest.created_at.desc(), ServiceRequest.id.desc()).all()
    return ok([_to_out(r) for r in rows])


@router.get("/{request_id}")
def get_request(request_id: int, db: Session = Depends(get_db)):
    return ok(_to_out(get_or_404(db, ServiceRequest, request_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_request(body: RequestCreate, db: Session = Depends(get_db)):
    # both lookups and the insert share this request's session/transaction
    if db.get(ServiceType, body.service_type_id) is None:
        raise HTTPException(status_code=400, detail="Invalid service type")
    if db.get(User, body.user_id) is None:
        raise HTTPException(status_code=400, detail="Invalid user")

    req = ServiceRequest(**body.model_dump(), status="pending")
    db.add(req)
    commit_or_500(db, "Error creating request")
    db.refresh(req)
    logger.info("Request %s created for user %s", req.id, req.user_id)
    return ok(_to_out(req))


@router.patch("/{request_id}")
def update_request(request_id: int, body: RequestUpdate, db: Session = Depends(get_db)):
    req = get_or_404(db, ServiceRequest, request_id, NOT_FOUND)
    values = patch_values(body)
    if "service_type_id" in values and db.get(ServiceType, values["service_type_id"]) is None:
        raise HTTPException(status_code=400, detail="Invalid service type")
    apply_patch(req, body, values)
    commit_or_500(db, "Error updating request")
    db.refresh(req)
    return ok(_to_out(req))
