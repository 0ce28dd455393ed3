# backend/routers/service_types_router.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.request_model import ServiceRequest
from backend.models.service_type_model import ServiceType
from backend.schemas.service_types import ServiceTypeCreate, ServiceTypeOut, ServiceTypeUpdate

router = APIRouter(prefix="/service-types", tags=["service-types"])

NOT_FOUND = "Service type not found"


@router.get("")
def list_service_types(db: Session = Depends(get_db)):
    types = db.query(ServiceType).order_by(ServiceType.name).all()
    return ok([ServiceTypeOut.model_validate(t) for t in types])


@router.get("/{type_id}")
def get_service_type(type_id: int, db: Session = Depends(get_db)):
    return ok(ServiceTypeOut.model_validate(get_or_404(db, ServiceType, type_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_service_type(body: ServiceTypeCreate, db: Session = Depends(get_db)):
    st = ServiceType(name=body.name, description=body.description)
    db.add(st)
    commit_or_500(db, "Error creating service type")
    db.refresh(st)
    return ok(ServiceTypeOut.model_validate(st))


@router.put("/{type_id}")
def update_service_type(type_id: int, body: ServiceTypeUpdate, db: Session = Depends(get_db)):
    st = get_or_404(db, ServiceType, type_id, NOT_FOUND)
    apply_patch(st, body)
    commit_or_500(db, "Error updating service type")
    db.refresh(st)
    return ok(ServiceTypeOut.model_validate(st))


@router.delete("/{type_id}", status_code=204)
def delete_service_type(type_id: int, db: Session = Depends(get_db)):
    st = get_or_404(db, ServiceType, type_id, NOT_FOUND)
    if db.query(ServiceRequest.id).filter(ServiceRequest.service_type_id == type_id).first():
        raise HTTPException(status_code=409, detail="Service type is in use")
    db.delete(st)
    commit_or_500(db, "Error deleting service type")
    return Response(status_code=204)
