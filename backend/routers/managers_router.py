# backend/routers/managers_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.sales_rep_model import Manager, SalesRepManagerAssignment
from backend.schemas.sales_reps import ManagerCreate, ManagerOut, ManagerUpdate

router = APIRouter(prefix="/managers", tags=["sales"])

NOT_FOUND = "Manager not found"


@router.get("")
def list_managers(
    manager_type: Optional[str] = Query(default=None, alias="managerType"),
    db: Session = Depends(get_db),
):
    q = db.query(Manager)
    if manager_type:
        q = q.filter(Manager.manager_type == manager_type)
    return ok([ManagerOut.model_validate(m) for m in q.order_by(Manager.name).all()])


@router.get("/{manager_id}")
def get_manager(manager_id: int, db: Session = Depends(get_db)):
    return ok(ManagerOut.model_validate(get_or_404(db, Manager, manager_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_manager(body: ManagerCreate, db: Session = Depends(get_db)):
    manager = Manager(**body.model_dump())
    db.add(manager)
    commit_or_500(db, "Error creating manager")
    db.refresh(manager)
    return ok(ManagerOut.model_validate(manager))


@router.put("/{manager_id}")
def update_manager(manager_id: int, body: ManagerUpdate, db: Session = Depends(get_db)):
    manager = get_or_404(db, Manager, manager_id, NOT_FOUND)
    apply_patch(manager, body)
    commit_or_500(db, "Error updating manager")
    db.refresh(manager)
    return ok(ManagerOut.model_validate(manager))


@router.delete("/{manager_id}", status_code=204)
def delete_manager(manager_id: int, db: Session = Depends(get_db)):
    manager = get_or_404(db, Manager, manager_id, NOT_FOUND)
    db.query(SalesRepManagerAssignment).filter(
        SalesRepManagerAssignment.manager_id == manager_id
    ).delete(synchronize_session=False)
    db.delete(manager)
    commit_or_500(db, "Error deleting manager")
    return Response(status_code=204)
