# backend/routers/staff_router.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, delete_or_404, get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.staff_model import Staff
from backend.schemas.staff import StaffCreate, StaffOut, StaffUpdate

router = APIRouter(prefix="/staff", tags=["staff"])

NOT_FOUND = "Staff member not found"


@router.get("")
def list_staff(db: Session = Depends(get_db)):
    rows = db.query(Staff).order_by(Staff.created_at.desc(), Staff.id.desc()).all()
    return ok([StaffOut.model_validate(s) for s in rows])


@router.get("/{staff_id}")
def get_staff(staff_id: int, db: Session = Depends(get_db)):
    return ok(StaffOut.model_validate(get_or_404(db, Staff, staff_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_staff(body: StaffCreate, db: Session = Depends(get_db)):
    member = Staff(**body.model_dump())
    db.add(member)
    commit_or_500(db, "Error creating staff member")
    db.refresh(member)
    return ok(StaffOut.model_validate(member))


@router.put("/{staff_id}")
def update_staff(staff_id: int, body: StaffUpdate, db: Session = Depends(get_db)):
    member = get_or_404(db, Staff, staff_id, NOT_FOUND)
    apply_patch(member, body)
    commit_or_500(db, "Error updating staff member")
    db.refresh(member)
    return ok(StaffOut.model_validate(member))


@router.delete("/{staff_id}", status_code=204)
def delete_staff(staff_id: int, db: Session = Depends(get_db)):
    delete_or_404(db, Staff, staff_id, NOT_FOUND, "Error deleting staff member")
    return Response(status_code=204)
