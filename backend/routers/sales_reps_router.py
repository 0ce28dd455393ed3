# backend/routers/sales_reps_router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.report_model import FeedbackReport, VisibilityReport
from backend.models.sales_rep_model import Manager, SalesRep, SalesRepManagerAssignment
from backend.schemas.sales_reps import (
    AssignmentOut, AssignmentsPayload, SalesRepCreate, SalesRepOut, SalesRepUpdate, StatusPayload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sales/sales-reps", tags=["sales"])

NOT_FOUND = "Sales rep not found"


def _assignments_out(rep: SalesRep):
    return [
        AssignmentOut(
            manager_id=a.manager_id,
            manager_name=a.manager.name if a.manager else None,
            manager_type=a.manager_type,
        )
        for a in sorted(rep.assignments, key=lambda a: a.manager_id)
    ]


@router.get("")
def list_sales_reps(
    status: Optional[int] = Query(default=None),
    country: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    q = db.query(SalesRep)
    if status is not None:
        q = q.filter(SalesRep.status == status)
    if country:
        q = q.filter(SalesRep.country == country)
    return ok([SalesRepOut.model_validate(r) for r in q.order_by(SalesRep.name).all()])


@router.get("/{rep_id}")
def get_sales_rep(rep_id: int, db: Session = Depends(get_db)):
    return ok(SalesRepOut.model_validate(get_or_404(db, SalesRep, rep_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_sales_rep(body: SalesRepCreate, db: Session = Depends(get_db)):
    rep = SalesRep(**body.model_dump())
    db.add(rep)
    commit_or_500(db, "Error creating sales rep")
    db.refresh(rep)
    return ok(SalesRepOut.model_validate(rep))


@router.put("/{rep_id}")
def update_sales_rep(rep_id: int, body: SalesRepUpdate, db: Session = Depends(get_db)):
    rep = get_or_404(db, SalesRep, rep_id, NOT_FOUND)
    apply_patch(rep, body)
    commit_or_500(db, "Error updating sales rep")
    db.refresh(rep)
    return ok(SalesRepOut.model_validate(rep))


@router.patch("/{rep_id}/status")
def update_sales_rep_status(rep_id: int, body: StatusPayload, db: Session = Depends(get_db)):
    rep = get_or_404(db, SalesRep, rep_id, NOT_FOUND)
    rep.status = body.status
    commit_or_500(db, "Error updating sales rep status")
    db.refresh(rep)
    return ok(SalesRepOut.model_validate(rep))


@router.delete("/{rep_id}", status_code=204)
def delete_sales_rep(rep_id: int, db: Session = Depends(get_db)):
    rep = get_or_404(db, SalesRep, rep_id, NOT_FOUND)
    has_reports = (
        db.query(FeedbackReport.id).filter(FeedbackReport.sales_rep_id == rep_id).first()
        or db.query(VisibilityReport.id).filter(VisibilityReport.sales_rep_id == rep_id).first()
    )
    if has_reports:
        raise HTTPException(status_code=409, detail="Sales rep has reports")
    db.delete(rep)
    commit_or_500(db, "Error deleting sales rep")
    return Response(status_code=204)


@router.get("/{rep_id}/managers")
def get_manager_assignments(rep_id: int, db: Session = Depends(get_db)):
    rep = get_or_404(db, SalesRep, rep_id, NOT_FOUND)
    return ok(_assignments_out(rep))


@router.post("/{rep_id}/managers")
def replace_manager_assignments(rep_id: int, body: AssignmentsPayload, db: Session = Depends(get_db)):
    """Replace the rep's manager assignments with exactly the ones sent."""
    rep = get_or_404(db, SalesRep, rep_id, NOT_FOUND)

    # last type wins for a repeated manager
    wanted = {}
    for a in body.assignments:
        wanted[a.manager_id] = a.manager_type

    found = {m[0] for m in db.query(Manager.id).filter(Manager.id.in_(list(wanted)))} if wanted else set()
    unknown = sorted(set(wanted) - found)
    if unknown:
        raise HTTPException(status_code=400, detail=f"Manager not found: {unknown[0]}")

    rep.assignments.clear()
    db.flush()
    rep.assignments.extend(
        SalesRepManagerAssignment(manager_id=mid, manager_type=mtype) for mid, mtype in wanted.items()
    )
    commit_or_500(db, "Error assigning managers")
    db.refresh(rep)
    logger.info("Sales rep %s now has %d manager assignments", rep_id, len(rep.assignments))
    return ok(_assignments_out(rep))
