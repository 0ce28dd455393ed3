# backend/routers/tasks_router.py
import re
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, delete_or_404, get_or_404
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.task_model import CalendarTask
from backend.schemas.tasks import TaskCreate, TaskOut, TaskUpdate

router = APIRouter(prefix="/calendar-tasks", tags=["sales"])

NOT_FOUND = "Task not found"
MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def month_range(month: str):
    """'2025-03' -> (date(2025, 3, 1), date(2025, 4, 1))"""
    m = MONTH_RE.match(month)
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise HTTPException(status_code=400, detail="Invalid month format, expected YYYY-MM")
    year, mon = int(m.group(1)), int(m.group(2))
    start = date(year, mon, 1)
    end = date(year + 1, 1, 1) if mon == 12 else date(year, mon + 1, 1)
    return start, end


@router.get("")
def list_tasks(
    month: Optional[str] = Query(default=None),
    status: Optional[str] = Query(default=None),
    assigned_to: Optional[str] = Query(default=None, alias="assignedTo"),
    db: Session = Depends(get_db),
):
    q = db.query(CalendarTask)
    if month:
        start, end = month_range(month)
        q = q.filter(CalendarTask.date >= start, CalendarTask.date < end)
    if status:
        q = q.filter(CalendarTask.status == status)
    if assigned_to:
        q = q.filter(CalendarTask.assigned_to == assigned_to)
    rows = q.order_by(CalendarTask.date, CalendarTask.id).all()
    return ok([TaskOut.model_validate(t) for t in rows])


@router.get("/{task_id}")
def get_task(task_id: int, db: Session = Depends(get_db)):
    return ok(TaskOut.model_validate(get_or_404(db, CalendarTask, task_id, NOT_FOUND)))


@router.post("", status_code=201)
def create_task(body: TaskCreate, db: Session = Depends(get_db)):
    task = CalendarTask(**body.model_dump())
    db.add(task)
    commit_or_500(db, "Error creating task")
    db.refresh(task)
    return ok(TaskOut.model_validate(task))


@router.put("/{task_id}")
def update_task(task_id: int, body: TaskUpdate, db: Session = Depends(get_db)):
    task = get_or_404(db, CalendarTask, task_id, NOT_FOUND)
    apply_patch(task, body)
    commit_or_500(db, "Error updating task")
    db.refresh(task)
    return ok(TaskOut.model_validate(task))


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    delete_or_404(db, CalendarTask, task_id, NOT_FOUND, "Error deleting task")
    return Response(status_code=204)
