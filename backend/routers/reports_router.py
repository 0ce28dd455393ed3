# backend/routers/reports_router.py
"""Feedback and visibility reports: filtered lists, CSV export and the mobile write path."""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from backend.core.errors import commit_or_500
from backend.core.responses import ok, paginated
from backend.database.session import get_db
from backend.models.client_model import Client
from backend.models.report_model import FeedbackReport, VisibilityReport
from backend.models.sales_rep_model import SalesRep
from backend.schemas.reports import (
    FeedbackReportCreate, FeedbackReportOut, VisibilityReportCreate, VisibilityReportOut,
)
from backend.services import report_service
from backend.services.report_service import ReportFilters

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


def report_filters(
    current_date: Optional[date] = Query(default=None, alias="currentDate"),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    country: Optional[str] = Query(default=None),
    sales_rep: Optional[str] = Query(default=None, alias="salesRep"),
    search: Optional[str] = Query(default=None),
) -> ReportFilters:
    if start_date and end_date and end_date < start_date:
        raise HTTPException(status_code=400, detail="End date cannot be before start date")
    return ReportFilters(
        current_date=current_date,
        start_date=start_date,
        end_date=end_date,
        country=country or None,
        sales_rep=sales_rep or None,
        search=search or None,
    )


def _csv_response(kind: str, rows, with_image: bool) -> Response:
    body = report_service.rows_to_csv(rows, with_image=with_image)
    filename = report_service.export_filename(kind)
    logger.info("Exporting %d %s reports", len(rows), kind)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _check_refs(db: Session, body: FeedbackReportCreate) -> None:
    if db.get(Client, body.client_id) is None:
        raise HTTPException(status_code=400, detail="Invalid client")
    if db.get(SalesRep, body.sales_rep_id) is None:
        raise HTTPException(status_code=400, detail="Invalid sales rep")


# ---------- feedback ----------

@router.get("/feedback-reports")
def list_feedback_reports(
    filters: ReportFilters = Depends(report_filters),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    rows, total = report_service.fetch_page(db, FeedbackReport, filters, page, limit)
    return paginated([FeedbackReportOut(**r) for r in rows], page, limit, total)


@router.get("/feedback-reports/export")
def export_feedback_reports(filters: ReportFilters = Depends(report_filters), db: Session = Depends(get_db)):
    return _csv_response("feedback", report_service.fetch_all(db, FeedbackReport, filters), with_image=False)


@router.post("/feedback-reports", status_code=201)
def create_feedback_report(body: FeedbackReportCreate, db: Session = Depends(get_db)):
    _check_refs(db, body)
    report = FeedbackReport(**body.model_dump())
    db.add(report)
    commit_or_500(db, "Error creating feedback report")
    db.refresh(report)
    return ok(FeedbackReportOut(
        id=report.id, report_id=report.report_id, outlet=report.client.name,
        country=report.client.country.name if report.client.country else None,
        sales_rep=report.sales_rep.name, comment=report.comment, created_at=report.created_at,
    ))


# ---------- visibility ----------

@router.get("/visibility-reports")
def list_visibility_reports(
    filters: ReportFilters = Depends(report_filters),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    rows, total = report_service.fetch_page(db, VisibilityReport, filters, page, limit)
    return paginated([VisibilityReportOut(**r) for r in rows], page, limit, total)


@router.get("/visibility-reports/export")
def export_visibility_reports(filters: ReportFilters = Depends(report_filters), db: Session = Depends(get_db)):
    return _csv_response("visibility", report_service.fetch_all(db, VisibilityReport, filters), with_image=True)


@router.post("/visibility-reports", status_code=201)
def create_visibility_report(body: VisibilityReportCreate, db: Session = Depends(get_db)):
    _check_refs(db, body)
    report = VisibilityReport(**body.model_dump())
    db.add(report)
    commit_or_500(db, "Error creating visibility report")
    db.refresh(report)
    return ok(VisibilityReportOut(
        id=report.id, report_id=report.report_id, outlet=report.client.name,
        country=report.client.country.name if report.client.country else None,
        sales_rep=report.sales_rep.name, comment=report.comment,
        image_url=report.image_url, created_at=report.created_at,
    ))


@router.get("/my-visibility-reports")
def my_visibility_reports(
    user_id: int = Query(alias="userId"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    filters = ReportFilters(user_id=user_id)
    rows, total = report_service.fetch_page(db, VisibilityReport, filters, page, limit)
    return paginated([VisibilityReportOut(**r) for r in rows], page, limit, total)
