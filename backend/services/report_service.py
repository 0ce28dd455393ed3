# backend/services/report_service.py
"""
Shared query and CSV export for feedback and visibility reports.

Both report tables have the same shape (client, sales rep, comment,
created_at) so the filters and the export live here once.
"""
import csv
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

import pandas as pd
from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.models.client_model import Client
from backend.models.region_model import Country
from backend.models.report_model import VisibilityReport
from backend.models.sales_rep_model import SalesRep

logger = logging.getLogger(__name__)

CSV_COLUMNS = {
    "id": "ID",
    "report_id": "Report ID",
    "outlet": "Outlet",
    "country": "Country",
    "sales_rep": "Sales Rep",
    "comment": "Comment",
    "created_at": "Created At",
}


@dataclass
class ReportFilters:
    current_date: Optional[date] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    country: Optional[str] = None
    sales_rep: Optional[str] = None
    search: Optional[str] = None
    user_id: Optional[int] = None


def _day_start(d: date) -> datetime:
    return datetime.combine(d, time.min)


def report_query(db: Session, model, filters: ReportFilters):
    q = (
        db.query(model, Client.name, Country.name, SalesRep.name)
        .join(Client, model.client_id == Client.id)
        .outerjoin(Country, Client.country_id == Country.id)
        .join(SalesRep, model.sales_rep_id == SalesRep.id)
    )
    # day filters are half-open ranges so an index on created_at stays usable
    if filters.current_date:
        start = _day_start(filters.current_date)
        q = q.filter(model.created_at >= start, model.created_at < start + timedelta(days=1))
    if filters.start_date:
        q = q.filter(model.created_at >= _day_start(filters.start_date))
    if filters.end_date:
        q = q.filter(model.created_at < _day_start(filters.end_date) + timedelta(days=1))
    if filters.country:
        q = q.filter(Country.name == filters.country)
    if filters.sales_rep:
        q = q.filter(SalesRep.name == filters.sales_rep)
    if filters.search:
        like = f"%{filters.search.strip()}%"
        q = q.filter(or_(Client.name.ilike(like), model.comment.ilike(like), SalesRep.name.ilike(like)))
    if filters.user_id is not None:
        q = q.filter(model.user_id == filters.user_id)
    return q.order_by(model.created_at.desc(), model.id.desc())


def _to_row(report, outlet, country, sales_rep) -> dict:
    row = {
        "id": report.id,
        "report_id": report.report_id,
        "outlet": outlet,
        "country": country,
        "sales_rep": sales_rep,
        "comment": report.comment,
        "created_at": report.created_at,
    }
    if isinstance(report, VisibilityReport):
        row["image_url"] = report.image_url
    return row


def fetch_page(db: Session, model, filters: ReportFilters, page: int, limit: int) -> Tuple[List[dict], int]:
    q = report_query(db, model, filters)
    total = q.count()
    rows = q.offset((page - 1) * limit).limit(limit).all()
    return [_to_row(*r) for r in rows], total


def fetch_all(db: Session, model, filters: ReportFilters) -> List[dict]:
    return [_to_row(*r) for r in report_query(db, model, filters).all()]


def rows_to_csv(rows: List[dict], with_image: bool = False) -> str:
    columns = dict(CSV_COLUMNS)
    if with_image:
        columns["image_url"] = "Image URL"
    df = pd.DataFrame(rows, columns=list(columns))
    if not df.empty:
        df["report_id"] = pd.to_numeric(df["report_id"]).astype("Int64")
        df["created_at"] = pd.to_datetime(df["created_at"]).dt.strftime("%Y-%m-%d %H:%M:%S")
    df = df.rename(columns=columns)
    return df.to_csv(index=False, quoting=csv.QUOTE_ALL)


def export_filename(kind: str, today: Optional[date] = None) -> str:
    return f"{kind}-reports-{(today or date.today()).isoformat()}.csv"
