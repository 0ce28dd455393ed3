# frontend/services/feedback_report_service.py
"""
Query-string construction and CSV export for the report pages.

A request with no filters at all asks for today's reports (currentDate);
otherwise only the filters the user actually filled in are sent.
"""
import csv
import logging
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from frontend.services import api_client

logger = logging.getLogger(__name__)

FILTER_KEYS = ("currentDate", "startDate", "endDate", "country", "salesRep", "search")

CSV_HEADERS = {
    "id": "ID",
    "reportId": "Report ID",
    "outlet": "Outlet",
    "country": "Country",
    "salesRep": "Sales Rep",
    "comment": "Comment",
    "createdAt": "Created At",
}


class ReportService:
    def __init__(self, resource: str, headers: Dict[str, str]):
        self.resource = resource
        self.headers = headers

    def build_params(self, filters: Optional[dict] = None, page: Optional[int] = None,
                     limit: Optional[int] = None, today: Optional[date] = None) -> Dict[str, str]:
        provided = {k: str(v) for k, v in (filters or {}).items() if k in FILTER_KEYS and v not in (None, "")}
        params = provided or {"currentDate": (today or date.today()).isoformat()}
        if page is not None:
            params["page"] = str(page)
        if limit is not None:
            params["limit"] = str(limit)
        return params

    def get_reports(self, filters: Optional[dict] = None, page: int = 1, limit: int = 10):
        """(rows, pagination) for one page."""
        return api_client.get_page(f"/api/{self.resource}", self.build_params(filters, page, limit))

    def export_to_csv(self, filters: Optional[dict], path: str) -> int:
        """Save the server-side export to `path`; returns the byte count."""
        blob = api_client.download(f"/api/{self.resource}/export", self.build_params(filters))
        with open(path, "wb") as f:
            f.write(blob)
        logger.info("Saved %s export to %s", self.resource, path)
        return len(blob)

    def rows_to_csv(self, rows: List[dict], path: str) -> None:
        """Write already loaded rows, every field quoted."""
        df = pd.DataFrame(rows, columns=list(self.headers)).rename(columns=self.headers)
        df.to_csv(path, index=False, quoting=csv.QUOTE_ALL)


feedback_report_service = ReportService("feedback-reports", CSV_HEADERS)

build_params = feedback_report_service.build_params
get_reports = feedback_report_service.get_reports
export_to_csv = feedback_report_service.export_to_csv
rows_to_csv = feedback_report_service.rows_to_csv
