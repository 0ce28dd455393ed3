from datetime import datetime
from typing import Optional

from pydantic import Field

from backend.core.schemas import CamelModel


class FeedbackReportCreate(CamelModel):
    client_id: int = Field(gt=0)
    sales_rep_id: int = Field(gt=0)
    report_id: Optional[int] = None
    user_id: Optional[int] = None
    comment: Optional[str] = None


class VisibilityReportCreate(FeedbackReportCreate):
    image_url: Optional[str] = None


class FeedbackReportOut(CamelModel):
    id: int
    report_id: Optional[int] = None
    outlet: Optional[str] = None
    country: Optional[str] = None
    sales_rep: Optional[str] = None
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


class VisibilityReportOut(FeedbackReportOut):
    image_url: Optional[str] = None
