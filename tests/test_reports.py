# tests/test_reports.py
from datetime import datetime

import pytest

from backend.models.report_model import FeedbackReport, VisibilityReport


@pytest.fixture
def reports(db, outlet, rep, user):
    db.add_all([
        FeedbackReport(report_id=11, client_id=outlet.id, sales_rep_id=rep.id, user_id=user.id,
                       comment='Shelf "A" empty', created_at=datetime(2025, 3, 1, 9, 30)),
        FeedbackReport(report_id=12, client_id=outlet.id, sales_rep_id=rep.id,
                       comment="Good display", created_at=datetime(2025, 3, 2, 23, 59)),
        FeedbackReport(report_id=13, client_id=outlet.id, sales_rep_id=rep.id,
                       comment="Late delivery", created_at=datetime(2025, 3, 5, 8, 0)),
        VisibilityReport(report_id=21, client_id=outlet.id, sales_rep_id=rep.id, user_id=user.id,
                         comment="Branding up", image_url="https://img.example.com/1.jpg",
                         created_at=datetime(2025, 3, 1, 10, 0)),
        VisibilityReport(report_id=22, client_id=outlet.id, sales_rep_id=rep.id,
                         comment="No poster", created_at=datetime(2025, 3, 1, 11, 0)),
    ])
    db.commit()


def test_feedback_reports_newest_first_with_pagination(client, reports):
    res = client.get("/api/feedback-reports", params={"limit": 2}).json()
    assert [r["reportId"] for r in res["data"]] == [13, 12]
    assert res["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}
    row = res["data"][0]
    assert (row["outlet"], row["country"], row["salesRep"]) == ("Mama Mboga Stores", "Kenya", "John Otieno")


def test_current_date_covers_the_whole_day(client, reports):
    res = client.get("/api/feedback-reports", params={"currentDate": "2025-03-02"}).json()
    assert [r["comment"] for r in res["data"]] == ["Good display"]


def test_date_range_is_inclusive(client, reports):
    res = client.get("/api/feedback-reports", params={"startDate": "2025-03-01", "endDate": "2025-03-02"}).json()
    assert [r["reportId"] for r in res["data"]] == [12, 11]


def test_end_date_before_start_date_is_rejected(client, reports):
    res = client.get("/api/feedback-reports", params={"startDate": "2025-03-05", "endDate": "2025-03-01"})
    assert res.status_code == 400
    assert res.json()["error"] == "End date cannot be before start date"


def test_country_rep_and_search_filters(client, reports):
    assert client.get("/api/feedback-reports", params={"country": "Uganda"}).json()["data"] == []
    assert len(client.get("/api/feedback-reports", params={"salesRep": "John Otieno"}).json()["data"]) == 3
    found = client.get("/api/feedback-reports", params={"search": "delivery"}).json()["data"]
    assert [r["reportId"] for r in found] == [13]


def test_feedback_export_is_fully_quoted_csv(client, reports):
    res = client.get("/api/feedback-reports/export", params={"currentDate": "2025-03-01"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    assert 'filename="feedback-reports-' in res.headers["content-disposition"]
    lines = res.text.strip().splitlines()
    assert lines[0] == '"ID","Report ID","Outlet","Country","Sales Rep","Comment","Created At"'
    assert lines[1].endswith('"11","Mama Mboga Stores","Kenya","John Otieno","Shelf ""A"" empty","2025-03-01 09:30:00"')


def test_empty_export_still_has_headers(client, reports):
    res = client.get("/api/feedback-reports/export", params={"currentDate": "2024-01-01"})
    assert res.text.strip() == '"ID","Report ID","Outlet","Country","Sales Rep","Comment","Created At"'


def test_visibility_export_has_image_column(client, reports):
    res = client.get("/api/visibility-reports/export")
    header = res.text.splitlines()[0]
    assert header.endswith('"Created At","Image URL"')
    assert '"https://img.example.com/1.jpg"' in res.text


def test_my_visibility_reports(client, reports, user):
    res = client.get("/api/my-visibility-reports", params={"userId": user.id}).json()
    assert [r["imageUrl"] for r in res["data"]] == ["https://img.example.com/1.jpg"]
    assert client.get("/api/my-visibility-reports").status_code == 400


def test_report_write_path_checks_references(client, outlet, rep):
    res = client.post("/api/visibility-reports", json={
        "clientId": outlet.id, "salesRepId": rep.id, "comment": "Fridge branded", "imageUrl": "x.jpg",
    })
    assert res.status_code == 201
    assert res.json()["data"]["outlet"] == "Mama Mboga Stores"

    bad = client.post("/api/feedback-reports", json={"clientId": outlet.id, "salesRepId": 999})
    assert bad.status_code == 400
    assert bad.json()["error"] == "Invalid sales rep"
