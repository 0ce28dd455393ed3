# frontend/services/visibility_report_service.py
from frontend.services import api_client
from frontend.services.feedback_report_service import CSV_HEADERS, ReportService

visibility_report_service = ReportService(
    "visibility-reports", {**CSV_HEADERS, "imageUrl": "Image URL"}
)

build_params = visibility_report_service.build_params
get_reports = visibility_report_service.get_reports
export_to_csv = visibility_report_service.export_to_csv
rows_to_csv = visibility_report_service.rows_to_csv


def get_my_reports(user_id: int):
    return api_client.get("/api/my-visibility-reports", {"userId": user_id})
