# frontend/views/pages/requests_pages.py
from PySide6.QtWidgets import QComboBox

from frontend.services import api_client
from frontend.views.pages import choices
from frontend.views.widgets.form_dialog import FieldSpec
from frontend.views.widgets.resource_table_page import ResourceTablePage

REQUEST_STATUSES = [("Pending", "pending"), ("Approved", "approved"), ("In progress", "in_progress"),
                    ("Completed", "completed"), ("Cancelled", "cancelled")]


def service_types_page():
    return ResourceTablePage(
        "Service Types", "/api/service-types",
        columns=[("id", "ID"), ("name", "Name"), ("description", "Description"), ("createdAt", "Created")],
        fields=[FieldSpec("name", "Name", required=True), FieldSpec("description", "Description", "multiline")],
    )


def staff_page():
    return ResourceTablePage(
        "Staff", "/api/staff",
        columns=[("id", "ID"), ("name", "Name"), ("position", "Position"), ("department", "Department")],
        fields=[
            FieldSpec("name", "Name", required=True),
            FieldSpec("position", "Position"),
            FieldSpec("department", "Department"),
            FieldSpec("photoUrl", "Photo URL"),
        ],
    )


class RequestsPage(ResourceTablePage):
    """Requests come from the customer app; here they are reviewed and moved through statuses."""

    def __init__(self, parent=None):
        super().__init__(
            "Requests", "/api/requests",
            columns=[("id", "ID"), ("userName", "Customer"), ("serviceTypeName", "Service"),
                     ("pickupLocation", "Pickup"), ("deliveryLocation", "Delivery"),
                     ("pickupDate", "Pickup date"), ("priority", "Priority"), ("status", "Status")],
            edit_fields=[
                FieldSpec("serviceTypeId", "Service type", "choice", required=True, choices=choices.service_types),
                FieldSpec("pickupLocation", "Pickup location", required=True),
                FieldSpec("deliveryLocation", "Delivery location", required=True),
                FieldSpec("pickupDate", "Pickup date", "date", required=True),
                FieldSpec("priority", "Priority", "choice", required=True,
                          choices=[("Low", "low"), ("Medium", "medium"), ("High", "high")]),
                FieldSpec("status", "Status", "choice", required=True, choices=REQUEST_STATUSES),
                FieldSpec("description", "Description", "multiline"),
            ],
            can_add=False, can_delete=False, parent=parent,
        )
        self.status_filter = QComboBox()
        self.status_filter.addItem("All statuses", None)
        for label, value in REQUEST_STATUSES:
            self.status_filter.addItem(label, value)
        self.status_filter.currentIndexChanged.connect(self._on_filter)
        self.add_widget(self.status_filter)

    def fetch(self):
        return api_client.get_requests(status=self.status_filter.currentData()), None

    def update(self, row: dict, payload: dict):
        return api_client.update_request(row["id"], payload)

    def _on_filter(self):
        self.load()
