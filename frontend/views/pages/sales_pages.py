# frontend/views/pages/sales_pages.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QDialog, QDialogButtonBox, QHBoxLayout, QLabel, QLineEdit,
    QListWidget, QListWidgetItem, QVBoxLayout, QWidget,
)

from frontend.services import api_client
from frontend.services.api_client import ApiError
from frontend.views.pages import choices
from frontend.views.widgets.form_dialog import FieldSpec
from frontend.views.widgets.resource_table_page import ResourceTablePage


def clients_page():
    return ResourceTablePage(
        "Clients", "/api/clients",
        columns=[("name", "Name"), ("contact", "Contact"), ("email", "Email"), ("countryName", "Country"),
                 ("regionName", "Region"), ("balance", "Balance"), ("status", "Status")],
        fields=[
            FieldSpec("name", "Name", required=True),
            FieldSpec("contact", "Contact", required=True),
            FieldSpec("email", "Email"),
            FieldSpec("address", "Address", "multiline"),
            FieldSpec("taxPin", "Tax PIN"),
            FieldSpec("countryId", "Country", "choice", required=True, choices=choices.countries),
            FieldSpec("regionId", "Region", "choice", required=True, choices=choices.regions),
            FieldSpec("clientTypeId", "Client type", "choice", choices=choices.client_types),
            FieldSpec("status", "Status", "choice", required=True, choices=[("Active", 0), ("Inactive", 1)]),
        ],
        paginated=True, page_size=20,
    )


def managers_page():
    return ResourceTablePage(
        "Managers", "/api/managers",
        columns=[("name", "Name"), ("email", "Email"), ("phoneNumber", "Phone"), ("country", "Country"),
                 ("region", "Region"), ("managerType", "Type")],
        fields=[
            FieldSpec("name", "Name", required=True),
            FieldSpec("email", "Email", required=True),
            FieldSpec("phoneNumber", "Phone"),
            FieldSpec("country", "Country", "choice", choices=choices.country_names),
            FieldSpec("region", "Region"),
            FieldSpec("managerType", "Type", "choice", choices=choices.MANAGER_TYPES),
        ],
    )


class ManagerAssignmentDialog(QDialog):
    """Tick the managers of a sales rep; one manager type per assignment. Saving replaces the set."""

    def __init__(self, rep: dict, parent=None):
        super().__init__(parent)
        self.rep = rep
        self.setWindowTitle(f"Managers of {rep['name']}")
        self.resize(520, 460)
        self.rows = {}

        layout = QVBoxLayout(self)
        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.list = QListWidget()
        layout.addWidget(self.list)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.setStyleSheet("QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }")

        try:
            managers = api_client.get_managers()
            current = {a["managerId"]: a["managerType"] for a in api_client.get_rep_managers(rep["id"])}
        except ApiError as e:
            self._error(str(e))
            return
        for m in managers:
            self._add_row(m, current.get(m["id"]))

    def _error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def _add_row(self, manager: dict, assigned_type):
        row = QWidget()
        h = QHBoxLayout(row)
        h.setContentsMargins(4, 2, 4, 2)
        check = QCheckBox(manager["name"])
        check.setChecked(assigned_type is not None)
        kind = QComboBox()
        for label, value in choices.MANAGER_TYPES:
            kind.addItem(label, value)
        idx = kind.findData(assigned_type or manager.get("managerType"))
        if idx >= 0:
            kind.setCurrentIndex(idx)
        h.addWidget(check)
        h.addStretch()
        h.addWidget(kind)
        item = QListWidgetItem(self.list)
        item.setSizeHint(row.sizeHint())
        self.list.setItemWidget(item, row)
        self.rows[manager["id"]] = (check, kind)

    def assignments(self):
        return [
            {"managerId": manager_id, "managerType": kind.currentData()}
            for manager_id, (check, kind) in self.rows.items()
            if check.isChecked()
        ]

    def _on_save(self):
        try:
            api_client.set_rep_managers(self.rep["id"], self.assignments())
        except ApiError as e:
            self._error(str(e))
            return
        self.accept()


class SalesRepsPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Sales Reps", "/api/sales/sales-reps",
            columns=[("name", "Name"), ("email", "Email"), ("phoneNumber", "Phone"), ("country", "Country"),
                     ("region", "Region"), ("routeName", "Route"), ("status", "Active")],
            fields=[
                FieldSpec("name", "Name", required=True),
                FieldSpec("email", "Email", required=True),
                FieldSpec("phoneNumber", "Phone", required=True),
                FieldSpec("country", "Country", "choice", choices=choices.country_names),
                FieldSpec("region", "Region"),
                FieldSpec("routeName", "Route"),
                FieldSpec("photoUrl", "Photo URL"),
            ],
            parent=parent,
        )
        self.add_action("Managers", self.edit_managers)
        self.add_action("Activate / Deactivate", self.toggle_status)

    def edit_managers(self, row: dict):
        ManagerAssignmentDialog(row, self).exec()

    def toggle_status(self, row: dict):
        try:
            api_client.set_sales_rep_status(row["id"], 0 if row.get("status") == 1 else 1)
        except ApiError as e:
            self.show_error(str(e))
            return
        self.load()


class NoticesPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Notices", "/api/notices",
            columns=[("title", "Title"), ("content", "Content"), ("countryName", "Country"),
                     ("createdAt", "Created")],
            fields=[
                FieldSpec("title", "Title", required=True),
                FieldSpec("content", "Content", "multiline", required=True),
                FieldSpec("countryId", "Country", "choice", choices=choices.countries),
                FieldSpec("status", "Status", "choice", required=True, choices=[("Active", 0), ("Archived", 1)]),
            ],
            parent=parent,
        )
        self.params = {"status": 0}
        self.country = QComboBox()
        self.country.addItem("All countries", None)
        self.archived = QCheckBox("Show archived")
        self.country.currentIndexChanged.connect(self._on_filter)
        self.archived.toggled.connect(self._on_filter)
        self.add_widget(self.country)
        self.add_widget(self.archived)

    def load(self):
        if self.country.count() == 1:
            try:
                for label, value in choices.countries():
                    self.country.addItem(label, value)
            except ApiError as e:
                self.show_error(str(e))
                return
        super().load()

    def fetch(self):
        return api_client.get_notices(country_id=self.params.get("countryId"), status=self.params.get("status")), None

    def _on_filter(self):
        self.params = {"status": 1 if self.archived.isChecked() else 0}
        if self.country.currentData():
            self.params["countryId"] = self.country.currentData()
        super().load()


class TasksPage(ResourceTablePage):
    def __init__(self, parent=None):
        super().__init__(
            "Calendar Tasks", "/api/calendar-tasks",
            columns=[("date", "Date"), ("title", "Title"), ("status", "Status"),
                     ("assignedTo", "Assigned to"), ("description", "Description")],
            fields=[
                FieldSpec("date", "Date", "date", required=True),
                FieldSpec("title", "Title", required=True),
                FieldSpec("description", "Description", "multiline"),
                FieldSpec("status", "Status", "choice", required=True, choices=choices.TASK_STATUSES),
                FieldSpec("assignedTo", "Assigned to"),
            ],
            parent=parent,
        )
        self.month = QDateEdit(QDate.currentDate())
        self.month.setDisplayFormat("yyyy-MM")
        self.status = QComboBox()
        self.status.addItem("All statuses", None)
        for label, value in choices.TASK_STATUSES:
            self.status.addItem(label, value)
        self.assignee = QLineEdit(placeholderText="Assignee")
        self.month.dateChanged.connect(self._on_filter)
        self.status.currentIndexChanged.connect(self._on_filter)
        self.assignee.returnPressed.connect(self._on_filter)
        for w in (self.month, self.status, self.assignee):
            self.add_widget(w)
        self._set_params()

    def fetch(self):
        return api_client.get_tasks(
            month=self.params.get("month"),
            status=self.params.get("status"),
            assigned_to=self.params.get("assignedTo"),
        ), None

    def _set_params(self):
        self.params = {"month": self.month.date().toString("yyyy-MM")}
        if self.status.currentData():
            self.params["status"] = self.status.currentData()
        if self.assignee.text().strip():
            self.params["assignedTo"] = self.assignee.text().strip()

    def _on_filter(self):
        self._set_params()
        self.load()
