# frontend/views/pages/reports_page.py
import logging
from datetime import date

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QFileDialog, QHBoxLayout, QHeaderView, QLabel, QLineEdit,
    QMessageBox, QPushButton, QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget,
)

from frontend.services import api_client
from frontend.services.api_client import ApiError
from frontend.services.feedback_report_service import ReportService, feedback_report_service
from frontend.services.visibility_report_service import visibility_report_service
from frontend.views.widgets.resource_table_page import format_cell

logger = logging.getLogger(__name__)

BASE_COLUMNS = [("reportId", "Report ID"), ("outlet", "Outlet"), ("country", "Country"),
                ("salesRep", "Sales Rep"), ("comment", "Comment"), ("createdAt", "Created At")]


class ReportsPage(QWidget):
    """Filter bar, paged table and CSV export for one report kind."""

    PAGE_SIZE = 10

    def __init__(self, title: str, service: ReportService, columns, parent=None):
        super().__init__(parent)
        self.service = service
        self.columns = columns
        self.page = 1
        self.total_pages = 1
        self.rows = []
        self._loaded = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(QLabel(title, objectName="PageTitle"))

        bar = QHBoxLayout()
        self.use_range = QCheckBox("Date range")
        self.start = QDateEdit(QDate.currentDate().addDays(-7), calendarPopup=True)
        self.end = QDateEdit(QDate.currentDate(), calendarPopup=True)
        for d in (self.start, self.end):
            d.setDisplayFormat("yyyy-MM-dd")
        self.country = QComboBox()
        self.country.addItem("All countries", None)
        self.sales_rep = QComboBox()
        self.sales_rep.addItem("All sales reps", None)
        self.search = QLineEdit(placeholderText="Search outlet, comment, rep")
        apply_btn = QPushButton("Apply")
        apply_btn.clicked.connect(self.apply_filters)
        clear_btn = QPushButton("Today")
        clear_btn.clicked.connect(self.clear_filters)
        for w in (self.use_range, self.start, self.end, self.country, self.sales_rep, self.search,
                  apply_btn, clear_btn):
            bar.addWidget(w)
        layout.addLayout(bar)

        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.table = QTableWidget(0, len(columns))
        self.table.setHorizontalHeaderLabels([h for _, h in columns])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        layout.addWidget(self.table)

        footer = QHBoxLayout()
        export_btn = QPushButton("Export CSV")
        export_btn.clicked.connect(self.export_all)
        export_page_btn = QPushButton("Export page")
        export_page_btn.clicked.connect(self.export_page)
        self.btn_prev = QPushButton("Previous")
        self.btn_next = QPushButton("Next")
        self.page_label = QLabel()
        self.btn_prev.clicked.connect(lambda: self.go_to_page(self.page - 1))
        self.btn_next.clicked.connect(lambda: self.go_to_page(self.page + 1))
        for w in (export_btn, export_page_btn):
            footer.addWidget(w)
        footer.addStretch()
        for w in (self.btn_prev, self.page_label, self.btn_next):
            footer.addWidget(w)
        layout.addLayout(footer)

        self.setStyleSheet("""
            QLabel#PageTitle { font-size:20px; font-weight:700; color:#111827; }
            QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }
        """)

    def showEvent(self, event):
        super().showEvent(event)
        if not self._loaded:
            self._load_lookups()
            self.load()

    def _load_lookups(self):
        try:
            for c in api_client.get_countries():
                self.country.addItem(c["name"], c["name"])
            for r in api_client.get_sales_reps():
                self.sales_rep.addItem(r["name"], r["name"])
        except ApiError as e:
            self._error(str(e))

    def _error(self, message: str):
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def filters(self) -> dict:
        f = {
            "country": self.country.currentData(),
            "salesRep": self.sales_rep.currentData(),
            "search": self.search.text().strip(),
        }
        if self.use_range.isChecked():
            f["startDate"] = self.start.date().toString("yyyy-MM-dd")
            f["endDate"] = self.end.date().toString("yyyy-MM-dd")
        return f

    def apply_filters(self):
        self.page = 1
        self.load()

    def clear_filters(self):
        self.use_range.setChecked(False)
        self.country.setCurrentIndex(0)
        self.sales_rep.setCurrentIndex(0)
        self.search.clear()
        self.apply_filters()

    def go_to_page(self, page: int):
        if 1 <= page <= self.total_pages:
            self.page = page
            self.load()

    def load(self):
        self._error("")
        try:
            rows, pagination = self.service.get_reports(self.filters(), self.page, self.PAGE_SIZE)
        except ApiError as e:
            self._error(str(e))
            return
        self._loaded = True
        self.rows = rows
        self.total_pages = max(1, int(pagination.get("totalPages") or 1))
        self.page_label.setText(f"Page {self.page} of {self.total_pages} ({pagination.get('total', 0)} reports)")
        self.btn_prev.setEnabled(self.page > 1)
        self.btn_next.setEnabled(self.page < self.total_pages)
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c, (key, _) in enumerate(self.columns):
                self.table.setItem(r, c, QTableWidgetItem(format_cell(row.get(key))))

    def _ask_path(self) -> str:
        default = f"{self.service.resource}-{date.today().isoformat()}.csv"
        path, _ = QFileDialog.getSaveFileName(self, "Export CSV", default, "CSV files (*.csv)")
        return path

    def export_all(self):
        path = self._ask_path()
        if not path:
            return
        try:
            self.service.export_to_csv(self.filters(), path)
        except (ApiError, OSError) as e:
            self._error(str(e))
            return
        QMessageBox.information(self, "Export", f"Saved to {path}")

    def export_page(self):
        if not self.rows:
            QMessageBox.information(self, "Export", "Nothing to export")
            return
        path = self._ask_path()
        if not path:
            return
        try:
            self.service.rows_to_csv(self.rows, path)
        except OSError as e:
            self._error(str(e))
            return
        QMessageBox.information(self, "Export", f"Saved to {path}")


def feedback_reports_page():
    return ReportsPage("Feedback Reports", feedback_report_service, BASE_COLUMNS)


def visibility_reports_page():
    return ReportsPage("Visibility Reports", visibility_report_service,
                       BASE_COLUMNS + [("imageUrl", "Image URL")])
