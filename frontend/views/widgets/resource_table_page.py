# frontend/views/widgets/resource_table_page.py
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QHeaderView, QLabel, QLineEdit, QMessageBox,
    QPushButton, QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget,
)

from frontend.services import api_client
from frontend.services.api_client import ApiError
from frontend.views.widgets.form_dialog import FieldSpec, FormDialog

logger = logging.getLogger(__name__)

Column = Tuple[str, str]   # (key in the row dict, header)


def format_cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


class ResourceTablePage(QWidget):
    """
    List page for one API collection: fetched when shown, inline error
    banner, Add/Edit/Delete through a FormDialog, refetch after every change.
    Paginated collections are paged and searched on the server.
    """

    def __init__(self, title: str, path: str, columns: Sequence[Column],
                 fields: Optional[List[FieldSpec]] = None, edit_fields: Optional[List[FieldSpec]] = None,
                 update_method: str = "put", can_add: bool = True, can_edit: bool = True,
                 can_delete: bool = True, searchable: bool = True, paginated: bool = False,
                 page_size: int = 20, parent=None):
        super().__init__(parent)
        self.title = title
        self.path = path
        self.columns = list(columns)
        self.fields = fields or []
        self.edit_fields = edit_fields or self.fields
        self.update_method = update_method
        self.paginated = paginated
        self.page = 1
        self.page_size = page_size
        self.total_pages = 1
        self.params: dict = {}
        self.rows: List[dict] = []
        self._loaded = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        head = QHBoxLayout()
        head.addWidget(QLabel(title, objectName="PageTitle"))
        head.addStretch()
        self.search = QLineEdit(placeholderText="Search...")
        self.search.setVisible(searchable)
        self.search.setFixedWidth(240)
        if paginated:
            self.search.returnPressed.connect(self._on_server_search)
        else:
            self.search.textChanged.connect(self._render)
        head.addWidget(self.search)
        layout.addLayout(head)

        self.toolbar = QHBoxLayout()
        self.btn_add = self._tool_button("Add", self.on_add, can_add and bool(self.fields))
        self.btn_edit = self._tool_button("Edit", self.on_edit, can_edit and bool(self.edit_fields))
        self.btn_delete = self._tool_button("Delete", self.on_delete, can_delete)
        self.toolbar.addStretch()
        self._tool_button("Refresh", self.load, True)
        layout.addLayout(self.toolbar)

        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.status_label = QLabel(objectName="Muted")
        layout.addWidget(self.status_label)

        self.table = QTableWidget(0, len(self.columns))
        self.table.setHorizontalHeaderLabels([h for _, h in self.columns])
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.doubleClicked.connect(lambda _: self.on_edit() if self.btn_edit.isVisibleTo(self) else None)
        layout.addWidget(self.table)

        pager = QHBoxLayout()
        self.btn_prev = QPushButton("Previous")
        self.btn_next = QPushButton("Next")
        self.page_label = QLabel()
        self.btn_prev.clicked.connect(lambda: self.go_to_page(self.page - 1))
        self.btn_next.clicked.connect(lambda: self.go_to_page(self.page + 1))
        pager.addStretch()
        for w in (self.btn_prev, self.page_label, self.btn_next):
            w.setVisible(paginated)
            pager.addWidget(w)
        layout.addLayout(pager)

        self.setStyleSheet("""
            QLabel#PageTitle { font-size:20px; font-weight:700; color:#111827; }
            QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }
            QLabel#Muted { color:#6b7280; }
            QPushButton { padding:6px 14px; border-radius:6px; }
        """)

    # ---------- hooks ----------
    def fetch(self):
        """Rows for the current filters; paginated pages also return the pagination block."""
        if self.paginated:
            params = dict(self.params, page=self.page, limit=self.page_size)
            if self.search.text().strip():
                params["search"] = self.search.text().strip()
            return api_client.get_page(self.path, params)
        return api_client.get(self.path, self.params or None), None

    def item_path(self, row: dict) -> str:
        return f"{self.path}/{row['id']}"

    def update(self, row: dict, payload: dict):
        return getattr(api_client, self.update_method)(self.item_path(row), payload)

    def to_payload(self, values: dict) -> dict:
        return values

    # ---------- helpers ----------
    def _tool_button(self, text: str, slot: Callable, visible: bool) -> QPushButton:
        btn = QPushButton(text)
        btn.clicked.connect(slot)
        btn.setVisible(visible)
        self.toolbar.addWidget(btn)
        return btn

    def add_action(self, text: str, slot: Callable[[dict], None]) -> QPushButton:
        """Toolbar button acting on the selected row."""
        def run():
            row = self.selected_row()
            if row is None:
                QMessageBox.information(self, self.title, "Select a row first")
                return
            slot(row)
        btn = QPushButton(text)
        btn.clicked.connect(run)
        self.toolbar.insertWidget(self.toolbar.count() - 2, btn)
        return btn

    def add_widget(self, widget: QWidget) -> None:
        self.toolbar.insertWidget(self.toolbar.count() - 2, widget)

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def selected_row(self) -> Optional[dict]:
        items = self.table.selectedItems()
        if not items:
            return None
        return self.table.item(items[0].row(), 0).data(Qt.UserRole)

    def showEvent(self, event):
        super().showEvent(event)
        if not self._loaded:
            self.load()

    # ---------- data ----------
    def load(self):
        self.status_label.setText("Loading...")
        self.show_error("")
        try:
            rows, pagination = self.fetch()
        except ApiError as e:
            logger.warning("Loading %s failed: %s", self.path, e)
            self.status_label.setText("")
            self.show_error(str(e))
            return
        self._loaded = True
        self.rows = rows or []
        if pagination:
            self.total_pages = max(1, int(pagination.get("totalPages") or 1))
            self.page_label.setText(f"Page {self.page} of {self.total_pages} ({pagination.get('total', 0)} total)")
            self.btn_prev.setEnabled(self.page > 1)
            self.btn_next.setEnabled(self.page < self.total_pages)
        self._render()

    def go_to_page(self, page: int):
        if 1 <= page <= self.total_pages:
            self.page = page
            self.load()

    def _on_server_search(self):
        self.page = 1
        self.load()

    def visible_rows(self) -> List[dict]:
        text = self.search.text().strip().lower()
        if self.paginated or not text:
            return self.rows
        return [r for r in self.rows if any(text in format_cell(r.get(k)).lower() for k, _ in self.columns)]

    def _render(self):
        rows = self.visible_rows()
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c, (key, _) in enumerate(self.columns):
                item = QTableWidgetItem(format_cell(row.get(key)))
                if c == 0:
                    item.setData(Qt.UserRole, row)
                self.table.setItem(r, c, item)
        self.status_label.setText(f"{len(rows)} rows" if rows else "No records found")

    # ---------- actions ----------
    def on_add(self):
        dlg = FormDialog(f"Add {self.title}", self.fields,
                         submit=lambda v: api_client.post(self.path, self.to_payload(v)), parent=self)
        if dlg.exec() == FormDialog.Accepted:
            self.load()

    def on_edit(self):
        row = self.selected_row()
        if row is None:
            return
        dlg = FormDialog(f"Edit {self.title}", self.edit_fields, initial=row,
                         submit=lambda v: self.update(row, self.to_payload(v)), parent=self)
        if dlg.exec() == FormDialog.Accepted:
            self.load()

    def on_delete(self):
        row = self.selected_row()
        if row is None:
            return
        if QMessageBox.question(self, "Delete", "Delete the selected record?") != QMessageBox.Yes:
            return
        try:
            api_client.delete(self.item_path(row))
        except ApiError as e:
            self.show_error(str(e))
            return
        self.load()
