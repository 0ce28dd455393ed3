# frontend/views/widgets/form_dialog.py
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QDialog, QDialogButtonBox, QDoubleSpinBox,
    QFormLayout, QLabel, QLineEdit, QSpinBox, QTextEdit, QVBoxLayout,
)

from frontend.services.api_client import ApiError

Choices = Union[Sequence[Tuple[str, Any]], Callable[[], Sequence[Tuple[str, Any]]]]


@dataclass
class FieldSpec:
    """One input of a FormDialog. `key` is the camelCase name sent to the API."""
    key: str
    label: str
    kind: str = "text"          # text | multiline | number | int | date | choice | bool | password
    required: bool = False
    choices: Optional[Choices] = None
    default: Any = None


def _to_qdate(value) -> QDate:
    if value:
        d = QDate.fromString(str(value)[:10], "yyyy-MM-dd")
        if d.isValid():
            return d
    return QDate.currentDate()


class FormDialog(QDialog):
    """
    Form built from FieldSpecs. `submit(values)` is called on Save; if it
    raises ApiError the message is shown inline and the dialog stays open.
    """

    def __init__(self, title: str, fields: List[FieldSpec], initial: Optional[dict] = None,
                 submit: Optional[Callable[[dict], Any]] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setMinimumWidth(420)
        self.fields = fields
        self.submit = submit
        self.result_data = None
        self.inputs: Dict[str, Any] = {}

        layout = QVBoxLayout(self)
        self.error_label = QLabel(objectName="Error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        form = QFormLayout()
        initial = initial or {}
        for spec in fields:
            widget = self._make_input(spec, initial.get(spec.key, spec.default))
            self.inputs[spec.key] = widget
            form.addRow(spec.label + (" *" if spec.required else ""), widget)
        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.setStyleSheet("""
            QLabel#Error { color:#dc2626; padding:8px; background:#fef2f2; border-radius:6px; }
            QLineEdit, QTextEdit, QComboBox, QDateEdit, QSpinBox, QDoubleSpinBox { padding:6px; }
        """)

    def _make_input(self, spec: FieldSpec, value):
        if spec.kind == "multiline":
            w = QTextEdit()
            w.setPlainText("" if value is None else str(value))
            w.setFixedHeight(80)
        elif spec.kind == "number":
            w = QDoubleSpinBox()
            w.setDecimals(2)
            w.setRange(-1e12, 1e12)
            w.setValue(float(value or 0))
        elif spec.kind == "int":
            w = QSpinBox()
            w.setRange(0, 10**9)
            w.setValue(int(value or 0))
        elif spec.kind == "date":
            w = QDateEdit(calendarPopup=True)
            w.setDisplayFormat("yyyy-MM-dd")
            w.setDate(_to_qdate(value))
        elif spec.kind == "choice":
            w = QComboBox()
            choices = spec.choices() if callable(spec.choices) else (spec.choices or [])
            if not spec.required:
                w.addItem("(none)", None)
            for label, data in choices:
                w.addItem(str(label), data)
            idx = w.findData(value)
            if idx >= 0:
                w.setCurrentIndex(idx)
        elif spec.kind == "bool":
            w = QCheckBox()
            w.setChecked(bool(value) if value is not None else True)
        else:
            w = QLineEdit("" if value is None else str(value))
            if spec.kind == "password":
                w.setEchoMode(QLineEdit.Password)
        return w

    def values(self) -> dict:
        out = {}
        for spec in self.fields:
            w = self.inputs[spec.key]
            if spec.kind == "multiline":
                v = w.toPlainText().strip() or None
            elif spec.kind in ("number", "int"):
                v = w.value()
            elif spec.kind == "date":
                v = w.date().toString("yyyy-MM-dd")
            elif spec.kind == "choice":
                v = w.currentData()
            elif spec.kind == "bool":
                v = w.isChecked()
            else:
                v = w.text().strip() or None
            out[spec.key] = v
        return out

    def show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.show()

    def _on_save(self):
        values = self.values()
        missing = [s.label for s in self.fields if s.required and values[s.key] in (None, "")]
        if missing:
            self.show_error("Required: " + ", ".join(missing))
            return
        if self.submit is None:
            self.result_data = values
            self.accept()
            return
        try:
            self.result_data = self.submit(values)
        except ApiError as e:
            self.show_error(str(e))
            return
        self.accept()
