# jobapp/ui/job_application_form.py
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import QDateTime, Qt, Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDateTimeEdit,
    QFormLayout,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from jobapp.core.form_store import FieldChange, FormSnapshot, FormStore, LifecycleState
from jobapp.core.rules.application_rules import (
    EXPERIENCE_POSITIONS,
    FIELD_LABELS,
    MANAGEMENT_POSITIONS,
    PORTFOLIO_POSITIONS,
    POSITIONS,
    SKILLS,
)
from jobapp.ui.dialogs.summary_dialog import SummaryDialog
from jobapp.ui.widgets.number_line_edit import NumberLineEdit


logger = logging.getLogger(__name__)

INTERVIEW_TIME_FORMAT = "yyyy-MM-dd'T'HH:mm"
_ERROR_STYLE = "color: #d9534f;"

# Skills are shown in two columns of three.
_SKILL_COLUMNS = 2


class JobApplicationForm(QWidget):
    """
    Job application data-entry form.

    The widget holds no form state of its own:
    - every edit is forwarded to the FormStore as a FieldChange
    - the view is re-rendered from each store snapshot
    - Submit calls FormStore.submit(); on success a SummaryDialog is opened
      and closing it resets the store.
    """

    submitted = Signal()

    def __init__(self, store: FormStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self._store = store
        self._rendering = False
        self._row_labels: Dict[str, QLabel] = {}
        self._row_widgets: Dict[str, QWidget] = {}
        self._error_labels: Dict[str, QLabel] = {}
        self.summary_dialog: Optional[SummaryDialog] = None

        root = QVBoxLayout(self)
        self.form = QFormLayout()
        root.addLayout(self.form)

        # Full Name
        self.full_name = QLineEdit()
        self.full_name.textEdited.connect(lambda text: self._emit("fullName", text))
        self._add_row("fullName", self.full_name)

        # Email
        self.email = QLineEdit()
        self.email.setPlaceholderText("name@example.com")
        self.email.textEdited.connect(lambda text: self._emit("email", text))
        self._add_row("email", self.email)

        # Phone Number
        self.phone_number = QLineEdit()
        self.phone_number.setPlaceholderText("10 digits")
        self.phone_number.textEdited.connect(lambda text: self._emit("phoneNumber", text))
        self._add_row("phoneNumber", self.phone_number)

        # Position (placeholder item carries an empty value)
        self.position = QComboBox()
        self.position.addItem("Select", "")
        for name in POSITIONS:
            self.position.addItem(name, name)
        self.position.currentIndexChanged.connect(self._on_position_changed)
        self._add_row("position", self.position)

        # Relevant Experience (Developer / Designer)
        self.relevant_experience = NumberLineEdit()
        self.relevant_experience.textEdited.connect(
            lambda text: self._emit("relevantExperience", text)
        )
        self.relevant_experience.normalized.connect(
            lambda text: self._emit("relevantExperience", text)
        )
        self._add_row("relevantExperience", self.relevant_experience, label="Relevant Experience (Years)")

        # Portfolio URL (Designer)
        self.portfolio_url = QLineEdit()
        self.portfolio_url.setPlaceholderText("https://")
        self.portfolio_url.textEdited.connect(lambda text: self._emit("portfolioUrl", text))
        self._add_row("portfolioUrl", self.portfolio_url)

        # Management Experience (Manager)
        self.management_experience = QTextEdit()
        self.management_experience.setFixedHeight(80)
        self.management_experience.textChanged.connect(
            lambda: self._emit("managementExperience", self.management_experience.toPlainText())
        )
        self._add_row("managementExperience", self.management_experience)

        # Additional Skills
        skills_box = QWidget()
        grid = QGridLayout(skills_box)
        grid.setContentsMargins(0, 0, 0, 0)
        rows_per_column = -(-len(SKILLS) // _SKILL_COLUMNS)
        self.skill_boxes: Dict[str, QCheckBox] = {}
        for i, skill in enumerate(SKILLS):
            cb = QCheckBox(skill)
            cb.toggled.connect(
                lambda checked, s=skill: self._emit(f"additionalSkills.{s}", checked, is_checkbox=True)
            )
            grid.addWidget(cb, i % rows_per_column, i // rows_per_column)
            self.skill_boxes[skill] = cb
        self._add_row("additionalSkills", skills_box)

        # Preferred Interview Time (minimum value doubles as "not set")
        self.interview_time = QDateTimeEdit()
        self.interview_time.setCalendarPopup(True)
        self.interview_time.setDisplayFormat("yyyy-MM-dd HH:mm")
        self.interview_time.setMinimumDateTime(QDateTime.fromString("2000-01-01T00:00", INTERVIEW_TIME_FORMAT))
        self.interview_time.setSpecialValueText("Not set")
        self.interview_time.setDateTime(self.interview_time.minimumDateTime())
        self.interview_time.dateTimeChanged.connect(self._on_interview_time_changed)
        self._add_row("preferredInterviewTime", self.interview_time)

        # Buttons
        btn_row = QHBoxLayout()
        btn_row.addStretch(1)
        self.btn_submit = QPushButton("Submit")
        self.btn_submit.clicked.connect(self.on_submit)
        btn_row.addWidget(self.btn_submit)
        root.addLayout(btn_row)
        root.addStretch(1)

        unsubscribe = store.subscribe(self.render)
        self.destroyed.connect(lambda *_: unsubscribe())
        self.render(store.get_snapshot())

    # ----------------------------
    # Layout helpers
    # ----------------------------
    def _add_row(self, name: str, editor: QWidget, *, label: Optional[str] = None) -> None:
        container = QWidget()
        box = QVBoxLayout(container)
        box.setContentsMargins(0, 0, 0, 0)
        box.setSpacing(2)
        box.addWidget(editor)

        error = QLabel()
        error.setStyleSheet(_ERROR_STYLE)
        error.setWordWrap(True)
        error.hide()
        box.addWidget(error)

        row_label = QLabel(label or FIELD_LABELS[name])
        row_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.form.addRow(row_label, container)

        self._row_labels[name] = row_label
        self._row_widgets[name] = container
        self._error_labels[name] = error

    def _set_row_visible(self, name: str, visible: bool) -> None:
        self._row_labels[name].setVisible(visible)
        self._row_widgets[name].setVisible(visible)

    # ----------------------------
    # Events -> store
    # ----------------------------
    def _emit(self, name: str, value: object, *, is_checkbox: bool = False) -> None:
        if self._rendering:
            return
        self._store.handle_change(FieldChange(name=name, value=value, is_checkbox=is_checkbox))

    def _on_position_changed(self, _index: int) -> None:
        self._emit("position", self.position.currentData() or "")

    def _on_interview_time_changed(self, value: QDateTime) -> None:
        if value == self.interview_time.minimumDateTime():
            text = ""
        else:
            text = value.toString(INTERVIEW_TIME_FORMAT)
        self._emit("preferredInterviewTime", text)

    def on_submit(self) -> None:
        try:
            state = self._store.submit()
        except Exception as e:
            logger.exception("submit failed")
            QMessageBox.critical(self, "Error", f"Unexpected error:\n\n{e}")
            return

        if state is LifecycleState.SUBMITTED:
            self.submitted.emit()
            self._open_summary(self._store.get_snapshot())

    def _open_summary(self, snapshot: FormSnapshot) -> None:
        dlg = SummaryDialog(snapshot.submitted_values or {}, self)
        dlg.finished.connect(self._on_summary_closed)
        self.summary_dialog = dlg
        dlg.open()

    def _on_summary_closed(self, _result: int) -> None:
        self.summary_dialog = None
        self._store.reset()

    # ----------------------------
    # Store -> view
    # ----------------------------
    def render(self, snapshot: FormSnapshot) -> None:
        values = snapshot.values
        self._rendering = True
        try:
            self._set_text(self.full_name, values.get("fullName"))
            self._set_text(self.email, values.get("email"))
            self._set_text(self.phone_number, values.get("phoneNumber"))
            self._set_text(self.relevant_experience, values.get("relevantExperience"))
            self._set_text(self.portfolio_url, values.get("portfolioUrl"))

            management = _as_text(values.get("managementExperience"))
            if self.management_experience.toPlainText() != management:
                self.management_experience.setPlainText(management)

            position = _as_text(values.get("position"))
            index = self.position.findData(position)
            self.position.setCurrentIndex(index if index >= 0 else 0)

            skills = values.get("additionalSkills") or {}
            for skill, cb in self.skill_boxes.items():
                cb.setChecked(bool(skills.get(skill)))

            self._set_interview_time(_as_text(values.get("preferredInterviewTime")))
        finally:
            self._rendering = False

        self._set_row_visible("relevantExperience", position in EXPERIENCE_POSITIONS)
        self._set_row_visible("portfolioUrl", position in PORTFOLIO_POSITIONS)
        self._set_row_visible("managementExperience", position in MANAGEMENT_POSITIONS)

        for name, label in self._error_labels.items():
            message = snapshot.errors.get(name, "")
            label.setText(message)
            label.setVisible(bool(message))

        editable = not snapshot.is_submitted
        for container in self._row_widgets.values():
            container.setEnabled(editable)
        self.btn_submit.setEnabled(editable)

    @staticmethod
    def _set_text(widget: QLineEdit, value: object) -> None:
        text = _as_text(value)
        if widget.text() != text:
            widget.setText(text)

    def _set_interview_time(self, text: str) -> None:
        if text:
            dt = QDateTime.fromString(text, INTERVIEW_TIME_FORMAT)
            if not dt.isValid():
                logger.warning("unparseable interview time %r", text)
                return
        else:
            dt = self.interview_time.minimumDateTime()
        if self.interview_time.dateTime() != dt:
            self.interview_time.setDateTime(dt)


def _as_text(value: object) -> str:
    return "" if value is None else str(value)
