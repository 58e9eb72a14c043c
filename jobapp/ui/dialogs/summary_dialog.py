from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from jobapp.core.canonical import canonical_text, selected_options
from jobapp.core.rules.application_rules import (
    EXPERIENCE_POSITIONS,
    FIELD_LABELS,
    MANAGEMENT_POSITIONS,
    PORTFOLIO_POSITIONS,
)


def summary_lines(values: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    (label, text) pairs shown in the summary, in display order.
    Position-dependent fields appear only for the positions that use them.
    """
    position = canonical_text(values.get("position"))

    lines = [
        (FIELD_LABELS["fullName"], canonical_text(values.get("fullName"))),
        (FIELD_LABELS["email"], canonical_text(values.get("email"))),
        (FIELD_LABELS["phoneNumber"], canonical_text(values.get("phoneNumber"))),
        (FIELD_LABELS["position"], position),
    ]
    if position in EXPERIENCE_POSITIONS:
        lines.append((FIELD_LABELS["relevantExperience"], canonical_text(values.get("relevantExperience"))))
    if position in PORTFOLIO_POSITIONS:
        lines.append((FIELD_LABELS["portfolioUrl"], canonical_text(values.get("portfolioUrl"))))
    if position in MANAGEMENT_POSITIONS:
        # Multi-line text is kept as typed.
        lines.append((FIELD_LABELS["managementExperience"], str(values.get("managementExperience") or "").strip()))

    lines.append((FIELD_LABELS["additionalSkills"], ", ".join(selected_options(values.get("additionalSkills")))))
    lines.append((FIELD_LABELS["preferredInterviewTime"], canonical_text(values.get("preferredInterviewTime"))))
    return lines


class SummaryDialog(QDialog):
    """
    Read-only summary of a successfully submitted application.
    Shows the values frozen at submit time; closing it is the caller's cue to reset.
    """

    def __init__(self, values: Mapping[str, Any], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.setWindowTitle("Form Summary")
        self.setModal(True)
        self.setMinimumWidth(420)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(10)

        title = QLabel("<h2>Form Summary</h2>")
        root.addWidget(title)

        form = QFormLayout()
        self.value_labels: dict[str, QLabel] = {}
        for label, text in summary_lines(values):
            lbl = QLabel(text)
            lbl.setWordWrap(True)
            lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
            form.addRow(QLabel(f"<b>{label}:</b>"), lbl)
            self.value_labels[label] = lbl
        root.addLayout(form)

        btn_row = QHBoxLayout()
        btn_row.addStretch(1)
        self.btn_close = QPushButton("Close")
        self.btn_close.clicked.connect(self.accept)
        btn_row.addWidget(self.btn_close)
        root.addLayout(btn_row)
