# jobapp/ui/widgets/number_line_edit.py
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import QLineEdit


class NumberLineEdit(QLineEdit):
    """
    Number-as-text input (years of experience).

    Behavior:
      - Accepts digits with an optional decimal separator ('.' or ',')
      - On editingFinished trims spaces, turns ',' into '.' and drops a trailing '.'
      - Emits normalized(value_str) after normalization

    The value stays text; the rules module decides whether it is acceptable.
    """

    normalized = Signal(str)

    def __init__(self, parent: Optional[object] = None) -> None:
        super().__init__(parent)

        v = QDoubleValidator(self)
        v.setNotation(QDoubleValidator.StandardNotation)
        v.setBottom(-1e6)
        v.setTop(1e6)
        self.setValidator(v)

        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.editingFinished.connect(self._normalize_now)

    def _normalize_now(self) -> None:
        out = normalize_number_text(self.text())
        if out != self.text():
            self.setText(out)
        self.normalized.emit(out)


def normalize_number_text(raw: Optional[str]) -> str:
    s = (raw or "").strip().replace(" ", "").replace(",", ".")
    if not s:
        return ""

    # Keep the first '.' as decimal separator.
    if s.count(".") > 1:
        first = s.find(".")
        s = s[: first + 1] + s[first + 1 :].replace(".", "")

    if s.endswith("."):
        s = s[:-1]
    return s
