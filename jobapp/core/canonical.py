from __future__ import annotations

import re
from typing import Any, Final, List, Mapping, Optional


# Collapse runs of whitespace.
_MULTI_SPACE: Final[re.Pattern[str]] = re.compile(r"\s+")


def canonical_text(text: object) -> str:
    """
    Canonical text for display and comparison.
    - None -> ""
    - Strips leading/trailing whitespace
    - Collapses inner whitespace to a single space
    """
    if text is None:
        return ""
    return _MULTI_SPACE.sub(" ", str(text)).strip()


def is_blank(value: Any) -> bool:
    """
    Empty-value test shared by every rule.
    Missing (None), empty and whitespace-only text count as blank.
    Numbers and booleans are never blank.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return False
    if isinstance(value, Mapping):
        return len(value) == 0
    return str(value).strip() == ""


def parse_number(value: Any) -> Optional[float]:
    """
    Best-effort numeric parse for number-as-text inputs.
    Accepts ',' as decimal separator. Returns None when not a number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip().replace(",", ".")
    if s == "":
        return None
    try:
        x = float(s)
    except ValueError:
        return None
    # Reject nan / inf.
    if x != x or x in (float("inf"), float("-inf")):
        return None
    return x


def selected_options(options: Any) -> List[str]:
    """
    Keys of a boolean map whose value is true, in the map's order.
    Example: {"CSS": True, "React": False} -> ["CSS"]
    """
    if not isinstance(options, Mapping):
        return []
    return [name for name, checked in options.items() if checked]
