from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from jobapp.core.canonical import is_blank, parse_number


# A rule inspects the whole values record and returns an error message or None.
Rule = Callable[[Mapping[str, Any]], Optional[str]]
RuleTable = Mapping[str, Tuple[Rule, ...]]


@dataclass(slots=True)
class ValidationResult:
    """
    Outcome of one validation pass.

    - ok: Blocking status. If False, the form must not be submitted.
    - field_errors: One message per failing field (first failing rule wins).
    - warnings: Non-blocking messages.
    """
    ok: bool = True
    field_errors: Dict[str, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def add_field_error(self, field_name: str, message: str) -> None:
        if field_name and message:
            self.field_errors[field_name] = message
            self.ok = False

    def add_warning(self, message: str) -> None:
        if message:
            self.warnings.append(message)


def run_rules(table: RuleTable, values: Mapping[str, Any]) -> ValidationResult:
    """
    Evaluate every field's rule chain in declared order.
    A chain stops at its first failing rule.
    """
    r = ValidationResult()
    for field_name, chain in table.items():
        for rule in chain:
            message = rule(values)
            if message:
                r.add_field_error(field_name, message)
                break
    return r


# ---------------------------------------------------------------------
# Rule factories
# ---------------------------------------------------------------------
def required(field_name: str, message: str) -> Rule:
    def _rule(values: Mapping[str, Any]) -> Optional[str]:
        return message if is_blank(values.get(field_name)) else None

    return _rule


def required_if(
    field_name: str,
    message: str,
    *,
    on_field: str,
    one_of: Iterable[str],
) -> Rule:
    """Required only while `on_field` holds one of the given values."""
    triggers = frozenset(one_of)

    def _rule(values: Mapping[str, Any]) -> Optional[str]:
        if values.get(on_field) not in triggers:
            return None
        return message if is_blank(values.get(field_name)) else None

    return _rule


def matches(field_name: str, pattern: "re.Pattern[str]", message: str, *, full: bool = True) -> Rule:
    """Checks a present value, untrimmed, against a pattern; blank values pass."""

    def _rule(values: Mapping[str, Any]) -> Optional[str]:
        value = values.get(field_name)
        if is_blank(value):
            return None
        text = str(value)
        found = pattern.fullmatch(text) if full else pattern.search(text)
        return None if found else message

    return _rule


def greater_than_zero(field_name: str, message: str, *, invalid_message: str) -> Rule:
    def _rule(values: Mapping[str, Any]) -> Optional[str]:
        value = values.get(field_name)
        if is_blank(value):
            return None
        number = parse_number(value)
        if number is None:
            return invalid_message
        return None if number > 0 else message

    return _rule


def any_selected(field_name: str, message: str) -> Rule:
    def _rule(values: Mapping[str, Any]) -> Optional[str]:
        options = values.get(field_name) or {}
        return None if any(bool(v) for v in options.values()) else message

    return _rule


from .application_rules import check_application, validate_application
