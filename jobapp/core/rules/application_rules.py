from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Tuple

from . import (
    Rule,
    ValidationResult,
    any_selected,
    greater_than_zero,
    matches,
    required,
    required_if,
    run_rules,
)
from jobapp.core.canonical import is_blank


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Public option lists (single source of truth for combos / checkboxes)
# ---------------------------------------------------------------------
POSITIONS: Tuple[str, ...] = (
    "Developer",
    "Designer",
    "Manager",
)

SKILLS: Tuple[str, ...] = (
    "JavaScript",
    "CSS",
    "Python",
    "React",
    "NodeJS",
    "TypeScript",
)

EXPERIENCE_POSITIONS: Tuple[str, ...] = ("Developer", "Designer")
PORTFOLIO_POSITIONS: Tuple[str, ...] = ("Designer",)
MANAGEMENT_POSITIONS: Tuple[str, ...] = ("Manager",)

FIELD_LABELS = {
    "fullName": "Full Name",
    "email": "Email",
    "phoneNumber": "Phone Number",
    "position": "Applying for Position",
    "relevantExperience": "Relevant Experience",
    "portfolioUrl": "Portfolio URL",
    "managementExperience": "Management Experience",
    "additionalSkills": "Additional Skills",
    "preferredInterviewTime": "Preferred Interview Time",
}


def initial_application_values() -> Dict[str, Any]:
    """A blank application; a new dict on every call."""
    return {
        "fullName": "",
        "email": "",
        "phoneNumber": "",
        "position": "",
        "relevantExperience": "",
        "portfolioUrl": "",
        "managementExperience": "",
        "additionalSkills": {skill: False for skill in SKILLS},
        "preferredInterviewTime": "",
    }


# Letters (any script) and whitespace only.
_FULL_NAME_RE = re.compile(r"(?:[^\W\d_]|\s)+")
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_PHONE_RE = re.compile(r"[0-9]{10}")
_URL_RE = re.compile(r"(ftp|http|https)://[^ \"]+")


APPLICATION_RULES: Mapping[str, Tuple[Rule, ...]] = {
    "fullName": (
        required("fullName", "Full Name is required"),
        matches("fullName", _FULL_NAME_RE, "Full Name must contain only letters and spaces"),
    ),
    "email": (
        required("email", "Email is required"),
        matches("email", _EMAIL_RE, "Email address is invalid", full=False),
    ),
    "phoneNumber": (
        required("phoneNumber", "Phone Number is required"),
        matches("phoneNumber", _PHONE_RE, "Phone Number must be a valid 10-digit number"),
    ),
    "relevantExperience": (
        required_if(
            "relevantExperience",
            "Relevant Experience is required",
            on_field="position",
            one_of=EXPERIENCE_POSITIONS,
        ),
        greater_than_zero(
            "relevantExperience",
            "Relevant Experience must be greater than 0",
            invalid_message="Relevant Experience must be a valid number",
        ),
    ),
    "portfolioUrl": (
        required_if(
            "portfolioUrl",
            "Portfolio URL is required",
            on_field="position",
            one_of=PORTFOLIO_POSITIONS,
        ),
        matches("portfolioUrl", _URL_RE, "Portfolio URL is invalid"),
    ),
    "managementExperience": (
        required_if(
            "managementExperience",
            "Management Experience is required",
            on_field="position",
            one_of=MANAGEMENT_POSITIONS,
        ),
    ),
    "additionalSkills": (
        any_selected("additionalSkills", "At least one skill must be selected"),
    ),
    "preferredInterviewTime": (
        required("preferredInterviewTime", "Preferred Interview Time is required"),
    ),
}


def check_application(values: Mapping[str, Any]) -> ValidationResult:
    """
    Job application validation:
    - fullName, email, phoneNumber, preferredInterviewTime are always required.
    - relevantExperience is required for Developer / Designer; if present it must be > 0.
    - portfolioUrl is required for Designer; if present it must be an ftp/http/https URL.
    - managementExperience is required for Manager.
    - At least one additional skill must be selected.

    position itself is not validated. A blank position only adds a warning,
    since the position-dependent fields are then not required.
    """
    r = run_rules(APPLICATION_RULES, values)

    if is_blank(values.get("position")):
        r.add_warning("No position selected; position-dependent fields were not checked.")

    return r


def validate_application(values: Mapping[str, Any]) -> Dict[str, str]:
    """ValidationEngine entry point: values -> {field: message}."""
    r = check_application(values)
    for message in r.warnings:
        logger.debug("application warning: %s", message)
    return dict(r.field_errors)
