from __future__ import annotations

import os
import sys
from pathlib import Path

# Qt widgets require a platform plugin.  Offscreen avoids display and libGL
# dependencies inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from jobapp.core.rules.application_rules import initial_application_values


@pytest.fixture
def blank_values():
    return initial_application_values()


@pytest.fixture
def designer_values():
    values = initial_application_values()
    values.update(
        {
            "fullName": "Ann Lee",
            "email": "ann@x.com",
            "phoneNumber": "5551234567",
            "position": "Designer",
            "relevantExperience": 3,
            "portfolioUrl": "https://ann.dev",
            "preferredInterviewTime": "2024-01-01T10:00",
        }
    )
    values["additionalSkills"]["JavaScript"] = True
    return values
