import pytest

from jobapp.ui.widgets.number_line_edit import normalize_number_text


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", ""),
        (None, ""),
        (" 3 ", "3"),
        ("2,5", "2.5"),
        ("1.2.3", "1.23"),
        ("4.", "4"),
    ],
)
def test_normalize_number_text(raw, expected):
    assert normalize_number_text(raw) == expected
