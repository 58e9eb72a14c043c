import pytest

from jobapp.core.rules import check_application, validate_application
from jobapp.core.rules.application_rules import SKILLS


def test_designer_example_is_valid(designer_values):
    assert validate_application(designer_values) == {}


def test_designer_without_portfolio_url(designer_values):
    designer_values["portfolioUrl"] = ""
    assert validate_application(designer_values) == {"portfolioUrl": "Portfolio URL is required"}


def test_blank_form_reports_always_required_fields(blank_values):
    errors = validate_application(blank_values)
    assert errors == {
        "fullName": "Full Name is required",
        "email": "Email is required",
        "phoneNumber": "Phone Number is required",
        "additionalSkills": "At least one skill must be selected",
        "preferredInterviewTime": "Preferred Interview Time is required",
    }


@pytest.mark.parametrize("field", ["fullName", "email", "phoneNumber", "preferredInterviewTime"])
def test_missing_required_field_is_reported(designer_values, field):
    designer_values[field] = ""
    assert field in validate_application(designer_values)


@pytest.mark.parametrize("field", ["fullName", "email", "phoneNumber", "preferredInterviewTime"])
def test_absent_key_counts_as_empty(designer_values, field):
    del designer_values[field]
    assert field in validate_application(designer_values)


def test_validate_is_idempotent(blank_values, designer_values):
    for values in (blank_values, designer_values):
        assert validate_application(values) == validate_application(values)


def test_developer_requires_relevant_experience(designer_values):
    designer_values.update(position="Developer", relevantExperience="", portfolioUrl="")
    assert validate_application(designer_values) == {
        "relevantExperience": "Relevant Experience is required"
    }


def test_manager_does_not_require_relevant_experience(designer_values):
    designer_values.update(
        position="Manager",
        relevantExperience="",
        portfolioUrl="",
        managementExperience="Led a team of five",
    )
    assert validate_application(designer_values) == {}


def test_manager_requires_management_experience(designer_values):
    designer_values.update(position="Manager", relevantExperience="", managementExperience="  ")
    errors = validate_application(designer_values)
    assert errors == {"managementExperience": "Management Experience is required"}


@pytest.mark.parametrize("value", [0, "0", "-2", -1.5])
def test_relevant_experience_must_be_positive(designer_values, value):
    designer_values["relevantExperience"] = value
    assert validate_application(designer_values) == {
        "relevantExperience": "Relevant Experience must be greater than 0"
    }


def test_relevant_experience_checked_for_any_position_when_present(designer_values):
    designer_values.update(position="Manager", managementExperience="Yes", relevantExperience="0")
    assert "relevantExperience" in validate_application(designer_values)


def test_relevant_experience_must_be_a_number(designer_values):
    designer_values["relevantExperience"] = "three"
    assert validate_application(designer_values) == {
        "relevantExperience": "Relevant Experience must be a valid number"
    }


@pytest.mark.parametrize("value", ["2", "2.5", "1,5", 4])
def test_relevant_experience_accepts_positive_numbers(designer_values, value):
    designer_values["relevantExperience"] = value
    assert "relevantExperience" not in validate_application(designer_values)


def test_portfolio_url_checked_when_present_for_other_positions(designer_values):
    designer_values.update(position="Developer", portfolioUrl="ann.dev")
    assert validate_application(designer_values) == {"portfolioUrl": "Portfolio URL is invalid"}


@pytest.mark.parametrize("url", ["ftp://files.example.com", "http://a.b", "https://ann.dev/work?x=1"])
def test_portfolio_url_accepted_schemes(designer_values, url):
    designer_values["portfolioUrl"] = url
    assert "portfolioUrl" not in validate_application(designer_values)


@pytest.mark.parametrize("url", ["mailto:ann@x.com", "https://ann dev", 'https://ann"dev', "https://"])
def test_portfolio_url_rejected(designer_values, url):
    designer_values["portfolioUrl"] = url
    assert validate_application(designer_values) == {"portfolioUrl": "Portfolio URL is invalid"}


@pytest.mark.parametrize("name", ["Ann Lee", "José Álvarez", "Zoë"])
def test_full_name_letters_and_spaces(designer_values, name):
    designer_values["fullName"] = name
    assert "fullName" not in validate_application(designer_values)


@pytest.mark.parametrize("name", ["Ann2", "Ann-Lee", "O'Neil", "ann_lee"])
def test_full_name_format_error_after_required(designer_values, name):
    designer_values["fullName"] = name
    assert validate_application(designer_values) == {
        "fullName": "Full Name must contain only letters and spaces"
    }


@pytest.mark.parametrize("email", ["ann", "ann@x", "@x.com", "ann@.com", "ann x@y"])
def test_email_shape(designer_values, email):
    designer_values["email"] = email
    assert validate_application(designer_values) == {"email": "Email address is invalid"}


@pytest.mark.parametrize("phone", ["555123456", "55512345678", "555-123-4567", "555123456a"])
def test_phone_must_be_ten_digits(designer_values, phone):
    designer_values["phoneNumber"] = phone
    assert validate_application(designer_values) == {
        "phoneNumber": "Phone Number must be a valid 10-digit number"
    }


def test_any_single_skill_is_enough(designer_values):
    for skill in SKILLS:
        designer_values["additionalSkills"] = {s: s == skill for s in SKILLS}
        assert "additionalSkills" not in validate_application(designer_values)


def test_no_skill_selected(designer_values):
    designer_values["additionalSkills"] = {s: False for s in SKILLS}
    assert validate_application(designer_values) == {
        "additionalSkills": "At least one skill must be selected"
    }


def test_blank_position_is_a_warning_not_an_error(designer_values):
    designer_values.update(position="", relevantExperience="", portfolioUrl="")
    result = check_application(designer_values)
    assert result.ok
    assert result.field_errors == {}
    assert len(result.warnings) == 1


@pytest.mark.parametrize("phone", [" 5551234567", "5551234567 ", " 5551234567 ", "5551234567\n"])
def test_padded_phone_is_not_ten_digits(designer_values, phone):
    designer_values["phoneNumber"] = phone
    assert validate_application(designer_values) == {
        "phoneNumber": "Phone Number must be a valid 10-digit number"
    }


@pytest.mark.parametrize("url", ["https://ann.dev ", " https://ann.dev"])
def test_padded_portfolio_url_is_invalid(designer_values, url):
    designer_values["portfolioUrl"] = url
    assert validate_application(designer_values) == {"portfolioUrl": "Portfolio URL is invalid"}


def test_full_name_with_surrounding_spaces_is_letters_and_spaces(designer_values):
    designer_values["fullName"] = "  Ann Lee "
    assert "fullName" not in validate_application(designer_values)


def test_whitespace_only_full_name_is_required(designer_values):
    designer_values["fullName"] = "   "
    assert validate_application(designer_values) == {"fullName": "Full Name is required"}
