"""Unit tests for request payload parsing into CvSpec."""

from datetime import date, datetime

import pytest

from cvstudio.exceptions import ValidationError
from cvstudio.services.cv_spec import (
    CvSpec,
    PersonalInfoSpec,
    coerce_cv_spec,
    parse_cv_spec,
    parse_date,
    validate_cv_spec,
)

pytestmark = pytest.mark.unit


def test_parses_camel_case_payload(make_payload):
    spec = parse_cv_spec(make_payload())

    assert spec.title == "Backend Engineer"
    assert spec.personal_info.full_name == "Ada Lovelace"
    assert spec.personal_info.linkedin == "linkedin.com/in/ada"
    assert spec.experiences[1].currently_working is True
    assert spec.experiences[0].start_date == date(2019, 1, 1)
    assert spec.certifications[0].issuing_organization == "Royal Society"


def test_parses_snake_case_payload():
    spec = parse_cv_spec(
        {
            "title": "CV",
            "is_primary": True,
            "personal_info": {"full_name": "Grace Hopper", "email": "grace@example.com"},
            "skills": [{"name": "COBOL", "years_of_experience": "12", "display_order": "3"}],
        }
    )

    assert spec.is_primary is True
    assert spec.personal_info.full_name == "Grace Hopper"
    assert spec.skills[0].years_of_experience == 12
    assert spec.skills[0].display_order == 3


def test_accepts_singular_collection_aliases():
    spec = parse_cv_spec(
        {
            "personalInfo": {"fullName": "A", "email": "a@example.com"},
            "experience": [{"jobTitle": "Dev"}],
            "education": [{"degree": "BSc"}],
        }
    )

    assert [e.job_title for e in spec.experiences] == ["Dev"]
    assert [e.degree for e in spec.educations] == ["BSc"]


def test_missing_collections_become_empty_lists():
    spec = parse_cv_spec({"title": "Bare"})

    assert spec.personal_info is None
    assert spec.experiences == []
    assert spec.skills == []
    assert spec.certifications == []
    assert spec.template == "Modern"


def test_skill_defaults_applied():
    spec = parse_cv_spec({"skills": [{"name": "SQL"}]})

    assert spec.skills[0].level == "Intermediate"
    assert spec.skills[0].category == "Technical"
    assert spec.skills[0].years_of_experience is None


def test_string_booleans_are_understood():
    spec = parse_cv_spec({"isPrimary": "false", "experiences": [{"currentlyWorking": "true"}]})

    assert spec.is_primary is False
    assert spec.experiences[0].currently_working is True


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2021-03-15", date(2021, 3, 15)),
        ("2021-03", date(2021, 3, 1)),
        ("2021-03-15T10:00:00Z", date(2021, 3, 15)),
        (datetime(2020, 1, 2, 3, 4), date(2020, 1, 2)),
        (date(2019, 5, 6), date(2019, 5, 6)),
        ("", None),
        (None, None),
    ],
)
def test_parse_date_accepts_common_shapes(value, expected):
    assert parse_date(value, "start_date") == expected


def test_parse_date_rejects_garbage():
    with pytest.raises(ValidationError, match="not a valid date"):
        parse_date("last spring", "start_date")


def test_non_dict_payload_is_rejected():
    with pytest.raises(ValidationError, match="No data provided"):
        parse_cv_spec(None)


def test_collection_must_be_a_list():
    with pytest.raises(ValidationError):
        parse_cv_spec({"skills": "Python"})


def test_bad_display_order_is_rejected():
    with pytest.raises(ValidationError, match="display_order"):
        parse_cv_spec({"skills": [{"name": "Go", "displayOrder": "first"}]})


def test_validate_requires_personal_info_name_and_email():
    with pytest.raises(ValidationError, match="Personal info is required"):
        validate_cv_spec(CvSpec())
    with pytest.raises(ValidationError, match="Full name is required"):
        validate_cv_spec(CvSpec(personal_info=PersonalInfoSpec(email="a@example.com")))
    with pytest.raises(ValidationError, match="Email is required"):
        validate_cv_spec(CvSpec(personal_info=PersonalInfoSpec(full_name="A")))


def test_coerce_passes_specs_through():
    spec = CvSpec(title="Ready")

    assert coerce_cv_spec(spec) is spec
    assert coerce_cv_spec({"title": "From dict"}).title == "From dict"
