"""Shared fixtures: an app on in-memory SQLite, JWT headers, CV payloads and transient CVs."""

import copy
from datetime import date

import pytest
from flask_jwt_extended import create_access_token

from config import TestConfig
from cvstudio import create_app
from cvstudio.extensions import db
from cvstudio.models import CV, Certification, Education, Experience, PersonalInfo, Project, Skill

BASE_PAYLOAD = {
    "title": "Backend Engineer",
    "summary": "Builds reliable services.",
    "template": "Modern",
    "isPrimary": False,
    "personalInfo": {
        "fullName": "Ada Lovelace",
        "jobTitle": "Software Engineer",
        "email": "ada@example.com",
        "phone": "+44 20 0000",
        "location": "London",
        "linkedIn": "linkedin.com/in/ada",
    },
    "experiences": [
        {
            "jobTitle": "Engineer",
            "company": "Analytical Engines Ltd",
            "location": "London",
            "startDate": "2019-01-01",
            "endDate": "2021-06-01",
            "displayOrder": 2,
        },
        {
            "jobTitle": "Lead Engineer",
            "company": "Difference Co",
            "startDate": "2021-07-01",
            "currentlyWorking": True,
            "displayOrder": 1,
        },
    ],
    "educations": [
        {
            "degree": "BSc Mathematics",
            "institution": "University of London",
            "startDate": "2014-09",
            "endDate": "2017-06",
            "displayOrder": 1,
        }
    ],
    "skills": [
        {"name": "Python", "level": "Expert", "category": "Technical", "displayOrder": 1},
        {"name": "English", "level": "Native", "category": "Language", "displayOrder": 2},
    ],
    "projects": [
        {"name": "Engine Simulator", "technologies": "Python", "startDate": "2020-01-01", "displayOrder": 1}
    ],
    "certifications": [
        {
            "name": "Certified Engineer",
            "issuingOrganization": "Royal Society",
            "issueDate": "2018-03-01",
            "expirationDate": "2028-03-01",
            "displayOrder": 1,
        }
    ],
}


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_payload():
    """Factory returning a fresh deep copy of the base payload with top-level overrides."""

    def factory(**overrides):
        payload = copy.deepcopy(BASE_PAYLOAD)
        payload.update(overrides)
        return payload

    return factory


@pytest.fixture
def auth_headers(app):
    """Factory for Authorization headers; the JWT subject is the CV owner."""

    def factory(user_id="user-1"):
        token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}

    return factory


def build_cv(**overrides):
    """Transient CV aggregate, never added to a session."""
    fields = dict(
        id=1,
        title="Backend Engineer",
        summary="Builds reliable services.",
        template="Modern",
        personal_info=PersonalInfo(
            full_name="Ada Lovelace",
            job_title="Software Engineer",
            email="ada@example.com",
            phone="+44 20 0000",
            location="London",
        ),
        experiences=[
            Experience(
                job_title="Engineer",
                company="Analytical Engines Ltd",
                start_date=date(2019, 1, 1),
                end_date=date(2021, 6, 1),
                currently_working=False,
                display_order=1,
            )
        ],
        educations=[
            Education(
                degree="BSc Mathematics",
                institution="University of London",
                start_date=date(2014, 9, 1),
                end_date=date(2017, 6, 1),
                currently_studying=False,
                grade="First",
                display_order=1,
            )
        ],
        skills=[Skill(name="Python", level="Expert", category="Technical", display_order=1)],
        projects=[
            Project(name="Engine Simulator", technologies="Python", start_date=date(2020, 1, 1), display_order=1)
        ],
        certifications=[
            Certification(
                name="Certified Engineer",
                issuing_organization="Royal Society",
                issue_date=date(2018, 3, 1),
                expiration_date=date(2028, 3, 1),
                display_order=1,
            )
        ],
    )
    fields.update(overrides)
    return CV(**fields)


@pytest.fixture
def make_cv():
    return build_cv


@pytest.fixture
def require_weasyprint():
    """Skip when WeasyPrint or its native Pango/cairo libraries cannot be loaded."""
    try:
        import weasyprint  # noqa: F401
    except (ImportError, OSError) as e:
        pytest.skip(f"WeasyPrint unavailable: {e}")
