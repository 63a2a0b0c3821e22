from datetime import date

from cvstudio.models import CV
from cvstudio.services.cv_store import CvAggregateStore

DEMO_USER_ID = "demo-user"

DEMO_CVS = [
    {
        "title": "Backend Engineer",
        "summary": "Backend engineer building data-heavy web services in Python.",
        "template": "Modern",
        "is_primary": True,
        "personal_info": {
            "full_name": "Dana Demo",
            "job_title": "Senior Backend Engineer",
            "email": "dana@example.com",
            "phone": "+1 555 0100",
            "location": "Berlin, Germany",
            "linkedin": "linkedin.com/in/dana-demo",
        },
        "experiences": [
            {
                "job_title": "Senior Backend Engineer",
                "company": "Acme Data",
                "location": "Berlin",
                "start_date": date(2021, 3, 1),
                "currently_working": True,
                "description": "Owns the ingestion pipeline and the reporting API.",
                "display_order": 1,
            },
            {
                "job_title": "Software Engineer",
                "company": "Widgets Inc",
                "start_date": date(2017, 9, 1),
                "end_date": date(2021, 2, 1),
                "display_order": 2,
            },
        ],
        "educations": [
            {
                "degree": "BSc Computer Science",
                "institution": "TU Berlin",
                "start_date": date(2013, 10, 1),
                "end_date": date(2017, 7, 1),
                "grade": "1.7",
            }
        ],
        "skills": [
            {"name": "Python", "level": "Expert", "category": "Technical", "display_order": 1},
            {"name": "PostgreSQL", "level": "Advanced", "category": "Technical", "display_order": 2},
            {"name": "German", "level": "Native", "category": "Language", "display_order": 3},
        ],
        "certifications": [
            {
                "name": "AWS Solutions Architect",
                "issuing_organization": "Amazon Web Services",
                "issue_date": date(2022, 5, 1),
            }
        ],
    },
    {
        "title": "Engineering Manager",
        "summary": "Leads small product teams from discovery to delivery.",
        "template": "Executive",
        "personal_info": {
            "full_name": "Dana Demo",
            "job_title": "Engineering Manager",
            "email": "dana@example.com",
        },
        "projects": [
            {
                "name": "Reporting Platform",
                "technologies": "Flask, SQLAlchemy, WeasyPrint",
                "start_date": date(2022, 1, 1),
                "end_date": date(2023, 6, 1),
                "github_link": "github.com/dana-demo/reporting",
            }
        ],
    },
]


def seed():
    print("🌱 Seeding demo CVs...")

    # prevent duplicates
    if CV.query.filter_by(user_id=DEMO_USER_ID).first():
        print(f"⚠️ CVs for '{DEMO_USER_ID}' already exist. Skipping insert.")
        return

    for payload in DEMO_CVS:
        cv = CvAggregateStore.create(DEMO_USER_ID, payload)
        print(f"  • CV {cv.id} '{cv.title}' (primary={cv.is_primary})")

    print("✅ Demo CVs seeded successfully!")
