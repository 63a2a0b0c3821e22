"""Helpers that turn CV aggregates into JSON-ready dicts."""


def _iso(value):
    return value.isoformat() if value else None


def personal_info_to_dict(info):
    if info is None:
        return None
    return {
        "full_name": info.full_name,
        "job_title": info.job_title,
        "email": info.email,
        "phone": info.phone,
        "location": info.location,
        "linkedin": info.linkedin,
        "github": info.github,
        "website": info.website,
    }


def experience_to_dict(exp):
    return {
        "id": exp.id,
        "job_title": exp.job_title,
        "company": exp.company,
        "location": exp.location,
        "start_date": _iso(exp.start_date),
        "end_date": _iso(exp.end_date),
        "currently_working": exp.currently_working,
        "description": exp.description,
        "display_order": exp.display_order,
    }


def education_to_dict(edu):
    return {
        "id": edu.id,
        "degree": edu.degree,
        "institution": edu.institution,
        "location": edu.location,
        "start_date": _iso(edu.start_date),
        "end_date": _iso(edu.end_date),
        "currently_studying": edu.currently_studying,
        "grade": edu.grade,
        "description": edu.description,
        "display_order": edu.display_order,
    }


def skill_to_dict(skill):
    return {
        "id": skill.id,
        "name": skill.name,
        "level": skill.level,
        "category": skill.category,
        "years_of_experience": skill.years_of_experience,
        "display_order": skill.display_order,
    }


def project_to_dict(project):
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "technologies": project.technologies,
        "project_link": project.project_link,
        "github_link": project.github_link,
        "start_date": _iso(project.start_date),
        "end_date": _iso(project.end_date),
        "display_order": project.display_order,
    }


def certification_to_dict(cert):
    return {
        "id": cert.id,
        "name": cert.name,
        "issuing_organization": cert.issuing_organization,
        "issue_date": _iso(cert.issue_date),
        "expiration_date": _iso(cert.expiration_date),
        "credential_id": cert.credential_id,
        "credential_url": cert.credential_url,
        "display_order": cert.display_order,
    }


def cv_summary_to_dict(cv):
    """Listing row: root fields plus name/title/email of the personal info."""
    info = cv.personal_info
    return {
        "id": cv.id,
        "title": cv.title,
        "template": cv.template,
        "summary": cv.summary,
        "is_primary": cv.is_primary,
        "created_at": _iso(cv.created_at),
        "updated_at": _iso(cv.updated_at),
        "personal_info": {
            "full_name": info.full_name,
            "job_title": info.job_title,
            "email": info.email,
        } if info else None,
    }


def cv_to_dict(cv):
    """Whole aggregate; collections keep the order they were loaded in."""
    return {
        "id": cv.id,
        "user_id": cv.user_id,
        "title": cv.title,
        "summary": cv.summary,
        "template": cv.template,
        "is_primary": cv.is_primary,
        "created_at": _iso(cv.created_at),
        "updated_at": _iso(cv.updated_at),
        "personal_info": personal_info_to_dict(cv.personal_info),
        "experiences": [experience_to_dict(e) for e in cv.experiences],
        "educations": [education_to_dict(e) for e in cv.educations],
        "skills": [skill_to_dict(s) for s in cv.skills],
        "projects": [project_to_dict(p) for p in cv.projects],
        "certifications": [certification_to_dict(c) for c in cv.certifications],
    }
