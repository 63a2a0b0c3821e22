import logging
from dataclasses import asdict

from cvstudio.extensions import db
from cvstudio.models import PersonalInfo, Experience, Education, Skill, Project, Certification

logger = logging.getLogger(__name__)

# every table keyed by cv_id; no foreign keys between them, so order is free
DEPENDENT_MODELS = (PersonalInfo, Experience, Education, Skill, Project, Certification)


class DependentSetWriter:
    """
    Batch replace of a CV's dependent rows.

    Always runs inside the caller's transaction: it flushes so constraint violations
    surface to the caller, but never commits, rolls back or retries.
    """

    @staticmethod
    def delete_all(cv_id):
        """Delete every dependent row of every type for ``cv_id``. Returns the row count."""
        deleted = 0
        for model in DEPENDENT_MODELS:
            deleted += model.query.filter_by(cv_id=cv_id).delete(synchronize_session="fetch")
        return deleted

    @staticmethod
    def build_rows(cv_id, spec):
        rows = []
        if spec.personal_info is not None:
            rows.append(PersonalInfo(cv_id=cv_id, **asdict(spec.personal_info)))
        rows.extend(Experience(cv_id=cv_id, **asdict(item)) for item in spec.experiences)
        rows.extend(Education(cv_id=cv_id, **asdict(item)) for item in spec.educations)
        rows.extend(Skill(cv_id=cv_id, **asdict(item)) for item in spec.skills)
        rows.extend(Project(cv_id=cv_id, **asdict(item)) for item in spec.projects)
        rows.extend(Certification(cv_id=cv_id, **asdict(item)) for item in spec.certifications)
        return rows

    @staticmethod
    def insert_all(cv_id, spec):
        """Insert every collection of ``spec`` stamped with ``cv_id``. Returns the row count."""
        rows = DependentSetWriter.build_rows(cv_id, spec)
        db.session.add_all(rows)
        db.session.flush()
        return len(rows)

    @staticmethod
    def replace(cv_id, spec):
        """Replace semantics: what is not in ``spec`` is gone afterwards."""
        deleted = DependentSetWriter.delete_all(cv_id)
        inserted = DependentSetWriter.insert_all(cv_id, spec)
        logger.debug("Replaced dependents of CV %s: %d deleted, %d inserted", cv_id, deleted, inserted)
        return deleted, inserted
