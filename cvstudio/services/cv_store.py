"""
CvAggregateStore: create, update, delete and set-primary for whole CV aggregates.

Every mutating call is a single transaction on ``db.session``. The owner's CV rows
are locked first (``SELECT ... FOR UPDATE``) so two writers for the same owner
cannot both observe "no primary" and elect themselves. The partial unique index on
``cvs(user_id) WHERE is_primary`` backs this up where the database supports it.
"""

import logging
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy.orm import selectinload

from cvstudio.exceptions import CvStudioError, NotFoundError, StorageError
from cvstudio.extensions import db
from cvstudio.models import CV
from cvstudio.services.cv_spec import coerce_cv_spec, validate_cv_spec
from cvstudio.services.dependent_writer import DependentSetWriter
from cvstudio.services.primary_manager import PrimaryInvariantManager

logger = logging.getLogger(__name__)

AGGREGATE_LOAD_OPTIONS = (
    selectinload(CV.personal_info),
    selectinload(CV.experiences),
    selectinload(CV.educations),
    selectinload(CV.skills),
    selectinload(CV.projects),
    selectinload(CV.certifications),
)


@contextmanager
def transaction(action):
    """
    Commit on success, roll back on any error.

    Domain errors (validation, not found) propagate as they are; every other failure
    is wrapped in StorageError with the cause attached.
    """
    try:
        yield db.session
        db.session.commit()
    except CvStudioError:
        db.session.rollback()
        raise
    except Exception as e:
        db.session.rollback()
        logger.exception("❌ Storage failure while %s", action)
        raise StorageError(f"Error {action}", original_error=e) from e


class CvAggregateStore:

    @staticmethod
    def get(cv_id, user_id):
        """Fully loaded CV owned by ``user_id``, dependents in display order, or None."""
        return (
            CV.query.options(*AGGREGATE_LOAD_OPTIONS)
            .filter_by(id=cv_id, user_id=user_id)
            .first()
        )

    @staticmethod
    def list_by_owner(user_id):
        """Owner's CVs, primary first, then most recently updated."""
        return (
            CV.query.options(selectinload(CV.personal_info))
            .filter_by(user_id=user_id)
            .order_by(CV.is_primary.desc(), CV.updated_at.desc(), CV.id.desc())
            .all()
        )

    @staticmethod
    def create(user_id, spec):
        """
        Create a CV with all of its dependents.

        The owner's first CV is always primary. When ``spec.is_primary`` is set the
        owner's current primary is cleared first.

        Raises:
            ValidationError: personal info full name or email missing
            StorageError: the transaction failed and was rolled back
        """
        spec = coerce_cv_spec(spec)
        validate_cv_spec(spec)

        with transaction("creating CV"):
            owner_cvs = PrimaryInvariantManager.lock_owner_rows(user_id)
            if spec.is_primary:
                PrimaryInvariantManager.clear_primary(user_id)

            now = datetime.utcnow()
            cv = CV(
                user_id=user_id,
                title=spec.title,
                summary=spec.summary,
                template=spec.template,
                is_primary=spec.is_primary or not owner_cvs,
                created_at=now,
                updated_at=now,
            )
            db.session.add(cv)
            db.session.flush()
            cv_id = cv.id

            DependentSetWriter.insert_all(cv_id, spec)

        logger.info("✅ Created CV %s for user %s", cv_id, user_id)
        return CvAggregateStore.get(cv_id, user_id)

    @staticmethod
    def update(cv_id, user_id, spec):
        """
        Replace a CV's root fields and every dependent collection.

        Items missing from ``spec`` are deleted. Demoting the owner's primary CV
        promotes another one when the owner has one.

        Raises:
            ValidationError: personal info full name or email missing
            NotFoundError: no such CV for this owner
            StorageError: the transaction failed and was rolled back
        """
        spec = coerce_cv_spec(spec)
        validate_cv_spec(spec)

        with transaction("updating CV"):
            PrimaryInvariantManager.lock_owner_rows(user_id)
            cv = CV.query.filter_by(id=cv_id, user_id=user_id).first()
            if cv is None:
                logger.warning("CV %s not found for user %s", cv_id, user_id)
                raise NotFoundError(f"CV {cv_id} not found")

            was_primary = cv.is_primary
            if spec.is_primary and not was_primary:
                PrimaryInvariantManager.clear_primary(user_id)

            cv.title = spec.title
            cv.summary = spec.summary
            cv.template = spec.template
            cv.is_primary = spec.is_primary
            cv.updated_at = datetime.utcnow()

            DependentSetWriter.replace(cv.id, spec)

            if was_primary and not spec.is_primary:
                PrimaryInvariantManager.ensure_at_least_one_primary(user_id, avoid_id=cv.id)

        logger.info("✅ Updated CV %s for user %s", cv_id, user_id)
        return CvAggregateStore.get(cv_id, user_id)

    @staticmethod
    def delete(cv_id, user_id):
        """Delete a CV and its dependents. False (never an error) when not found."""
        with transaction("deleting CV"):
            PrimaryInvariantManager.lock_owner_rows(user_id)
            cv = CV.query.filter_by(id=cv_id, user_id=user_id).first()
            if cv is None:
                logger.warning("Delete skipped, CV %s not found for user %s", cv_id, user_id)
                return False

            was_primary = cv.is_primary
            db.session.delete(cv)
            db.session.flush()

            if was_primary:
                PrimaryInvariantManager.ensure_at_least_one_primary(user_id)

        logger.info("🗑️ Deleted CV %s for user %s", cv_id, user_id)
        return True

    @staticmethod
    def set_primary(cv_id, user_id):
        """
        Make ``cv_id`` the owner's only primary CV.

        The target is looked up before anything is cleared, so an unknown id returns
        False and leaves the owner's current primary in place.
        """
        with transaction("setting primary CV"):
            PrimaryInvariantManager.lock_owner_rows(user_id)
            cv = CV.query.filter_by(id=cv_id, user_id=user_id).first()
            if cv is None:
                logger.warning("Set-primary skipped, CV %s not found for user %s", cv_id, user_id)
                return False

            PrimaryInvariantManager.clear_primary(user_id, exclude_id=cv.id)
            cv.is_primary = True
            cv.updated_at = datetime.utcnow()

        logger.info("⭐ CV %s is now primary for user %s", cv_id, user_id)
        return True
