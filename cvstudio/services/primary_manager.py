import logging

from cvstudio.extensions import db
from cvstudio.models import CV

logger = logging.getLogger(__name__)


class PrimaryInvariantManager:
    """
    Keeps at most one primary CV per owner.

    Only ever called inside a transaction opened by CvAggregateStore; nothing here
    commits or rolls back.
    """

    @staticmethod
    def lock_owner_rows(user_id):
        """SELECT ... FOR UPDATE over the owner's CVs so concurrent writers queue up."""
        return (
            CV.query.filter_by(user_id=user_id)
            .order_by(CV.id)
            .with_for_update()
            .all()
        )

    @staticmethod
    def clear_primary(user_id, exclude_id=None):
        """Unset ``is_primary`` on the owner's primary rows. Idempotent."""
        query = CV.query.filter_by(user_id=user_id, is_primary=True)
        if exclude_id is not None:
            query = query.filter(CV.id != exclude_id)

        cleared = 0
        for cv in query.with_for_update().all():
            cv.is_primary = False
            cleared += 1

        if cleared:
            # the partial unique index must see the old primary gone before a new one lands
            db.session.flush()
            logger.debug("Cleared primary flag on %d CV(s) of user %s", cleared, user_id)
        return cleared

    @staticmethod
    def ensure_at_least_one_primary(user_id, avoid_id=None):
        """
        Promote the most recently updated CV when the owner has CVs but no primary.

        ``avoid_id`` is skipped unless it is the only candidate. Returns the promoted
        CV, or None when nothing had to change.
        """
        cvs = (
            CV.query.filter_by(user_id=user_id)
            .order_by(CV.updated_at.desc(), CV.id.desc())
            .with_for_update()
            .all()
        )
        if not cvs or any(cv.is_primary for cv in cvs):
            return None

        candidates = [cv for cv in cvs if cv.id != avoid_id] or cvs
        promoted = candidates[0]
        promoted.is_primary = True
        db.session.flush()
        logger.info("Promoted CV %s to primary for user %s", promoted.id, user_id)
        return promoted
