"""
Gamification Kernel Service.

Provides Low-Level CRUD operations for gamification elements.
This layer deals directly with the database models (Badge, UserBadge).
It should NOT contain high-level business logic (rules for when to award).
"""

from datetime import datetime
from typing import List, Optional, Set

from flask import current_app
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from respire_app.extensions import db
from respire_app.utils.time_utils import utcnow

from ..models import Badge, UserBadge


class GamificationKernel:
    """Core database service for gamification entities."""

    @staticmethod
    def get_badge_catalog(active_only: bool = True) -> List[Badge]:
        query = Badge.query
        if active_only:
            query = query.filter_by(is_active=True)
        return query.order_by(Badge.badge_id.asc()).all()

    @staticmethod
    def get_unlocked_badge_ids(user_id: int) -> Set[int]:
        rows = db.session.query(UserBadge.badge_id).filter(UserBadge.user_id == user_id).all()
        return {row.badge_id for row in rows}

    @staticmethod
    def insert_unlock(
        user_id: int,
        badge_id: int,
        unlocked_at: Optional[datetime] = None
    ) -> Optional[UserBadge]:
        """
        Persist an unlock record.

        Returns None when the (user, badge) pair already exists; that
        outcome is expected under concurrent evaluation and is not an error.
        """
        record = UserBadge(
            user_id=user_id,
            badge_id=badge_id,
            unlocked_at=unlocked_at or utcnow(),
        )
        db.session.add(record)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            current_app.logger.info(
                f"[Gamification] Badge {badge_id} already unlocked for user {user_id}, skipping"
            )
            return None
        return record

    @staticmethod
    def get_user_badges(user_id: int) -> List[UserBadge]:
        """Get list of badges earned by user, newest first."""
        return (
            UserBadge.query.filter_by(user_id=user_id)
            .options(joinedload(UserBadge.badge))
            .order_by(UserBadge.unlocked_at.desc(), UserBadge.id.desc())
            .all()
        )

    @staticmethod
    def count_user_badges(user_id: int) -> int:
        return UserBadge.query.filter_by(user_id=user_id).count()
