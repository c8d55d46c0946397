"""
Score Service
Adds points to a profile and keeps its level in step.
"""
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy import func

from respire_app.core.signals import points_awarded
from respire_app.extensions import db
from respire_app.modules.profiles.models import Profile

from ..logics.progression import level_for


class ScoreService:
    """Point awards and level recomputation."""

    @staticmethod
    def award_points(user_id: int, amount: int, reason: Optional[str] = None) -> Dict[str, Any]:
        """
        Add `amount` points to the user's profile and recompute the level.

        The increment is a single UPDATE so two concurrent awards cannot
        overwrite each other. Failures are logged and reported, never raised.
        """
        if amount == 0:
            return {'success': True, 'new_total': None, 'score_change': 0, 'leveled_up': False}

        if amount < 0:
            current_app.logger.warning(
                f"[Gamification] Refusing negative award of {amount} points for user {user_id}"
            )
            return {'success': False, 'message': 'Point awards must be non-negative'}

        try:
            profile = db.session.get(Profile, user_id)
            if not profile:
                current_app.logger.warning(
                    f"[Gamification] Profile {user_id} not found, award of {amount} points abandoned"
                )
                return {'success': False, 'message': 'Profile not found'}

            old_level = profile.level

            Profile.query.filter(Profile.user_id == user_id).update(
                {Profile.points: func.coalesce(Profile.points, 0) + amount},
                synchronize_session=False,
            )
            new_total = db.session.query(Profile.points).filter(Profile.user_id == user_id).scalar() or 0
            new_level = level_for(new_total)
            Profile.query.filter(Profile.user_id == user_id).update(
                {Profile.level: new_level},
                synchronize_session=False,
            )
            db.session.commit()

        except Exception as e:
            db.session.rollback()
            current_app.logger.error(
                f"[Gamification] Error awarding points to user {user_id}: {e}", exc_info=True
            )
            return {'success': False, 'message': str(e)}

        leveled_up = new_level != old_level
        if leveled_up:
            current_app.logger.info(f"[Gamification] User {user_id} reached level {new_level}")

        try:
            points_awarded.send(
                None,
                user_id=user_id,
                amount=amount,
                reason=reason,
                new_total=new_total,
                level=new_level,
                leveled_up=leveled_up,
            )
        except Exception as e:
            current_app.logger.error(f"[Gamification] points_awarded listener failed: {e}", exc_info=True)

        return {
            'success': True,
            'new_total': new_total,
            'score_change': amount,
            'level': new_level,
            'leveled_up': leveled_up,
        }
