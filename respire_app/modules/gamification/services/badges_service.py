"""
Badge Service
Evaluates the badge catalog against a user's history and unlocks what is earned.
"""
from datetime import date
from typing import List, Optional

from flask import current_app

from respire_app.core.signals import badge_unlocked
from respire_app.extensions import db
from respire_app.modules.profiles.services.profile_service import ProfileService
from respire_app.modules.tracker.schemas import DailyEntryDTO
from respire_app.modules.tracker.services.tracker_service import TrackerService
from respire_app.utils.time_utils import utc_today, utcnow

from ..logics.badge_rules import BadgeContext, evaluate_badge_rule, is_known_rule
from ..schemas import BadgeDTO
from .gamification_kernel import GamificationKernel
from .scoring_service import ScoreService


class BadgeService:
    """Badge unlock evaluation."""

    @staticmethod
    def evaluate_badges(user_id: int, today: Optional[date] = None) -> List[BadgeDTO]:
        """
        Unlock every catalog badge the user newly qualifies for.

        Badges already unlocked are skipped before their rule runs. Each new
        unlock inserts one record and awards the badge's points. Never raises:
        a storage failure while loading returns [], a failure on one badge
        skips that badge.
        """
        today = today or utc_today()

        try:
            catalog = [BadgeDTO.from_model(b) for b in GamificationKernel.get_badge_catalog()]
            if not catalog:
                return []

            unlocked_ids = GamificationKernel.get_unlocked_badge_ids(user_id)
            context = BadgeContext(
                entries=[DailyEntryDTO.from_model(e) for e in TrackerService.list_entries(user_id)],
                profile=ProfileService.get_snapshot(user_id),
                journal_count=TrackerService.count_journal_entries(user_id),
                today=today,
            )
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"[Gamification] Error loading badge data for user {user_id}: {e}", exc_info=True)
            return []

        newly_unlocked: List[BadgeDTO] = []

        for badge in catalog:
            if badge.id in unlocked_ids:
                continue

            if not is_known_rule(badge.code):
                current_app.logger.debug(f"[Gamification] No unlock rule for badge code '{badge.code}'")
                continue

            try:
                if not evaluate_badge_rule(badge.code, context):
                    continue

                record = GamificationKernel.insert_unlock(user_id, badge.id, unlocked_at=utcnow())
            except Exception as e:
                db.session.rollback()
                current_app.logger.warning(
                    f"[Gamification] Skipping badge '{badge.code}' for user {user_id}: {e}"
                )
                continue

            if record is None:
                continue

            newly_unlocked.append(badge)
            ScoreService.award_points(user_id, badge.points, reason=f"Badge unlocked: {badge.name}")
            try:
                badge_unlocked.send(None, user_id=user_id, badge=badge)
            except Exception as e:
                current_app.logger.error(f"[Gamification] badge_unlocked listener failed: {e}", exc_info=True)

        if newly_unlocked:
            current_app.logger.info(
                f"[Gamification] User {user_id} unlocked {', '.join(b.code for b in newly_unlocked)}"
            )

        return newly_unlocked
