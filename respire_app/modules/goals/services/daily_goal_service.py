"""
Daily Goal Service
Evaluates the user's current goal against today's entry, and manages goal
selection, history and statistics.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from flask import current_app

from respire_app.core.error_handlers import NotFoundError, ValidationError
from respire_app.core.signals import daily_goal_completed
from respire_app.extensions import db
from respire_app.modules.gamification.services.scoring_service import ScoreService
from respire_app.modules.profiles.schemas import ProfileDTO
from respire_app.modules.profiles.services.profile_service import ProfileService
from respire_app.modules.tracker.schemas import DailyEntryDTO
from respire_app.utils.time_utils import utc_today, utcnow

from ..logics.calculation import calculate_goal_stats
from ..logics.validation import describe_completion, get_validator
from ..schemas import GoalHistoryDTO, GoalOutcome, GoalTemplateDTO
from .goal_kernel_service import GoalKernelService


class DailyGoalService:

    @staticmethod
    def evaluate_daily_goal(
        user_id: int,
        today_entry=None,
        today: Optional[date] = None,
        now: Optional[datetime] = None
    ) -> GoalOutcome:
        """
        Check today's goal and record its completion at most once.

        `today_entry` is the entry just saved for `today` (a DailyEntry or
        DailyEntryDTO), or None. Never raises; failures come back as
        GoalOutcome(success=False, error=...).
        """
        today = today or utc_today()
        now = now or utcnow()
        if today_entry is not None and not isinstance(today_entry, DailyEntryDTO):
            today_entry = DailyEntryDTO.from_model(today_entry)

        try:
            profile_model = ProfileService.get_profile(user_id)
            if not profile_model:
                current_app.logger.warning(f"[Goals] Profile {user_id} not found")
                return GoalOutcome(success=False, error='Profile not found')
            profile = ProfileDTO.from_model(profile_model)

            if profile.current_daily_goal_id is None:
                return GoalOutcome(success=True, no_goal=True)

            template_model = GoalKernelService.get_template(profile.current_daily_goal_id)
            if not template_model:
                current_app.logger.warning(
                    f"[Goals] Goal template {profile.current_daily_goal_id} not found for user {user_id}"
                )
                return GoalOutcome(success=False, error='Goal template not found')
            template = GoalTemplateDTO.from_model(template_model)

            history = GoalKernelService.get_history(user_id, today)
            if history is not None and history.completed:
                return GoalOutcome(success=True, already_completed=True, goal_title=template.title)

            if GoalKernelService.clear_stale_completion_flag(user_id, today):
                db.session.commit()
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"[Goals] Error loading goal data for user {user_id}: {e}", exc_info=True)
            return GoalOutcome(success=False, error=str(e))

        validator = get_validator(template.category)
        if validator is None:
            current_app.logger.warning(f"[Goals] Unknown goal category '{template.category}'")
            return GoalOutcome(success=False, error='Unknown goal type', goal_title=template.title)

        if not validator(template, today_entry, profile):
            return GoalOutcome(success=True, completed=False, goal_title=template.title)

        try:
            transitioned = GoalKernelService.upsert_history(
                user_id,
                today,
                template.id,
                completed=True,
                completed_at=now,
                points_earned=template.points_reward,
                only_if_pending=True,
            )
            if not transitioned:
                # A concurrent evaluation completed the day first.
                db.session.rollback()
                return GoalOutcome(success=True, already_completed=True, goal_title=template.title)

            GoalKernelService.record_completion(user_id, today)
            db.session.commit()
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"[Goals] Error updating goal history for user {user_id}: {e}", exc_info=True)
            return GoalOutcome(success=False, error='Failed to update goal history', goal_title=template.title)

        ScoreService.award_points(user_id, template.points_reward, reason=f"Daily goal: {template.title}")

        try:
            daily_goal_completed.send(
                None,
                user_id=user_id,
                goal_date=today,
                template_id=template.id,
                points_earned=template.points_reward,
            )
        except Exception as e:
            current_app.logger.error(f"[Goals] daily_goal_completed listener failed: {e}", exc_info=True)
        current_app.logger.info(f"[Goals] User {user_id} completed '{template.title}' on {today}")

        return GoalOutcome(
            success=True,
            completed=True,
            points_earned=template.points_reward,
            goal_title=template.title,
            details=describe_completion(template, today_entry, profile),
        )

    @staticmethod
    def select_goal(
        user_id: int,
        template_id: int,
        today: Optional[date] = None,
        now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """Make `template_id` the user's current goal and open today's history row."""
        today = today or utc_today()
        now = now or utcnow()

        profile = ProfileService.get_profile(user_id)
        if not profile:
            raise NotFoundError(f'Profile {user_id} not found', resource='profile')

        template = GoalKernelService.get_template(template_id)
        if not template:
            raise NotFoundError(f'Goal template {template_id} not found', resource='goal_template')
        if not template.is_active:
            raise ValidationError('Goal template is no longer available', errors={'template_id': 'inactive'})

        history = GoalKernelService.get_history(user_id, today)
        already_completed = bool(history and history.completed)

        profile.current_daily_goal_id = template.template_id
        profile.daily_goal_started_at = now
        profile.daily_goal_completed_today = already_completed

        # Leaves a completed day untouched.
        GoalKernelService.upsert_history(
            user_id,
            today,
            template.template_id,
            completed=False,
            completed_at=None,
            points_earned=0,
            only_if_pending=True,
        )
        db.session.commit()

        current_app.logger.info(f"[Goals] User {user_id} selected goal '{template.code}'")
        return {
            'profile': profile.to_dict(),
            'template': template.to_dict(),
            'already_completed_today': already_completed,
        }

    @staticmethod
    def get_history(user_id: int, limit: Optional[int] = None) -> List[GoalHistoryDTO]:
        if limit is None:
            limit = current_app.config.get('HISTORY_DEFAULT_LIMIT', 30)
        rows = GoalKernelService.list_history(user_id, limit=limit)
        return [
            GoalHistoryDTO(
                goal_date=row.goal_date,
                completed=bool(row.completed),
                points_earned=row.points_earned or 0,
                goal_template_id=row.goal_template_id,
                completed_at=row.completed_at,
                goal_title=row.template.title if row.template else None,
                category=row.template.category if row.template else None,
            )
            for row in rows
        ]

    @staticmethod
    def get_stats(user_id: int) -> Dict[str, Any]:
        rows = GoalKernelService.list_history(user_id)
        history = [
            GoalHistoryDTO(
                goal_date=row.goal_date,
                completed=bool(row.completed),
                points_earned=row.points_earned or 0,
            )
            for row in rows
        ]
        return calculate_goal_stats(history)
