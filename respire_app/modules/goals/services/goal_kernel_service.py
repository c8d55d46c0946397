"""
Goal Kernel Service
Low-level CRUD operations for the daily goal system.
Connects with 'goal_templates', 'daily_goal_history' and the goal counters on 'profiles'.
"""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import joinedload

from respire_app.core.error_handlers import CollaboratorError
from respire_app.extensions import db
from respire_app.modules.profiles.models import Profile

from ..models import DailyGoalHistory, GoalTemplate


def _dialect_insert():
    """Dialect-specific INSERT supporting ON CONFLICT."""
    dialect = db.engine.dialect.name
    if dialect == 'sqlite':
        from sqlalchemy.dialects.sqlite import insert
    elif dialect == 'postgresql':
        from sqlalchemy.dialects.postgresql import insert
    else:
        raise CollaboratorError(f"Upsert is not supported on '{dialect}'", operation='upsert_history')
    return insert


class GoalKernelService:

    @staticmethod
    def get_template(template_id: int) -> Optional[GoalTemplate]:
        return db.session.get(GoalTemplate, template_id)

    @staticmethod
    def list_templates(active_only: bool = True, category: Optional[str] = None) -> List[GoalTemplate]:
        query = GoalTemplate.query
        if active_only:
            query = query.filter_by(is_active=True)
        if category:
            query = query.filter_by(category=category)
        return query.order_by(GoalTemplate.template_id.asc()).all()

    @staticmethod
    def get_history(user_id: int, goal_date: date) -> Optional[DailyGoalHistory]:
        return DailyGoalHistory.query.filter_by(user_id=user_id, goal_date=goal_date).first()

    @staticmethod
    def list_history(user_id: int, limit: Optional[int] = None) -> List[DailyGoalHistory]:
        query = (
            DailyGoalHistory.query.filter_by(user_id=user_id)
            .options(joinedload(DailyGoalHistory.template))
            .order_by(DailyGoalHistory.goal_date.desc())
        )
        if limit:
            query = query.limit(limit)
        return query.all()

    @staticmethod
    def upsert_history(
        user_id: int,
        goal_date: date,
        template_id: int,
        completed: bool,
        completed_at: Optional[datetime] = None,
        points_earned: int = 0,
        only_if_pending: bool = True
    ) -> bool:
        """
        Insert or update the (user, goal_date) row in one statement.

        With only_if_pending, an existing row that is already completed is
        left untouched. Returns True when a row was inserted or updated.
        Caller must commit.
        """
        insert = _dialect_insert()
        table = DailyGoalHistory.__table__
        stmt = insert(table).values(
            user_id=user_id,
            goal_template_id=template_id,
            goal_date=goal_date,
            completed=completed,
            completed_at=completed_at,
            points_earned=points_earned,
        )
        update_kwargs = {
            'index_elements': ['user_id', 'goal_date'],
            'set_': {
                'goal_template_id': stmt.excluded.goal_template_id,
                'completed': stmt.excluded.completed,
                'completed_at': stmt.excluded.completed_at,
                'points_earned': stmt.excluded.points_earned,
            },
        }
        if only_if_pending:
            update_kwargs['where'] = table.c.completed == False  # noqa: E712

        result = db.session.execute(stmt.on_conflict_do_update(**update_kwargs))
        return (result.rowcount or 0) > 0

    @staticmethod
    def record_completion(user_id: int, goal_date: date) -> None:
        """Bump the profile's completion counters. Caller must commit."""
        Profile.query.filter(Profile.user_id == user_id).update(
            {
                Profile.total_daily_goals_completed: func.coalesce(Profile.total_daily_goals_completed, 0) + 1,
                Profile.daily_goal_last_completion_date: goal_date,
                Profile.daily_goal_completed_today: True,
            },
            synchronize_session=False,
        )

    @staticmethod
    def clear_stale_completion_flag(user_id: int, goal_date: date) -> bool:
        """Unset `daily_goal_completed_today` when it refers to an earlier day. Caller must commit."""
        updated = Profile.query.filter(
            Profile.user_id == user_id,
            Profile.daily_goal_completed_today == True,  # noqa: E712
            or_(
                Profile.daily_goal_last_completion_date.is_(None),
                Profile.daily_goal_last_completion_date < goal_date,
            ),
        ).update({Profile.daily_goal_completed_today: False}, synchronize_session=False)
        return updated > 0
