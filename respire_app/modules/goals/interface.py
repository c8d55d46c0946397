from datetime import date
from typing import Any, Dict, List, Optional

from .schemas import GoalHistoryDTO, GoalOutcome
from .services.daily_goal_service import DailyGoalService


def evaluate_daily_goal(user_id: int, today_entry=None, today: Optional[date] = None) -> GoalOutcome:
    """Validate today's goal for the user."""
    return DailyGoalService.evaluate_daily_goal(user_id, today_entry, today=today)


def select_goal(user_id: int, template_id: int, today: Optional[date] = None) -> Dict[str, Any]:
    return DailyGoalService.select_goal(user_id, template_id, today=today)


def get_goal_history(user_id: int, limit: Optional[int] = None) -> List[GoalHistoryDTO]:
    return DailyGoalService.get_history(user_id, limit=limit)


def get_goal_stats(user_id: int) -> Dict[str, Any]:
    return DailyGoalService.get_stats(user_id)
