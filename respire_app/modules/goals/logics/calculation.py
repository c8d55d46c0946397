"""
Stateless calculation logic for Goal History statistics.
Pure functions, no database dependencies.
"""
from typing import Any, Dict, Sequence

from ..schemas import GoalHistoryDTO


def calculate_completion_rate(total_completed: int, total_attempts: int) -> int:
    """Percentage of completed days, rounded half up."""
    if total_attempts <= 0:
        return 0
    return int((total_completed / total_attempts) * 100 + 0.5)


def calculate_completion_streak(history: Sequence[GoalHistoryDTO]) -> int:
    """Completed days counted back from the most recent row until the first miss."""
    streak = 0
    for row in sorted(history, key=lambda h: h.goal_date, reverse=True):
        if not row.completed:
            break
        streak += 1
    return streak


def calculate_goal_stats(history: Sequence[GoalHistoryDTO]) -> Dict[str, Any]:
    if not history:
        return {
            'total_attempts': 0,
            'total_completed': 0,
            'completion_rate': 0,
            'total_points_earned': 0,
            'current_streak': 0,
        }

    total_attempts = len(history)
    total_completed = sum(1 for h in history if h.completed)

    return {
        'total_attempts': total_attempts,
        'total_completed': total_completed,
        'completion_rate': calculate_completion_rate(total_completed, total_attempts),
        'total_points_earned': sum(h.points_earned or 0 for h in history),
        'current_streak': calculate_completion_streak(history),
    }
