from datetime import date

from respire_app.modules.goals.logics.calculation import (
    calculate_completion_rate,
    calculate_completion_streak,
    calculate_goal_stats,
)
from respire_app.modules.goals.schemas import GoalHistoryDTO


def row(day, completed, points=0):
    return GoalHistoryDTO(goal_date=date(2024, 1, day), completed=completed, points_earned=points)


def test_empty_history_is_all_zeros():
    assert calculate_goal_stats([]) == {
        'total_attempts': 0,
        'total_completed': 0,
        'completion_rate': 0,
        'total_points_earned': 0,
        'current_streak': 0,
    }


def test_stats_summary():
    history = [
        row(1, True, 10),
        row(2, False),
        row(3, True, 15),
        row(4, True, 10),
    ]
    stats = calculate_goal_stats(history)

    assert stats['total_attempts'] == 4
    assert stats['total_completed'] == 3
    assert stats['completion_rate'] == 75
    assert stats['total_points_earned'] == 35
    assert stats['current_streak'] == 2


def test_streak_stops_at_most_recent_miss():
    history = [row(1, True), row(2, True), row(3, False)]
    assert calculate_completion_streak(history) == 0


def test_completion_rate_rounds_half_up():
    assert calculate_completion_rate(1, 8) == 13  # 12.5
    assert calculate_completion_rate(1, 3) == 33
    assert calculate_completion_rate(2, 3) == 67
    assert calculate_completion_rate(0, 0) == 0
