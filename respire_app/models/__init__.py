"""Database models package for Respire."""

from ..extensions import db

from ..modules.profiles.models import Profile
from ..modules.tracker.models import DailyEntry, JournalEntry
from ..modules.gamification.models import Badge, UserBadge
from ..modules.goals.models import DailyGoalHistory, GoalTemplate

__all__ = [
    'db',
    'Profile',
    'DailyEntry',
    'JournalEntry',
    'Badge',
    'UserBadge',
    'GoalTemplate',
    'DailyGoalHistory',
]
