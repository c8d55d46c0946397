from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProfileDTO:
    """Read-only profile snapshot handed to the rule logic."""
    user_id: int
    points: int = 0
    level: str = 'beginner'
    quit_type: str = 'cigarettes'
    cigarettes_baseline: int = 0
    vape_frequency_baseline: Optional[str] = None
    current_daily_goal_id: Optional[int] = None
    total_daily_goals_completed: int = 0

    @classmethod
    def from_model(cls, profile) -> 'ProfileDTO':
        return cls(
            user_id=profile.user_id,
            points=profile.points or 0,
            level=profile.level or 'beginner',
            quit_type=profile.quit_type or 'cigarettes',
            cigarettes_baseline=profile.cigarettes_baseline or 0,
            vape_frequency_baseline=profile.vape_frequency_baseline,
            current_daily_goal_id=profile.current_daily_goal_id,
            total_daily_goals_completed=profile.total_daily_goals_completed or 0,
        )
