from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class GoalTemplateDTO:
    id: int
    title: str
    category: str
    target_type: str = 'both'
    max_cigarettes: Optional[int] = None
    max_vape_puffs: Optional[int] = None
    points_reward: int = 0

    @classmethod
    def from_model(cls, template) -> 'GoalTemplateDTO':
        return cls(
            id=template.template_id,
            title=template.title,
            category=template.category,
            target_type=template.target_type or 'both',
            max_cigarettes=template.max_cigarettes,
            max_vape_puffs=template.max_vape_puffs,
            points_reward=template.points_reward or 0,
        )


@dataclass(frozen=True)
class GoalHistoryDTO:
    goal_date: date
    completed: bool
    points_earned: int = 0
    goal_template_id: Optional[int] = None
    completed_at: Optional[datetime] = None
    goal_title: Optional[str] = None
    category: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'goal_date': self.goal_date.isoformat(),
            'completed': self.completed,
            'points_earned': self.points_earned,
            'goal_template_id': self.goal_template_id,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
            'goal_title': self.goal_title,
            'category': self.category,
        }


@dataclass
class GoalOutcome:
    """Result of one daily-goal evaluation."""
    success: bool
    completed: bool = False
    no_goal: bool = False
    already_completed: bool = False
    points_earned: int = 0
    goal_title: Optional[str] = None
    details: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
