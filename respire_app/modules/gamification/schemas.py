from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class BadgeDTO:
    id: int
    code: str
    name: str
    points: int = 0
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_model(cls, badge) -> 'BadgeDTO':
        return cls(
            id=badge.badge_id,
            code=badge.code,
            name=badge.name,
            points=badge.points or 0,
            description=badge.description,
            icon=badge.icon,
            category=badge.category,
        )

    def to_dict(self) -> dict:
        return asdict(self)
