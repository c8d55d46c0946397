from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class DailyEntryDTO:
    """Snapshot of a daily entry, as consumed by badge and goal rules."""
    entry_date: date
    cigarettes_count: int = 0
    vape_puffs: int = 0
    physical_activity_minutes: int = 0
    meditation_minutes: int = 0
    user_id: Optional[int] = None

    @classmethod
    def from_model(cls, entry) -> 'DailyEntryDTO':
        return cls(
            entry_date=entry.entry_date,
            cigarettes_count=entry.cigarettes_count or 0,
            vape_puffs=entry.vape_puffs or 0,
            physical_activity_minutes=entry.physical_activity_minutes or 0,
            meditation_minutes=entry.meditation_minutes or 0,
            user_id=entry.user_id,
        )


@dataclass(frozen=True)
class JournalEntryDTO:
    journal_id: int
    user_id: int
    title: Optional[str] = None
