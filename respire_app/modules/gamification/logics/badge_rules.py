"""
Badge Rules - unlock predicates keyed by badge code.

Every rule is a pure function of a BadgeContext: the user's daily entries
(ascending by date), a profile snapshot, the journal entry count and the
evaluation date. Codes missing from BADGE_RULES never auto-unlock.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Optional, Sequence

from respire_app.modules.profiles.schemas import ProfileDTO
from respire_app.modules.tracker.schemas import DailyEntryDTO

from .streak_logic import longest_consecutive_run

HALF_REDUCTION_WINDOW = 7
HALF_REDUCTION_RATIO = 0.5
CUMULATIVE_MINUTES_TARGET = 100


@dataclass(frozen=True)
class BadgeContext:
    entries: Sequence[DailyEntryDTO]
    profile: Optional[ProfileDTO]
    journal_count: int
    today: date


BadgeRule = Callable[[BadgeContext], bool]


def count_zero_consumption_days(entries: Sequence[DailyEntryDTO]) -> int:
    return sum(
        1 for e in entries
        if (e.cigarettes_count or 0) == 0 and (e.vape_puffs or 0) == 0
    )


def count_tracked_days(entries: Sequence[DailyEntryDTO], days: int, today: date) -> int:
    """Entries dated within the last `days` calendar days, today included."""
    window_start = today - timedelta(days=days - 1)
    return sum(1 for e in entries if window_start <= e.entry_date <= today)


def has_half_reduction(entries: Sequence[DailyEntryDTO], profile: Optional[ProfileDTO]) -> bool:
    """Mean cigarettes over the last 7 entries is at most half the baseline."""
    if not entries or profile is None:
        return False

    baseline = profile.cigarettes_baseline or 0
    if baseline <= 0:
        return False

    recent = sorted(entries, key=lambda e: e.entry_date)[-HALF_REDUCTION_WINDOW:]
    average = sum(e.cigarettes_count or 0 for e in recent) / len(recent)
    return average <= baseline * HALF_REDUCTION_RATIO


# --- rule factories -------------------------------------------------------

def entries_at_least(target: int) -> BadgeRule:
    return lambda ctx: len(ctx.entries) >= target


def streak_at_least(target: int) -> BadgeRule:
    def rule(ctx: BadgeContext) -> bool:
        if len(ctx.entries) < target:
            return False
        return longest_consecutive_run(e.entry_date for e in ctx.entries) >= target
    return rule


def zero_days_at_least(target: int) -> BadgeRule:
    return lambda ctx: count_zero_consumption_days(ctx.entries) >= target


def any_minutes(field: str) -> BadgeRule:
    return lambda ctx: any((getattr(e, field) or 0) > 0 for e in ctx.entries)


def total_minutes_at_least(field: str, target: int = CUMULATIVE_MINUTES_TARGET) -> BadgeRule:
    return lambda ctx: sum(getattr(e, field) or 0 for e in ctx.entries) >= target


def journals_at_least(target: int) -> BadgeRule:
    return lambda ctx: ctx.journal_count >= target


def tracked_every_day(days: int) -> BadgeRule:
    return lambda ctx: count_tracked_days(ctx.entries, days, ctx.today) >= days


def half_reduction(ctx: BadgeContext) -> bool:
    return has_half_reduction(ctx.entries, ctx.profile)


BADGE_RULES: Dict[str, BadgeRule] = {
    # Milestones
    'first_day': entries_at_least(1),
    'week_streak': streak_at_least(7),
    'month_streak': streak_at_least(30),
    'hundred_days': streak_at_least(100),
    'year_streak': streak_at_least(365),
    # Reduction
    'zero_day': zero_days_at_least(1),
    'ten_zero_days': zero_days_at_least(10),
    'half_reduction': half_reduction,
    # Positive actions
    'first_sport': any_minutes('physical_activity_minutes'),
    'hundred_min_sport': total_minutes_at_least('physical_activity_minutes'),
    'first_meditation': any_minutes('meditation_minutes'),
    'hundred_min_meditation': total_minutes_at_least('meditation_minutes'),
    'first_journal': journals_at_least(1),
    'ten_journals': journals_at_least(10),
    # Regularity
    'tracker_week': tracked_every_day(7),
    'tracker_month': tracked_every_day(30),
}


def is_known_rule(code: str) -> bool:
    return code in BADGE_RULES


def evaluate_badge_rule(code: str, ctx: BadgeContext) -> bool:
    """Whether the badge identified by `code` is earned under `ctx`."""
    rule = BADGE_RULES.get(code)
    if rule is None:
        return False
    return bool(rule(ctx))
