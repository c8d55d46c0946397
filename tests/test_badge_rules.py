"""
Tests for the badge unlock predicates.
"""
from datetime import date, timedelta

from respire_app.modules.gamification.logics.badge_rules import (
    BADGE_RULES,
    BadgeContext,
    count_tracked_days,
    count_zero_consumption_days,
    evaluate_badge_rule,
    has_half_reduction,
    is_known_rule,
)
from respire_app.modules.profiles.schemas import ProfileDTO
from respire_app.modules.tracker.schemas import DailyEntryDTO

TODAY = date(2024, 3, 31)


def entry(day, **counters):
    return DailyEntryDTO(entry_date=day, **counters)


def days_back(count, end=TODAY):
    return [end - timedelta(days=offset) for offset in reversed(range(count))]


def context(entries=(), profile=None, journal_count=0, today=TODAY):
    return BadgeContext(
        entries=list(entries),
        profile=profile or ProfileDTO(user_id=1),
        journal_count=journal_count,
        today=today,
    )


class TestHalfReduction:

    def test_average_exactly_half_of_baseline_holds(self):
        profile = ProfileDTO(user_id=1, cigarettes_baseline=20)
        entries = [entry(d, cigarettes_count=10) for d in days_back(7)]
        assert has_half_reduction(entries, profile) is True

    def test_average_just_over_half_fails(self):
        profile = ProfileDTO(user_id=1, cigarettes_baseline=20)
        counts = [10, 10, 10, 10, 10, 10, 11]  # 71 / 7
        entries = [entry(d, cigarettes_count=c) for d, c in zip(days_back(7), counts)]
        assert has_half_reduction(entries, profile) is False

    def test_only_last_seven_entries_count(self):
        profile = ProfileDTO(user_id=1, cigarettes_baseline=20)
        old = [entry(d, cigarettes_count=40) for d in days_back(5, end=TODAY - timedelta(days=10))]
        recent = [entry(d, cigarettes_count=8) for d in days_back(7)]
        assert has_half_reduction(old + recent, profile) is True

    def test_shorter_history_uses_available_entries(self):
        profile = ProfileDTO(user_id=1, cigarettes_baseline=20)
        entries = [entry(d, cigarettes_count=9) for d in days_back(3)]
        assert has_half_reduction(entries, profile) is True

    def test_requires_positive_baseline(self):
        entries = [entry(d, cigarettes_count=0) for d in days_back(7)]
        assert has_half_reduction(entries, ProfileDTO(user_id=1, cigarettes_baseline=0)) is False

    def test_empty_history_fails(self):
        assert has_half_reduction([], ProfileDTO(user_id=1, cigarettes_baseline=20)) is False


class TestCounters:

    def test_zero_consumption_days(self):
        entries = [
            entry(date(2024, 1, 1), cigarettes_count=0, vape_puffs=0),
            entry(date(2024, 1, 2), cigarettes_count=0, vape_puffs=5),
            entry(date(2024, 1, 3), cigarettes_count=0, vape_puffs=0),
        ]
        assert count_zero_consumption_days(entries) == 2

    def test_tracked_days_window_is_inclusive_of_today(self):
        entries = [entry(d) for d in days_back(7)]
        assert count_tracked_days(entries, 7, TODAY) == 7

    def test_tracked_days_excludes_older_and_future_rows(self):
        entries = [entry(d) for d in days_back(8)] + [entry(TODAY + timedelta(days=1))]
        assert count_tracked_days(entries, 7, TODAY) == 7


class TestRuleRegistry:

    def test_every_catalog_code_has_a_rule(self):
        expected = {
            'first_day', 'week_streak', 'month_streak', 'hundred_days', 'year_streak',
            'zero_day', 'ten_zero_days', 'half_reduction',
            'first_sport', 'hundred_min_sport', 'first_meditation', 'hundred_min_meditation',
            'first_journal', 'ten_journals', 'tracker_week', 'tracker_month',
        }
        assert set(BADGE_RULES) == expected

    def test_unknown_code_never_unlocks(self):
        ctx = context([entry(d) for d in days_back(400)], journal_count=100)
        assert is_known_rule('mystery_badge') is False
        assert evaluate_badge_rule('mystery_badge', ctx) is False

    def test_first_day(self):
        assert evaluate_badge_rule('first_day', context()) is False
        assert evaluate_badge_rule('first_day', context([entry(TODAY)])) is True

    def test_week_streak_uses_longest_run(self):
        days = [date(2024, 1, d) for d in (1, 2, 3, 5, 6, 7, 8, 9, 10, 11)]
        assert evaluate_badge_rule('week_streak', context([entry(d) for d in days])) is True

        broken = [date(2024, 1, d) for d in (1, 2, 3, 5, 6, 7, 8)]
        assert evaluate_badge_rule('week_streak', context([entry(d) for d in broken])) is False

    def test_zero_day_family(self):
        ctx = context([entry(d) for d in days_back(10)])
        assert evaluate_badge_rule('zero_day', ctx) is True
        assert evaluate_badge_rule('ten_zero_days', ctx) is True

        smoky = context([entry(d, cigarettes_count=1) for d in days_back(10)])
        assert evaluate_badge_rule('zero_day', smoky) is False

    def test_activity_minutes(self):
        entries = [entry(d, physical_activity_minutes=25) for d in days_back(4)]
        ctx = context(entries)
        assert evaluate_badge_rule('first_sport', ctx) is True
        assert evaluate_badge_rule('hundred_min_sport', ctx) is True
        assert evaluate_badge_rule('first_meditation', ctx) is False

    def test_meditation_sum_below_target(self):
        entries = [entry(d, meditation_minutes=33) for d in days_back(3)]
        ctx = context(entries)
        assert evaluate_badge_rule('first_meditation', ctx) is True
        assert evaluate_badge_rule('hundred_min_meditation', ctx) is False

    def test_journal_counts(self):
        assert evaluate_badge_rule('first_journal', context(journal_count=1)) is True
        assert evaluate_badge_rule('ten_journals', context(journal_count=9)) is False
        assert evaluate_badge_rule('ten_journals', context(journal_count=10)) is True

    def test_tracker_week_needs_every_day_up_to_today(self):
        assert evaluate_badge_rule('tracker_week', context([entry(d) for d in days_back(7)])) is True

        yesterday = TODAY - timedelta(days=1)
        stale = context([entry(d) for d in days_back(7, end=yesterday)])
        assert evaluate_badge_rule('tracker_week', stale) is False

    def test_tracker_week_depends_on_evaluation_date(self):
        entries = [entry(d) for d in days_back(7)]
        later = context(entries, today=TODAY + timedelta(days=2))
        assert evaluate_badge_rule('tracker_week', later) is False
