"""
Streak Logic - Pure functions for streak calculation.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
from datetime import date, datetime
from typing import Iterable, List, Union

from respire_app.utils.time_utils import days_between, to_date


def longest_consecutive_run(activity_dates: Iterable[Union[date, datetime, str]]) -> int:
    """
    Length of the longest run of calendar-consecutive days.

    Dates are sorted ascending and scanned once; the running counter resets
    to 1 whenever two neighbours are not exactly one calendar day apart.

    Examples:
        >>> from datetime import date
        >>> days = [date(2024, 1, d) for d in (1, 2, 3, 5, 6, 7, 8)]
        >>> longest_consecutive_run(days)
        4
    """
    normalized: List[date] = sorted(
        d for d in (to_date(val) for val in activity_dates) if d is not None
    )
    if not normalized:
        return 0

    current = 1
    longest = 1
    for previous, current_date in zip(normalized, normalized[1:]):
        if days_between(previous, current_date) == 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1

    return longest
