"""
Progression Logic - level tiers derived from accumulated points.

Pure functions only: no database, no Flask.
"""
from typing import Any, Dict, Tuple

LEVEL_BEGINNER = 'beginner'
LEVEL_EXPLORER = 'explorer'
LEVEL_CHAMPION = 'champion'
LEVEL_MASTER = 'master'

# (minimum points, level), highest tier first
LEVEL_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (1500, LEVEL_MASTER),
    (500, LEVEL_CHAMPION),
    (100, LEVEL_EXPLORER),
    (0, LEVEL_BEGINNER),
)

LEVEL_ORDER = tuple(level for _, level in reversed(LEVEL_THRESHOLDS))


def level_for(points: int) -> str:
    """
    Map a non-negative point total to its level.

    >>> level_for(99), level_for(100), level_for(500), level_for(1500)
    ('beginner', 'explorer', 'champion', 'master')
    """
    if points < 0:
        raise ValueError(f"points must be non-negative, got {points}")

    for minimum, level in LEVEL_THRESHOLDS:
        if points >= minimum:
            return level
    return LEVEL_BEGINNER


def progress_to_next_level(points: int) -> Dict[str, Any]:
    """Current level plus the distance to the next tier (None at the top)."""
    level = level_for(points)
    next_index = LEVEL_ORDER.index(level) + 1

    if next_index >= len(LEVEL_ORDER):
        return {
            'level': level,
            'next_level': None,
            'next_threshold': None,
            'points_to_next': 0,
        }

    next_level = LEVEL_ORDER[next_index]
    next_threshold = next(minimum for minimum, lvl in LEVEL_THRESHOLDS if lvl == next_level)
    return {
        'level': level,
        'next_level': next_level,
        'next_threshold': next_threshold,
        'points_to_next': next_threshold - points,
    }
