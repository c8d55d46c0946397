"""Shared configuration for daily goals."""

from __future__ import annotations

CATEGORY_REDUCTION = 'reduction'
CATEGORY_TIME = 'time'
CATEGORY_PERIOD = 'period'
CATEGORY_SPACING = 'spacing'
CATEGORY_CONTEXT = 'context'

GOAL_CATEGORIES: tuple[str, ...] = (
    CATEGORY_REDUCTION,
    CATEGORY_TIME,
    CATEGORY_PERIOD,
    CATEGORY_SPACING,
    CATEGORY_CONTEXT,
)

TARGET_CIGARETTES = 'cigarettes'
TARGET_VAPE = 'vape'
TARGET_BOTH = 'both'

# Ceiling used for an unset max on "both" templates
UNSET_MAX_CEILING = 999

# Baseline fallback for time/period/spacing/context goals
BASELINE_REDUCTION_RATIO = 0.8
DEFAULT_CIGARETTES_BASELINE = 20
VAPE_BASELINE_PUFFS: dict[str, int] = {
    'heavy': 300,
    'moderate': 200,
    'light': 100,
}
DEFAULT_VAPE_BASELINE = 200

CATEGORY_DETAILS: dict[str, str] = {
    CATEGORY_TIME: 'Time goal respected',
    CATEGORY_PERIOD: 'Smoke-free period respected',
    CATEGORY_SPACING: 'Spacing respected',
    CATEGORY_CONTEXT: 'Context respected',
}
