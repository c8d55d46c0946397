"""
Stateless validation of a daily goal against one day's entry.
Pure functions, no database dependencies.
"""
from typing import Callable, Dict, Optional

from respire_app.modules.profiles.schemas import ProfileDTO
from respire_app.modules.tracker.schemas import DailyEntryDTO

from ..constants import (
    BASELINE_REDUCTION_RATIO,
    CATEGORY_CONTEXT,
    CATEGORY_DETAILS,
    CATEGORY_PERIOD,
    CATEGORY_REDUCTION,
    CATEGORY_SPACING,
    CATEGORY_TIME,
    DEFAULT_CIGARETTES_BASELINE,
    DEFAULT_VAPE_BASELINE,
    TARGET_BOTH,
    TARGET_CIGARETTES,
    TARGET_VAPE,
    UNSET_MAX_CEILING,
    VAPE_BASELINE_PUFFS,
)
from ..schemas import GoalTemplateDTO

GoalValidator = Callable[[GoalTemplateDTO, Optional[DailyEntryDTO], ProfileDTO], bool]


def _within(count: int, maximum: Optional[int]) -> bool:
    # An unset max on a single-counter check allows nothing.
    return count <= (maximum if maximum is not None else 0)


def validate_reduction_goal(
    template: GoalTemplateDTO,
    entry: Optional[DailyEntryDTO],
    profile: ProfileDTO
) -> bool:
    """Every counter the template targets stays at or under its max."""
    if entry is None:
        return False

    cigarettes = entry.cigarettes_count or 0
    puffs = entry.vape_puffs or 0
    target = template.target_type

    if profile.quit_type == TARGET_BOTH:
        if target == TARGET_CIGARETTES:
            return _within(cigarettes, template.max_cigarettes)
        if target == TARGET_VAPE:
            return _within(puffs, template.max_vape_puffs)
        if target == TARGET_BOTH:
            cig_max = template.max_cigarettes if template.max_cigarettes is not None else UNSET_MAX_CEILING
            vape_max = template.max_vape_puffs if template.max_vape_puffs is not None else UNSET_MAX_CEILING
            return cigarettes <= cig_max and puffs <= vape_max

    if target == TARGET_CIGARETTES or (target == TARGET_BOTH and profile.quit_type == TARGET_CIGARETTES):
        return _within(cigarettes, template.max_cigarettes)

    if target == TARGET_VAPE or (target == TARGET_BOTH and profile.quit_type == TARGET_VAPE):
        return _within(puffs, template.max_vape_puffs)

    return False


def consumption_baseline(profile: ProfileDTO) -> int:
    """Reference daily consumption used by the baseline fallback."""
    if profile.quit_type == TARGET_CIGARETTES:
        return profile.cigarettes_baseline or DEFAULT_CIGARETTES_BASELINE
    return VAPE_BASELINE_PUFFS.get(profile.vape_frequency_baseline, DEFAULT_VAPE_BASELINE)


def validate_below_baseline(
    template: GoalTemplateDTO,
    entry: Optional[DailyEntryDTO],
    profile: ProfileDTO
) -> bool:
    """
    Approximation shared by time, period, spacing and context goals: today's
    consumption is under 80% of the baseline. No time-of-day data is tracked.
    """
    if entry is None:
        return False

    if profile.quit_type == TARGET_CIGARETTES:
        count = entry.cigarettes_count or 0
    else:
        count = entry.vape_puffs or 0
    return count < consumption_baseline(profile) * BASELINE_REDUCTION_RATIO


CATEGORY_VALIDATORS: Dict[str, GoalValidator] = {
    CATEGORY_REDUCTION: validate_reduction_goal,
    CATEGORY_TIME: validate_below_baseline,
    CATEGORY_PERIOD: validate_below_baseline,
    CATEGORY_SPACING: validate_below_baseline,
    CATEGORY_CONTEXT: validate_below_baseline,
}


def get_validator(category: str) -> Optional[GoalValidator]:
    return CATEGORY_VALIDATORS.get(category)


def describe_completion(template: GoalTemplateDTO, entry: DailyEntryDTO, profile: ProfileDTO) -> str:
    """Short human-readable summary for a completed goal."""
    if template.category != CATEGORY_REDUCTION:
        return CATEGORY_DETAILS.get(template.category, 'Goal met')

    cigarettes = f"{entry.cigarettes_count or 0}/{template.max_cigarettes} cigarettes"
    puffs = f"{entry.vape_puffs or 0}/{template.max_vape_puffs} puffs"

    if template.target_type == TARGET_BOTH and profile.quit_type == TARGET_BOTH:
        return f"{cigarettes}, {puffs}"
    if template.target_type == TARGET_CIGARETTES or profile.quit_type == TARGET_CIGARETTES:
        return cigarettes
    return puffs
