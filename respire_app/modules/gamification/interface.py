from datetime import date
from typing import Any, Dict, List, Optional

from .logics.progression import level_for, progress_to_next_level
from .schemas import BadgeDTO
from .services.badges_service import BadgeService
from .services.gamification_kernel import GamificationKernel
from .services.scoring_service import ScoreService


def award_points(user_id: int, amount: int, reason: Optional[str] = None) -> Dict[str, Any]:
    """Public API to award points."""
    return ScoreService.award_points(user_id, amount, reason)


def evaluate_badges(user_id: int, today: Optional[date] = None) -> List[BadgeDTO]:
    """Unlock newly earned badges; returns them for notification."""
    return BadgeService.evaluate_badges(user_id, today=today)


def get_user_progress(user_id: int) -> Optional[Dict[str, Any]]:
    """
    Gamification progress for a user.

    Returns:
        dict with: points, level, next_level, next_threshold, points_to_next, badges_unlocked
        or None when the profile does not exist.
    """
    from respire_app.modules.profiles.services.profile_service import ProfileService

    profile = ProfileService.get_snapshot(user_id)
    if profile is None:
        return None

    progress = progress_to_next_level(profile.points)
    progress['points'] = profile.points
    progress['badges_unlocked'] = GamificationKernel.count_user_badges(user_id)
    return progress


__all__ = ['award_points', 'evaluate_badges', 'get_user_progress', 'level_for']
