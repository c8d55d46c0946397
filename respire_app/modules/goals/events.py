"""
Event Handlers for Goals Module.

Validates the current daily goal whenever today's tracker entry is saved.
"""
from flask import current_app

from respire_app.core.signals import tracker_entry_saved
from respire_app.utils.time_utils import utc_today


@tracker_entry_saved.connect
def on_tracker_entry_saved(sender, **kwargs):
    """
    Expected kwargs:
        - user_id: int
        - entry: DailyEntryDTO
    """
    from .services.daily_goal_service import DailyGoalService

    user_id = kwargs.get('user_id')
    entry = kwargs.get('entry')

    if not user_id or entry is None:
        return None

    # The current goal applies to today only; back-filled days are not re-judged.
    today = utc_today()
    if entry.entry_date != today:
        return None

    try:
        outcome = DailyGoalService.evaluate_daily_goal(user_id, entry, today=today)
    except Exception as e:
        current_app.logger.error(f"[Goals] Error validating daily goal: {e}", exc_info=True)
        return None

    return {'daily_goal': outcome.to_dict()}
