"""
Event Handlers for Gamification Module.

Runs badge evaluation after tracker and journal saves. The tracker module
does not import gamification; it only emits the signals.
"""
from flask import current_app

from respire_app.core.signals import journal_entry_saved, tracker_entry_saved


@tracker_entry_saved.connect
def on_tracker_entry_saved(sender, **kwargs):
    """
    Expected kwargs:
        - user_id: int
        - entry: DailyEntryDTO
    """
    return _check_badges(kwargs.get('user_id'))


@journal_entry_saved.connect
def on_journal_entry_saved(sender, **kwargs):
    """
    Expected kwargs:
        - user_id: int
        - entry: JournalEntryDTO
    """
    return _check_badges(kwargs.get('user_id'))


def _check_badges(user_id):
    from .services.badges_service import BadgeService

    if not user_id:
        return None

    try:
        new_badges = BadgeService.evaluate_badges(user_id)
    except Exception as e:
        current_app.logger.error(f"[Gamification] Error checking badges: {e}", exc_info=True)
        return None

    return {'new_badges': [badge.to_dict() for badge in new_badges]}
