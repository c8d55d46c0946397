"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker (Flask's signalling backend) to keep the tracker, gamification
and goals modules decoupled.

Usage:
    # Publisher (sender)
    from respire_app.core.signals import tracker_entry_saved
    results = tracker_entry_saved.send(None, user_id=1, entry=entry_dto)

    # Subscriber (receiver) - in module's events.py
    @tracker_entry_saved.connect
    def on_tracker_entry_saved(sender, **kwargs):
        ...

Receivers of the *_saved signals may return a dict; the publisher merges
those dicts into the notifications it hands back to the client.
"""
from blinker import Namespace

# ============================================
# Tracker Signals (post-commit hooks)
# ============================================
tracker_signals = Namespace()

# Signal: Fired after a daily entry has been committed
# Payload: user_id, entry (DailyEntryDTO)
tracker_entry_saved = tracker_signals.signal('tracker_entry_saved')

# Signal: Fired after a journal entry has been committed
# Payload: user_id, entry (JournalEntryDTO)
journal_entry_saved = tracker_signals.signal('journal_entry_saved')

# ============================================
# Gamification Signals
# ============================================
gamification_signals = Namespace()

# Signal: Fired when points are added to a profile
# Payload: user_id, amount, reason, new_total, level, leveled_up
points_awarded = gamification_signals.signal('points_awarded')

# Signal: Fired once per newly created unlock record
# Payload: user_id, badge (BadgeDTO)
badge_unlocked = gamification_signals.signal('badge_unlocked')

# Signal: Fired when today's goal transitions to completed
# Payload: user_id, goal_date, template_id, points_earned
daily_goal_completed = gamification_signals.signal('daily_goal_completed')
