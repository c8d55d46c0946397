"""
Tracker Service
Saves daily tracker rows and journal entries, then fires the post-commit
hooks that drive badge and daily-goal evaluation.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import IntegrityError

from respire_app.core.error_handlers import NotFoundError, ValidationError
from respire_app.core.signals import journal_entry_saved, tracker_entry_saved
from respire_app.extensions import db
from respire_app.modules.profiles.models import Profile
from respire_app.utils.time_utils import to_date, utc_today

from ..models import DailyEntry, JournalEntry
from ..schemas import DailyEntryDTO, JournalEntryDTO

COUNTER_FIELDS = (
    'cigarettes_count',
    'vape_puffs',
    'physical_activity_minutes',
    'meditation_minutes',
)
OPAQUE_FIELDS = ('tracking_type', 'mood', 'energy_level', 'notes')


class TrackerService:
    """Daily entry and journal persistence."""

    @staticmethod
    def save_daily_entry(
        user_id: int,
        entry_date: Optional[date] = None,
        **fields: Any
    ) -> Tuple[DailyEntry, Dict[str, Any]]:
        """
        Create or update the single entry for (user, entry_date).

        Returns (entry, notifications) where notifications is the merged
        output of the post-commit hooks.
        """
        if not db.session.get(Profile, user_id):
            raise NotFoundError(f'Profile {user_id} not found', resource='profile')

        entry_date = to_date(entry_date) if entry_date is not None else utc_today()
        if entry_date is None:
            raise ValidationError('entry_date must be an ISO date', errors={'entry_date': 'invalid'})

        values = TrackerService._validate_fields(fields)

        try:
            entry = TrackerService._write_entry(user_id, entry_date, values)
        except IntegrityError:
            # Another request created the row for this day first.
            db.session.rollback()
            current_app.logger.info(
                f"[Tracker] Concurrent insert for user={user_id} date={entry_date}, updating instead"
            )
            entry = TrackerService._write_entry(user_id, entry_date, values)

        notifications = TrackerService._fire(
            tracker_entry_saved,
            user_id=user_id,
            entry=DailyEntryDTO.from_model(entry),
        )
        return entry, notifications

    @staticmethod
    def _write_entry(user_id: int, entry_date: date, values: Dict[str, Any]) -> DailyEntry:
        entry = DailyEntry.query.filter_by(user_id=user_id, entry_date=entry_date).first()
        if entry is None:
            entry = DailyEntry(user_id=user_id, entry_date=entry_date)
            db.session.add(entry)
        for key, value in values.items():
            setattr(entry, key, value)
        db.session.commit()
        return entry

    @staticmethod
    def _validate_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
        values = {}
        errors = {}
        for key in COUNTER_FIELDS:
            if key not in fields:
                continue
            value = fields[key]
            if value is None:
                value = 0
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors[key] = 'must be a non-negative integer'
                continue
            values[key] = value
        for key in OPAQUE_FIELDS:
            if key in fields:
                values[key] = fields[key]
        if errors:
            raise ValidationError('Invalid tracker entry', errors=errors)
        return values

    @staticmethod
    def list_entries(
        user_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None
    ) -> List[DailyEntry]:
        """Entries for a user in ascending date order, optionally bounded."""
        query = DailyEntry.query.filter(DailyEntry.user_id == user_id)
        if start:
            query = query.filter(DailyEntry.entry_date >= start)
        if end:
            query = query.filter(DailyEntry.entry_date <= end)
        return query.order_by(DailyEntry.entry_date.asc()).all()

    @staticmethod
    def get_entry(user_id: int, entry_date: date) -> Optional[DailyEntry]:
        return DailyEntry.query.filter_by(user_id=user_id, entry_date=entry_date).first()

    @staticmethod
    def save_journal_entry(
        user_id: int,
        content: str,
        title: Optional[str] = None,
        mood: Optional[str] = None
    ) -> Tuple[JournalEntry, Dict[str, Any]]:
        if not db.session.get(Profile, user_id):
            raise NotFoundError(f'Profile {user_id} not found', resource='profile')
        if not content or not str(content).strip():
            raise ValidationError('Journal content is required', errors={'content': 'required'})

        journal = JournalEntry(user_id=user_id, title=title, content=content, mood=mood)
        db.session.add(journal)
        db.session.commit()

        notifications = TrackerService._fire(
            journal_entry_saved,
            user_id=user_id,
            entry=JournalEntryDTO(journal_id=journal.journal_id, user_id=user_id, title=title),
        )
        return journal, notifications

    @staticmethod
    def list_journal_entries(user_id: int) -> List[JournalEntry]:
        return (
            JournalEntry.query.filter_by(user_id=user_id)
            .order_by(JournalEntry.created_at.desc(), JournalEntry.journal_id.desc())
            .all()
        )

    @staticmethod
    def count_journal_entries(user_id: int) -> int:
        return JournalEntry.query.filter_by(user_id=user_id).count()

    @staticmethod
    def _fire(signal, **payload) -> Dict[str, Any]:
        """Send a post-commit signal and merge receiver results."""
        notifications: Dict[str, Any] = {}
        try:
            for _receiver, result in signal.send(None, **payload):
                if isinstance(result, dict):
                    notifications.update(result)
        except Exception as e:
            # The save is already committed; hooks must not undo it.
            current_app.logger.error(f"[Tracker] Post-save hook failed: {e}", exc_info=True)
        return notifications
