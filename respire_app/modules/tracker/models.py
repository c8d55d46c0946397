"""Daily tracker and journal models."""

from __future__ import annotations

from sqlalchemy.sql import func

from respire_app.extensions import db


class DailyEntry(db.Model):
    """
    One tracker row per user and calendar date.
    """
    __tablename__ = 'daily_entries'

    entry_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('profiles.user_id'), nullable=False)
    entry_date = db.Column(db.Date, nullable=False)

    tracking_type = db.Column(db.String(20), default='cigarettes')  # cigarettes, vape, both
    cigarettes_count = db.Column(db.Integer, nullable=False, default=0)
    vape_puffs = db.Column(db.Integer, nullable=False, default=0)
    physical_activity_minutes = db.Column(db.Integer, nullable=False, default=0)
    meditation_minutes = db.Column(db.Integer, nullable=False, default=0)

    # Opaque to the rules engine
    mood = db.Column(db.String(30))
    energy_level = db.Column(db.Integer)
    notes = db.Column(db.Text)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        db.UniqueConstraint('user_id', 'entry_date', name='_user_entry_date_uc'),
        db.Index('ix_daily_entries_user_date', 'user_id', 'entry_date'),
    )

    def to_dict(self):
        return {
            'entry_id': self.entry_id,
            'user_id': self.user_id,
            'entry_date': self.entry_date.isoformat() if self.entry_date else None,
            'tracking_type': self.tracking_type,
            'cigarettes_count': self.cigarettes_count or 0,
            'vape_puffs': self.vape_puffs or 0,
            'physical_activity_minutes': self.physical_activity_minutes or 0,
            'meditation_minutes': self.meditation_minutes or 0,
            'mood': self.mood,
            'energy_level': self.energy_level,
            'notes': self.notes,
        }

    def __repr__(self):
        return f'<DailyEntry {self.user_id} {self.entry_date}>'


class JournalEntry(db.Model):
    """User-authored journal entry."""
    __tablename__ = 'journal_entries'

    journal_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('profiles.user_id'), nullable=False, index=True)
    title = db.Column(db.String(200))
    content = db.Column(db.Text, nullable=False)
    mood = db.Column(db.String(30))
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'journal_id': self.journal_id,
            'user_id': self.user_id,
            'title': self.title,
            'content': self.content,
            'mood': self.mood,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<JournalEntry {self.journal_id}>'
