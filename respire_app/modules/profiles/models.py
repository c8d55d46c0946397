"""Profile model: one row per user."""

from __future__ import annotations

from sqlalchemy.sql import func

from respire_app.extensions import db


class Profile(db.Model):
    """User profile, points and daily-goal bookkeeping."""
    __tablename__ = 'profiles'

    user_id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    display_name = db.Column(db.String(120))

    # Progression
    points = db.Column(db.Integer, nullable=False, default=0)
    level = db.Column(db.String(20), nullable=False, default='beginner')

    # Baselines
    quit_type = db.Column(db.String(20), nullable=False, default='cigarettes')  # cigarettes, vape, both
    cigarettes_baseline = db.Column(db.Integer, default=0)  # cigarettes per day before quitting
    vape_frequency_baseline = db.Column(db.String(20))  # heavy, moderate, light
    quit_date = db.Column(db.Date, nullable=True)

    # Daily goal
    current_daily_goal_id = db.Column(
        db.Integer, db.ForeignKey('goal_templates.template_id'), nullable=True
    )
    daily_goal_started_at = db.Column(db.DateTime(timezone=True), nullable=True)
    daily_goal_completed_today = db.Column(db.Boolean, nullable=False, default=False)
    total_daily_goals_completed = db.Column(db.Integer, nullable=False, default=0)
    daily_goal_last_completion_date = db.Column(db.Date, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=func.now())

    QUIT_CIGARETTES = 'cigarettes'
    QUIT_VAPE = 'vape'
    QUIT_BOTH = 'both'
    QUIT_TYPES = (QUIT_CIGARETTES, QUIT_VAPE, QUIT_BOTH)

    VAPE_FREQUENCIES = ('heavy', 'moderate', 'light')

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'username': self.username,
            'display_name': self.display_name,
            'points': self.points or 0,
            'level': self.level,
            'quit_type': self.quit_type,
            'cigarettes_baseline': self.cigarettes_baseline or 0,
            'vape_frequency_baseline': self.vape_frequency_baseline,
            'quit_date': self.quit_date.isoformat() if self.quit_date else None,
            'current_daily_goal_id': self.current_daily_goal_id,
            'daily_goal_completed_today': bool(self.daily_goal_completed_today),
            'total_daily_goals_completed': self.total_daily_goals_completed or 0,
            'daily_goal_last_completion_date': (
                self.daily_goal_last_completion_date.isoformat()
                if self.daily_goal_last_completion_date else None
            ),
        }

    def __repr__(self):
        return f'<Profile {self.user_id} {self.username}>'
