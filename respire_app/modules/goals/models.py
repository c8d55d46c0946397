"""Daily goal models."""

from __future__ import annotations

from respire_app.extensions import db


class GoalTemplate(db.Model):
    """
    Catalog of daily challenges a user can pick as their current goal.
    """
    __tablename__ = 'goal_templates'

    template_id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)
    title = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text)

    # Classification
    category = db.Column(db.String(20), nullable=False)  # reduction, time, period, spacing, context
    target_type = db.Column(db.String(20), nullable=False, default='both')  # cigarettes, vape, both
    difficulty = db.Column(db.String(20), default='medium')  # easy, medium, hard

    # Thresholds
    max_cigarettes = db.Column(db.Integer, nullable=True)
    max_vape_puffs = db.Column(db.Integer, nullable=True)

    points_reward = db.Column(db.Integer, nullable=False, default=10)
    icon = db.Column(db.String(20), default='🎯')
    is_active = db.Column(db.Boolean, default=True)

    def to_dict(self):
        return {
            'template_id': self.template_id,
            'code': self.code,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'target_type': self.target_type,
            'difficulty': self.difficulty,
            'max_cigarettes': self.max_cigarettes,
            'max_vape_puffs': self.max_vape_puffs,
            'points_reward': self.points_reward or 0,
            'icon': self.icon,
        }

    def __repr__(self):
        return f'<GoalTemplate {self.code}>'


class DailyGoalHistory(db.Model):
    """
    Outcome of the user's goal for one calendar date.
    """
    __tablename__ = 'daily_goal_history'

    history_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('profiles.user_id'), nullable=False)
    goal_template_id = db.Column(db.Integer, db.ForeignKey('goal_templates.template_id'), nullable=False)
    goal_date = db.Column(db.Date, nullable=False)

    completed = db.Column(db.Boolean, nullable=False, default=False)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    points_earned = db.Column(db.Integer, nullable=False, default=0)

    template = db.relationship('GoalTemplate')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'goal_date', name='_user_goal_date_uc'),
        db.Index('ix_daily_goal_history_date', 'goal_date'),
    )

    def __repr__(self):
        return f'<DailyGoalHistory {self.user_id} {self.goal_date}: {self.completed}>'
