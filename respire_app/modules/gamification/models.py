from sqlalchemy.sql import func

from respire_app.extensions import db


class Badge(db.Model):
    """Badge catalog entry. `code` selects the unlock rule."""
    __tablename__ = 'badges'

    badge_id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255))
    icon = db.Column(db.String(20), default='🏅')
    category = db.Column(db.String(30), default='milestone')  # milestone, reduction, positive, regularity

    points = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'badge_id': self.badge_id,
            'code': self.code,
            'name': self.name,
            'description': self.description,
            'icon': self.icon,
            'category': self.category,
            'points': self.points or 0,
        }

    def __repr__(self):
        return f'<Badge {self.code}>'


class UserBadge(db.Model):
    """Unlock record: at most one per (user, badge)."""
    __tablename__ = 'user_badges'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('profiles.user_id'), nullable=False)
    badge_id = db.Column(db.Integer, db.ForeignKey('badges.badge_id'), nullable=False)
    unlocked_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    badge = db.relationship('Badge')

    __table_args__ = (db.UniqueConstraint('user_id', 'badge_id', name='_user_badge_uc'),)

    def to_dict(self):
        return {
            'id': self.id,
            'badge_id': self.badge_id,
            'code': self.badge.code,
            'badge_name': self.badge.name,
            'badge_description': self.badge.description,
            'icon': self.badge.icon,
            'points': self.badge.points or 0,
            'unlocked_at': self.unlocked_at.isoformat() if self.unlocked_at else None
        }
