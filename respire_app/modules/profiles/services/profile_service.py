"""
Profile Service
Reads and writes the per-user profile row.
"""
from datetime import date
from typing import Any, Dict, Optional

from respire_app.core.error_handlers import ConflictError, NotFoundError, ValidationError
from respire_app.extensions import db
from respire_app.utils.time_utils import to_date

from ..models import Profile
from ..schemas import ProfileDTO

# Fields a client may set; points, level and goal counters are engine-owned.
EDITABLE_FIELDS = (
    'display_name',
    'quit_type',
    'cigarettes_baseline',
    'vape_frequency_baseline',
    'quit_date',
)


class ProfileService:
    """Profile CRUD used by the API and by both evaluators."""

    @staticmethod
    def get_profile(user_id: int) -> Optional[Profile]:
        return db.session.get(Profile, user_id)

    @staticmethod
    def get_snapshot(user_id: int) -> Optional[ProfileDTO]:
        profile = db.session.get(Profile, user_id)
        return ProfileDTO.from_model(profile) if profile else None

    @staticmethod
    def create_profile(username: str, **fields: Any) -> Profile:
        if not username or not str(username).strip():
            raise ValidationError('Username is required', errors={'username': 'required'})
        username = str(username).strip()

        if Profile.query.filter_by(username=username).first():
            raise ConflictError(f"Username '{username}' is already taken", resource='profile')

        profile = Profile(username=username)
        ProfileService._apply_fields(profile, fields)
        db.session.add(profile)
        db.session.commit()
        return profile

    @staticmethod
    def update_profile(user_id: int, **fields: Any) -> Profile:
        profile = db.session.get(Profile, user_id)
        if not profile:
            raise NotFoundError(f'Profile {user_id} not found', resource='profile')

        ProfileService._apply_fields(profile, fields)
        db.session.commit()
        return profile

    @staticmethod
    def _apply_fields(profile: Profile, fields: Dict[str, Any]) -> None:
        errors = {}
        for key, value in fields.items():
            if key not in EDITABLE_FIELDS:
                continue

            if key == 'quit_type':
                if value not in Profile.QUIT_TYPES:
                    errors[key] = f"must be one of {', '.join(Profile.QUIT_TYPES)}"
                    continue
            elif key == 'cigarettes_baseline':
                if value is None:
                    value = 0
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    errors[key] = 'must be a non-negative integer'
                    continue
            elif key == 'vape_frequency_baseline':
                if value is not None and value not in Profile.VAPE_FREQUENCIES:
                    errors[key] = f"must be one of {', '.join(Profile.VAPE_FREQUENCIES)}"
                    continue
            elif key == 'quit_date':
                parsed = to_date(value) if value is not None else None
                if value is not None and not isinstance(parsed, date):
                    errors[key] = 'must be an ISO date'
                    continue
                value = parsed

            setattr(profile, key, value)

        if errors:
            db.session.rollback()
            raise ValidationError('Invalid profile fields', errors=errors)
