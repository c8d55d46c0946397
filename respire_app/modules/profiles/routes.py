from flask import jsonify

from respire_app.core.error_handlers import NotFoundError
from respire_app.utils.request_utils import json_object

from . import profiles_api_bp
from .services.profile_service import EDITABLE_FIELDS, ProfileService


def _editable_fields(payload):
    return {key: payload[key] for key in EDITABLE_FIELDS if key in payload}


@profiles_api_bp.route('', methods=['POST'])
def create_profile_api():
    """Create a profile."""
    payload = json_object()
    profile = ProfileService.create_profile(payload.get('username'), **_editable_fields(payload))
    return jsonify({'success': True, 'profile': profile.to_dict()}), 201


@profiles_api_bp.route('/<int:user_id>', methods=['GET'])
def get_profile_api(user_id):
    profile = ProfileService.get_profile(user_id)
    if not profile:
        raise NotFoundError(f'Profile {user_id} not found', resource='profile')
    return jsonify({'success': True, 'profile': profile.to_dict()})


@profiles_api_bp.route('/<int:user_id>', methods=['PATCH'])
def update_profile_api(user_id):
    """Update baselines and display fields."""
    profile = ProfileService.update_profile(user_id, **_editable_fields(json_object()))
    return jsonify({'success': True, 'profile': profile.to_dict()})
