from flask import jsonify

from respire_app.core.error_handlers import NotFoundError, ValidationError
from respire_app.utils.request_utils import json_object
from respire_app.utils.time_utils import to_date

from . import gamification_api_bp
from .interface import evaluate_badges, get_user_progress
from .services.gamification_kernel import GamificationKernel


@gamification_api_bp.route('/badges', methods=['GET'])
def list_badges_api():
    """Active badge catalog."""
    badges = GamificationKernel.get_badge_catalog()
    return jsonify({
        'success': True,
        'badges': [badge.to_dict() for badge in badges],
    })


@gamification_api_bp.route('/users/<int:user_id>/badges', methods=['GET'])
def user_badges_api(user_id):
    records = GamificationKernel.get_user_badges(user_id)
    return jsonify({
        'success': True,
        'badges': [record.to_dict() for record in records],
    })


@gamification_api_bp.route('/users/<int:user_id>/evaluate', methods=['POST'])
def evaluate_badges_api(user_id):
    """Run badge evaluation on demand."""
    payload = json_object()
    today = None
    if payload.get('today'):
        today = to_date(payload['today'])
        if today is None:
            raise ValidationError('today must be an ISO date', errors={'today': 'invalid'})

    new_badges = evaluate_badges(user_id, today=today)
    return jsonify({
        'success': True,
        'new_badges': [badge.to_dict() for badge in new_badges],
    })


@gamification_api_bp.route('/users/<int:user_id>/progress', methods=['GET'])
def user_progress_api(user_id):
    progress = get_user_progress(user_id)
    if progress is None:
        raise NotFoundError(f'Profile {user_id} not found', resource='profile')
    return jsonify({'success': True, 'progress': progress})
