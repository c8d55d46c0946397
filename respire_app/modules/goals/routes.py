from flask import jsonify, request

from respire_app.core.error_handlers import UnknownRuleError, ValidationError
from respire_app.modules.tracker.services.tracker_service import TrackerService
from respire_app.utils.request_utils import json_object
from respire_app.utils.time_utils import to_date, utc_today

from . import goals_api_bp
from .constants import GOAL_CATEGORIES
from .interface import evaluate_daily_goal, get_goal_history, get_goal_stats, select_goal
from .services.goal_kernel_service import GoalKernelService


def _payload_date(payload, key='today'):
    raw = payload.get(key)
    if not raw:
        return None
    parsed = to_date(raw)
    if parsed is None:
        raise ValidationError(f'{key} must be an ISO date', errors={key: 'invalid'})
    return parsed


@goals_api_bp.route('/templates', methods=['GET'])
def list_templates_api():
    category = request.args.get('category')
    if category and category not in GOAL_CATEGORIES:
        raise UnknownRuleError(f"Unknown goal category '{category}'", rule=category)

    templates = GoalKernelService.list_templates(category=category)
    return jsonify({
        'success': True,
        'templates': [template.to_dict() for template in templates],
    })


@goals_api_bp.route('/users/<int:user_id>/select', methods=['POST'])
def select_goal_api(user_id):
    payload = json_object()
    template_id = payload.get('template_id')
    if isinstance(template_id, bool) or not isinstance(template_id, int):
        raise ValidationError('template_id is required', errors={'template_id': 'required'})

    result = select_goal(user_id, template_id, today=_payload_date(payload))
    return jsonify({'success': True, **result})


@goals_api_bp.route('/users/<int:user_id>/evaluate', methods=['POST'])
def evaluate_goal_api(user_id):
    """Validate today's goal against the stored entry for the day."""
    payload = json_object()
    today = _payload_date(payload) or utc_today()
    entry = TrackerService.get_entry(user_id, today)

    outcome = evaluate_daily_goal(user_id, entry, today=today)
    status = 200 if outcome.success else 422
    return jsonify(outcome.to_dict()), status


@goals_api_bp.route('/users/<int:user_id>/history', methods=['GET'])
def goal_history_api(user_id):
    limit = request.args.get('limit', type=int)
    history = get_goal_history(user_id, limit=limit)
    return jsonify({
        'success': True,
        'history': [row.to_dict() for row in history],
    })


@goals_api_bp.route('/users/<int:user_id>/stats', methods=['GET'])
def goal_stats_api(user_id):
    return jsonify({'success': True, 'stats': get_goal_stats(user_id)})
