from flask import jsonify, request

from respire_app.core.error_handlers import ValidationError
from respire_app.utils.request_utils import json_object
from respire_app.utils.time_utils import to_date

from . import tracker_api_bp
from .services.tracker_service import COUNTER_FIELDS, OPAQUE_FIELDS, TrackerService

ENTRY_FIELDS = COUNTER_FIELDS + OPAQUE_FIELDS


def _date_arg(name):
    raw = request.args.get(name)
    if raw is None:
        return None
    parsed = to_date(raw)
    if parsed is None:
        raise ValidationError(f'{name} must be an ISO date', errors={name: 'invalid'})
    return parsed


@tracker_api_bp.route('/<int:user_id>/entries', methods=['POST'])
def save_entry_api(user_id):
    """Save today's (or the given day's) tracker entry and run the hooks."""
    payload = json_object()
    fields = {key: payload[key] for key in ENTRY_FIELDS if key in payload}
    entry, notifications = TrackerService.save_daily_entry(user_id, payload.get('entry_date'), **fields)
    return jsonify({
        'success': True,
        'entry': entry.to_dict(),
        'notifications': notifications,
    })


@tracker_api_bp.route('/<int:user_id>/entries', methods=['GET'])
def list_entries_api(user_id):
    entries = TrackerService.list_entries(user_id, _date_arg('start'), _date_arg('end'))
    return jsonify({
        'success': True,
        'entries': [entry.to_dict() for entry in entries],
    })


@tracker_api_bp.route('/<int:user_id>/journal', methods=['POST'])
def save_journal_api(user_id):
    payload = json_object()
    journal, notifications = TrackerService.save_journal_entry(
        user_id,
        payload.get('content'),
        title=payload.get('title'),
        mood=payload.get('mood'),
    )
    return jsonify({
        'success': True,
        'journal': journal.to_dict(),
        'notifications': notifications,
    }), 201


@tracker_api_bp.route('/<int:user_id>/journal', methods=['GET'])
def list_journal_api(user_id):
    journals = TrackerService.list_journal_entries(user_id)
    return jsonify({
        'success': True,
        'journal': [journal.to_dict() for journal in journals],
    })
