"""Helpers for reading JSON request bodies."""
from typing import Any, Dict

from flask import request

from respire_app.core.error_handlers import ValidationError


def json_object() -> Dict[str, Any]:
    """The request's JSON body as a dict; empty when no body was sent."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object', errors={'body': 'invalid'})
    return payload
