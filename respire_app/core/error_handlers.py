"""
Error types and JSON error handlers for Respire.

Services raise RespireError subclasses; the handlers registered here turn
them into ``{success: false, message, code, details}`` responses.
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request


class RespireError(Exception):
    """Base class. Subclasses set `code` and `status_code`."""

    code = 'UNKNOWN_ERROR'
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details,
        }


class NotFoundError(RespireError):
    """Profile, template or other required record is missing."""
    code = 'NOT_FOUND'
    status_code = 404

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(message, {'resource': resource} if resource else None)


class ValidationError(RespireError):
    code = 'VALIDATION_ERROR'
    status_code = 400

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(message, {'errors': errors} if errors else None)


class ConflictError(RespireError):
    """Uniqueness violation the caller should see (e.g. a taken username)."""
    code = 'CONFLICT'
    status_code = 409

    def __init__(self, message: str = 'Record already exists', resource: str = None):
        super().__init__(message, {'resource': resource} if resource else None)


class UnknownRuleError(RespireError):
    """Unrecognized badge code or goal category."""
    code = 'UNKNOWN_RULE'
    status_code = 422

    def __init__(self, message: str = 'Unknown rule', rule: str = None):
        super().__init__(message, {'rule': rule} if rule else None)


class CollaboratorError(RespireError):
    """The backing store cannot serve the operation."""
    code = 'COLLABORATOR_FAILURE'
    status_code = 503

    def __init__(self, message: str = 'Storage unavailable', operation: str = None):
        super().__init__(message, {'operation': operation} if operation else None)


def error_response(message: str, code: str, status_code: int, details: Dict = None):
    body = {'success': False, 'message': message, 'code': code}
    if details:
        body['details'] = details
    return jsonify(body), status_code


def _is_api_request() -> bool:
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Attach the JSON handlers to the app."""

    @app.errorhandler(RespireError)
    def handle_respire_error(error):
        log = current_app.logger.error if error.status_code >= 500 else current_app.logger.info
        log(f"[API] {error.code} on {request.method} {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if _is_api_request():
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if _is_api_request():
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('[API] Unhandled error')
        if _is_api_request():
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
