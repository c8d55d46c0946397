"""Blueprint registration for the goals module."""

from flask import Blueprint

goals_api_bp = Blueprint('goals_api', __name__)

from . import routes, events  # noqa: E402,F401  # isort:skip
