"""Blueprint registration for the tracker module (daily entries and journal)."""

from flask import Blueprint

tracker_api_bp = Blueprint('tracker_api', __name__)

from . import routes  # noqa: E402,F401  # isort:skip
