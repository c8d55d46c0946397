"""Blueprint registration for the profiles module."""

from flask import Blueprint

profiles_api_bp = Blueprint('profiles_api', __name__)

from . import routes  # noqa: E402,F401  # isort:skip
