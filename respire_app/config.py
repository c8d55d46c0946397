# File: respire_app/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# Repository root (this file lives in respire_app/)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "respire.db")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Respire application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    SQLITE_BUSY_TIMEOUT = 30
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = _env_flag('LOG_JSON', False)

    # Badge and goal catalogs
    SEED_CATALOG_ON_STARTUP = _env_flag('SEED_CATALOG_ON_STARTUP', True)

    HISTORY_DEFAULT_LIMIT = 30

    @classmethod
    def init_app(cls, app):
        """Finish the engine options for the configured URI and create storage directories."""
        uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = cls.engine_options(
            uri, app.config.get('SQLALCHEMY_ENGINE_OPTIONS'), app.config.get('SQLITE_BUSY_TIMEOUT')
        )
        if uri == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)

    @staticmethod
    def engine_options(uri, options=None, busy_timeout=None):
        """Engine options for `uri`; the connect timeout only applies to SQLite."""
        options = dict(options or {})
        if uri.startswith('sqlite') and busy_timeout:
            connect_args = dict(options.get('connect_args') or {})
            connect_args.setdefault('timeout', busy_timeout)
            options['connect_args'] = connect_args
        return options
