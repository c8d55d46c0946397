import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from respire_app import create_app, db
from respire_app.config import Config
from respire_app.models import Badge, DailyEntry, GoalTemplate, Profile


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    SEED_CATALOG_ON_STARTUP = False
    LOG_DIR = None


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_profile(app):
    counter = {'n': 0}

    def _make(**fields):
        counter['n'] += 1
        fields.setdefault('username', f"user{counter['n']}")
        profile = Profile(**fields)
        db.session.add(profile)
        db.session.commit()
        return profile

    return _make


@pytest.fixture
def make_badge(app):
    def _make(code, points=10, name=None, is_active=True):
        badge = Badge(
            code=code,
            name=name or code.replace('_', ' ').title(),
            points=points,
            is_active=is_active,
        )
        db.session.add(badge)
        db.session.commit()
        return badge

    return _make


@pytest.fixture
def make_template(app):
    def _make(code, category='reduction', target_type='cigarettes', points_reward=10, **fields):
        template = GoalTemplate(
            code=code,
            title=fields.pop('title', code.replace('_', ' ').title()),
            category=category,
            target_type=target_type,
            points_reward=points_reward,
            **fields
        )
        db.session.add(template)
        db.session.commit()
        return template

    return _make


@pytest.fixture
def add_entries(app):
    """Insert daily entries directly, without firing the save hooks."""
    def _add(user_id, days, **counters):
        rows = []
        for day in days:
            row = DailyEntry(user_id=user_id, entry_date=day, **counters)
            db.session.add(row)
            rows.append(row)
        db.session.commit()
        return rows

    return _add
