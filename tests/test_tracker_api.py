"""
Tests for the tracker endpoints and the post-save hooks they trigger.
"""
from datetime import timedelta

from respire_app import db
from respire_app.models import DailyEntry, Profile, UserBadge
from respire_app.modules.tracker.services.tracker_service import TrackerService
from respire_app.utils.time_utils import utc_today


def test_save_today_returns_badge_and_goal_notifications(app, client, make_profile, make_badge, make_template):
    make_badge('first_day', points=10)
    make_badge('zero_day', points=25)
    template = make_template('zero_cigarettes', max_cigarettes=0, points_reward=40, title='Smoke-free day')
    profile = make_profile(current_daily_goal_id=template.template_id)

    response = client.post(
        f'/api/tracker/{profile.user_id}/entries',
        json={'cigarettes_count': 0, 'mood': 'calm'},
    )

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['entry']['entry_date'] == utc_today().isoformat()

    notifications = data['notifications']
    assert {b['code'] for b in notifications['new_badges']} == {'first_day', 'zero_day'}
    assert notifications['daily_goal']['completed'] is True
    assert notifications['daily_goal']['points_earned'] == 40

    db.session.expire_all()
    assert db.session.get(Profile, profile.user_id).points == 75


def test_saving_same_day_twice_updates_the_row(app, client, make_profile):
    profile = make_profile()
    url = f'/api/tracker/{profile.user_id}/entries'

    client.post(url, json={'cigarettes_count': 4})
    client.post(url, json={'cigarettes_count': 2, 'meditation_minutes': 15})

    rows = DailyEntry.query.filter_by(user_id=profile.user_id).all()
    assert len(rows) == 1
    assert rows[0].cigarettes_count == 2
    assert rows[0].meditation_minutes == 15


def test_backfilled_day_skips_goal_evaluation(app, client, make_profile, make_template):
    template = make_template('max_5', max_cigarettes=5)
    profile = make_profile(current_daily_goal_id=template.template_id)
    yesterday = (utc_today() - timedelta(days=1)).isoformat()

    response = client.post(
        f'/api/tracker/{profile.user_id}/entries',
        json={'entry_date': yesterday, 'cigarettes_count': 1},
    )

    assert response.status_code == 200
    assert 'daily_goal' not in response.get_json()['notifications']


def test_negative_counter_is_rejected(app, client, make_profile):
    profile = make_profile()

    response = client.post(f'/api/tracker/{profile.user_id}/entries', json={'vape_puffs': -3})

    assert response.status_code == 400
    data = response.get_json()
    assert data['success'] is False
    assert data['code'] == 'VALIDATION_ERROR'
    assert 'vape_puffs' in data['details']['errors']
    assert DailyEntry.query.count() == 0


def test_unknown_profile_is_404(app, client):
    response = client.post('/api/tracker/777/entries', json={'cigarettes_count': 1})

    assert response.status_code == 404
    assert response.get_json()['code'] == 'NOT_FOUND'


def test_list_entries_with_range(app, client, make_profile, add_entries):
    profile = make_profile()
    today = utc_today()
    add_entries(profile.user_id, [today - timedelta(days=d) for d in (5, 3, 1)])

    start = (today - timedelta(days=4)).isoformat()
    response = client.get(f'/api/tracker/{profile.user_id}/entries?start={start}')

    dates = [e['entry_date'] for e in response.get_json()['entries']]
    assert dates == [(today - timedelta(days=3)).isoformat(), (today - timedelta(days=1)).isoformat()]


def test_invalid_range_argument(app, client, make_profile):
    profile = make_profile()
    response = client.get(f'/api/tracker/{profile.user_id}/entries?start=yesterday')
    assert response.status_code == 400


def test_journal_save_unlocks_journal_badge(app, client, make_profile, make_badge):
    make_badge('first_journal', points=10)
    profile = make_profile()

    response = client.post(
        f'/api/tracker/{profile.user_id}/journal',
        json={'title': 'Day one', 'content': 'Craving passed after ten minutes.'},
    )

    assert response.status_code == 201
    assert [b['code'] for b in response.get_json()['notifications']['new_badges']] == ['first_journal']

    listing = client.get(f'/api/tracker/{profile.user_id}/journal').get_json()
    assert listing['journal'][0]['title'] == 'Day one'


def test_journal_requires_content(app, client, make_profile):
    profile = make_profile()
    response = client.post(f'/api/tracker/{profile.user_id}/journal', json={'title': 'Empty'})
    assert response.status_code == 400


def test_failing_hook_does_not_fail_the_save(app, make_profile, make_badge, monkeypatch):
    from respire_app.modules.gamification.services.badges_service import BadgeService

    make_badge('first_day', points=10)
    profile = make_profile()

    def broken(*args, **kwargs):
        raise RuntimeError('boom')

    monkeypatch.setattr(BadgeService, 'evaluate_badges', staticmethod(broken))

    entry, notifications = TrackerService.save_daily_entry(profile.user_id, cigarettes_count=1)

    assert entry.entry_id is not None
    assert 'new_badges' not in notifications
    assert UserBadge.query.count() == 0


def test_unrelated_body_keys_are_ignored(app, client, make_profile):
    profile = make_profile()
    other = make_profile()

    response = client.post(
        f'/api/tracker/{profile.user_id}/entries',
        json={'user_id': other.user_id, 'entry_id': 5, 'cigarettes_count': 1},
    )

    assert response.status_code == 200
    assert response.get_json()['entry']['user_id'] == profile.user_id
    assert DailyEntry.query.filter_by(user_id=other.user_id).count() == 0


def test_non_object_body_is_rejected(app, client, make_profile):
    profile = make_profile()

    for url in (f'/api/tracker/{profile.user_id}/entries', f'/api/tracker/{profile.user_id}/journal'):
        response = client.post(url, json=[{'cigarettes_count': 1}])
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'

    assert DailyEntry.query.count() == 0
