"""
Tests for the profile, gamification and goals endpoints.
"""
from datetime import date, timedelta

from respire_app import db
from respire_app.models import UserBadge
from respire_app.utils.time_utils import utc_today


class TestProfilesApi:

    def test_create_and_fetch_profile(self, app, client):
        response = client.post('/api/profiles', json={
            'username': 'sam',
            'quit_type': 'both',
            'cigarettes_baseline': 15,
            'vape_frequency_baseline': 'moderate',
        })

        assert response.status_code == 201
        profile = response.get_json()['profile']
        assert profile['level'] == 'beginner'
        assert profile['points'] == 0

        fetched = client.get(f"/api/profiles/{profile['user_id']}").get_json()
        assert fetched['profile']['quit_type'] == 'both'

    def test_duplicate_username_conflicts(self, app, client):
        client.post('/api/profiles', json={'username': 'sam'})
        response = client.post('/api/profiles', json={'username': 'sam'})
        assert response.status_code == 409

    def test_invalid_quit_type(self, app, client):
        response = client.post('/api/profiles', json={'username': 'sam', 'quit_type': 'snuff'})
        assert response.status_code == 400
        assert 'quit_type' in response.get_json()['details']['errors']

    def test_points_are_not_client_editable(self, app, client, make_profile):
        profile = make_profile()
        response = client.patch(f'/api/profiles/{profile.user_id}', json={'points': 5000, 'display_name': 'Sam'})

        body = response.get_json()['profile']
        assert body['points'] == 0
        assert body['display_name'] == 'Sam'

    def test_patch_ignores_user_id_in_body(self, app, client, make_profile):
        profile = make_profile()
        response = client.patch(f'/api/profiles/{profile.user_id}', json={'user_id': 77, 'display_name': 'Sam'})

        assert response.status_code == 200
        assert response.get_json()['profile']['user_id'] == profile.user_id

    def test_non_object_body_is_rejected(self, app, client):
        response = client.post('/api/profiles', json=['sam'])
        assert response.status_code == 400

    def test_unknown_profile(self, app, client):
        assert client.get('/api/profiles/31337').status_code == 404

    def test_unknown_endpoint_is_json(self, app, client):
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        assert response.get_json()['success'] is False


class TestGamificationApi:

    def test_badge_catalog_lists_active_badges(self, app, client, make_badge):
        make_badge('first_day')
        make_badge('retired', is_active=False)

        codes = [b['code'] for b in client.get('/api/gamification/badges').get_json()['badges']]
        assert codes == ['first_day']

    def test_evaluate_with_explicit_date(self, app, client, make_profile, make_badge, add_entries):
        profile = make_profile()
        make_badge('tracker_week', points=30)
        end = date(2024, 6, 10)
        add_entries(profile.user_id, [end - timedelta(days=d) for d in range(7)])

        response = client.post(
            f'/api/gamification/users/{profile.user_id}/evaluate',
            json={'today': end.isoformat()},
        )

        assert [b['code'] for b in response.get_json()['new_badges']] == ['tracker_week']
        user_badges = client.get(f'/api/gamification/users/{profile.user_id}/badges').get_json()['badges']
        assert user_badges[0]['code'] == 'tracker_week'

    def test_progress(self, app, client, make_profile, make_badge):
        profile = make_profile(points=120)
        badge = make_badge('first_day')
        db.session.add(UserBadge(user_id=profile.user_id, badge_id=badge.badge_id))
        db.session.commit()

        progress = client.get(f'/api/gamification/users/{profile.user_id}/progress').get_json()['progress']

        assert progress['level'] == 'explorer'
        assert progress['next_level'] == 'champion'
        assert progress['points_to_next'] == 380
        assert progress['badges_unlocked'] == 1

    def test_progress_unknown_profile(self, app, client):
        assert client.get('/api/gamification/users/5/progress').status_code == 404


class TestGoalsApi:

    def test_templates_filtered_by_category(self, app, client, make_template):
        make_template('max_5', max_cigarettes=5)
        make_template('no_morning', category='time', target_type='both')

        response = client.get('/api/goals/templates?category=time')

        assert [t['code'] for t in response.get_json()['templates']] == ['no_morning']

    def test_unknown_category_filter(self, app, client):
        response = client.get('/api/goals/templates?category=astrology')
        assert response.status_code == 422
        assert response.get_json()['code'] == 'UNKNOWN_RULE'

    def test_select_then_evaluate_today(self, app, client, make_profile, make_template, add_entries):
        template = make_template('max_5', max_cigarettes=5, points_reward=20)
        profile = make_profile()
        add_entries(profile.user_id, [utc_today()], cigarettes_count=2)

        selected = client.post(f'/api/goals/users/{profile.user_id}/select', json={'template_id': template.template_id})
        assert selected.status_code == 200
        assert selected.get_json()['profile']['current_daily_goal_id'] == template.template_id

        outcome = client.post(f'/api/goals/users/{profile.user_id}/evaluate').get_json()
        assert outcome['completed'] is True
        assert outcome['points_earned'] == 20

        history = client.get(f'/api/goals/users/{profile.user_id}/history').get_json()['history']
        assert history[0]['completed'] is True

        stats = client.get(f'/api/goals/users/{profile.user_id}/stats').get_json()['stats']
        assert stats['total_completed'] == 1
        assert stats['completion_rate'] == 100

    def test_select_requires_template_id(self, app, client, make_profile):
        profile = make_profile()
        response = client.post(f'/api/goals/users/{profile.user_id}/select', json={})
        assert response.status_code == 400

    def test_select_rejects_non_object_body(self, app, client, make_profile):
        profile = make_profile()
        response = client.post(f'/api/goals/users/{profile.user_id}/select', json=[1])
        assert response.status_code == 400

    def test_select_unknown_template(self, app, client, make_profile):
        profile = make_profile()
        response = client.post(f'/api/goals/users/{profile.user_id}/select', json={'template_id': 42})
        assert response.status_code == 404

    def test_evaluate_unknown_profile(self, app, client):
        response = client.post('/api/goals/users/404/evaluate')
        assert response.status_code == 422
        assert response.get_json()['error'] == 'Profile not found'
