"""
Tests for the progression model (points -> level).
"""

import pytest

from respire_app.modules.gamification.logics.progression import (
    LEVEL_BEGINNER,
    LEVEL_CHAMPION,
    LEVEL_EXPLORER,
    LEVEL_MASTER,
    level_for,
    progress_to_next_level,
)


class TestLevelFor:

    @pytest.mark.parametrize('points, expected', [
        (0, LEVEL_BEGINNER),
        (99, LEVEL_BEGINNER),
        (100, LEVEL_EXPLORER),
        (499, LEVEL_EXPLORER),
        (500, LEVEL_CHAMPION),
        (1499, LEVEL_CHAMPION),
        (1500, LEVEL_MASTER),
        (250000, LEVEL_MASTER),
    ])
    def test_thresholds(self, points, expected):
        assert level_for(points) == expected

    def test_never_regresses_as_points_grow(self):
        order = [LEVEL_BEGINNER, LEVEL_EXPLORER, LEVEL_CHAMPION, LEVEL_MASTER]
        ranks = [order.index(level_for(p)) for p in range(0, 2000, 7)]
        assert ranks == sorted(ranks)

    def test_negative_points_rejected(self):
        with pytest.raises(ValueError):
            level_for(-1)


class TestProgressToNextLevel:

    def test_beginner_counts_down_to_explorer(self):
        progress = progress_to_next_level(40)
        assert progress == {
            'level': LEVEL_BEGINNER,
            'next_level': LEVEL_EXPLORER,
            'next_threshold': 100,
            'points_to_next': 60,
        }

    def test_exact_threshold_targets_following_tier(self):
        progress = progress_to_next_level(500)
        assert progress['level'] == LEVEL_CHAMPION
        assert progress['next_level'] == LEVEL_MASTER
        assert progress['points_to_next'] == 1000

    def test_master_has_no_next_level(self):
        progress = progress_to_next_level(1800)
        assert progress['next_level'] is None
        assert progress['next_threshold'] is None
        assert progress['points_to_next'] == 0
