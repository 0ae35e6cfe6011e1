"""Tests for profiles, points and the leaderboard."""

from uuid import uuid4

import pytest

from health_tracker.domain.models import Goals, UserProfile, level_for_points, level_progress
from health_tracker.services.leaderboard import LeaderboardService
from health_tracker.services.profiles import ProfileService
from tests.conftest import InMemoryProfileRepository


def test_get_profile_creates_default_on_first_access(user_id) -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)

    profile = service.get_profile(user_id, email="sam@example.com")

    assert profile.name == "sam"
    assert profile.goals == Goals()
    assert profile.level == 1
    assert service.get_profile(user_id) is profile


def test_update_profile_rejects_counter_fields(user_id) -> None:
    service = ProfileService(InMemoryProfileRepository())
    service.get_profile(user_id)

    with pytest.raises(ValueError, match="points"):
        service.update_profile(user_id, {"points": 99999})

    updated = service.update_profile(user_id, {"name": "Alex", "weight": 72.5})
    assert updated.name == "Alex"
    assert updated.weight == 72.5


def test_levels_follow_points() -> None:
    assert level_for_points(0) == 1
    assert level_for_points(999) == 1
    assert level_for_points(1000) == 2
    assert level_for_points(-50) == 1
    assert level_progress(1250) == 0.25


def test_award_points_reports_level_up(user_id) -> None:
    repository = InMemoryProfileRepository()
    repository.profiles[user_id] = UserProfile(id=user_id, name="Sam", points=995)
    service = ProfileService(repository)

    award = service.award_points(user_id, 10)

    assert award.points == 1005
    assert award.level == 2
    assert award.leveled_up is True
    assert repository.profiles[user_id].level == 2


def test_register_entry_awards_points_and_streak(user_id) -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository, points_per_entry=10)

    award = service.register_entry(user_id, streak=4)

    assert award.points == 10
    assert award.leveled_up is False
    assert repository.profiles[user_id].streak == 4


def test_leaderboard_ranks_by_points_then_streak() -> None:
    repository = InMemoryProfileRepository()
    me, other, third = uuid4(), uuid4(), uuid4()
    repository.profiles = {
        me: UserProfile(id=me, name="Me", points=500, streak=3),
        other: UserProfile(id=other, name="Other", points=500, streak=9),
        third: UserProfile(id=third, name="Third", points=1200, level=2),
    }

    rows = LeaderboardService(repository).top(me, limit=10)

    assert [row.name for row in rows] == ["Third", "Other", "Me"]
    assert [row.rank for row in rows] == [1, 2, 3]
    assert rows[2].is_current_user is True
    assert rows[0].is_current_user is False
