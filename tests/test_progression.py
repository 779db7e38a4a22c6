import datetime as dt
from types import SimpleNamespace

import pytest
from pydantic import ValidationError as PydanticValidationError

from skillswap.common.config import Settings
from skillswap.modules.achievements.progression import (
    DEFAULT_ICON,
    build_achievement_board,
    compute_progression,
    icon_for_type,
    rarity_for_type,
)


def test_no_achievements_is_level_one():
    summary = compute_progression(0)
    assert summary.total_points == 0
    assert summary.level == 1
    assert summary.current_level_points == 0
    assert summary.next_level_points == 500
    assert summary.progress_to_next_level == 0


def test_three_achievements_reach_level_two():
    summary = compute_progression(3)
    assert summary.total_points == 600
    assert summary.level == 2
    assert summary.current_level_points == 500
    assert summary.next_level_points == 1000
    assert summary.progress_to_next_level == pytest.approx(20.0)


def test_exact_level_boundary_starts_new_band():
    summary = compute_progression(5)
    assert summary.total_points == 1000
    assert summary.level == 3
    assert summary.progress_to_next_level == 0


def test_progress_stays_below_hundred():
    for earned in range(0, 40):
        summary = compute_progression(earned)
        assert 0 <= summary.progress_to_next_level < 100
        assert summary.current_level_points <= summary.total_points < summary.next_level_points


def test_custom_point_values():
    summary = compute_progression(2, points_per_achievement=100, points_per_level=300)
    assert summary.total_points == 200
    assert summary.level == 1
    assert summary.progress_to_next_level == pytest.approx(200 / 3)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        compute_progression(-1)


def test_icons_and_rarity():
    assert icon_for_type("sessions") == "book-open"
    assert icon_for_type("connections") == "users"
    assert icon_for_type("skills") == "star"
    assert icon_for_type("ratings") == "crown"
    assert icon_for_type("mystery") == DEFAULT_ICON
    assert icon_for_type(None) == DEFAULT_ICON
    assert rarity_for_type("ratings") == "ratings"
    assert rarity_for_type(None) == "common"


def test_board_marks_earned_entries():
    catalog = [
        SimpleNamespace(id="a1", name="First Session", description="Book one", type="sessions"),
        SimpleNamespace(id="a2", name="Knowledge Sharer", description=None, type="skills"),
    ]
    first = dt.datetime(2025, 6, 1, tzinfo=dt.timezone.utc)
    earned = [
        SimpleNamespace(achievement_id="a1", earned_at=first),
        # duplicate record; the first one wins
        SimpleNamespace(achievement_id="a1", earned_at=first + dt.timedelta(days=1)),
    ]

    cards = build_achievement_board(catalog, earned)

    assert [c.name for c in cards] == ["First Session", "Knowledge Sharer"]
    assert cards[0].earned is True
    assert cards[0].earned_at == first
    assert cards[0].icon == "book-open"
    assert cards[0].points == 200
    assert cards[1].earned is False
    assert cards[1].earned_at is None
    assert cards[1].description == ""
    assert cards[1].rarity == "skills"


def test_explicit_zero_points_per_achievement_is_respected():
    summary = compute_progression(4, points_per_achievement=0)
    assert summary.total_points == 0
    assert summary.level == 1


def test_non_positive_level_size_rejected():
    with pytest.raises(ValueError):
        compute_progression(1, points_per_level=0)


@pytest.mark.parametrize("field", ["POINTS_PER_ACHIEVEMENT", "POINTS_PER_LEVEL"])
def test_settings_reject_non_positive_points(field):
    with pytest.raises(PydanticValidationError):
        Settings(**{field: 0})
