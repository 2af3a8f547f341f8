"""Tests for the experience to level formulas."""

from __future__ import annotations

import pytest

from player_registry.services.levels import (
    MAX_EXPERIENCE,
    MIN_EXPERIENCE,
    experience_to_next_level,
    level_for_experience,
    level_progress,
)


@pytest.mark.parametrize(
    ("experience", "level", "until_next"),
    [
        (0, 0, 100),
        (99, 0, 1),
        (100, 1, 200),
        (299, 1, 1),
        (300, 2, 300),
        (500, 2, 100),
        (2000, 5, 100),
        (MAX_EXPERIENCE, 446, 12_800),
    ],
)
def test_level_progress_known_points(experience: int, level: int, until_next: int) -> None:
    """Pinned values at level thresholds and documented scenarios."""

    assert level_progress(experience) == (level, until_next)


def test_experience_to_next_level_uses_supplied_level() -> None:
    assert experience_to_next_level(2000, 5) == 100
    assert experience_to_next_level(0, 0) == 100


def test_level_is_monotonic_and_remaining_experience_positive() -> None:
    """Across a sampled range the level never drops and the gap stays positive."""

    previous_level = level_for_experience(MIN_EXPERIENCE)
    for experience in range(MIN_EXPERIENCE, 60_000, 7):
        level, until_next = level_progress(experience)
        assert level >= previous_level
        assert level >= 0
        assert until_next > 0
        previous_level = level

    for experience in range(MAX_EXPERIENCE - 5_000, MAX_EXPERIENCE + 1, 13):
        level, until_next = level_progress(experience)
        assert level >= previous_level
        assert until_next > 0
        previous_level = level


def test_next_threshold_matches_level_boundary() -> None:
    """Adding the remaining experience reaches exactly the next level."""

    for experience in (0, 1, 250, 2000, 123_456, 9_999_999):
        level, until_next = level_progress(experience)
        assert level_for_experience(experience + until_next) == level + 1
        assert level_for_experience(experience + until_next - 1) == level
