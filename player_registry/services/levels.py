"""Experience to level formulas.

``level(e) = floor((sqrt(2500 + 200 * e) - 50) / 100)`` and the experience
still needed is ``50 * (level + 1) * (level + 2) - e``. Both are defined for
experience in ``[MIN_EXPERIENCE, MAX_EXPERIENCE]``.
"""

from __future__ import annotations

import math

__all__ = [
    "LEVEL_BASE",
    "LEVEL_DIVISOR",
    "LEVEL_OFFSET",
    "LEVEL_SLOPE",
    "MAX_EXPERIENCE",
    "MIN_EXPERIENCE",
    "experience_to_next_level",
    "level_for_experience",
    "level_progress",
]

MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000

LEVEL_BASE = 2500
LEVEL_SLOPE = 200
LEVEL_OFFSET = 50
LEVEL_DIVISOR = 100


def level_for_experience(experience: int) -> int:
    """Return the level reached with ``experience`` points."""

    root = math.sqrt(LEVEL_BASE + LEVEL_SLOPE * experience)
    return int((root - LEVEL_OFFSET) / LEVEL_DIVISOR)


def experience_to_next_level(experience: int, level: int) -> int:
    """Return the experience still missing to go from ``level`` to ``level + 1``."""

    return LEVEL_OFFSET * (level + 1) * (level + 2) - experience


def level_progress(experience: int) -> tuple[int, int]:
    """Return ``(level, until_next_level)`` computed together from ``experience``."""

    level = level_for_experience(experience)
    return level, experience_to_next_level(experience, level)
