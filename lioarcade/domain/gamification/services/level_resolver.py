"""
Level lookup from cumulative points.

Levels 1-4 use fixed thresholds; from 1000 points on, every further 500
points is one more level.
"""

from typing import Final

# Lower bound (inclusive) of levels 2, 3, 4 and 5
LEVEL_THRESHOLDS: Final[tuple[int, ...]] = (100, 300, 600, 1000)
POINTS_PER_LEVEL_AFTER_THRESHOLDS: Final[int] = 500


def calculate_level(total_points: int) -> int:
    """
    Resolve the level for a cumulative point total.

    Always called with the new total, after the latest points were added.
    """
    for level, threshold in enumerate(LEVEL_THRESHOLDS, start=1):
        if total_points < threshold:
            return level

    open_ended_base = len(LEVEL_THRESHOLDS) + 1
    points_past_thresholds = total_points - LEVEL_THRESHOLDS[-1]
    return open_ended_base + points_past_thresholds // POINTS_PER_LEVEL_AFTER_THRESHOLDS


def level_floor(level: int) -> int:
    """Minimum total points for a level."""
    if level <= 1:
        return 0
    if level <= len(LEVEL_THRESHOLDS) + 1:
        return LEVEL_THRESHOLDS[level - 2]
    extra_levels = level - (len(LEVEL_THRESHOLDS) + 1)
    return LEVEL_THRESHOLDS[-1] + extra_levels * POINTS_PER_LEVEL_AFTER_THRESHOLDS


def points_to_next_level(total_points: int) -> int:
    """Points still needed to reach the next level."""
    return level_floor(calculate_level(total_points) + 1) - total_points
