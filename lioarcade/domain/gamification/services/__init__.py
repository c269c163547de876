"""
Pure scoring services.

Points Calculator -> Level Resolver -> Badge Evaluator, composed by the
submit-score use case.
"""

from .badge_evaluator import BADGE_RULES, BadgeEvaluator, BadgeRule, ProgressHistory
from .level_resolver import calculate_level, points_to_next_level
from .points_calculator import calculate_points, estimate_points

__all__ = [
    "BADGE_RULES",
    "BadgeEvaluator",
    "BadgeRule",
    "ProgressHistory",
    "calculate_level",
    "calculate_points",
    "estimate_points",
    "points_to_next_level",
]
