"""
Points awarded for a scored attempt, by content type.

Pure functions; no infrastructure dependencies.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from lioarcade.domain.content.entities.content import ContentType

UNKNOWN_CONTENT_POINTS: Final[int] = 10
POINTS_PER_FLASHCARD: Final[int] = 5

# (base, span): points = base + percentage * span
PERCENTAGE_FORMULAS: Final[dict[str, tuple[int, int]]] = {
    ContentType.QUIZ: (10, 40),
    ContentType.MINI_GAME: (20, 80),
}

# Max score assumed when re-scoring a stored best score after the fact
ESTIMATE_MAX_SCORE: Final[int] = 100


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_points(content_type: str, score: float, max_score: float) -> int:
    """
    Calculate points for one attempt.

    QUIZ and MINI_GAME scale linearly with score / max_score (10-50 and
    20-100 for percentages in [0, 1], extrapolated outside it). FLASHCARD
    awards a fixed amount per card known. Unknown types get a flat award.

    Args:
        content_type: Stored content type string
        score: Raw score (cards known, for flashcards)
        max_score: Maximum achievable score; non-positive values count as 0%

    Returns:
        Points earned
    """
    if content_type == ContentType.FLASHCARD:
        return round_half_away_from_zero(score * POINTS_PER_FLASHCARD)

    formula = PERCENTAGE_FORMULAS.get(content_type)
    if formula is None:
        return UNKNOWN_CONTENT_POINTS

    base, span = formula
    percentage = score / max_score if max_score > 0 else 0.0
    return round_half_away_from_zero(base + percentage * span)


def estimate_points(content_type: str, best_score: float) -> int:
    """
    Re-score a stored best score without its original max score.

    Percentage-based types read the best score as a percentage of 100.
    This is a leaderboard heuristic; it does not reproduce the points
    actually awarded at submission time.
    """
    if content_type == ContentType.FLASHCARD:
        return calculate_points(content_type, best_score, 1)
    return calculate_points(content_type, best_score, ESTIMATE_MAX_SCORE)
