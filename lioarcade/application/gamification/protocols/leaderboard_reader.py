"""Protocol for the leaderboard read-side projection."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.gamification.value_objects.badge import Badge


class LeaderboardOrder(StrEnum):
    POINTS = "points"
    LEVEL = "level"


@dataclass(frozen=True)
class Standing:
    """A user's current gamification standing."""

    user_id: UserId
    username: str
    total_points: int
    level: int
    badges: list[Badge]


class LeaderboardReaderProtocol(Protocol):
    """Protocol for leaderboard queries."""

    def top_standings(self, limit: int, order: LeaderboardOrder) -> list[Standing]:
        """
        Get the best-ranked users.

        Points order sorts by total_points, then level; level order sorts
        by level, then total_points. Ties fall back to user id.
        """
        ...

    def best_scores_by_content_type(self, content_type: str) -> dict[UserId, list[float]]:
        """Get every user's best scores on content of the given type."""
        ...

    def standings_for_users(self, user_ids: list[UserId]) -> list[Standing]:
        """Get standings for specific users (users without an aggregate are skipped)."""
        ...
