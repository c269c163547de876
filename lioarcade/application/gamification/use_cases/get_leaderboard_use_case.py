"""Use case for the public leaderboard."""

import structlog

from lioarcade.application.gamification.protocols.leaderboard_reader import (
    LeaderboardOrder,
    LeaderboardReaderProtocol,
    Standing,
)
from lioarcade.application.gamification.use_cases.dtos import LeaderboardEntry
from lioarcade.domain.content.entities.content import ContentType
from lioarcade.domain.gamification.services.points_calculator import estimate_points
from lioarcade.exceptions import InvalidLeaderboardQueryError

logger = structlog.get_logger(__name__)

DEFAULT_LEADERBOARD_LIMIT = 10
MAX_LEADERBOARD_LIMIT = 100


class GetLeaderboardUseCase:
    """Use case for ranking users overall or within one content type."""

    def __init__(
        self,
        leaderboard_reader: LeaderboardReaderProtocol,
        max_limit: int = MAX_LEADERBOARD_LIMIT,
    ) -> None:
        self.leaderboard_reader = leaderboard_reader
        self.max_limit = max_limit

    def get_leaderboard(
        self,
        limit: int = DEFAULT_LEADERBOARD_LIMIT,
        by: str = LeaderboardOrder.POINTS,
        content_type: str | None = None,
    ) -> list[LeaderboardEntry]:
        """
        Rank users.

        Without a content type, users are ranked on their stored totals.
        With one, each user's points are re-estimated from their best scores
        on that type of content and the ranking uses the estimate. The
        estimate is approximate; see estimate_points.

        Args:
            limit: Number of entries to return (1..max_limit)
            by: "points" or "level"
            content_type: Optional QUIZ, FLASHCARD or MINI_GAME filter

        Returns:
            Entries with 1-based ranks

        Raises:
            InvalidLeaderboardQueryError: If limit, by or content_type is invalid
        """
        if limit < 1 or limit > self.max_limit:
            raise InvalidLeaderboardQueryError(f"limit must be between 1 and {self.max_limit}")
        try:
            order = LeaderboardOrder(by)
        except ValueError:
            raise InvalidLeaderboardQueryError(f"unknown ordering '{by}'") from None

        if content_type is None:
            standings = self.leaderboard_reader.top_standings(limit, order)
            entries = [
                self._to_entry(rank, standing, standing.total_points)
                for rank, standing in enumerate(standings, start=1)
            ]
        else:
            entries = self._rank_by_content_type(limit, order, content_type)

        logger.debug(
            "fetched_leaderboard", limit=limit, by=order.value, content_type=content_type
        )
        return entries

    def _rank_by_content_type(
        self, limit: int, order: LeaderboardOrder, content_type: str
    ) -> list[LeaderboardEntry]:
        try:
            known_type = ContentType(content_type)
        except ValueError:
            raise InvalidLeaderboardQueryError(
                f"unknown content type '{content_type}'"
            ) from None

        scores = self.leaderboard_reader.best_scores_by_content_type(known_type)
        estimates = {
            user_id: sum(estimate_points(known_type, score) for score in best_scores)
            for user_id, best_scores in scores.items()
        }
        standings = self.leaderboard_reader.standings_for_users(list(estimates))

        def sort_key(standing: Standing) -> tuple[int, int, int]:
            estimate = estimates[standing.user_id]
            if order == LeaderboardOrder.LEVEL:
                return (-standing.level, -estimate, standing.user_id.value)
            return (-estimate, -standing.level, standing.user_id.value)

        ranked = sorted(standings, key=sort_key)[:limit]
        return [
            self._to_entry(rank, standing, estimates[standing.user_id])
            for rank, standing in enumerate(ranked, start=1)
        ]

    def _to_entry(self, rank: int, standing: Standing, points: int) -> LeaderboardEntry:
        return LeaderboardEntry(
            rank=rank,
            user_id=standing.user_id,
            username=standing.username,
            points=points,
            level=standing.level,
            badges=standing.badges,
        )
