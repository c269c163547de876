"""Use case for reading a user's gamification progress."""

import structlog

from lioarcade.application.gamification.protocols.gamification_repository import (
    GamificationRepositoryProtocol,
)
from lioarcade.application.gamification.protocols.progress_repository import (
    ProgressRepositoryProtocol,
)
from lioarcade.application.gamification.use_cases.dtos import (
    ProgressStatistics,
    UserProgressSummary,
)
from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.gamification.exceptions import GamificationAggregateNotFoundError
from lioarcade.domain.gamification.services.level_resolver import points_to_next_level

logger = structlog.get_logger(__name__)

DEFAULT_RECENT_ACTIVITY_LIMIT = 20


class GetUserProgressUseCase:
    """Use case for the progress page: standing, recent activity and statistics."""

    def __init__(
        self,
        gamification_repository: GamificationRepositoryProtocol,
        progress_repository: ProgressRepositoryProtocol,
        recent_activity_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
    ) -> None:
        self.gamification_repository = gamification_repository
        self.progress_repository = progress_repository
        self.recent_activity_limit = recent_activity_limit

    def get_user_progress(self, user_id: int) -> UserProgressSummary:
        """
        Get a user's progress summary.

        Args:
            user_id: ID of the user

        Returns:
            UserProgressSummary with the aggregate, recent records and counts

        Raises:
            GamificationAggregateNotFoundError: If the user has no aggregate
        """
        user_id_vo = UserId(user_id)

        aggregate = self.gamification_repository.find_by_user(user_id_vo)
        if not aggregate:
            raise GamificationAggregateNotFoundError(user_id)

        recent = self.progress_repository.find_recent(user_id_vo, self.recent_activity_limit)
        statistics = ProgressStatistics(
            total_completed=self.progress_repository.count_by_user(user_id_vo),
            by_type=self.progress_repository.count_by_type_for_user(user_id_vo),
        )

        logger.debug("fetched_user_progress", user_id=user_id, recent_count=len(recent))
        return UserProgressSummary(
            gamification=aggregate,
            recent_progress=recent,
            statistics=statistics,
            points_to_next_level=points_to_next_level(aggregate.total_points),
        )
