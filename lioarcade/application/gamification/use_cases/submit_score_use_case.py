"""Use case for submitting a score and updating the user's gamification state."""

from datetime import UTC, datetime

import structlog

from lioarcade.application.common.unit_of_work import UnitOfWork
from lioarcade.application.gamification.protocols.content_lookup import ContentLookupProtocol
from lioarcade.application.gamification.protocols.gamification_repository import (
    GamificationRepositoryProtocol,
)
from lioarcade.application.gamification.protocols.progress_repository import (
    ProgressRepositoryProtocol,
)
from lioarcade.application.gamification.use_cases.dtos import ScoreSubmissionResult
from lioarcade.domain.common.value_objects import ContentId, UserId
from lioarcade.domain.gamification.exceptions import (
    ContentNotFoundError,
    GamificationAggregateNotFoundError,
)
from lioarcade.domain.gamification.services.badge_evaluator import BadgeEvaluator
from lioarcade.domain.gamification.services.points_calculator import calculate_points
from lioarcade.exceptions import InvalidScoreError

logger = structlog.get_logger(__name__)


class SubmitScoreUseCase:
    """Use case for scoring an attempt and merging it into the user's aggregate."""

    def __init__(
        self,
        content_lookup: ContentLookupProtocol,
        progress_repository: ProgressRepositoryProtocol,
        gamification_repository: GamificationRepositoryProtocol,
        badge_evaluator: BadgeEvaluator,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.content_lookup = content_lookup
        self.progress_repository = progress_repository
        self.gamification_repository = gamification_repository
        self.badge_evaluator = badge_evaluator
        self.unit_of_work = unit_of_work

    def submit_score(
        self,
        user_id: int,
        content_id: int,
        score: float,
        max_score: float,
    ) -> ScoreSubmissionResult:
        """
        Score an attempt, record progress and update points, level and badges.

        The progress upsert and the aggregate update commit together or not
        at all. The user's aggregate row stays locked from the moment it is
        read until commit, so submissions for one user are serialized.

        Args:
            user_id: ID of the user submitting
            content_id: ID of the content attempted
            score: Raw score (cards known, for flashcards)
            max_score: Maximum achievable score

        Returns:
            ScoreSubmissionResult with updated progress and aggregate

        Raises:
            InvalidScoreError: If score is negative or max_score is not positive
            ContentNotFoundError: If content does not exist
            GamificationAggregateNotFoundError: If the user has no aggregate
        """
        if score < 0:
            raise InvalidScoreError(score, max_score, "score cannot be negative")
        if max_score <= 0:
            raise InvalidScoreError(score, max_score, "max score must be positive")

        user_id_vo = UserId(user_id)
        content_id_vo = ContentId(content_id)

        with self.unit_of_work:
            content = self.content_lookup.find_by_id(content_id_vo)
            if not content:
                raise ContentNotFoundError(content_id)

            points_earned = calculate_points(content.type, score, max_score)

            aggregate = self.gamification_repository.get_for_update(user_id_vo)
            if not aggregate:
                raise GamificationAggregateNotFoundError(user_id)

            now = datetime.now(UTC)
            progress = self.progress_repository.upsert(user_id_vo, content_id_vo, score, now)

            previous_level = aggregate.level
            aggregate.add_points(points_earned)
            candidates = self.badge_evaluator.evaluate(
                user_id=user_id_vo,
                total_points=aggregate.total_points,
                level=aggregate.level,
                history=self.progress_repository,
                earned_at=now,
            )
            new_badges = aggregate.merge_badges(candidates)

            self.unit_of_work.track(aggregate)
            aggregate = self.gamification_repository.save(aggregate)
            self.unit_of_work.commit()

        level_up = aggregate.level > previous_level
        logger.info(
            "score_submitted",
            user_id=user_id,
            content_id=content_id,
            content_type=content.type,
            points_earned=points_earned,
            total_points=aggregate.total_points,
            new_level=aggregate.level,
            level_up=level_up,
            new_badges=[badge.name for badge in new_badges],
        )
        return ScoreSubmissionResult(
            progress=progress,
            gamification=aggregate,
            points_earned=points_earned,
            level_up=level_up,
            new_badges=new_badges,
        )
