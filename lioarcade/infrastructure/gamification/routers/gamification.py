"""API routes for scoring, progress and leaderboards."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lioarcade.application.gamification.protocols.progress_repository import (
    ProgressWithContent,
)
from lioarcade.application.gamification.use_cases.get_leaderboard_use_case import (
    GetLeaderboardUseCase,
)
from lioarcade.application.gamification.use_cases.get_user_progress_use_case import (
    GetUserProgressUseCase,
)
from lioarcade.application.gamification.use_cases.submit_score_use_case import (
    SubmitScoreUseCase,
)
from lioarcade.config import get_settings
from lioarcade.core import container
from lioarcade.domain.common.exceptions import DomainError
from lioarcade.domain.gamification.entities.gamification_aggregate import (
    GamificationAggregate,
)
from lioarcade.domain.gamification.entities.progress_record import ProgressRecord
from lioarcade.domain.gamification.value_objects.badge import Badge as BadgeEntity
from lioarcade.exceptions import LioArcadeError, ValidationError
from lioarcade.infrastructure.common.di import inject_use_case
from lioarcade.infrastructure.gamification.schemas import (
    Badge,
    ContentSummary,
    Gamification,
    LeaderboardEntry,
    LeaderboardResponse,
    Progress,
    ProgressStatistics,
    SubmitScoreRequest,
    SubmitScoreResponse,
    UserProgressResponse,
)
from lioarcade.infrastructure.identity.dependencies import CurrentUserId

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/gamification", tags=["gamification"])


def _badge(badge: BadgeEntity) -> Badge:
    return Badge(name=badge.name, icon=badge.icon, earned_at=badge.earned_at)


def _gamification(aggregate: GamificationAggregate) -> Gamification:
    return Gamification(
        user_id=aggregate.user_id.value,
        points=aggregate.total_points,
        level=aggregate.level,
        badges=[_badge(badge) for badge in aggregate.badges],
    )


def _progress(record: ProgressRecord, content: ContentSummary | None = None) -> Progress:
    return Progress(
        id=record.id.value,
        user_id=record.user_id.value,
        content_id=record.content_id.value,
        best_score=record.best_score,
        attempt_count=record.attempt_count,
        last_completed_at=record.last_completed_at,
        content=content,
    )


def _recent_progress(item: ProgressWithContent) -> Progress:
    content = ContentSummary(
        id=item.content.id.value,
        type=item.content.type,
        title=item.content.title,
        category=item.content.category,
    )
    return _progress(item.progress, content)


@router.post(
    "/submit-score",
    response_model=SubmitScoreResponse,
    status_code=status.HTTP_200_OK,
)
def submit_score(
    request: SubmitScoreRequest,
    current_user_id: CurrentUserId,
    use_case: SubmitScoreUseCase = Depends(inject_use_case(container.submit_score_use_case)),
) -> SubmitScoreResponse:
    """
    Submit the result of a quiz, flashcard or mini-game attempt.

    Args:
        request: Content ID, score and maximum score
        use_case: SubmitScoreUseCase injected via dependency container

    Returns:
        Points earned, level change, new badges and updated state

    Raises:
        HTTPException: If content or gamification state is missing or the
            submission fails
    """
    try:
        result = use_case.submit_score(
            user_id=current_user_id,
            content_id=request.content_id,
            score=request.score,
            max_score=request.max_score,
        )
        return SubmitScoreResponse(
            message="Score submitted successfully",
            points_earned=result.points_earned,
            level_up=result.level_up,
            new_badges=[_badge(badge) for badge in result.new_badges],
            progress=_progress(result.progress),
            gamification=_gamification(result.gamification),
        )
    except (LioArcadeError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to submit score for content {request.content_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/progress",
    response_model=UserProgressResponse,
    status_code=status.HTTP_200_OK,
)
def get_progress(
    current_user_id: CurrentUserId,
    use_case: GetUserProgressUseCase = Depends(
        inject_use_case(container.get_user_progress_use_case)
    ),
) -> UserProgressResponse:
    """
    Get the current user's points, level, badges and recent activity.

    Raises:
        HTTPException: If the user has no gamification state or fetching fails
    """
    try:
        summary = use_case.get_user_progress(current_user_id)
        return UserProgressResponse(
            gamification=_gamification(summary.gamification),
            recent_progress=[_recent_progress(item) for item in summary.recent_progress],
            statistics=ProgressStatistics(
                total_completed=summary.statistics.total_completed,
                by_type=summary.statistics.by_type,
            ),
            points_to_next_level=summary.points_to_next_level,
        )
    except (LioArcadeError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch progress for user {current_user_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/leaderboard",
    response_model=LeaderboardResponse,
    status_code=status.HTTP_200_OK,
)
def get_leaderboard(
    limit: int = Query(
        settings.LEADERBOARD_DEFAULT_LIMIT, description="Number of entries to return"
    ),
    by: str = Query("points", description="Rank by \"points\" or \"level\""),
    content_type: str | None = Query(None, description="Restrict to QUIZ, FLASHCARD or MINI_GAME"),
    use_case: GetLeaderboardUseCase = Depends(inject_use_case(container.get_leaderboard_use_case)),
) -> LeaderboardResponse:
    """
    Get the public leaderboard.

    Args:
        limit: Number of entries (bounded by configuration)
        by: Rank by "points" or "level"
        content_type: Optional content type to rank within
        use_case: GetLeaderboardUseCase injected via dependency container

    Returns:
        Ranked entries

    Raises:
        HTTPException: If fetching fails
    """
    try:
        entries = use_case.get_leaderboard(limit=limit, by=by, content_type=content_type)
        return LeaderboardResponse(
            leaderboard=[
                LeaderboardEntry(
                    rank=entry.rank,
                    user_id=entry.user_id.value,
                    username=entry.username,
                    points=entry.points,
                    level=entry.level,
                    badges=[_badge(badge) for badge in entry.badges],
                )
                for entry in entries
            ]
        )
    except (LioArcadeError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch leaderboard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
