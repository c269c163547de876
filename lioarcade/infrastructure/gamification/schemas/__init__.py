"""Gamification context schemas."""

from lioarcade.infrastructure.gamification.schemas.gamification_schemas import (
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

__all__ = [
    "Badge",
    "ContentSummary",
    "Gamification",
    "LeaderboardEntry",
    "LeaderboardResponse",
    "Progress",
    "ProgressStatistics",
    "SubmitScoreRequest",
    "SubmitScoreResponse",
    "UserProgressResponse",
]
