from .dtos import (
    LeaderboardEntry,
    ProgressStatistics,
    ScoreSubmissionResult,
    UserProgressSummary,
)
from .get_leaderboard_use_case import GetLeaderboardUseCase
from .get_user_progress_use_case import GetUserProgressUseCase
from .provision_gamification_use_case import ProvisionGamificationUseCase
from .submit_score_use_case import SubmitScoreUseCase

__all__ = [
    "GetLeaderboardUseCase",
    "GetUserProgressUseCase",
    "LeaderboardEntry",
    "ProgressStatistics",
    "ProvisionGamificationUseCase",
    "ScoreSubmissionResult",
    "SubmitScoreUseCase",
    "UserProgressSummary",
]
