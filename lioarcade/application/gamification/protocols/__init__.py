from .content_lookup import ContentLookupProtocol
from .gamification_repository import GamificationRepositoryProtocol
from .leaderboard_reader import LeaderboardOrder, LeaderboardReaderProtocol, Standing
from .progress_repository import ProgressRepositoryProtocol, ProgressWithContent

__all__ = [
    "ContentLookupProtocol",
    "GamificationRepositoryProtocol",
    "LeaderboardOrder",
    "LeaderboardReaderProtocol",
    "ProgressRepositoryProtocol",
    "ProgressWithContent",
    "Standing",
]
