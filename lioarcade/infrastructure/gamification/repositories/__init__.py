from .gamification_repository import GamificationRepository
from .leaderboard_repository import LeaderboardRepository
from .progress_repository import ProgressRepository

__all__ = ["GamificationRepository", "LeaderboardRepository", "ProgressRepository"]
