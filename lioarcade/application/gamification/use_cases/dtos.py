"""DTOs for gamification use cases."""

from dataclasses import dataclass, field

from lioarcade.application.gamification.protocols.progress_repository import ProgressWithContent
from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.gamification.entities.gamification_aggregate import (
    GamificationAggregate,
)
from lioarcade.domain.gamification.entities.progress_record import ProgressRecord
from lioarcade.domain.gamification.value_objects.badge import Badge


@dataclass
class ScoreSubmissionResult:
    """Outcome of one score submission."""

    progress: ProgressRecord
    gamification: GamificationAggregate
    points_earned: int
    level_up: bool
    new_badges: list[Badge] = field(default_factory=list)


@dataclass
class ProgressStatistics:
    total_completed: int
    by_type: dict[str, int]


@dataclass
class UserProgressSummary:
    """Gamification snapshot plus recent activity for a user."""

    gamification: GamificationAggregate
    recent_progress: list[ProgressWithContent]
    statistics: ProgressStatistics
    points_to_next_level: int


@dataclass
class LeaderboardEntry:
    rank: int
    user_id: UserId
    username: str
    points: int
    level: int
    badges: list[Badge]
