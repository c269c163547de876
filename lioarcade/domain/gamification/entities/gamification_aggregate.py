"""
GamificationAggregate aggregate root.
"""

from dataclasses import dataclass, field

from lioarcade.domain.common.aggregate_root import AggregateRoot
from lioarcade.domain.common.exceptions import InvariantViolationError
from lioarcade.domain.common.value_objects import GamificationId, UserId
from lioarcade.domain.gamification.events import BadgeEarned, LevelReached, PointsAwarded
from lioarcade.domain.gamification.services.level_resolver import calculate_level
from lioarcade.domain.gamification.value_objects.badge import Badge, BadgeSet


@dataclass(eq=False)
class GamificationAggregate(AggregateRoot[GamificationId]):
    """
    Per-user rollup of points, level and badges.

    Business Rules:
    - total_points is never negative and only grows
    - level is recomputed from total_points whenever points are added
    - a badge name is held at most once; the first award is kept
    """

    id: GamificationId
    user_id: UserId
    total_points: int = 0
    level: int = 1
    badges: BadgeSet = field(default_factory=BadgeSet)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.total_points < 0:
            raise InvariantViolationError("GamificationAggregate", "total_points >= 0")
        if self.level < 1:
            raise InvariantViolationError("GamificationAggregate", "level >= 1")

    def add_points(self, points: int) -> None:
        """
        Add earned points and recompute the level.

        Raises:
            InvariantViolationError: If points is negative
        """
        if points < 0:
            raise InvariantViolationError("GamificationAggregate", "points are only ever added")

        previous_level = self.level
        self.total_points += points
        self.level = calculate_level(self.total_points)

        self._record_event(
            PointsAwarded(user_id=self.user_id, points=points, total_points=self.total_points)
        )
        if self.level > previous_level:
            self._record_event(
                LevelReached(
                    user_id=self.user_id, previous_level=previous_level, new_level=self.level
                )
            )

    def merge_badges(self, candidates: list[Badge]) -> list[Badge]:
        """
        Merge freshly evaluated badges into the owned set.

        Returns:
            Badges that were newly earned
        """
        self.badges, added = self.badges.merge(candidates)
        for badge in added:
            self._record_event(
                BadgeEarned(user_id=self.user_id, badge_name=badge.name, icon=badge.icon)
            )
        return added

    @classmethod
    def provision(cls, user_id: UserId) -> "GamificationAggregate":
        """Create the empty aggregate for a new user (ID will be 0 until persisted)."""
        return cls(id=GamificationId.generate(), user_id=user_id)

    @classmethod
    def create_with_id(
        cls,
        id: GamificationId,
        user_id: UserId,
        total_points: int,
        level: int,
        badges: list[Badge],
    ) -> "GamificationAggregate":
        """Reconstitute an aggregate from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            total_points=total_points,
            level=level,
            badges=BadgeSet(badges),
        )
