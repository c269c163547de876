"""Domain events raised by the gamification aggregate."""

from dataclasses import dataclass

from lioarcade.domain.common.domain_event import DomainEvent
from lioarcade.domain.common.value_objects import UserId


@dataclass(frozen=True)
class PointsAwarded(DomainEvent):
    user_id: UserId
    points: int
    total_points: int


@dataclass(frozen=True)
class LevelReached(DomainEvent):
    user_id: UserId
    previous_level: int
    new_level: int


@dataclass(frozen=True)
class BadgeEarned(DomainEvent):
    user_id: UserId
    badge_name: str
    icon: str
