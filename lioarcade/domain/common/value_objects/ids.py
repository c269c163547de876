from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class ContentId(EntityId):
    """Strongly-typed content identifier."""

    value: int


@dataclass(frozen=True)
class ProgressRecordId(EntityId):
    """Strongly-typed progress record identifier."""

    value: int


@dataclass(frozen=True)
class GamificationId(EntityId):
    """Strongly-typed gamification aggregate identifier."""

    value: int
