"""
Badge value objects.

A Badge is a named achievement. Its name is the identity key: a user holds
at most one badge per name, and the first award wins.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

from lioarcade.domain.common.exceptions import ValidationError
from lioarcade.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Badge(ValueObject):
    """An earned achievement. Immutable once created."""

    name: str
    icon: str
    earned_at: datetime

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Badge name cannot be empty", field="name")

    def to_primitive(self) -> dict[str, str]:
        return {
            "name": self.name,
            "icon": self.icon,
            "earned_at": self.earned_at.isoformat(),
        }

    @classmethod
    def from_primitive(cls, data: dict[str, str]) -> "Badge":
        return cls(
            name=data["name"],
            icon=data["icon"],
            earned_at=datetime.fromisoformat(data["earned_at"]),
        )


class BadgeSet:
    """
    Ordered collection of badges keyed by name.

    Iteration yields badges in the order they were earned. Merging never
    replaces an entry already present under the same name.
    """

    __slots__ = ("_badges",)

    def __init__(self, badges: Iterable[Badge] = ()) -> None:
        self._badges: dict[str, Badge] = {}
        for badge in badges:
            self._badges.setdefault(badge.name, badge)

    def merge(self, candidates: Iterable[Badge]) -> tuple["BadgeSet", list[Badge]]:
        """
        Union by name, keeping existing entries.

        Returns:
            Tuple of (merged set, badges that were not present before)
        """
        merged = BadgeSet(self._badges.values())
        added: list[Badge] = []
        for badge in candidates:
            if badge.name not in merged._badges:
                merged._badges[badge.name] = badge
                added.append(badge)
        return merged, added

    def get(self, name: str) -> Badge | None:
        return self._badges.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._badges)

    def to_primitive(self) -> list[dict[str, str]]:
        return [badge.to_primitive() for badge in self._badges.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._badges

    def __iter__(self) -> Iterator[Badge]:
        return iter(self._badges.values())

    def __len__(self) -> int:
        return len(self._badges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BadgeSet):
            return False
        return list(self._badges.values()) == list(other._badges.values())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BadgeSet({self.names!r})"
