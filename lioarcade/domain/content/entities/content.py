"""
Content entity: a quiz, flashcard deck or mini-game that can be scored.
"""

from dataclasses import dataclass
from enum import StrEnum

from lioarcade.domain.common.entity import Entity
from lioarcade.domain.common.value_objects import ContentId


class ContentType(StrEnum):
    """Kinds of scoreable content."""

    QUIZ = "QUIZ"
    FLASHCARD = "FLASHCARD"
    MINI_GAME = "MINI_GAME"


@dataclass(eq=False)
class Content(Entity[ContentId]):
    """
    Read-only view of a piece of learning content.

    The stored type is kept as the raw string so that rows written with a
    type this service does not know about still resolve; scoring falls back
    to a flat award for those.
    """

    id: ContentId
    type: str
    title: str
    category: str | None = None

