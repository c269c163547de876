"""Protocol for resolving scoreable content."""

from typing import Protocol

from lioarcade.domain.common.value_objects import ContentId
from lioarcade.domain.content.entities.content import Content


class ContentLookupProtocol(Protocol):
    """Protocol for content lookups made by the scoring engine."""

    def find_by_id(self, content_id: ContentId) -> Content | None:
        """
        Find content by ID.

        Args:
            content_id: The content ID

        Returns:
            Content entity if found, None otherwise
        """
        ...
