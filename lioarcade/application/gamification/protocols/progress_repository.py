"""Protocol for ProgressRecord repository."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from lioarcade.domain.common.value_objects import ContentId, UserId
from lioarcade.domain.content.entities.content import Content
from lioarcade.domain.gamification.entities.progress_record import ProgressRecord


@dataclass(frozen=True)
class ProgressWithContent:
    """A progress record together with the content it belongs to."""

    progress: ProgressRecord
    content: Content


class ProgressRepositoryProtocol(Protocol):
    """Protocol for progress record persistence and history counts."""

    def upsert(
        self,
        user_id: UserId,
        content_id: ContentId,
        score: float,
        completed_at: datetime,
    ) -> ProgressRecord:
        """
        Record an attempt for (user, content).

        Creates the record with best_score=score and attempt_count=1, or
        raises best_score to max(best_score, score) and increments
        attempt_count. Changes are flushed, not committed.

        Returns:
            The up-to-date progress record
        """
        ...

    def count_by_user_and_type(self, user_id: UserId, content_type: str) -> int:
        """Count the user's progress records for content of a given type."""
        ...

    def count_by_user_with_score_at_least(self, user_id: UserId, threshold: float) -> int:
        """Count the user's progress records whose best score is >= threshold."""
        ...

    def count_by_user(self, user_id: UserId) -> int:
        """Count all progress records of a user."""
        ...

    def count_by_type_for_user(self, user_id: UserId) -> dict[str, int]:
        """Count the user's progress records grouped by content type."""
        ...

    def find_recent(self, user_id: UserId, limit: int) -> list[ProgressWithContent]:
        """
        Get the user's most recently completed progress records.

        Returns:
            Records ordered by last_completed_at DESC
        """
        ...
