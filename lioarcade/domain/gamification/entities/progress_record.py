"""
ProgressRecord entity: a user's history with one piece of content.
"""

from dataclasses import dataclass
from datetime import datetime

from lioarcade.domain.common.entity import Entity
from lioarcade.domain.common.exceptions import ValidationError
from lioarcade.domain.common.value_objects import ContentId, ProgressRecordId, UserId


@dataclass(eq=False)
class ProgressRecord(Entity[ProgressRecordId]):
    """
    Best score and attempt count for one (user, content) pair.

    Business Rules:
    - best_score never decreases
    - attempt_count grows by exactly one per recorded attempt
    - scores are non-negative
    """

    id: ProgressRecordId
    user_id: UserId
    content_id: ContentId
    best_score: float
    attempt_count: int
    last_completed_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.best_score < 0:
            raise ValidationError("Best score cannot be negative", "best_score", self.best_score)
        if self.attempt_count < 1:
            raise ValidationError(
                "Attempt count must be at least 1", "attempt_count", self.attempt_count
            )

    def record_attempt(self, score: float, completed_at: datetime) -> None:
        """
        Record another attempt at this content.

        Args:
            score: Raw score of the new attempt
            completed_at: When the attempt finished

        Raises:
            ValidationError: If score is negative
        """
        if score < 0:
            raise ValidationError("Score cannot be negative", "score", score)
        self.best_score = max(self.best_score, score)
        self.attempt_count += 1
        self.last_completed_at = completed_at

    @classmethod
    def start(
        cls,
        user_id: UserId,
        content_id: ContentId,
        score: float,
        completed_at: datetime,
    ) -> "ProgressRecord":
        """Create the record for a first attempt (ID will be 0 until persisted)."""
        if score < 0:
            raise ValidationError("Score cannot be negative", "score", score)
        return cls(
            id=ProgressRecordId.generate(),
            user_id=user_id,
            content_id=content_id,
            best_score=score,
            attempt_count=1,
            last_completed_at=completed_at,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ProgressRecordId,
        user_id: UserId,
        content_id: ContentId,
        best_score: float,
        attempt_count: int,
        last_completed_at: datetime,
    ) -> "ProgressRecord":
        """Reconstitute a progress record from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            content_id=content_id,
            best_score=best_score,
            attempt_count=attempt_count,
            last_completed_at=last_completed_at,
        )
