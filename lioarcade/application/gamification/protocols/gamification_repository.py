"""Protocol for GamificationAggregate repository."""

from typing import Protocol

from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.gamification.entities.gamification_aggregate import (
    GamificationAggregate,
)


class GamificationRepositoryProtocol(Protocol):
    """Protocol for per-user gamification aggregate persistence."""

    def find_by_user(self, user_id: UserId) -> GamificationAggregate | None:
        """Find a user's aggregate without locking it."""
        ...

    def get_for_update(self, user_id: UserId) -> GamificationAggregate | None:
        """
        Find a user's aggregate and lock its row until the transaction ends.

        Concurrent submissions for the same user wait here; other users
        are unaffected.
        """
        ...

    def add(self, aggregate: GamificationAggregate) -> GamificationAggregate:
        """
        Persist a newly provisioned aggregate (flushed, not committed).

        Returns:
            Aggregate with database-generated ID
        """
        ...

    def save(self, aggregate: GamificationAggregate) -> GamificationAggregate:
        """Write points, level and badges of an existing aggregate (flushed, not committed)."""
        ...
