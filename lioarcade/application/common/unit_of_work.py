"""
Unit of Work interface.

The Unit of Work keeps everything one use case writes inside a single
transaction, and hands the domain events of the aggregates it tracked to
the registered handlers once that transaction has committed.

Example:
    with self.unit_of_work:
        aggregate = self.gamification_repository.get_for_update(user_id)
        aggregate.add_points(points)
        self.unit_of_work.track(aggregate)
        self.gamification_repository.save(aggregate)
        self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import Self

from lioarcade.domain.common import AggregateRoot, DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure provides the concrete implementation
    (SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """
        Commit the current transaction.

        After commit, domain events of tracked aggregates are dispatched.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction and drop pending events."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()

    def track(self, aggregate: AggregateRoot) -> None:  # type: ignore[type-arg]
        """Register an aggregate whose events should be dispatched on commit."""
        _ = aggregate

    def collect_events(self) -> list[DomainEvent]:
        """Collect domain events from tracked aggregates."""
        return []

    def register_event_handler(self, handler: Callable[[DomainEvent], None]) -> None:
        """Register a handler to be called for domain events after commit."""
        _ = handler
