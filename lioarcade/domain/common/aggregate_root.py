"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to a cluster of domain objects that is
treated as a single unit. All invariants of the cluster are enforced here,
and significant state changes are recorded as domain events.

Example:
    @dataclass
    class GamificationAggregate(AggregateRoot[GamificationId]):
        id: GamificationId
        total_points: int

        def add_points(self, points: int) -> None:
            self.total_points += points
            self._record_event(PointsAwarded(...))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Domain events are collected and dispatched after the aggregate
    is persisted (through the Unit of Work).
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched after commit."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Collect and clear all recorded domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()
