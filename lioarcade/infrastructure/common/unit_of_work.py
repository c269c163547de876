"""SQLAlchemy implementation of the Unit of Work."""

from collections.abc import Callable, Iterable

import structlog
from sqlalchemy.orm import Session

from lioarcade.application.common.unit_of_work import UnitOfWork
from lioarcade.domain.common import AggregateRoot, DomainEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work bound to the request-scoped database session."""

    def __init__(self, db: Session, event_handlers: Iterable[EventHandler] = ()) -> None:
        self.db = db
        self._handlers: list[EventHandler] = list(event_handlers)
        self._tracked: list[AggregateRoot] = []  # type: ignore[type-arg]

    def commit(self) -> None:
        """Commit the session, then dispatch events of tracked aggregates."""
        self.db.commit()
        for event in self.collect_events():
            for handler in self._handlers:
                try:
                    handler(event)
                except Exception:
                    # The transaction is already committed
                    logger.error(
                        "event_handler_failed", event_type=type(event).__name__, exc_info=True
                    )

    def rollback(self) -> None:
        """Roll back the session and discard pending events."""
        self.db.rollback()
        for aggregate in self._tracked:
            aggregate.collect_events()
        self._tracked.clear()

    def track(self, aggregate: AggregateRoot) -> None:  # type: ignore[type-arg]
        if aggregate not in self._tracked:
            self._tracked.append(aggregate)

    def collect_events(self) -> list[DomainEvent]:
        events: list[DomainEvent] = []
        for aggregate in self._tracked:
            events.extend(aggregate.collect_events())
        self._tracked.clear()
        return events

    def register_event_handler(self, handler: EventHandler) -> None:
        self._handlers.append(handler)
