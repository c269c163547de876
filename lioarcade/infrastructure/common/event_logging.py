"""Structured log output for domain events."""

from typing import Any

import structlog

from lioarcade.domain.common import DomainEvent

logger = structlog.get_logger("lioarcade.events")


def log_domain_event(event: DomainEvent, log: Any = None) -> None:
    """Write a committed domain event to the event log."""
    (log or logger).info("domain_event", **event.to_dict())
