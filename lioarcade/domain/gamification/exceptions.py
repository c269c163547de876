"""Gamification domain exceptions."""

from lioarcade.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class ContentNotFoundError(EntityNotFoundError):
    """Raised when a score is submitted for content that does not exist."""

    def __init__(self, content_id: int) -> None:
        super().__init__("Content", content_id)


class GamificationAggregateNotFoundError(EntityNotFoundError):
    """
    Raised when a user has no gamification aggregate.

    Aggregates are provisioned at registration, so this signals an
    inconsistent account rather than a transient condition.
    """

    def __init__(self, user_id: int) -> None:
        super().__init__("GamificationAggregate", user_id)


class GamificationAlreadyProvisionedError(BusinessRuleViolationError):
    """Raised when provisioning would create a second aggregate for a user."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            "one_aggregate_per_user",
            f"Gamification aggregate already exists for user {user_id}",
        )
        self.user_id = user_id
