"""Use case for creating a new user's gamification aggregate."""

import structlog

from lioarcade.application.common.unit_of_work import UnitOfWork
from lioarcade.application.gamification.protocols.gamification_repository import (
    GamificationRepositoryProtocol,
)
from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.gamification.entities.gamification_aggregate import (
    GamificationAggregate,
)
from lioarcade.domain.gamification.exceptions import GamificationAlreadyProvisionedError

logger = structlog.get_logger(__name__)


class ProvisionGamificationUseCase:
    """
    Create the empty aggregate a user needs before any score is accepted.

    Called by the registration flow. Score submission never creates
    aggregates on its own.
    """

    def __init__(
        self,
        gamification_repository: GamificationRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.gamification_repository = gamification_repository
        self.unit_of_work = unit_of_work

    def provision(self, user_id: int) -> GamificationAggregate:
        """
        Provision a user's aggregate; returns the existing one if present.

        Args:
            user_id: ID of the newly registered user

        Returns:
            The user's aggregate (0 points, level 1, no badges when new)

        Raises:
            GamificationAlreadyProvisionedError: If the insert conflicts but no
                aggregate can be read back
        """
        user_id_vo = UserId(user_id)

        existing = self.gamification_repository.find_by_user(user_id_vo)
        if existing:
            return existing

        try:
            with self.unit_of_work:
                aggregate = self.gamification_repository.add(
                    GamificationAggregate.provision(user_id_vo)
                )
                self.unit_of_work.commit()
        except GamificationAlreadyProvisionedError:
            # A concurrent registration won the insert
            existing = self.gamification_repository.find_by_user(user_id_vo)
            if existing is None:
                raise
            return existing

        logger.info("provisioned_gamification", user_id=user_id)
        return aggregate
