"""Repository for GamificationAggregate domain aggregates."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.gamification.entities.gamification_aggregate import (
    GamificationAggregate,
)
from lioarcade.domain.gamification.exceptions import (
    GamificationAggregateNotFoundError,
    GamificationAlreadyProvisionedError,
)
from lioarcade.infrastructure.gamification.mappers.gamification_mapper import (
    GamificationMapper,
)
from lioarcade.models import Gamification as GamificationORM


class GamificationRepository:
    """Repository for GamificationAggregate persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GamificationMapper()

    def find_by_user(self, user_id: UserId) -> GamificationAggregate | None:
        """
        Find a user's aggregate.

        Args:
            user_id: The user ID

        Returns:
            Aggregate if provisioned, None otherwise
        """
        stmt = select(GamificationORM).where(GamificationORM.user_id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def get_for_update(self, user_id: UserId) -> GamificationAggregate | None:
        """
        Find a user's aggregate and lock its row (SELECT ... FOR UPDATE).

        The lock is held until the surrounding transaction commits or
        rolls back. SQLite has no row locks and ignores the clause.

        Args:
            user_id: The user ID

        Returns:
            Aggregate if provisioned, None otherwise
        """
        stmt = (
            select(GamificationORM)
            .where(GamificationORM.user_id == user_id.value)
            .with_for_update()
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def add(self, aggregate: GamificationAggregate) -> GamificationAggregate:
        """
        Persist a newly provisioned aggregate.

        Args:
            aggregate: Aggregate with placeholder ID

        Returns:
            Aggregate with database-generated ID

        Raises:
            GamificationAlreadyProvisionedError: If the user already has one
        """
        orm_model = self.mapper.to_orm(aggregate)
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            raise GamificationAlreadyProvisionedError(aggregate.user_id.value) from e
        return self.mapper.to_domain(orm_model)

    def save(self, aggregate: GamificationAggregate) -> GamificationAggregate:
        """
        Write points, level and badges of an existing aggregate.

        Args:
            aggregate: The aggregate to save

        Returns:
            Saved aggregate as read back from the database row

        Raises:
            GamificationAggregateNotFoundError: If the row no longer exists
        """
        stmt = select(GamificationORM).where(GamificationORM.user_id == aggregate.user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise GamificationAggregateNotFoundError(aggregate.user_id.value)
        self.mapper.to_orm(aggregate, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)
