"""Mapper for Gamification ORM ↔ GamificationAggregate conversion."""

from lioarcade.domain.common.value_objects import GamificationId, UserId
from lioarcade.domain.gamification.entities.gamification_aggregate import (
    GamificationAggregate,
)
from lioarcade.domain.gamification.value_objects.badge import Badge
from lioarcade.models import Gamification as GamificationORM


class GamificationMapper:
    """Mapper for Gamification ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GamificationORM) -> GamificationAggregate:
        """Convert ORM model to domain aggregate."""
        return GamificationAggregate.create_with_id(
            id=GamificationId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            total_points=orm_model.points,
            level=orm_model.level,
            badges=self.badges_to_domain(orm_model.badges),
        )

    def badges_to_domain(self, stored: list[dict[str, str]] | None) -> list[Badge]:
        return [Badge.from_primitive(item) for item in stored or []]

    def to_orm(
        self, domain_entity: GamificationAggregate, orm_model: GamificationORM | None = None
    ) -> GamificationORM:
        """Convert domain aggregate to ORM model."""
        if orm_model:
            orm_model.points = domain_entity.total_points
            orm_model.level = domain_entity.level
            # New list so the JSON column is marked dirty
            orm_model.badges = domain_entity.badges.to_primitive()
            return orm_model

        return GamificationORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            points=domain_entity.total_points,
            level=domain_entity.level,
            badges=domain_entity.badges.to_primitive(),
        )
