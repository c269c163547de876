"""Mapper for UserProgress ORM ↔ ProgressRecord conversion."""

from lioarcade.domain.common.value_objects import ContentId, ProgressRecordId, UserId
from lioarcade.domain.gamification.entities.progress_record import ProgressRecord
from lioarcade.models import UserProgress as UserProgressORM


class ProgressMapper:
    """Mapper for UserProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserProgressORM) -> ProgressRecord:
        """Convert ORM model to domain entity."""
        return ProgressRecord.create_with_id(
            id=ProgressRecordId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            content_id=ContentId(orm_model.content_id),
            best_score=orm_model.best_score,
            attempt_count=orm_model.attempt_count,
            last_completed_at=orm_model.last_completed_at,
        )

    def to_orm(
        self, domain_entity: ProgressRecord, orm_model: UserProgressORM | None = None
    ) -> UserProgressORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.best_score = domain_entity.best_score
            orm_model.attempt_count = domain_entity.attempt_count
            orm_model.last_completed_at = domain_entity.last_completed_at
            return orm_model

        return UserProgressORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            content_id=domain_entity.content_id.value,
            best_score=domain_entity.best_score,
            attempt_count=domain_entity.attempt_count,
            last_completed_at=domain_entity.last_completed_at,
        )
