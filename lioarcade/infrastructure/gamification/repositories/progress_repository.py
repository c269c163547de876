"""Repository for ProgressRecord domain entities."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lioarcade.application.gamification.protocols.progress_repository import (
    ProgressWithContent,
)
from lioarcade.domain.common.value_objects import ContentId, UserId
from lioarcade.domain.gamification.entities.progress_record import ProgressRecord
from lioarcade.infrastructure.content.mappers.content_mapper import ContentMapper
from lioarcade.infrastructure.gamification.mappers.progress_mapper import ProgressMapper
from lioarcade.models import Content as ContentORM
from lioarcade.models import UserProgress as UserProgressORM


class ProgressRepository:
    """Repository for ProgressRecord domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProgressMapper()
        self.content_mapper = ContentMapper()

    def upsert(
        self,
        user_id: UserId,
        content_id: ContentId,
        score: float,
        completed_at: datetime,
    ) -> ProgressRecord:
        """
        Record an attempt for (user, content).

        Args:
            user_id: The user ID
            content_id: The content ID
            score: Raw score of the attempt
            completed_at: When the attempt finished

        Returns:
            The up-to-date progress record (flushed, not committed)
        """
        stmt = (
            select(UserProgressORM)
            .where(
                UserProgressORM.user_id == user_id.value,
                UserProgressORM.content_id == content_id.value,
            )
            .with_for_update()
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()

        if orm_model is None:
            record = ProgressRecord.start(user_id, content_id, score, completed_at)
            orm_model = self.mapper.to_orm(record)
            self.db.add(orm_model)
        else:
            record = self.mapper.to_domain(orm_model)
            record.record_attempt(score, completed_at)
            self.mapper.to_orm(record, orm_model)

        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def count_by_user_and_type(self, user_id: UserId, content_type: str) -> int:
        """
        Count the user's progress records for content of a given type.

        Args:
            user_id: The user ID
            content_type: Stored content type string

        Returns:
            Count of progress records
        """
        stmt = (
            select(func.count(UserProgressORM.id))
            .join(ContentORM, UserProgressORM.content_id == ContentORM.id)
            .where(
                UserProgressORM.user_id == user_id.value,
                ContentORM.type == str(content_type),
            )
        )
        return self.db.execute(stmt).scalar() or 0

    def count_by_user_with_score_at_least(self, user_id: UserId, threshold: float) -> int:
        """
        Count the user's progress records whose best score reaches a threshold.

        Args:
            user_id: The user ID
            threshold: Minimum best score (inclusive)

        Returns:
            Count of progress records
        """
        stmt = select(func.count(UserProgressORM.id)).where(
            UserProgressORM.user_id == user_id.value,
            UserProgressORM.best_score >= threshold,
        )
        return self.db.execute(stmt).scalar() or 0

    def count_by_user(self, user_id: UserId) -> int:
        """Count all progress records of a user."""
        stmt = select(func.count(UserProgressORM.id)).where(
            UserProgressORM.user_id == user_id.value
        )
        return self.db.execute(stmt).scalar() or 0

    def count_by_type_for_user(self, user_id: UserId) -> dict[str, int]:
        """Count the user's progress records grouped by content type."""
        stmt = (
            select(ContentORM.type, func.count(UserProgressORM.id))
            .join(ContentORM, UserProgressORM.content_id == ContentORM.id)
            .where(UserProgressORM.user_id == user_id.value)
            .group_by(ContentORM.type)
        )
        return {content_type: count for content_type, count in self.db.execute(stmt).all()}

    def find_recent(self, user_id: UserId, limit: int) -> list[ProgressWithContent]:
        """
        Get the user's most recently completed progress records.

        Args:
            user_id: The user ID
            limit: Maximum number of records

        Returns:
            Records with their content, ordered by last_completed_at DESC
        """
        stmt = (
            select(UserProgressORM, ContentORM)
            .join(ContentORM, UserProgressORM.content_id == ContentORM.id)
            .where(UserProgressORM.user_id == user_id.value)
            .order_by(UserProgressORM.last_completed_at.desc(), UserProgressORM.id.desc())
            .limit(limit)
        )
        return [
            ProgressWithContent(
                progress=self.mapper.to_domain(progress_orm),
                content=self.content_mapper.to_domain(content_orm),
            )
            for progress_orm, content_orm in self.db.execute(stmt).all()
        ]
