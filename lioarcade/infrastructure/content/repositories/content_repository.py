"""Repository for Content lookups."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from lioarcade.domain.common.value_objects import ContentId
from lioarcade.domain.content.entities.content import Content
from lioarcade.infrastructure.content.mappers.content_mapper import ContentMapper
from lioarcade.models import Content as ContentORM


class ContentRepository:
    """Read-only repository for Content domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ContentMapper()

    def find_by_id(self, content_id: ContentId) -> Content | None:
        """
        Find content by ID.

        Args:
            content_id: The content ID

        Returns:
            Content entity if found, None otherwise
        """
        stmt = select(ContentORM).where(ContentORM.id == content_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
