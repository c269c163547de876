"""Mapper for Content ORM → Domain conversion."""

from lioarcade.domain.common.value_objects import ContentId
from lioarcade.domain.content.entities.content import Content
from lioarcade.models import Content as ContentORM


class ContentMapper:
    """Mapper for Content ORM → Domain conversion (read-only)."""

    def to_domain(self, orm_model: ContentORM) -> Content:
        """Convert ORM model to domain entity."""
        return Content(
            id=ContentId(orm_model.id),
            type=orm_model.type,
            title=orm_model.title,
            category=orm_model.category,
        )
