"""Read-side repository for leaderboard standings."""

from collections import defaultdict

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from lioarcade.application.gamification.protocols.leaderboard_reader import (
    LeaderboardOrder,
    Standing,
)
from lioarcade.domain.common.value_objects import UserId
from lioarcade.infrastructure.gamification.mappers.gamification_mapper import (
    GamificationMapper,
)
from lioarcade.models import Content as ContentORM
from lioarcade.models import Gamification as GamificationORM
from lioarcade.models import User as UserORM
from lioarcade.models import UserProgress as UserProgressORM


class LeaderboardRepository:
    """Leaderboard queries over aggregates joined with their users."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GamificationMapper()

    def _standings_query(self) -> Select[tuple[GamificationORM, str]]:
        return select(GamificationORM, UserORM.username).join(
            UserORM, GamificationORM.user_id == UserORM.id
        )

    def top_standings(self, limit: int, order: LeaderboardOrder) -> list[Standing]:
        """
        Get the best-ranked users.

        Args:
            limit: Maximum number of standings
            order: Primary sort column

        Returns:
            Standings in rank order
        """
        if order == LeaderboardOrder.LEVEL:
            ordering = (GamificationORM.level.desc(), GamificationORM.points.desc())
        else:
            ordering = (GamificationORM.points.desc(), GamificationORM.level.desc())

        stmt = self._standings_query().order_by(*ordering, GamificationORM.user_id).limit(limit)
        return [self._to_standing(row, username) for row, username in self.db.execute(stmt).all()]

    def best_scores_by_content_type(self, content_type: str) -> dict[UserId, list[float]]:
        """
        Get every user's best scores on content of the given type.

        Args:
            content_type: Stored content type string

        Returns:
            Best scores keyed by user
        """
        stmt = (
            select(UserProgressORM.user_id, UserProgressORM.best_score)
            .join(ContentORM, UserProgressORM.content_id == ContentORM.id)
            .where(ContentORM.type == str(content_type))
        )
        scores: dict[UserId, list[float]] = defaultdict(list)
        for user_id, best_score in self.db.execute(stmt).all():
            scores[UserId(user_id)].append(best_score)
        return dict(scores)

    def standings_for_users(self, user_ids: list[UserId]) -> list[Standing]:
        """Get standings for specific users; users without an aggregate are skipped."""
        if not user_ids:
            return []
        stmt = self._standings_query().where(
            GamificationORM.user_id.in_([user_id.value for user_id in user_ids])
        )
        return [self._to_standing(row, username) for row, username in self.db.execute(stmt).all()]

    def _to_standing(self, orm_model: GamificationORM, username: str) -> Standing:
        return Standing(
            user_id=UserId(orm_model.user_id),
            username=username,
            total_points=orm_model.points,
            level=orm_model.level,
            badges=self.mapper.badges_to_domain(orm_model.badges),
        )
