"""Domain service deciding which badges a user qualifies for."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Protocol

from lioarcade.domain.common.value_objects import UserId
from lioarcade.domain.content.entities.content import ContentType
from lioarcade.domain.gamification.value_objects.badge import Badge

PERFECT_SCORE_THRESHOLD: Final[float] = 100
PERFECT_SCORE_BADGE_COUNT: Final[int] = 5
DEDICATED_LEARNER_POINTS: Final[int] = 500


class ProgressHistory(Protocol):
    """Counts over a user's progress records, taken after the latest upsert."""

    def count_by_user_and_type(self, user_id: UserId, content_type: str) -> int: ...

    def count_by_user_with_score_at_least(self, user_id: UserId, threshold: float) -> int: ...


@dataclass(frozen=True)
class BadgeContext:
    """Everything a badge rule may look at."""

    user_id: UserId
    total_points: int
    level: int
    history: ProgressHistory


@dataclass(frozen=True)
class BadgeRule:
    name: str
    icon: str
    qualifies: Callable[[BadgeContext], bool]


def _first_quiz(ctx: BadgeContext) -> bool:
    # Only the submission that creates the first quiz record matches
    return ctx.history.count_by_user_and_type(ctx.user_id, ContentType.QUIZ) == 1


def _perfect_score_master(ctx: BadgeContext) -> bool:
    perfect = ctx.history.count_by_user_with_score_at_least(
        ctx.user_id, PERFECT_SCORE_THRESHOLD
    )
    return perfect >= PERFECT_SCORE_BADGE_COUNT


BADGE_RULES: Final[tuple[BadgeRule, ...]] = (
    BadgeRule("First Quiz", "🎯", _first_quiz),
    BadgeRule("Perfect Score Master", "⭐", _perfect_score_master),
    BadgeRule("Level 5", "🏆", lambda ctx: ctx.level >= 5),
    BadgeRule("Level 10", "👑", lambda ctx: ctx.level >= 10),
    BadgeRule("Dedicated Learner", "🔥", lambda ctx: ctx.total_points >= DEDICATED_LEARNER_POINTS),
)


class BadgeEvaluator:
    """
    Evaluates every badge rule against a user's current standing.

    Rules are independent, and a badge the user already owns is emitted
    again whenever its rule still holds. Removing those repeats is the
    job of the aggregate's badge merge, which keeps the original award.
    """

    def __init__(self, rules: tuple[BadgeRule, ...] = BADGE_RULES) -> None:
        self.rules = rules

    def evaluate(
        self,
        user_id: UserId,
        total_points: int,
        level: int,
        history: ProgressHistory,
        earned_at: datetime,
    ) -> list[Badge]:
        """
        Return a badge for every rule that currently holds.

        Args:
            user_id: User being evaluated
            total_points: New cumulative points
            level: New level
            history: Progress counts for the user
            earned_at: Timestamp stamped on emitted badges

        Returns:
            Badges in rule order
        """
        ctx = BadgeContext(
            user_id=user_id, total_points=total_points, level=level, history=history
        )
        return [
            Badge(name=rule.name, icon=rule.icon, earned_at=earned_at)
            for rule in self.rules
            if rule.qualifies(ctx)
        ]
