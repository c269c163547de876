"""Tests for GetUserProgressUseCase and GetLeaderboardUseCase."""

from datetime import UTC, datetime, timedelta

import pytest
from fakes import (
    FakeContentLookup,
    FakeGamificationRepository,
    FakeLeaderboardReader,
    FakeProgressRepository,
)

from lioarcade.application.gamification.protocols import Standing
from lioarcade.application.gamification.use_cases import (
    GetLeaderboardUseCase,
    GetUserProgressUseCase,
)
from lioarcade.domain.common.value_objects import ContentId, UserId
from lioarcade.domain.gamification.exceptions import GamificationAggregateNotFoundError
from lioarcade.domain.gamification.value_objects.badge import Badge
from lioarcade.exceptions import InvalidLeaderboardQueryError

START = datetime(2025, 1, 1, tzinfo=UTC)


def _standing(user_id: int, points: int, level: int) -> Standing:
    return Standing(
        user_id=UserId(user_id),
        username=f"user{user_id}",
        total_points=points,
        level=level,
        badges=[],
    )


class TestGetUserProgress:
    @pytest.fixture
    def content_lookup(self) -> FakeContentLookup:
        lookup = FakeContentLookup()
        lookup.add(1, "QUIZ", "Capital Cities")
        lookup.add(2, "FLASHCARD", "Spanish Verbs")
        lookup.add(3, "QUIZ", "Rivers")
        return lookup

    @pytest.fixture
    def progress_repository(self, content_lookup: FakeContentLookup) -> FakeProgressRepository:
        repository = FakeProgressRepository(content_lookup)
        for offset, content_id in enumerate((1, 2, 3)):
            repository.upsert(
                UserId(7), ContentId(content_id), 50, START + timedelta(minutes=offset)
            )
        return repository

    @pytest.fixture
    def gamification_repository(self) -> FakeGamificationRepository:
        repository = FakeGamificationRepository()
        repository.provision(7, total_points=137)
        return repository

    def test_summary(
        self,
        progress_repository: FakeProgressRepository,
        gamification_repository: FakeGamificationRepository,
    ) -> None:
        use_case = GetUserProgressUseCase(gamification_repository, progress_repository)

        summary = use_case.get_user_progress(7)

        assert summary.gamification.total_points == 137
        assert summary.gamification.level == 2
        assert summary.points_to_next_level == 163
        assert summary.statistics.total_completed == 3
        assert summary.statistics.by_type == {"QUIZ": 2, "FLASHCARD": 1}
        assert [item.content.title for item in summary.recent_progress] == [
            "Rivers",
            "Spanish Verbs",
            "Capital Cities",
        ]

    def test_recent_activity_limit(
        self,
        progress_repository: FakeProgressRepository,
        gamification_repository: FakeGamificationRepository,
    ) -> None:
        use_case = GetUserProgressUseCase(
            gamification_repository, progress_repository, recent_activity_limit=2
        )
        assert len(use_case.get_user_progress(7).recent_progress) == 2

    def test_missing_aggregate(self, progress_repository: FakeProgressRepository) -> None:
        use_case = GetUserProgressUseCase(FakeGamificationRepository(), progress_repository)
        with pytest.raises(GamificationAggregateNotFoundError):
            use_case.get_user_progress(7)


class TestGetLeaderboard:
    @pytest.fixture
    def reader(self) -> FakeLeaderboardReader:
        return FakeLeaderboardReader(
            standings=[
                _standing(1, 500, 3),
                _standing(2, 1200, 5),
                _standing(3, 500, 3),
                _standing(4, 90, 1),
            ],
        )

    def test_ranks_by_points(self, reader: FakeLeaderboardReader) -> None:
        entries = GetLeaderboardUseCase(reader).get_leaderboard(limit=3)

        assert [entry.rank for entry in entries] == [1, 2, 3]
        assert [entry.user_id.value for entry in entries] == [2, 1, 3]
        assert entries[0].points == 1200
        assert entries[0].username == "user2"

    def test_ranks_by_level(self, reader: FakeLeaderboardReader) -> None:
        reader.standings.append(_standing(5, 1000, 5))
        entries = GetLeaderboardUseCase(reader).get_leaderboard(by="level")
        assert [entry.user_id.value for entry in entries][:2] == [2, 5]

    def test_content_type_uses_estimates(self, reader: FakeLeaderboardReader) -> None:
        reader.best_scores["QUIZ"] = {
            UserId(1): [80.0],
            UserId(4): [100.0, 100.0],
        }

        entries = GetLeaderboardUseCase(reader).get_leaderboard(content_type="QUIZ")

        assert [(entry.user_id.value, entry.points) for entry in entries] == [(4, 100), (1, 42)]

    def test_content_type_without_progress(self, reader: FakeLeaderboardReader) -> None:
        assert GetLeaderboardUseCase(reader).get_leaderboard(content_type="MINI_GAME") == []

    def test_badges_are_passed_through(self, reader: FakeLeaderboardReader) -> None:
        badge = Badge("Level 5", "🏆", START)
        reader.standings = [
            Standing(
                user_id=UserId(9), username="champ", total_points=1000, level=5, badges=[badge]
            )
        ]
        entries = GetLeaderboardUseCase(reader).get_leaderboard()
        assert entries[0].badges == [badge]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"limit": 0},
            {"limit": 101},
            {"by": "badges"},
            {"content_type": "CROSSWORD"},
        ],
    )
    def test_invalid_queries(self, reader: FakeLeaderboardReader, kwargs: dict) -> None:
        with pytest.raises(InvalidLeaderboardQueryError):
            GetLeaderboardUseCase(reader).get_leaderboard(**kwargs)

    def test_configured_max_limit(self, reader: FakeLeaderboardReader) -> None:
        use_case = GetLeaderboardUseCase(reader, max_limit=2)
        with pytest.raises(InvalidLeaderboardQueryError):
            use_case.get_leaderboard(limit=3)
