"""Tests for the request-scoped use case dependency."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from dependency_injector import providers
from sqlalchemy.orm import Session

from lioarcade.application.gamification.use_cases import (
    GetLeaderboardUseCase,
    SubmitScoreUseCase,
)
from lioarcade.core import container
from lioarcade.infrastructure.common.di import inject_use_case


class TestInjectUseCase:
    def test_builds_use_case_on_the_given_session(self) -> None:
        dependency = inject_use_case(container.submit_score_use_case)
        db = Session()

        use_case = dependency(db)

        assert isinstance(use_case, SubmitScoreUseCase)
        assert use_case.unit_of_work.db is db
        assert use_case.gamification_repository.db is db
        assert use_case.progress_repository.db is db

    def test_leaves_shared_container_unbound(self) -> None:
        dependency = inject_use_case(container.get_leaderboard_use_case)

        use_case = dependency(Session())

        assert isinstance(use_case, GetLeaderboardUseCase)
        assert not container.db.overridden

    def test_concurrent_requests_keep_their_own_session(self) -> None:
        dependency = inject_use_case(container.submit_score_use_case)

        def resolve(_: int) -> bool:
            db = Session()
            return all(dependency(db).unit_of_work.db is db for _ in range(50))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(resolve, range(32)))

        assert all(results)

    def test_rejects_unregistered_provider(self) -> None:
        with pytest.raises(ValueError, match="not registered"):
            inject_use_case(providers.Factory(SubmitScoreUseCase))
