"""Tests for ProgressRecord entity."""

from datetime import UTC, datetime, timedelta

import pytest

from lioarcade.domain.common.exceptions import ValidationError
from lioarcade.domain.common.value_objects import ContentId, ProgressRecordId, UserId
from lioarcade.domain.gamification.entities.progress_record import ProgressRecord

FIRST = datetime(2025, 1, 1, tzinfo=UTC)
SECOND = FIRST + timedelta(hours=1)


def _start(score: float = 40) -> ProgressRecord:
    return ProgressRecord.start(UserId(1), ContentId(2), score, FIRST)


class TestProgressRecord:
    def test_start(self) -> None:
        record = _start()
        assert record.id == ProgressRecordId(0)
        assert record.best_score == 40
        assert record.attempt_count == 1
        assert record.last_completed_at == FIRST

    def test_best_score_never_decreases(self) -> None:
        record = _start(40)
        record.record_attempt(30, SECOND)
        assert record.best_score == 40
        assert record.attempt_count == 2
        assert record.last_completed_at == SECOND

    def test_better_score_replaces_best(self) -> None:
        record = _start(40)
        record.record_attempt(90, SECOND)
        assert record.best_score == 90

    def test_negative_score_rejected(self) -> None:
        record = _start()
        with pytest.raises(ValidationError):
            record.record_attempt(-1, SECOND)
        assert record.attempt_count == 1

    def test_negative_first_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _start(-1)

    def test_reconstitute_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValidationError):
            ProgressRecord.create_with_id(
                id=ProgressRecordId(3),
                user_id=UserId(1),
                content_id=ContentId(2),
                best_score=10,
                attempt_count=0,
                last_completed_at=FIRST,
            )
