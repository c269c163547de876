"""Tests for gamification API endpoints."""

from typing import Any

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lioarcade import models
from lioarcade.infrastructure.identity.token_service import create_access_token

SUBMIT_URL = "/api/v1/gamification/submit-score"


def _submit(
    client: TestClient,
    headers: dict[str, str],
    content: models.Content,
    score: float,
    max_score: float = 100,
) -> Any:
    return client.post(
        SUBMIT_URL,
        json={"content_id": content.id, "score": score, "max_score": max_score},
        headers=headers,
    )


def _headers(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


class TestSubmitScore:
    """Test suite for POST /gamification/submit-score endpoint."""

    def test_quiz_submission(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
        quiz: models.Content,
    ) -> None:
        """Test a first quiz submission awards points and the First Quiz badge."""
        response = _submit(client, auth_headers, quiz, 8, 10)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Score submitted successfully"
        assert data["points_earned"] == 42
        assert data["level_up"] is False
        assert [badge["name"] for badge in data["new_badges"]] == ["First Quiz"]
        assert data["new_badges"][0]["icon"] == "🎯"
        assert data["progress"]["best_score"] == 8
        assert data["progress"]["attempt_count"] == 1
        assert data["progress"]["content_id"] == quiz.id
        assert data["gamification"]["points"] == 42
        assert data["gamification"]["level"] == 1

        # Verify state was committed
        db_session.expire_all()
        row = db_session.query(models.Gamification).filter_by(user_id=test_user.id).one()
        assert row.points == 42
        assert [badge["name"] for badge in row.badges] == ["First Quiz"]
        progress = db_session.query(models.UserProgress).filter_by(user_id=test_user.id).one()
        assert progress.best_score == 8

    def test_flashcard_submission(
        self, client: TestClient, auth_headers: dict[str, str], flashcard_deck: models.Content
    ) -> None:
        """Test flashcards award five points per card known."""
        response = _submit(client, auth_headers, flashcard_deck, 6, 10)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["points_earned"] == 30

    def test_mini_game_submission(
        self, client: TestClient, auth_headers: dict[str, str], mini_game: models.Content
    ) -> None:
        """Test mini-games scale with percentage."""
        response = _submit(client, auth_headers, mini_game, 50, 100)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["points_earned"] == 60

    def test_unknown_content_type(
        self, client: TestClient, auth_headers: dict[str, str], make_content: Any
    ) -> None:
        """Test content with an unrecognised type gets the flat award."""
        crossword = make_content("CROSSWORD", "Daily Crossword")
        response = _submit(client, auth_headers, crossword, 3, 10)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["points_earned"] == 10

    def test_level_up(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
        quiz: models.Content,
    ) -> None:
        """Test crossing 100 points moves the user from level 1 to 2."""
        row = db_session.query(models.Gamification).filter_by(user_id=test_user.id).one()
        row.points = 95
        db_session.commit()

        response = _submit(client, auth_headers, quiz, 8, 10)

        data = response.json()
        assert data["gamification"]["points"] == 137
        assert data["gamification"]["level"] == 2
        assert data["level_up"] is True

    def test_repeat_attempt_keeps_best_score(
        self, client: TestClient, auth_headers: dict[str, str], quiz: models.Content
    ) -> None:
        """Test a worse retry keeps the best score but still earns points."""
        first = _submit(client, auth_headers, quiz, 40).json()
        second = _submit(client, auth_headers, quiz, 30).json()

        assert second["progress"]["best_score"] == 40
        assert second["progress"]["attempt_count"] == 2
        assert second["progress"]["id"] == first["progress"]["id"]
        assert second["gamification"]["points"] == first["points_earned"] + second["points_earned"]
        assert second["new_badges"] == []

    def test_perfect_score_master(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
        make_content: Any,
    ) -> None:
        """Test the fifth perfect record awards Perfect Score Master exactly once."""
        games = [make_content("MINI_GAME", f"Game {i}") for i in range(6)]

        awarded = []
        for game in games:
            data = _submit(client, auth_headers, game, 100).json()
            awarded.append([badge["name"] for badge in data["new_badges"]])

        assert "Perfect Score Master" not in awarded[3]
        assert "Perfect Score Master" in awarded[4]
        assert awarded[5] == []

        db_session.expire_all()
        row = db_session.query(models.Gamification).filter_by(user_id=test_user.id).one()
        names = [badge["name"] for badge in row.badges]
        assert names.count("Perfect Score Master") == 1
        assert names == ["Perfect Score Master", "Dedicated Learner"]

    def test_content_not_found(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test submitting for non-existent content."""
        response = client.post(
            SUBMIT_URL,
            json={"content_id": 99999, "score": 1, "max_score": 1},
            headers=auth_headers,
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Content with id 99999 not found"

    def test_aggregate_not_provisioned(
        self, client: TestClient, db_session: Session, quiz: models.Content
    ) -> None:
        """Test a user without gamification state is rejected without writing progress."""
        user = models.User(email="new@example.com", username="newcomer")
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)

        response = _submit(client, _headers(user), quiz, 8, 10)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        assert db_session.query(models.UserProgress).filter_by(user_id=user.id).count() == 0

    def test_requires_authentication(self, client: TestClient, quiz: models.Content) -> None:
        """Test submitting without a token."""
        response = client.post(
            SUBMIT_URL, json={"content_id": quiz.id, "score": 1, "max_score": 1}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_rejects_invalid_token(self, client: TestClient, quiz: models.Content) -> None:
        """Test submitting with a garbage token."""
        response = _submit(client, {"Authorization": "Bearer not-a-jwt"}, quiz, 1, 1)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_negative_score_rejected(
        self, client: TestClient, auth_headers: dict[str, str], quiz: models.Content
    ) -> None:
        """Test request validation on the score."""
        response = _submit(client, auth_headers, quiz, -1, 10)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_zero_max_score_rejected(
        self, client: TestClient, auth_headers: dict[str, str], quiz: models.Content
    ) -> None:
        """Test request validation on the max score."""
        response = _submit(client, auth_headers, quiz, 1, 0)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestGetProgress:
    """Test suite for GET /gamification/progress endpoint."""

    def test_progress_summary(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        quiz: models.Content,
        flashcard_deck: models.Content,
    ) -> None:
        """Test the summary reflects submissions."""
        _submit(client, auth_headers, quiz, 8, 10)
        _submit(client, auth_headers, flashcard_deck, 6, 10)

        response = client.get("/api/v1/gamification/progress", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["gamification"]["points"] == 72
        assert data["points_to_next_level"] == 28
        assert data["statistics"] == {
            "total_completed": 2,
            "by_type": {"QUIZ": 1, "FLASHCARD": 1},
        }
        assert len(data["recent_progress"]) == 2
        content_ids = {item["content"]["id"] for item in data["recent_progress"]}
        assert content_ids == {quiz.id, flashcard_deck.id}

    def test_progress_empty(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a freshly provisioned user."""
        response = client.get("/api/v1/gamification/progress", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["gamification"]["points"] == 0
        assert data["gamification"]["level"] == 1
        assert data["gamification"]["badges"] == []
        assert data["points_to_next_level"] == 100
        assert data["recent_progress"] == []
        assert data["statistics"]["total_completed"] == 0

    def test_progress_requires_authentication(self, client: TestClient) -> None:
        """Test fetching progress without a token."""
        response = client.get("/api/v1/gamification/progress")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGetLeaderboard:
    """Test suite for GET /gamification/leaderboard endpoint."""

    def test_ranked_by_points(
        self, client: TestClient, test_user: models.User, make_user: Any
    ) -> None:
        """Test default ordering by points."""
        make_user("alice", points=1200, level=5)
        make_user("bob", points=450, level=3)

        response = client.get("/api/v1/gamification/leaderboard")

        assert response.status_code == status.HTTP_200_OK
        entries = response.json()["leaderboard"]
        assert [entry["username"] for entry in entries] == ["alice", "bob", "learner"]
        assert [entry["rank"] for entry in entries] == [1, 2, 3]
        assert entries[0]["points"] == 1200

    def test_limit(self, client: TestClient, test_user: models.User, make_user: Any) -> None:
        """Test the limit parameter."""
        make_user("alice", points=1200, level=5)
        response = client.get("/api/v1/gamification/leaderboard", params={"limit": 1})
        assert [entry["username"] for entry in response.json()["leaderboard"]] == ["alice"]

    def test_ranked_by_level(self, client: TestClient, make_user: Any) -> None:
        """Test ordering by level."""
        make_user("alice", points=1000, level=5)
        make_user("bob", points=1400, level=5)
        make_user("carol", points=700, level=4)

        response = client.get("/api/v1/gamification/leaderboard", params={"by": "level"})

        entries = response.json()["leaderboard"]
        assert [entry["username"] for entry in entries] == ["bob", "alice", "carol"]

    def test_by_content_type(
        self,
        client: TestClient,
        test_user: models.User,
        auth_headers: dict[str, str],
        make_user: Any,
        quiz: models.Content,
        mini_game: models.Content,
    ) -> None:
        """Test ranking within one content type uses estimated points."""
        rival = make_user("rival")
        _submit(client, auth_headers, quiz, 80)
        _submit(client, _headers(rival), mini_game, 100)

        response = client.get(
            "/api/v1/gamification/leaderboard", params={"content_type": "QUIZ"}
        )

        entries = response.json()["leaderboard"]
        assert [(entry["username"], entry["points"]) for entry in entries] == [("learner", 42)]

    def test_invalid_content_type(self, client: TestClient) -> None:
        """Test unknown content types are rejected."""
        response = client.get(
            "/api/v1/gamification/leaderboard", params={"content_type": "CROSSWORD"}
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_limit_above_maximum(self, client: TestClient) -> None:
        """Test limits beyond the configured maximum are rejected."""
        response = client.get("/api/v1/gamification/leaderboard", params={"limit": 101})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_invalid_ordering(self, client: TestClient) -> None:
        """Test unknown ordering values are rejected."""
        response = client.get("/api/v1/gamification/leaderboard", params={"by": "badges"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
