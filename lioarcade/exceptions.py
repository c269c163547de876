"""Custom exception hierarchy for the LioArcade application."""

from fastapi import HTTPException
from starlette import status


class LioArcadeError(Exception):
    """Base exception for all LioArcade errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(LioArcadeError):
    """Validation error."""


class InvalidScoreError(ValidationError):
    """Score submission outside the range the scoring engine accepts."""

    def __init__(self, score: float, max_score: float, reason: str) -> None:
        """Initialize with the rejected values and the reason."""
        self.score = score
        self.max_score = max_score
        self.reason = reason
        super().__init__(
            f"Invalid score {score} out of {max_score}: {reason}", status_code=400
        )


class InvalidLeaderboardQueryError(ValidationError):
    """Leaderboard query parameters could not be honoured."""

    def __init__(self, reason: str) -> None:
        """Initialize with the reason for rejection."""
        self.reason = reason
        super().__init__(f"Invalid leaderboard query: {reason}", status_code=400)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
