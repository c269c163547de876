"""Pydantic schemas for gamification API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class SubmitScoreRequest(BaseModel):
    """Schema for submitting the result of a content attempt."""

    content_id: int = Field(..., ge=1, description="ID of the quiz, flashcard or mini-game")
    score: float = Field(..., ge=0, description="Raw score achieved")
    max_score: float = Field(..., ge=1, description="Maximum achievable score")


class Badge(BaseModel):
    """Schema for an earned badge."""

    name: str
    icon: str
    earned_at: datetime


class ContentSummary(BaseModel):
    """Schema for the content a progress record refers to."""

    id: int
    type: str
    title: str
    category: str | None = None


class Progress(BaseModel):
    """Schema for a user's progress on one piece of content."""

    id: int
    user_id: int
    content_id: int
    best_score: float
    attempt_count: int
    last_completed_at: datetime
    content: ContentSummary | None = None


class Gamification(BaseModel):
    """Schema for a user's points, level and badges."""

    user_id: int
    points: int
    level: int
    badges: list[Badge] = Field(default_factory=list)


class SubmitScoreResponse(BaseModel):
    """Schema for score submission response."""

    message: str = Field(..., description="Response message")
    points_earned: int = Field(..., description="Points awarded for this attempt")
    level_up: bool = Field(..., description="Whether the attempt raised the level")
    new_badges: list[Badge] = Field(..., description="Badges earned by this attempt")
    progress: Progress
    gamification: Gamification


class ProgressStatistics(BaseModel):
    """Schema for progress counts."""

    total_completed: int
    by_type: dict[str, int]


class UserProgressResponse(BaseModel):
    """Schema for the current user's progress summary."""

    gamification: Gamification
    recent_progress: list[Progress]
    statistics: ProgressStatistics
    points_to_next_level: int


class LeaderboardEntry(BaseModel):
    """Schema for one ranked user."""

    rank: int
    user_id: int
    username: str
    points: int
    level: int
    badges: list[Badge]


class LeaderboardResponse(BaseModel):
    """Schema for leaderboard response."""

    leaderboard: list[LeaderboardEntry]
