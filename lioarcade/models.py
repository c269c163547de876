"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lioarcade.database import Base


class User(Base):
    """Registered learner. Owned by the identity flow; read-only here."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    gamification: Mapped["Gamification | None"] = relationship(
        back_populates="user", uselist=False
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}')>"


class Content(Base):
    """Quiz, flashcard deck or mini-game."""

    __tablename__ = "content"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # Free-form so rows with types this service does not know still load
    type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Content."""
        return f"<Content(id={self.id}, type='{self.type}', title='{self.title[:50]}')>"


class UserProgress(Base):
    """Best score and attempt count per (user, content)."""

    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_user_progress_user_content"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content_id: Mapped[int] = mapped_column(
        ForeignKey("content.id", ondelete="CASCADE"), nullable=False, index=True
    )
    best_score: Mapped[float] = mapped_column(Float, nullable=False)
    attempt_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    last_completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    content: Mapped[Content] = relationship()

    def __repr__(self) -> str:
        """String representation of UserProgress."""
        return (
            f"<UserProgress(user_id={self.user_id}, content_id={self.content_id}, "
            f"best_score={self.best_score})>"
        )


class Gamification(Base):
    """Per-user points, level and badges."""

    __tablename__ = "gamification"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1, index=True)
    # Earn-ordered list of {"name", "icon", "earned_at"}
    badges: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="gamification")

    def __repr__(self) -> str:
        """String representation of Gamification."""
        return f"<Gamification(user_id={self.user_id}, points={self.points}, level={self.level})>"
