"""Shared value objects."""

from .ids import ContentId, GamificationId, ProgressRecordId, UserId

__all__ = [
    "ContentId",
    "GamificationId",
    "ProgressRecordId",
    "UserId",
]
