from .badge import Badge, BadgeSet

__all__ = ["Badge", "BadgeSet"]
