"""Identity infrastructure: bearer token verification."""

from lioarcade.infrastructure.identity.dependencies import (
    CurrentUserId,
    get_current_user_id,
    oauth2_scheme,
)

__all__ = [
    "CurrentUserId",
    "get_current_user_id",
    "oauth2_scheme",
]
