"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from lioarcade.exceptions import CredentialsException
from lioarcade.infrastructure.identity.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


async def get_current_user_id(token: Annotated[str, Depends(oauth2_scheme)]) -> int:
    """
    Get the authenticated user's ID from the access token.

    Args:
        token: JWT access token from Authorization header

    Returns:
        The user ID carried in the token

    Raises:
        CredentialsException: If the token is invalid
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
