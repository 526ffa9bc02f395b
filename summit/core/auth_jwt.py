"""Access token verification.

Tokens are issued by the hosted identity provider and signed with the shared
project secret. The caller's user id is the 'sub' claim.
"""

from __future__ import annotations

from jose import JWTError, jwt
from loguru import logger

from summit.config.settings import settings


def decode_access_token(token: str) -> str:
    """Decode and verify an access token.

    Args:
        token: JWT token string

    Returns:
        User ID (string) from token 'sub' claim

    Raises:
        ValueError: If token is invalid, expired, or verification is not configured
    """
    if not settings.auth_secret_key:
        raise ValueError("Token verification is not configured")

    try:
        payload = jwt.decode(
            token,
            settings.auth_secret_key,
            algorithms=[settings.auth_algorithm],
            audience=settings.auth_audience,
        )
    except JWTError as e:
        logger.warning(f"[AUTH] JWT decode failed: {e}")
        raise ValueError("Invalid or expired token") from e

    user_id = payload.get("sub")
    if not user_id:
        raise ValueError("Token missing user ID")
    return str(user_id)
