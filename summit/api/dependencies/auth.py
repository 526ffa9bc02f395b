"""FastAPI authentication dependency.

Extracts the bearer token from the Authorization header, verifies it, and
returns the caller's user id. Account management lives with the identity
provider; this service trusts a verified token.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from loguru import logger

from summit.core.auth_jwt import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(request: Request, token: str | None = Depends(oauth2_scheme)) -> str:
    """Resolve the caller's user id from the bearer token.

    Every data query is scoped to the returned id.

    Raises:
        HTTPException: 401 when the token is absent or fails verification
    """
    route = f"{request.method} {request.url.path}"
    if not token:
        logger.warning(f"[AUTH] No bearer token on {route}")
        raise _unauthorized("Missing or invalid Authorization header")

    try:
        user_id = decode_access_token(token)
    except ValueError as e:
        logger.warning(f"[AUTH] Rejected token on {route}: {e}")
        raise _unauthorized("Invalid authentication credentials") from e

    logger.debug(f"[AUTH] user_id={user_id} on {route}")
    return user_id
