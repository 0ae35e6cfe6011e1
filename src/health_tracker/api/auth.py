"""Bearer token authentication for user routes."""

import logging
from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWTError

from health_tracker.api.dependencies import Container

_logger = logging.getLogger(__name__)

JWT_ALGORITHMS = ["HS256"]
JWT_AUDIENCE = "authenticated"

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    container: Container,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UUID:
    """Verify a Supabase access token and return the user id from `sub`."""
    if credentials is None:
        raise _unauthorized("Missing bearer token")
    try:
        payload = jwt.decode(
            credentials.credentials,
            container.settings.supabase_jwt_secret,
            algorithms=JWT_ALGORITHMS,
            audience=JWT_AUDIENCE,
        )
    except jwt.ExpiredSignatureError as exc:
        raise _unauthorized("Token has expired") from exc
    except PyJWTError as exc:
        _logger.info("Rejected bearer token", extra={"reason": str(exc)})
        raise _unauthorized("Invalid token") from exc

    subject = payload.get("sub")
    if not subject:
        raise _unauthorized("Invalid token: missing user ID")
    try:
        return UUID(str(subject))
    except ValueError as exc:
        raise _unauthorized("Invalid token: malformed user ID") from exc


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
