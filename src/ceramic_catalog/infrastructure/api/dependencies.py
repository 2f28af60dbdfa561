"""FastAPI dependencies for authentication and authorization.

Provides dependencies for extracting and validating JWT tokens from requests
and for checking the caller's role against an operation.
"""

from dataclasses import dataclass
from typing import Annotated, Callable, Iterable

from fastapi import Depends, Header, HTTPException, status

from ceramic_catalog.core.logging import get_logger
from ceramic_catalog.domain.entities.role import Role
from ceramic_catalog.domain.services.access_policy import ensure_role
from ceramic_catalog.infrastructure.auth import (
    InvalidTokenError,
    TokenExpiredError,
    jwt_service,
)
from ceramic_catalog.infrastructure.persistence.database import get_db_session

logger = get_logger(__name__)

__all__ = [
    "AuthenticatedUser",
    "CurrentUser",
    "OptionalUser",
    "get_current_user",
    "get_db_session",
    "get_optional_user",
    "require_roles",
]


@dataclass
class CurrentUser:
    """Represents the current caller context.

    Extracted from a valid JWT access token, or the anonymous PUBLIC
    context for endpoints that allow unauthenticated reads.
    """

    user_id: str | None
    email: str | None
    role: Role
    client_id: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None


ANONYMOUS = CurrentUser(user_id=None, email=None, role=Role.PUBLIC)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _decode_bearer(authorization: str) -> CurrentUser:
    """Decode a Bearer Authorization header into a CurrentUser.

    Raises:
        HTTPException: 401 if the header or token is invalid.
    """
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Authentication failed: invalid Authorization header format")
        raise _unauthorized("Could not validate credentials")

    try:
        payload = jwt_service.validate_access_token(parts[1])
        return CurrentUser(
            user_id=payload["user_id"],
            email=payload["email"],
            role=Role.parse(payload.get("role")),
            client_id=payload.get("client_id"),
        )
    except TokenExpiredError:
        logger.info("Authentication failed: token expired")
        raise _unauthorized("Token has expired")
    except InvalidTokenError as e:
        logger.info("Authentication failed: invalid token", error=str(e))
        raise _unauthorized(f"Invalid token: {str(e)}")
    except KeyError as e:
        logger.warning("Authentication failed: missing claim in token", missing_claim=str(e))
        raise _unauthorized(f"Missing claim: {str(e)}")


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Extract and validate the current user from the Authorization header.

    Args:
        authorization: The Authorization header value (e.g., "Bearer <token>").

    Returns:
        CurrentUser: The authenticated user's context.

    Raises:
        HTTPException: 401 if token is missing, invalid, or expired.
    """
    if authorization is None:
        logger.info("Authentication failed: missing Authorization header")
        raise _unauthorized("Missing Authorization header")
    return _decode_bearer(authorization)


async def get_optional_user(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """Like get_current_user, but anonymous callers get the PUBLIC context.

    A token that is present but invalid is still rejected with 401.
    """
    if authorization is None:
        return ANONYMOUS
    return _decode_bearer(authorization)


# Type aliases for dependency injection
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
OptionalUser = Annotated[CurrentUser, Depends(get_optional_user)]


def require_roles(allowed: Iterable[Role], action: str) -> Callable:
    """Build a dependency that admits only the given roles.

    Args:
        allowed: Roles permitted to perform the action.
        action: Short description used in the 403 message.

    Returns:
        A dependency returning the authenticated CurrentUser.
    """
    allowed = frozenset(allowed)

    async def dependency(current_user: AuthenticatedUser) -> CurrentUser:
        ensure_role(current_user.role, allowed, action)
        return current_user

    return dependency
