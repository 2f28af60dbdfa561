"""Unit tests for authentication dependencies."""

from datetime import timedelta

import pytest
from fastapi import HTTPException

from ceramic_catalog.domain.entities import Role
from ceramic_catalog.domain.exceptions import UnauthorizedError
from ceramic_catalog.domain.services import CLIENT_WRITERS
from ceramic_catalog.infrastructure.api.dependencies import (
    CurrentUser,
    get_current_user,
    get_optional_user,
    require_roles,
)
from ceramic_catalog.infrastructure.auth import jwt_service


def _bearer(role: str, **kwargs) -> str:
    token = jwt_service.create_access_token(
        user_id="u1", email="u1@example.com", role=role, **kwargs
    )
    return f"Bearer {token}"


@pytest.mark.asyncio
async def test_current_user_from_token():
    user = await get_current_user(authorization=_bearer("PRODUCTION", client_id="c1"))

    assert user == CurrentUser(
        user_id="u1", email="u1@example.com", role=Role.PRODUCTION, client_id="c1"
    )


@pytest.mark.asyncio
async def test_unknown_role_claim_is_public():
    user = await get_current_user(authorization=_bearer("OWNER"))

    assert user.role is Role.PUBLIC


@pytest.mark.asyncio
async def test_missing_header():
    with pytest.raises(HTTPException) as exc:
        await get_current_user(authorization=None)

    assert exc.value.status_code == 401
    assert exc.value.detail == "Missing Authorization header"


@pytest.mark.asyncio
async def test_malformed_header():
    with pytest.raises(HTTPException) as exc:
        await get_current_user(authorization="Token abc")

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_expired_token():
    with pytest.raises(HTTPException) as exc:
        await get_current_user(
            authorization=_bearer("ADMIN", expires_delta=timedelta(seconds=-1))
        )

    assert exc.value.detail == "Token has expired"


@pytest.mark.asyncio
async def test_optional_user_anonymous():
    user = await get_optional_user(authorization=None)

    assert user.is_anonymous
    assert user.role is Role.PUBLIC


@pytest.mark.asyncio
async def test_optional_user_rejects_bad_token():
    with pytest.raises(HTTPException) as exc:
        await get_optional_user(authorization="Bearer not-a-jwt")

    assert exc.value.status_code == 401


@pytest.mark.asyncio
async def test_require_roles():
    dependency = require_roles(CLIENT_WRITERS, "manage clients")
    admin = CurrentUser(user_id="u1", email="a@example.com", role=Role.ADMIN)
    collection = CurrentUser(user_id="u2", email="b@example.com", role=Role.COLLECTION)

    assert await dependency(admin) is admin
    with pytest.raises(UnauthorizedError, match="ADMIN role required to manage clients"):
        await dependency(collection)
