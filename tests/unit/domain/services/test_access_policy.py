"""Unit tests for the role requirements of catalog operations."""

import pytest

from ceramic_catalog.domain.entities import Role
from ceramic_catalog.domain.exceptions import UnauthorizedError
from ceramic_catalog.domain.services import (
    CLIENT_READERS,
    CLIENT_WRITERS,
    COLLECTION_WRITERS,
    RELATIONSHIP_READERS,
    RELATIONSHIP_WRITERS,
    ensure_role,
)


@pytest.mark.parametrize(
    "allowed,role,permitted",
    [
        (CLIENT_READERS, Role.PUBLIC, True),
        (CLIENT_WRITERS, Role.ADMIN, True),
        (CLIENT_WRITERS, Role.COLLECTION, False),
        (RELATIONSHIP_READERS, Role.PRODUCTION, True),
        (RELATIONSHIP_READERS, Role.PUBLIC, False),
        (RELATIONSHIP_WRITERS, Role.PRODUCTION, False),
        (COLLECTION_WRITERS, Role.COLLECTION, True),
        (COLLECTION_WRITERS, Role.PRODUCTION, False),
    ],
)
def test_role_tables(allowed, role, permitted):
    assert (role in allowed) is permitted


def test_ensure_role_returns_parsed_role():
    assert ensure_role("admin", CLIENT_WRITERS, "manage clients") is Role.ADMIN


def test_ensure_role_message_lists_allowed_roles():
    with pytest.raises(UnauthorizedError) as exc:
        ensure_role(Role.PUBLIC, RELATIONSHIP_READERS, "view client relationships")

    assert exc.value.message == (
        "COLLECTION or PRODUCTION or ADMIN role required to view client relationships"
    )
    assert exc.value.status_code == 403


def test_missing_role_counts_as_public():
    with pytest.raises(UnauthorizedError):
        ensure_role(None, COLLECTION_WRITERS, "manage collections")
