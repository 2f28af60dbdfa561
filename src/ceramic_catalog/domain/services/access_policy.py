"""Role requirements for catalog operations."""

from typing import Iterable

from ceramic_catalog.domain.entities.role import Role
from ceramic_catalog.domain.exceptions import UnauthorizedError

ALL_ROLES = frozenset(Role)

CLIENT_READERS = ALL_ROLES
CLIENT_WRITERS = frozenset({Role.ADMIN})
RELATIONSHIP_READERS = frozenset({Role.COLLECTION, Role.PRODUCTION, Role.ADMIN})
RELATIONSHIP_WRITERS = frozenset({Role.ADMIN})
COLLECTION_WRITERS = frozenset({Role.COLLECTION, Role.ADMIN})


def ensure_role(role: Role | str | None, allowed: Iterable[Role], action: str) -> Role:
    """Ensure a role is allowed to perform an action.

    Args:
        role: Caller role; missing values count as PUBLIC.
        allowed: Roles permitted for the action.
        action: Short description used in the error message.

    Returns:
        The parsed role.

    Raises:
        UnauthorizedError: If the role is not allowed.
    """
    parsed = Role.parse(role)
    allowed = frozenset(allowed)
    if parsed not in allowed:
        names = " or ".join(r.value for r in Role if r in allowed)
        raise UnauthorizedError(f"{names} role required to {action}")
    return parsed
