"""Collection visibility by role and reachability by client.

Two separate questions are answered here:

1. Role visibility: which collections may a caller with a given role see?
   ADMIN, COLLECTION and PRODUCTION see everything; PUBLIC (and anonymous
   callers) only see GENERAL collections. ``can_view`` is the single
   predicate behind both listing and single-item access.
2. Client reachability: which collections does a client reach through its
   own regions and departments? GENERAL always, EXCLUSIVE only when the
   client owns it, EXCLUSIVE_GROUP when the owner shares at least one
   region and at least one department with the client.
"""

from typing import Iterable, TypeVar

from ceramic_catalog.domain.entities.client import Client
from ceramic_catalog.domain.entities.product_collection import ProductCollection
from ceramic_catalog.domain.entities.role import CollectionType, Role
from ceramic_catalog.domain.exceptions import AccessDeniedError, ValidationFailedError

C = TypeVar("C", bound=ProductCollection)

_ALL_TYPES = frozenset(CollectionType)

# Role -> collection types the role may read
_VISIBLE_TYPES: dict[Role, frozenset[CollectionType]] = {
    Role.ADMIN: _ALL_TYPES,
    Role.COLLECTION: _ALL_TYPES,
    Role.PRODUCTION: _ALL_TYPES,
    Role.PUBLIC: frozenset({CollectionType.GENERAL}),
}


class VisibilityResolver:
    """Resolves role visibility and client reachability of collections."""

    @staticmethod
    def visible_types(role: Role | str | None) -> frozenset[CollectionType] | None:
        """Return the collection types a role may read.

        Returns:
            The allowed types, or None when the role is unrestricted.
        """
        allowed = _VISIBLE_TYPES[Role.parse(role)]
        return None if allowed == _ALL_TYPES else allowed

    @staticmethod
    def can_view(role: Role | str | None, collection_type: CollectionType | str) -> bool:
        """Check whether a role may read collections of the given type."""
        return CollectionType(collection_type) in _VISIBLE_TYPES[Role.parse(role)]

    @classmethod
    def visible_collections(cls, role: Role | str | None, collections: Iterable[C]) -> list[C]:
        """Filter collections down to those the role may read, keeping order."""
        return [c for c in collections if cls.can_view(role, c.collection_type)]

    @classmethod
    def check_read_access(cls, role: Role | str | None, collection: ProductCollection) -> None:
        """Check single-item read access.

        Unlike the list filter this fails loudly instead of hiding the
        collection.

        Raises:
            AccessDeniedError: If the role may not read this collection.
        """
        if not cls.can_view(role, collection.collection_type):
            raise AccessDeniedError(
                f"Access denied to {CollectionType(collection.collection_type).value} collection"
            )

    @staticmethod
    def can_reach(
        client: Client,
        collection: ProductCollection,
        region: str | None = None,
        department: str | None = None,
    ) -> bool:
        """Check whether a client reaches a collection.

        Args:
            client: The querying client.
            collection: Collection to test; its owning client must be loaded
                for EXCLUSIVE_GROUP collections.
            region: Optional single region to match on instead of all of the
                client's regions.
            department: Optional single department to match on instead of all
                of the client's departments.
        """
        kind = CollectionType(collection.collection_type)
        if kind is CollectionType.GENERAL:
            return True
        if kind is CollectionType.EXCLUSIVE:
            return collection.client_id == client.id

        owner = collection.client
        if owner is None:
            return False
        regions = {region} if region else set(client.regions)
        departments = {department} if department else set(client.departments)
        return bool(regions.intersection(owner.regions)) and bool(
            departments.intersection(owner.departments)
        )

    @classmethod
    def reachable_collections(
        cls,
        client: Client,
        collections: Iterable[C],
        region: str | None = None,
        department: str | None = None,
    ) -> list[C]:
        """Filter collections down to those the client reaches, keeping order.

        Raises:
            ValidationFailedError: If a narrowing region or department is not
                carried by the client.
        """
        errors: dict[str, list[str]] = {}
        if region and region not in client.regions:
            errors["region"] = [f'Region "{region}" not associated with this client']
        if department and department not in client.departments:
            errors["department"] = [
                f'Department "{department}" not associated with this client'
            ]
        if errors:
            raise ValidationFailedError("Invalid relationship filter", errors=errors)

        return [c for c in collections if cls.can_reach(client, c, region, department)]
