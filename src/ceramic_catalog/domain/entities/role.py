"""Closed enumerations for caller roles and collection exclusivity."""

from enum import Enum


class Role(str, Enum):
    """Role of an authenticated caller.

    Anonymous callers are treated as PUBLIC.
    """

    PUBLIC = "PUBLIC"
    COLLECTION = "COLLECTION"
    PRODUCTION = "PRODUCTION"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, value: "str | Role | None") -> "Role":
        """Convert a raw role value, falling back to PUBLIC.

        Args:
            value: Role name (case-insensitive), Role member, or None.

        Returns:
            Matching Role, or PUBLIC for missing and unknown values.
        """
        if isinstance(value, Role):
            return value
        if not value:
            return cls.PUBLIC
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.PUBLIC


class CollectionType(str, Enum):
    """Exclusivity tag of a product collection."""

    GENERAL = "GENERAL"
    EXCLUSIVE = "EXCLUSIVE"
    EXCLUSIVE_GROUP = "EXCLUSIVE_GROUP"

    @property
    def requires_client(self) -> bool:
        """Whether collections of this type must name an owning client."""
        return self is not CollectionType.GENERAL
