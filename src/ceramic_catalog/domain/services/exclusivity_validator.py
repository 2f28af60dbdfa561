"""Exclusivity validation for product collections.

EXCLUSIVE and EXCLUSIVE_GROUP collections must declare an owning client.
GENERAL collections never fail, whatever the client reference says.
"""

from ceramic_catalog.domain.entities.role import CollectionType
from ceramic_catalog.domain.exceptions import ExclusivityViolationError, ValidationFailedError


class ExclusivityValidator:
    """Validator for the collection type / owning client pairing."""

    @classmethod
    def parse_type(cls, collection_type: CollectionType | str) -> CollectionType:
        """Convert a raw collection type.

        Raises:
            ValidationFailedError: If the value is not a known type.
        """
        try:
            return CollectionType(collection_type)
        except ValueError:
            allowed = ", ".join(t.value for t in CollectionType)
            raise ValidationFailedError(
                "Invalid collection type",
                errors={"collection_type": [f"Must be one of: {allowed}"]},
            )

    @classmethod
    def validate(cls, collection_type: CollectionType | str, client_id: str | None) -> None:
        """Validate that exclusive collection types carry a client reference.

        Args:
            collection_type: GENERAL, EXCLUSIVE or EXCLUSIVE_GROUP.
            client_id: Optional owning client ID.

        Raises:
            ExclusivityViolationError: If an exclusive type has no client.
            ValidationFailedError: If the collection type is unknown.
        """
        parsed = cls.parse_type(collection_type)
        if parsed.requires_client and not (client_id and client_id.strip()):
            raise ExclusivityViolationError(parsed.value)
