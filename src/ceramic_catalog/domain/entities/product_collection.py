"""Product collection entity."""

from dataclasses import dataclass

from ceramic_catalog.domain.entities.client import Client
from ceramic_catalog.domain.entities.role import CollectionType


@dataclass
class ProductCollection:
    """A ceramic product collection.

    Only the exclusivity tag and the owning client matter to access
    control; the descriptive codes are opaque strings.

    Attributes:
        id: Unique identifier (UUID string).
        collect_code: Unique collection code.
        collection_type: GENERAL, EXCLUSIVE or EXCLUSIVE_GROUP.
        client_id: Owning client, required for the exclusive types.
        client: Owning client entity when loaded.
    """

    id: str
    collect_code: str
    collection_type: CollectionType = CollectionType.GENERAL
    client_id: str | None = None
    client: Client | None = None
    design_code: str = ""
    name_code: str = ""
    category_code: str = ""
    size_code: str = ""
    texture_code: str = ""
    color_code: str = ""
    material_code: str = ""

    def __post_init__(self) -> None:
        """Validate collection data after initialization."""
        if not self.id:
            raise ValueError("Collection ID is required")
        if not self.collect_code:
            raise ValueError("Collection code is required")
        self.collection_type = CollectionType(self.collection_type)
        if self.client is not None and self.client_id is None:
            self.client_id = self.client.id
