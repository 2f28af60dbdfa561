"""Domain entities for the catalog.

Entities are pure Python dataclasses and enums that represent core business
concepts. They have no dependencies on infrastructure or external frameworks.
"""

from ceramic_catalog.domain.entities.client import Client, normalize_labels
from ceramic_catalog.domain.entities.product_collection import ProductCollection
from ceramic_catalog.domain.entities.role import CollectionType, Role

__all__ = [
    "Client",
    "CollectionType",
    "ProductCollection",
    "Role",
    "normalize_labels",
]
