"""SQLAlchemy models for the catalog tables.

All models inherit from the Base class defined in database.py and are
automatically created on application startup in development mode.
"""

from ceramic_catalog.infrastructure.persistence.models.client import ClientModel
from ceramic_catalog.infrastructure.persistence.models.product_collection import (
    ProductCollectionModel,
)
from ceramic_catalog.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ClientModel",
    "ProductCollectionModel",
    "UserModel",
]
