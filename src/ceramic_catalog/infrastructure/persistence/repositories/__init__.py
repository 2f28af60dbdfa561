"""Persistence repositories for database operations."""

from ceramic_catalog.infrastructure.persistence.repositories.client_repository import (
    ClientRepository,
)
from ceramic_catalog.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from ceramic_catalog.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ClientRepository",
    "CollectionRepository",
    "UserRepository",
]
