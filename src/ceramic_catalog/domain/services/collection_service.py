"""Product collection service for business logic.

Write operations run the exclusivity check first, then resolve the owning
client, then enforce collect code uniqueness. Read operations apply role
visibility through the VisibilityResolver.
"""

import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.core.logging import get_logger
from ceramic_catalog.domain.entities.role import Role
from ceramic_catalog.domain.exceptions import (
    ClientNotFoundError,
    CollectionNotFoundError,
    ConflictError,
)
from ceramic_catalog.domain.services.exclusivity_validator import ExclusivityValidator
from ceramic_catalog.domain.services.visibility_resolver import VisibilityResolver
from ceramic_catalog.infrastructure.persistence.models import (
    ClientModel,
    ProductCollectionModel,
)
from ceramic_catalog.infrastructure.persistence.repositories import (
    ClientRepository,
    CollectionRepository,
)

logger = get_logger(__name__)

# Columns that are not copied when duplicating a collection
_NON_COPYABLE = frozenset({"id", "collect_code", "created_at", "updated_at"})


class CollectionService:
    """Service for product collection business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the collection service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.collection_repo = CollectionRepository(session)
        self.client_repo = ClientRepository(session)

    async def list_collections(
        self,
        role: Role | str | None,
        page: int = 1,
        page_size: int = 10,
        search: str | None = None,
        client_id: str | None = None,
        category_code: str | None = None,
        collection_type: str | None = None,
    ) -> tuple[list[ProductCollectionModel], int]:
        """List the collections visible to a role, newest first.

        The role restriction is combined with any requested type filter, so
        a PUBLIC caller asking for EXCLUSIVE collections gets none.

        Returns:
            Tuple of (collections on the page, total visible count).
        """
        visible = VisibilityResolver.visible_types(role)
        types = None if visible is None else {t.value for t in visible}
        if collection_type:
            requested = {ExclusivityValidator.parse_type(collection_type).value}
            types = requested if types is None else types & requested

        return await self.collection_repo.get_all_paginated(
            page=page,
            page_size=page_size,
            search_query=search,
            client_id=client_id,
            category_code=category_code,
            collection_types=types,
        )

    async def get_collection(
        self, collection_id: str, role: Role | str | None
    ) -> ProductCollectionModel:
        """Get a single collection the role may read.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
            AccessDeniedError: If the role may not read it.
        """
        collection = await self._get_or_raise(collection_id)
        VisibilityResolver.check_read_access(role, collection)
        return collection

    async def create_collection(self, attributes: dict[str, Any]) -> ProductCollectionModel:
        """Create a collection.

        Args:
            attributes: Column values keyed by model attribute name.

        Raises:
            ExclusivityViolationError: If an exclusive type has no client.
            ClientNotFoundError: If the referenced client does not exist.
            ConflictError: If the collect code is already taken.
        """
        values = dict(attributes)
        client = await self._validate(values)
        if await self.collection_repo.code_exists(values["collect_code"]):
            raise ConflictError(f"Collection code '{values['collect_code']}' already exists")

        collection = ProductCollectionModel(id=str(uuid.uuid4()), **values)
        collection.client = client
        created = await self.collection_repo.create(collection)
        logger.info(
            "Collection created",
            collection_id=created.id,
            collect_code=created.collect_code,
            collection_type=created.collection_type,
        )
        return created

    async def update_collection(
        self, collection_id: str, attributes: dict[str, Any]
    ) -> ProductCollectionModel:
        """Replace a collection's attributes.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
            ExclusivityViolationError: If an exclusive type has no client.
            ClientNotFoundError: If the referenced client does not exist.
            ConflictError: If the new collect code belongs to another collection.
        """
        collection = await self._get_or_raise(collection_id)
        values = dict(attributes)
        client = await self._validate(values)

        code = values["collect_code"]
        if code != collection.collect_code and await self.collection_repo.code_exists(
            code, exclude_id=collection_id
        ):
            raise ConflictError(f"Collection code '{code}' already exists")

        for key, value in values.items():
            setattr(collection, key, value)
        collection.client = client
        updated = await self.collection_repo.update(collection)
        logger.info("Collection updated", collection_id=collection_id)
        return updated

    async def delete_collection(self, collection_id: str) -> None:
        """Delete a collection.

        Raises:
            CollectionNotFoundError: If the collection does not exist.
        """
        collection = await self._get_or_raise(collection_id)
        await self.collection_repo.delete(collection)
        logger.info("Collection deleted", collection_id=collection_id)

    async def duplicate_collection(
        self, original_id: str, new_code: str
    ) -> ProductCollectionModel:
        """Copy a collection under a new collect code.

        Raises:
            CollectionNotFoundError: If the original does not exist.
            ConflictError: If the new code is already taken.
        """
        original = await self._get_or_raise(original_id)
        attributes = {
            column.key: getattr(original, column.key)
            for column in ProductCollectionModel.__table__.columns
            if column.key not in _NON_COPYABLE
        }
        attributes["details"] = dict(original.details or {})
        attributes["collect_code"] = new_code.strip()
        duplicate = await self.create_collection(attributes)
        logger.info("Collection duplicated", original_id=original_id, collection_id=duplicate.id)
        return duplicate

    async def reachable_for_client(
        self,
        client_id: str,
        region: str | None = None,
        department: str | None = None,
    ) -> list[ProductCollectionModel]:
        """List the collections a client reaches through its relationships.

        Raises:
            ClientNotFoundError: If the client does not exist.
            ValidationFailedError: If the region or department is not the client's.
        """
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        collections = await self.collection_repo.list_all()
        return VisibilityResolver.reachable_collections(client, collections, region, department)

    async def _get_or_raise(self, collection_id: str) -> ProductCollectionModel:
        collection = await self.collection_repo.get_by_id(collection_id)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        return collection

    async def _validate(self, values: dict[str, Any]) -> ClientModel | None:
        """Check exclusivity and resolve the owning client.

        Normalizes ``collection_type`` and ``client_id`` in place.
        """
        client_id = (values.get("client_id") or "").strip() or None
        collection_type = ExclusivityValidator.parse_type(values.get("collection_type", "GENERAL"))
        ExclusivityValidator.validate(collection_type, client_id)

        client = None
        if client_id is not None:
            client = await self.client_repo.get_by_id(client_id)
            if client is None:
                raise ClientNotFoundError(client_id)

        values["client_id"] = client_id
        values["collection_type"] = collection_type.value
        values["collect_code"] = values["collect_code"].strip()
        return client
