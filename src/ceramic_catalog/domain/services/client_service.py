"""Client service for business logic.

Provides client creation, updates, deletion and listing with the
uniqueness and delete-guard rules.
"""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.core.logging import get_logger
from ceramic_catalog.domain.entities.client import normalize_labels
from ceramic_catalog.domain.exceptions import ClientNotFoundError, ConflictError
from ceramic_catalog.infrastructure.persistence.models import ClientModel
from ceramic_catalog.infrastructure.persistence.repositories import ClientRepository

logger = get_logger(__name__)


class ClientService:
    """Service for client management business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the client service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.client_repo = ClientRepository(session)

    async def list_clients(self, search: str | None = None) -> list[ClientModel]:
        """List clients ordered by name, optionally filtered by code or name."""
        return await self.client_repo.get_all(search_query=search)

    async def get_client(self, client_id: str) -> tuple[ClientModel, int]:
        """Get a client with the number of collections it owns.

        Raises:
            ClientNotFoundError: If the client does not exist.
        """
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        collection_count = await self.client_repo.count_collections(client_id)
        return client, collection_count

    async def create_client(
        self,
        code: str,
        name: str,
        regions: list[str] | None = None,
        departments: list[str] | None = None,
    ) -> ClientModel:
        """Create a new client.

        Raises:
            ConflictError: If the client code is already taken.
        """
        code = code.strip()
        if await self.client_repo.code_exists(code):
            raise ConflictError(f"Client code '{code}' already exists")

        client = ClientModel(
            id=str(uuid.uuid4()),
            code=code,
            name=name.strip(),
            regions=normalize_labels(regions),
            departments=normalize_labels(departments),
        )
        created = await self.client_repo.create(client)
        logger.info("Client created", client_id=created.id, code=created.code)
        return created

    async def update_client(
        self,
        client_id: str,
        code: str,
        name: str,
        regions: list[str] | None = None,
        departments: list[str] | None = None,
    ) -> ClientModel:
        """Replace a client's code, name, regions and departments.

        Raises:
            ClientNotFoundError: If the client does not exist.
            ConflictError: If the new code belongs to another client.
        """
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        code = code.strip()
        if code != client.code and await self.client_repo.code_exists(code, exclude_id=client_id):
            raise ConflictError(f"Client code '{code}' already exists")

        client.code = code
        client.name = name.strip()
        client.regions = normalize_labels(regions)
        client.departments = normalize_labels(departments)
        updated = await self.client_repo.update(client)
        logger.info("Client updated", client_id=client_id)
        return updated

    async def delete_client(self, client_id: str) -> None:
        """Delete a client that owns no collections.

        Raises:
            ClientNotFoundError: If the client does not exist.
            ConflictError: If the client still owns collections.
        """
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        collection_count = await self.client_repo.count_collections(client_id)
        if collection_count > 0:
            logger.info(
                "Client delete blocked",
                client_id=client_id,
                collection_count=collection_count,
            )
            raise ConflictError(
                f"Cannot delete client with {collection_count} collections. "
                "Please reassign or delete associated records first."
            )

        await self.client_repo.delete(client)
        logger.info("Client deleted", client_id=client_id)
