"""Repository for client database operations."""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.infrastructure.persistence.models import ClientModel, ProductCollectionModel


class ClientRepository:
    """Repository for client database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, client: ClientModel) -> ClientModel:
        """Create a new client.

        Args:
            client: Client model to create.

        Returns:
            Created client model.
        """
        self.session.add(client)
        await self.session.flush()
        return client

    async def get_by_id(self, client_id: str) -> ClientModel | None:
        """Get a client by ID.

        Args:
            client_id: Client ID.

        Returns:
            Client model if found, None otherwise.
        """
        result = await self.session.execute(
            select(ClientModel).where(ClientModel.id == client_id)
        )
        return result.scalar_one_or_none()

    async def code_exists(self, code: str, exclude_id: str | None = None) -> bool:
        """Check if a client code is already taken.

        Args:
            code: Client code to check.
            exclude_id: Client ID to ignore (the client being updated).

        Returns:
            True if another client uses the code, False otherwise.
        """
        query = select(ClientModel.id).where(ClientModel.code == code)
        if exclude_id is not None:
            query = query.where(ClientModel.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def get_all(self, search_query: str | None = None) -> list[ClientModel]:
        """List clients ordered by name, optionally filtered by code or name.

        Args:
            search_query: Case-insensitive substring of the code or name.

        Returns:
            List of client models.
        """
        query = select(ClientModel)
        if search_query:
            search_pattern = f"%{search_query}%"
            query = query.where(
                or_(
                    ClientModel.code.ilike(search_pattern),
                    ClientModel.name.ilike(search_pattern),
                )
            )
        result = await self.session.execute(query.order_by(ClientModel.name.asc()))
        return list(result.scalars().all())

    async def list_in_insertion_order(self) -> list[ClientModel]:
        """List all clients in the order they were created.

        Relationship matrix cells list clients in this order.
        """
        result = await self.session.execute(
            select(ClientModel).order_by(ClientModel.created_at.asc(), ClientModel.id.asc())
        )
        return list(result.scalars().all())

    async def count_collections(self, client_id: str) -> int:
        """Count the collections owned by a client.

        Args:
            client_id: Client ID.

        Returns:
            Number of collections referencing the client.
        """
        result = await self.session.execute(
            select(func.count(ProductCollectionModel.id)).where(
                ProductCollectionModel.client_id == client_id
            )
        )
        return result.scalar_one() or 0

    async def update(self, client: ClientModel) -> ClientModel:
        """Update a client.

        Args:
            client: Client model to update.

        Returns:
            Updated client model.
        """
        if client not in self.session:
            self.session.add(client)
        await self.session.flush()
        return client

    async def delete(self, client: ClientModel) -> None:
        """Delete a client.

        Args:
            client: Client model to delete.
        """
        await self.session.delete(client)
        await self.session.flush()
