"""Repository for product collection database operations."""

from typing import Iterable

from sqlalchemy import Row, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.infrastructure.persistence.models import ProductCollectionModel


class CollectionRepository:
    """Repository for product collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: ProductCollectionModel) -> ProductCollectionModel:
        """Create a new collection.

        Args:
            collection: Collection model to create.

        Returns:
            Created collection model.
        """
        self.session.add(collection)
        await self.session.flush()
        return collection

    async def get_by_id(self, collection_id: str) -> ProductCollectionModel | None:
        """Get a collection by ID, with its owning client loaded.

        Args:
            collection_id: Collection ID.

        Returns:
            Collection model if found, None otherwise.
        """
        result = await self.session.execute(
            select(ProductCollectionModel).where(ProductCollectionModel.id == collection_id)
        )
        return result.scalar_one_or_none()

    async def code_exists(self, collect_code: str, exclude_id: str | None = None) -> bool:
        """Check if a collection code is already taken.

        Args:
            collect_code: Collection code to check.
            exclude_id: Collection ID to ignore (the collection being updated).

        Returns:
            True if another collection uses the code, False otherwise.
        """
        query = select(ProductCollectionModel.id).where(
            ProductCollectionModel.collect_code == collect_code
        )
        if exclude_id is not None:
            query = query.where(ProductCollectionModel.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def get_all_paginated(
        self,
        page: int = 1,
        page_size: int = 10,
        search_query: str | None = None,
        client_id: str | None = None,
        category_code: str | None = None,
        collection_types: Iterable[str] | None = None,
    ) -> tuple[list[ProductCollectionModel], int]:
        """Get a page of collections, newest first.

        Args:
            page: Page number (1-indexed).
            page_size: Number of items per page.
            search_query: Case-insensitive substring of collect, name or design code.
            client_id: Only collections owned by this client.
            category_code: Only collections in this category.
            collection_types: Only collections of these types; None means any.

        Returns:
            Tuple of (list of collections, total count).
        """
        query = select(ProductCollectionModel)

        if search_query:
            search_pattern = f"%{search_query}%"
            query = query.where(
                or_(
                    ProductCollectionModel.collect_code.ilike(search_pattern),
                    ProductCollectionModel.name_code.ilike(search_pattern),
                    ProductCollectionModel.design_code.ilike(search_pattern),
                )
            )
        if client_id:
            query = query.where(ProductCollectionModel.client_id == client_id)
        if category_code:
            query = query.where(ProductCollectionModel.category_code == category_code)
        if collection_types is not None:
            query = query.where(ProductCollectionModel.collection_type.in_(list(collection_types)))

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.session.execute(count_query)).scalar_one()

        query = (
            query.order_by(
                ProductCollectionModel.created_at.desc(), ProductCollectionModel.id.desc()
            )
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def list_all(self) -> list[ProductCollectionModel]:
        """List every collection, oldest first."""
        result = await self.session.execute(
            select(ProductCollectionModel).order_by(
                ProductCollectionModel.created_at.asc(), ProductCollectionModel.id.asc()
            )
        )
        return list(result.scalars().all())

    async def list_ownership(self) -> list[Row]:
        """List (client_id, collection_type) for every client-owned collection."""
        result = await self.session.execute(
            select(
                ProductCollectionModel.client_id,
                ProductCollectionModel.collection_type,
            ).where(ProductCollectionModel.client_id.is_not(None))
        )
        return list(result.all())

    async def update(self, collection: ProductCollectionModel) -> ProductCollectionModel:
        """Update a collection.

        Args:
            collection: Collection model to update.

        Returns:
            Updated collection model.
        """
        if collection not in self.session:
            self.session.add(collection)
        await self.session.flush()
        return collection

    async def delete(self, collection: ProductCollectionModel) -> None:
        """Delete a collection.

        Args:
            collection: Collection model to delete.
        """
        await self.session.delete(collection)
        await self.session.flush()
