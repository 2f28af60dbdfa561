"""Pytest configuration for all tests."""

import uuid
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ceramic_catalog.domain.entities import Role
from ceramic_catalog.infrastructure.auth.jwt_service import jwt_service
from ceramic_catalog.infrastructure.persistence.database import Base
from ceramic_catalog.infrastructure.persistence.models import (
    ClientModel,
    ProductCollectionModel,
)

COLLECTION_CODES = {
    "design_code": "D1",
    "name_code": "N1",
    "category_code": "CAT",
    "size_code": "S1",
    "texture_code": "T1",
    "color_code": "C1",
    "material_code": "M1",
}


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from ceramic_catalog.infrastructure.api.app import app
    from ceramic_catalog.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


def make_token(role: Role, client_id: str | None = None) -> str:
    """Issue an access token for a caller with the given role."""
    return jwt_service.create_access_token(
        user_id=f"user-{role.value.lower()}",
        email=f"{role.value.lower()}@example.com",
        role=role.value,
        client_id=client_id,
    )


def auth_headers(role: Role) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(role)}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_headers(Role.ADMIN)


@pytest.fixture
def collection_headers() -> dict[str, str]:
    return auth_headers(Role.COLLECTION)


@pytest.fixture
def production_headers() -> dict[str, str]:
    return auth_headers(Role.PRODUCTION)


@pytest.fixture
def public_headers() -> dict[str, str]:
    return auth_headers(Role.PUBLIC)


async def create_client_record(
    session: AsyncSession,
    code: str,
    name: str,
    regions: list[str],
    departments: list[str],
) -> ClientModel:
    """Insert a client directly through the session."""
    client = ClientModel(
        id=str(uuid.uuid4()),
        code=code,
        name=name,
        regions=regions,
        departments=departments,
    )
    session.add(client)
    await session.flush()
    return client


async def create_collection_record(
    session: AsyncSession,
    collect_code: str,
    collection_type: str = "GENERAL",
    client: ClientModel | None = None,
) -> ProductCollectionModel:
    """Insert a collection directly through the session."""
    collection = ProductCollectionModel(
        id=str(uuid.uuid4()),
        collect_code=collect_code,
        collection_type=collection_type,
        client_id=client.id if client else None,
        details={},
        **COLLECTION_CODES,
    )
    collection.client = client
    session.add(collection)
    await session.flush()
    return collection


@pytest.fixture
def make_client(db_session: AsyncSession):
    """Factory fixture inserting clients into the test database."""

    async def _make(
        code: str,
        name: str,
        regions: list[str],
        departments: list[str],
    ) -> ClientModel:
        return await create_client_record(db_session, code, name, regions, departments)

    return _make


@pytest.fixture
def make_collection(db_session: AsyncSession):
    """Factory fixture inserting collections into the test database."""

    async def _make(
        collect_code: str,
        collection_type: str = "GENERAL",
        client: ClientModel | None = None,
    ) -> ProductCollectionModel:
        return await create_collection_record(db_session, collect_code, collection_type, client)

    return _make


@pytest.fixture
def collection_payload():
    """Factory for a valid collection request body."""

    def _payload(collect_code: str, **overrides) -> dict:
        body = {"collect_code": collect_code, **COLLECTION_CODES}
        body.update(overrides)
        return body

    return _payload
