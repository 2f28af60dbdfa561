"""Unit tests for CollectionService."""

from unittest.mock import AsyncMock

import pytest

from ceramic_catalog.domain.entities import Role
from ceramic_catalog.domain.exceptions import (
    AccessDeniedError,
    ClientNotFoundError,
    CollectionNotFoundError,
    ConflictError,
    ExclusivityViolationError,
    ValidationFailedError,
)
from ceramic_catalog.domain.services.collection_service import CollectionService
from ceramic_catalog.infrastructure.persistence.models import (
    ClientModel,
    ProductCollectionModel,
)

CODES = {
    "design_code": "D1",
    "name_code": "N1",
    "category_code": "CAT",
    "size_code": "S1",
    "texture_code": "T1",
    "color_code": "C1",
    "material_code": "M1",
}


def _attributes(collect_code="COL-1", **overrides):
    attributes = {"collect_code": collect_code, "collection_type": "GENERAL", **CODES}
    attributes.update(overrides)
    return attributes


async def _echo(collection):
    return collection


@pytest.fixture
def owner():
    return ClientModel(id="c1", code="A", name="Alpha", regions=["Tokyo"], departments=["Spa"])


@pytest.fixture
def collection_service():
    """CollectionService instance with mocked repositories."""
    service = CollectionService(AsyncMock())
    service.collection_repo = AsyncMock()
    service.client_repo = AsyncMock()
    service.collection_repo.create.side_effect = _echo
    service.collection_repo.update.side_effect = _echo
    service.collection_repo.code_exists.return_value = False
    return service


class TestListCollections:
    """Role visibility is pushed into the repository query."""

    @pytest.mark.asyncio
    async def test_public_restricted_to_general(self, collection_service):
        collection_service.collection_repo.get_all_paginated.return_value = ([], 0)

        await collection_service.list_collections(Role.PUBLIC)

        kwargs = collection_service.collection_repo.get_all_paginated.call_args.kwargs
        assert kwargs["collection_types"] == {"GENERAL"}

    @pytest.mark.asyncio
    async def test_admin_unrestricted(self, collection_service):
        collection_service.collection_repo.get_all_paginated.return_value = ([], 0)

        await collection_service.list_collections(Role.ADMIN, page=2, page_size=5)

        kwargs = collection_service.collection_repo.get_all_paginated.call_args.kwargs
        assert kwargs["collection_types"] is None
        assert kwargs["page"] == 2
        assert kwargs["page_size"] == 5

    @pytest.mark.asyncio
    async def test_public_asking_for_exclusive_gets_nothing(self, collection_service):
        collection_service.collection_repo.get_all_paginated.return_value = ([], 0)

        await collection_service.list_collections(Role.PUBLIC, collection_type="EXCLUSIVE")

        kwargs = collection_service.collection_repo.get_all_paginated.call_args.kwargs
        assert kwargs["collection_types"] == set()

    @pytest.mark.asyncio
    async def test_type_filter_for_privileged_role(self, collection_service):
        collection_service.collection_repo.get_all_paginated.return_value = ([], 0)

        await collection_service.list_collections(
            Role.PRODUCTION, collection_type="EXCLUSIVE_GROUP"
        )

        kwargs = collection_service.collection_repo.get_all_paginated.call_args.kwargs
        assert kwargs["collection_types"] == {"EXCLUSIVE_GROUP"}

    @pytest.mark.asyncio
    async def test_unknown_type_filter(self, collection_service):
        with pytest.raises(ValidationFailedError):
            await collection_service.list_collections(Role.ADMIN, collection_type="PRIVATE")


@pytest.mark.asyncio
async def test_get_collection_not_found(collection_service):
    collection_service.collection_repo.get_by_id.return_value = None

    with pytest.raises(CollectionNotFoundError):
        await collection_service.get_collection("missing", Role.ADMIN)


@pytest.mark.asyncio
async def test_get_exclusive_collection_as_public(collection_service):
    collection_service.collection_repo.get_by_id.return_value = ProductCollectionModel(
        id="p1", collect_code="X", collection_type="EXCLUSIVE", client_id="c1", **CODES
    )

    with pytest.raises(AccessDeniedError):
        await collection_service.get_collection("p1", Role.PUBLIC)


@pytest.mark.asyncio
async def test_create_general_collection(collection_service):
    result = await collection_service.create_collection(_attributes(collect_code=" COL-1 "))

    assert result.collect_code == "COL-1"
    assert result.collection_type == "GENERAL"
    assert result.client_id is None
    assert result.client is None
    collection_service.client_repo.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_create_exclusive_without_client(collection_service):
    with pytest.raises(ExclusivityViolationError):
        await collection_service.create_collection(_attributes(collection_type="EXCLUSIVE"))

    collection_service.collection_repo.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_exclusive_checks_exclusivity_before_code(collection_service):
    collection_service.collection_repo.code_exists.return_value = True

    with pytest.raises(ExclusivityViolationError):
        await collection_service.create_collection(
            _attributes(collection_type="EXCLUSIVE_GROUP", client_id="  ")
        )


@pytest.mark.asyncio
async def test_create_with_unknown_client(collection_service):
    collection_service.client_repo.get_by_id.return_value = None

    with pytest.raises(ClientNotFoundError):
        await collection_service.create_collection(
            _attributes(collection_type="EXCLUSIVE", client_id="nope")
        )


@pytest.mark.asyncio
async def test_create_exclusive_with_client(collection_service, owner):
    collection_service.client_repo.get_by_id.return_value = owner

    result = await collection_service.create_collection(
        _attributes(collection_type="EXCLUSIVE", client_id="c1")
    )

    assert result.client_id == "c1"
    assert result.client is owner


@pytest.mark.asyncio
async def test_create_duplicate_code(collection_service):
    collection_service.collection_repo.code_exists.return_value = True

    with pytest.raises(ConflictError):
        await collection_service.create_collection(_attributes())


@pytest.mark.asyncio
async def test_update_to_exclusive_without_client(collection_service):
    collection_service.collection_repo.get_by_id.return_value = ProductCollectionModel(
        id="p1", collect_code="COL-1", collection_type="GENERAL", **CODES
    )

    with pytest.raises(ExclusivityViolationError):
        await collection_service.update_collection("p1", _attributes(collection_type="EXCLUSIVE"))


@pytest.mark.asyncio
async def test_update_replaces_attributes(collection_service, owner):
    existing = ProductCollectionModel(
        id="p1", collect_code="COL-1", collection_type="GENERAL", **CODES
    )
    collection_service.collection_repo.get_by_id.return_value = existing
    collection_service.client_repo.get_by_id.return_value = owner

    result = await collection_service.update_collection(
        "p1",
        _attributes(collection_type="EXCLUSIVE_GROUP", client_id="c1", color_code="BLUE"),
    )

    assert result.collection_type == "EXCLUSIVE_GROUP"
    assert result.color_code == "BLUE"
    assert result.client is owner
    collection_service.collection_repo.code_exists.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_copies_attributes(collection_service, owner):
    original = ProductCollectionModel(
        id="p1",
        collect_code="COL-1",
        collection_type="EXCLUSIVE",
        client_id="c1",
        details={"clay": "Stoneware", "glaze": ["Celadon"]},
        **CODES,
    )
    collection_service.collection_repo.get_by_id.return_value = original
    collection_service.client_repo.get_by_id.return_value = owner

    copy = await collection_service.duplicate_collection("p1", "COL-2")

    assert copy.id != original.id
    assert copy.collect_code == "COL-2"
    assert copy.collection_type == "EXCLUSIVE"
    assert copy.client_id == "c1"
    assert copy.design_code == original.design_code
    assert copy.details == original.details
    assert copy.details is not original.details


@pytest.mark.asyncio
async def test_duplicate_missing_original(collection_service):
    collection_service.collection_repo.get_by_id.return_value = None

    with pytest.raises(CollectionNotFoundError):
        await collection_service.duplicate_collection("missing", "COL-2")


@pytest.mark.asyncio
async def test_reachable_for_unknown_client(collection_service):
    collection_service.client_repo.get_by_id.return_value = None

    with pytest.raises(ClientNotFoundError):
        await collection_service.reachable_for_client("missing")


@pytest.mark.asyncio
async def test_reachable_for_client(collection_service, owner):
    other = ClientModel(id="c2", code="B", name="Beta", regions=["Tokyo"], departments=["Spa"])
    group = ProductCollectionModel(
        id="p1", collect_code="X", collection_type="EXCLUSIVE_GROUP", client_id="c1", **CODES
    )
    group.client = owner
    exclusive = ProductCollectionModel(
        id="p2", collect_code="E", collection_type="EXCLUSIVE", client_id="c1", **CODES
    )
    exclusive.client = owner
    collection_service.client_repo.get_by_id.return_value = other
    collection_service.collection_repo.list_all.return_value = [group, exclusive]

    reachable = await collection_service.reachable_for_client("c2")

    assert reachable == [group]
