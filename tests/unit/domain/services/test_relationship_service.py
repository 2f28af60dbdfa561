"""Unit tests for RelationshipService."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from ceramic_catalog.domain.exceptions import (
    ClientNotFoundError,
    EmptyDepartmentSetError,
    EmptyRegionSetError,
)
from ceramic_catalog.domain.services.relationship_service import RelationshipService
from ceramic_catalog.infrastructure.persistence.models import ClientModel


def _client(cid, code, name, regions, departments):
    return ClientModel(id=cid, code=code, name=name, regions=regions, departments=departments)


@pytest.fixture
def relationship_service():
    """RelationshipService instance with mocked repositories."""
    service = RelationshipService(AsyncMock())
    service.client_repo = AsyncMock()
    service.collection_repo = AsyncMock()

    async def _echo(client):
        return client

    service.client_repo.update.side_effect = _echo
    service.client_repo.list_in_insertion_order.return_value = [
        _client("a", "A", "Alpha", ["Tokyo", "Paris"], ["Spa"]),
        _client("b", "B", "Beta", ["Paris"], ["Spa", "Bathroom"]),
    ]
    service.collection_repo.list_ownership.return_value = [
        SimpleNamespace(client_id="a", collection_type="EXCLUSIVE"),
        SimpleNamespace(client_id="b", collection_type="EXCLUSIVE_GROUP"),
    ]
    return service


@pytest.mark.asyncio
async def test_regions_and_departments(relationship_service):
    assert await relationship_service.get_regions() == ["Paris", "Tokyo"]
    assert await relationship_service.get_departments() == ["Bathroom", "Spa"]


@pytest.mark.asyncio
async def test_overview(relationship_service):
    overview = await relationship_service.get_overview()

    assert overview["matrix"]["Paris"]["Spa"] == ["Alpha (A)", "Beta (B)"]
    assert overview["stats"].collection_distribution["EXCLUSIVE"] == 1
    assert overview["stats"].collection_distribution["EXCLUSIVE_GROUP"] == 1
    assert overview["stats"].total_clients == 2


@pytest.mark.asyncio
async def test_clients_by_region_department(relationship_service):
    clients = await relationship_service.get_clients_by_region_department("Paris", "Bathroom")

    assert [c.code for c in clients] == ["B"]


@pytest.mark.asyncio
async def test_client_pairs_not_found(relationship_service):
    relationship_service.client_repo.get_by_id.return_value = None

    with pytest.raises(ClientNotFoundError):
        await relationship_service.get_client_pairs("missing")


@pytest.mark.asyncio
async def test_update_replaces_sets(relationship_service):
    existing = _client("a", "A", "Alpha", ["Tokyo"], ["Spa"])
    relationship_service.client_repo.get_by_id.return_value = existing

    result = await relationship_service.update_client_relationships(
        "a", regions=["Paris", " Paris "], departments=["Bathroom"]
    )

    assert result.regions == ["Paris"]
    assert result.departments == ["Bathroom"]
    relationship_service.client_repo.update.assert_called_once_with(existing)


@pytest.mark.asyncio
async def test_update_with_empty_regions(relationship_service):
    with pytest.raises(EmptyRegionSetError) as exc:
        await relationship_service.update_client_relationships("a", ["  "], ["Spa"])

    assert exc.value.message == "At least one region must be specified"
    relationship_service.client_repo.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_update_with_empty_departments(relationship_service):
    with pytest.raises(EmptyDepartmentSetError) as exc:
        await relationship_service.update_client_relationships("a", ["Tokyo"], [])

    assert exc.value.message == "At least one department must be specified"


@pytest.mark.asyncio
async def test_update_unknown_client(relationship_service):
    relationship_service.client_repo.get_by_id.return_value = None

    with pytest.raises(ClientNotFoundError):
        await relationship_service.update_client_relationships("missing", ["Tokyo"], ["Spa"])
