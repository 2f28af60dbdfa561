"""Unit tests for the clients router handlers."""

from unittest.mock import AsyncMock, patch

import pytest

from ceramic_catalog.domain.entities import Role
from ceramic_catalog.domain.exceptions import ValidationFailedError
from ceramic_catalog.domain.services import RelationshipStats
from ceramic_catalog.infrastructure.api.dependencies import CurrentUser
from ceramic_catalog.infrastructure.api.routes.clients_router import (
    RelationshipAction,
    get_relationships,
)


@pytest.fixture
def current_user():
    return CurrentUser(user_id="u1", email="p@example.com", role=Role.PRODUCTION)


@pytest.fixture
def mock_service():
    with patch(
        "ceramic_catalog.infrastructure.api.routes.clients_router.RelationshipService"
    ) as service_cls:
        service = AsyncMock()
        service_cls.return_value = service
        yield service


@pytest.mark.asyncio
async def test_regions_action(current_user, mock_service):
    mock_service.get_regions.return_value = ["Paris", "Tokyo"]

    result = await get_relationships(current_user, AsyncMock(), action=RelationshipAction.REGIONS)

    assert result == {"regions": ["Paris", "Tokyo"]}


@pytest.mark.asyncio
async def test_stats_action(current_user, mock_service):
    mock_service.get_stats.return_value = RelationshipStats(total_clients=2)

    result = await get_relationships(current_user, AsyncMock(), action=RelationshipAction.STATS)

    assert result["stats"]["total_clients"] == 2
    assert result["stats"]["collection_distribution"]["GENERAL"] == 0


@pytest.mark.asyncio
async def test_client_action_requires_client_id(current_user, mock_service):
    with pytest.raises(ValidationFailedError) as exc:
        await get_relationships(
            current_user, AsyncMock(), action=RelationshipAction.CLIENT, client_id=None
        )

    assert "client_id" in exc.value.errors
    mock_service.get_client_pairs.assert_not_called()


@pytest.mark.asyncio
async def test_clients_by_region_dept_requires_both(current_user, mock_service):
    with pytest.raises(ValidationFailedError) as exc:
        await get_relationships(
            current_user,
            AsyncMock(),
            action=RelationshipAction.CLIENTS_BY_REGION_DEPT,
            client_id=None,
            region="Tokyo",
            department=None,
        )

    assert set(exc.value.errors) == {"department"}
