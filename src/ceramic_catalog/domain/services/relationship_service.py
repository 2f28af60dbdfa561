"""Client region/department relationship queries and updates.

Every read loads the current client set and builds a fresh
RelationshipIndex, so an update is visible to the next query without any
cache to invalidate.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.core.logging import get_logger
from ceramic_catalog.domain.entities.client import normalize_labels
from ceramic_catalog.domain.exceptions import (
    ClientNotFoundError,
    EmptyDepartmentSetError,
    EmptyRegionSetError,
)
from ceramic_catalog.domain.services.relationship_index import (
    Matrix,
    RegionDepartmentPair,
    RelationshipIndex,
    RelationshipStats,
)
from ceramic_catalog.infrastructure.persistence.models import ClientModel
from ceramic_catalog.infrastructure.persistence.repositories import (
    ClientRepository,
    CollectionRepository,
)

logger = get_logger(__name__)


class RelationshipService:
    """Service for client relationship business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the relationship service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.client_repo = ClientRepository(session)
        self.collection_repo = CollectionRepository(session)

    async def _index(self) -> RelationshipIndex:
        return RelationshipIndex(await self.client_repo.list_in_insertion_order())

    async def get_regions(self) -> list[str]:
        """Return every region used by any client, sorted."""
        return (await self._index()).all_regions()

    async def get_departments(self) -> list[str]:
        """Return every department used by any client, sorted."""
        return (await self._index()).all_departments()

    async def get_matrix(self) -> Matrix:
        """Return the region -> department -> client names matrix."""
        return (await self._index()).matrix()

    async def get_stats(self) -> RelationshipStats:
        """Return client and collection-type statistics."""
        index = await self._index()
        return index.stats(await self.collection_repo.list_ownership())

    async def get_overview(self) -> dict[str, Any]:
        """Return regions, departments, matrix and stats from one snapshot."""
        index = await self._index()
        return {
            "regions": index.all_regions(),
            "departments": index.all_departments(),
            "matrix": index.matrix(),
            "stats": index.stats(await self.collection_repo.list_ownership()),
        }

    async def get_client_pairs(self, client_id: str) -> list[RegionDepartmentPair]:
        """Return every (region, department) pair of one client.

        Raises:
            ClientNotFoundError: If the client does not exist.
        """
        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return RelationshipIndex.pairs_for(client)

    async def get_clients_by_region_department(
        self, region: str, department: str
    ) -> list[ClientModel]:
        """Return clients carrying both the region and the department."""
        return (await self._index()).clients_for(region, department)

    async def update_client_relationships(
        self,
        client_id: str,
        regions: list[str],
        departments: list[str],
    ) -> ClientModel:
        """Replace a client's regions and departments.

        Labels are stripped and de-duplicated; the resulting sets must both
        be non-empty. The previous sets are discarded, not merged.

        Raises:
            EmptyRegionSetError: If no region is left.
            EmptyDepartmentSetError: If no department is left.
            ClientNotFoundError: If the client does not exist.
        """
        cleaned_regions = normalize_labels(regions)
        cleaned_departments = normalize_labels(departments)
        if not cleaned_regions:
            raise EmptyRegionSetError()
        if not cleaned_departments:
            raise EmptyDepartmentSetError()

        client = await self.client_repo.get_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        client.regions = cleaned_regions
        client.departments = cleaned_departments
        updated = await self.client_repo.update(client)
        logger.info(
            "Client relationships updated",
            client_id=client_id,
            regions=cleaned_regions,
            departments=cleaned_departments,
        )
        return updated
