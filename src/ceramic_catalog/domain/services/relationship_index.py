"""Region and department relationships derived from the client set.

The index is built from a snapshot of clients and is never persisted;
callers build a fresh one per query so it cannot go stale. Clients may be
domain entities or ORM models, anything exposing ``id``, ``code``,
``name``, ``regions``, ``departments`` and ``display_name``.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ceramic_catalog.domain.entities.client import Client
from ceramic_catalog.domain.entities.product_collection import ProductCollection
from ceramic_catalog.domain.entities.role import CollectionType

Matrix = dict[str, dict[str, list[str]]]


@dataclass(frozen=True)
class RegionDepartmentPair:
    """A single (region, department) combination carried by a client."""

    client_id: str
    region: str
    department: str


@dataclass
class RelationshipStats:
    """Aggregate counts over clients and the collections they own.

    Attributes:
        total_clients: Number of clients.
        total_regions: Number of distinct regions.
        total_departments: Number of distinct departments.
        clients_by_region: Region label -> number of clients carrying it.
        clients_by_department: Department label -> number of clients carrying it.
        collection_distribution: Collection type -> number of client-owned collections.
    """

    total_clients: int = 0
    total_regions: int = 0
    total_departments: int = 0
    clients_by_region: dict[str, int] = field(default_factory=dict)
    clients_by_department: dict[str, int] = field(default_factory=dict)
    collection_distribution: dict[str, int] = field(
        default_factory=lambda: {t.value: 0 for t in CollectionType}
    )


class RelationshipIndex:
    """Read-only view of regions, departments and the relationship matrix.

    Region and department lists are sorted; matrix cells keep client
    iteration order.
    """

    def __init__(self, clients: Iterable[Client]) -> None:
        self.clients: list[Client] = list(clients)

    def all_regions(self) -> list[str]:
        """Return every region carried by any client, sorted."""
        return sorted({region for client in self.clients for region in client.regions})

    def all_departments(self) -> list[str]:
        """Return every department carried by any client, sorted."""
        return sorted(
            {department for client in self.clients for department in client.departments}
        )

    def matrix(self) -> Matrix:
        """Build the region -> department -> client display names matrix.

        Pairs are taken within each client's own sets, never across
        clients. Two clients sharing a cell both appear in it, even when
        they share no collection.
        """
        matrix: Matrix = {}
        for client in self.clients:
            for region in client.regions:
                for department in client.departments:
                    row = matrix.setdefault(region, {})
                    row.setdefault(department, []).append(client.display_name)
        return matrix

    @staticmethod
    def pairs_for(client: Client) -> list[RegionDepartmentPair]:
        """Return the cartesian product of one client's regions and departments."""
        return [
            RegionDepartmentPair(client_id=client.id, region=region, department=department)
            for region in client.regions
            for department in client.departments
        ]

    @staticmethod
    def has_pair(client: Client, region: str, department: str) -> bool:
        """Check whether a client carries both the region and the department."""
        return region in client.regions and department in client.departments

    def clients_for(self, region: str, department: str) -> list[Client]:
        """Return clients carrying both the region and the department."""
        return [c for c in self.clients if self.has_pair(c, region, department)]

    def stats(self, collections: Sequence[ProductCollection] = ()) -> RelationshipStats:
        """Summarize clients and the types of collections they own.

        Args:
            collections: Collections to count; only client-owned ones are counted.

        Returns:
            RelationshipStats for the current snapshot.
        """
        region_counts: Counter[str] = Counter()
        department_counts: Counter[str] = Counter()
        for client in self.clients:
            region_counts.update(client.regions)
            department_counts.update(client.departments)

        client_ids = {client.id for client in self.clients}
        result = RelationshipStats(
            total_clients=len(self.clients),
            total_regions=len(region_counts),
            total_departments=len(department_counts),
            clients_by_region=dict(region_counts),
            clients_by_department=dict(department_counts),
        )
        for collection in collections:
            if collection.client_id in client_ids:
                kind = CollectionType(collection.collection_type).value
                result.collection_distribution[kind] += 1
        return result
