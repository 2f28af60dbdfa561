"""Pydantic schemas for client relationship endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RelationshipUpdateRequest(BaseModel):
    """Schema for replacing a client's regions and departments."""

    client_id: str = Field(..., min_length=1, description="Client ID")
    regions: list[str] = Field(..., description="New region labels (at least one)")
    departments: list[str] = Field(..., description="New department labels (at least one)")


class RegionDepartmentPairResponse(BaseModel):
    """A single (region, department) combination of a client."""

    client_id: str
    region: str
    department: str

    model_config = ConfigDict(from_attributes=True)


class ClientRelationshipsResponse(BaseModel):
    """Every (region, department) pair of one client."""

    client_id: str
    relationships: list[RegionDepartmentPairResponse]


class RelationshipStatsResponse(BaseModel):
    """Aggregate client and collection-type counts."""

    total_clients: int
    total_regions: int
    total_departments: int
    clients_by_region: dict[str, int]
    clients_by_department: dict[str, int]
    collection_distribution: dict[str, int]

    model_config = ConfigDict(from_attributes=True)


class RelationshipOverviewResponse(BaseModel):
    """Regions, departments, matrix and stats from a single snapshot."""

    regions: list[str]
    departments: list[str]
    matrix: dict[str, dict[str, list[str]]] = Field(
        ..., description="Region -> department -> client display names"
    )
    stats: RelationshipStatsResponse
