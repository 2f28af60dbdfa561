"""API Schemas for request/response validation."""

from ceramic_catalog.infrastructure.api.schemas.auth_schemas import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from ceramic_catalog.infrastructure.api.schemas.client_schemas import (
    ClientCreate,
    ClientDetailResponse,
    ClientResponse,
    ClientSummary,
    ClientUpdate,
)
from ceramic_catalog.infrastructure.api.schemas.collection_schemas import (
    CollectionCreate,
    CollectionListResponse,
    CollectionResponse,
    CollectionUpdate,
    DuplicateCollectionRequest,
    ProductionDetails,
)
from ceramic_catalog.infrastructure.api.schemas.relationship_schemas import (
    ClientRelationshipsResponse,
    RegionDepartmentPairResponse,
    RelationshipOverviewResponse,
    RelationshipStatsResponse,
    RelationshipUpdateRequest,
)

__all__ = [
    "AuthResponse",
    "ClientCreate",
    "ClientDetailResponse",
    "ClientRelationshipsResponse",
    "ClientResponse",
    "ClientSummary",
    "ClientUpdate",
    "CollectionCreate",
    "CollectionListResponse",
    "CollectionResponse",
    "CollectionUpdate",
    "CurrentUserResponse",
    "DuplicateCollectionRequest",
    "LoginRequest",
    "ProductionDetails",
    "RegionDepartmentPairResponse",
    "RegisterRequest",
    "RelationshipOverviewResponse",
    "RelationshipStatsResponse",
    "RelationshipUpdateRequest",
    "UserResponse",
]
