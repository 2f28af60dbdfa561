"""Domain services for the catalog.

The exclusivity validator, relationship index, visibility resolver and
access policy are pure and framework-free. The remaining services apply
them against the store through repositories.
"""

from ceramic_catalog.domain.services.access_policy import (
    CLIENT_READERS,
    CLIENT_WRITERS,
    COLLECTION_WRITERS,
    RELATIONSHIP_READERS,
    RELATIONSHIP_WRITERS,
    ensure_role,
)
from ceramic_catalog.domain.services.client_service import ClientService
from ceramic_catalog.domain.services.collection_service import CollectionService
from ceramic_catalog.domain.services.exclusivity_validator import ExclusivityValidator
from ceramic_catalog.domain.services.relationship_index import (
    RegionDepartmentPair,
    RelationshipIndex,
    RelationshipStats,
)
from ceramic_catalog.domain.services.relationship_service import RelationshipService
from ceramic_catalog.domain.services.user_service import UserService
from ceramic_catalog.domain.services.visibility_resolver import VisibilityResolver

__all__ = [
    "CLIENT_READERS",
    "CLIENT_WRITERS",
    "COLLECTION_WRITERS",
    "ClientService",
    "CollectionService",
    "ExclusivityValidator",
    "RELATIONSHIP_READERS",
    "RELATIONSHIP_WRITERS",
    "RegionDepartmentPair",
    "RelationshipIndex",
    "RelationshipService",
    "RelationshipStats",
    "UserService",
    "VisibilityResolver",
    "ensure_role",
]
