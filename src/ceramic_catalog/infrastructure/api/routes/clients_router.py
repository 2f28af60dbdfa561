"""Clients API routes.

Provides client management, the region/department relationship views and
the collections a client reaches through its relationships.
"""

from enum import Enum
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.domain.exceptions import ValidationFailedError
from ceramic_catalog.domain.services import (
    CLIENT_READERS,
    CLIENT_WRITERS,
    RELATIONSHIP_READERS,
    RELATIONSHIP_WRITERS,
    ClientService,
    CollectionService,
    RelationshipService,
)
from ceramic_catalog.infrastructure.api.dependencies import (
    CurrentUser,
    get_db_session,
    require_roles,
)
from ceramic_catalog.infrastructure.api.schemas import (
    ClientCreate,
    ClientDetailResponse,
    ClientRelationshipsResponse,
    ClientResponse,
    ClientUpdate,
    CollectionResponse,
    RegionDepartmentPairResponse,
    RelationshipOverviewResponse,
    RelationshipStatsResponse,
    RelationshipUpdateRequest,
)

router = APIRouter()

ClientReader = Annotated[CurrentUser, Depends(require_roles(CLIENT_READERS, "view clients"))]
ClientWriter = Annotated[CurrentUser, Depends(require_roles(CLIENT_WRITERS, "manage clients"))]
RelationshipReader = Annotated[
    CurrentUser,
    Depends(require_roles(RELATIONSHIP_READERS, "view client relationships")),
]
RelationshipWriter = Annotated[
    CurrentUser,
    Depends(require_roles(RELATIONSHIP_WRITERS, "update client relationships")),
]
Session = Annotated[AsyncSession, Depends(get_db_session)]


class RelationshipAction(str, Enum):
    """Views available on the relationships endpoint."""

    REGIONS = "regions"
    DEPARTMENTS = "departments"
    MATRIX = "matrix"
    STATS = "stats"
    CLIENT = "client"
    CLIENTS_BY_REGION_DEPT = "clients-by-region-dept"


def _client_response(client: Any, collection_count: int = 0) -> ClientDetailResponse:
    response = ClientDetailResponse.model_validate(client)
    response.collection_count = collection_count
    return response


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[ClientResponse],
)
async def list_clients(
    current_user: ClientReader,
    session: Session,
    search: str | None = Query(None, description="Case-insensitive match on code or name"),
) -> list[ClientResponse]:
    """List clients ordered by name."""
    clients = await ClientService(session).list_clients(search=search)
    return [ClientResponse.model_validate(c) for c in clients]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ClientResponse,
    responses={
        403: {"description": "ADMIN role required"},
        409: {"description": "Client code already exists"},
    },
)
async def create_client(
    request: ClientCreate,
    current_user: ClientWriter,
    session: Session,
) -> ClientResponse:
    """Create a client. Regions and departments may be empty."""
    client = await ClientService(session).create_client(
        code=request.code,
        name=request.name,
        regions=request.regions,
        departments=request.departments,
    )
    await session.commit()
    return ClientResponse.model_validate(client)


@router.get(
    "/relationships",
    status_code=status.HTTP_200_OK,
    responses={
        403: {"description": "COLLECTION, PRODUCTION or ADMIN role required"},
        422: {"description": "Missing parameter for the requested action"},
    },
)
async def get_relationships(
    current_user: RelationshipReader,
    session: Session,
    action: RelationshipAction | None = Query(None, description="Single view to return"),
    client_id: str | None = Query(None, description="Client for action=client"),
    region: str | None = Query(None, description="Region for action=clients-by-region-dept"),
    department: str | None = Query(
        None, description="Department for action=clients-by-region-dept"
    ),
) -> dict[str, Any]:
    """Return the relationship views derived from the current client set.

    Without an action, regions, departments, matrix and stats are returned
    together.
    """
    service = RelationshipService(session)

    if action is RelationshipAction.REGIONS:
        return {"regions": await service.get_regions()}
    if action is RelationshipAction.DEPARTMENTS:
        return {"departments": await service.get_departments()}
    if action is RelationshipAction.MATRIX:
        return {"matrix": await service.get_matrix()}
    if action is RelationshipAction.STATS:
        stats = await service.get_stats()
        return {"stats": RelationshipStatsResponse.model_validate(stats).model_dump()}
    if action is RelationshipAction.CLIENT:
        if not client_id:
            raise ValidationFailedError(
                "client_id parameter required",
                errors={"client_id": ["Required for action=client"]},
            )
        pairs = await service.get_client_pairs(client_id)
        return ClientRelationshipsResponse(
            client_id=client_id,
            relationships=[RegionDepartmentPairResponse.model_validate(p) for p in pairs],
        ).model_dump()
    if action is RelationshipAction.CLIENTS_BY_REGION_DEPT:
        missing = {
            name: [f"Required for action={action.value}"]
            for name, value in (("region", region), ("department", department))
            if not value
        }
        if missing:
            raise ValidationFailedError("region and department parameters required", errors=missing)
        clients = await service.get_clients_by_region_department(region, department)
        return {
            "clients": [ClientResponse.model_validate(c).model_dump(mode="json") for c in clients]
        }

    overview = await service.get_overview()
    return RelationshipOverviewResponse(
        regions=overview["regions"],
        departments=overview["departments"],
        matrix=overview["matrix"],
        stats=RelationshipStatsResponse.model_validate(overview["stats"]),
    ).model_dump()


@router.post(
    "/relationships",
    status_code=status.HTTP_200_OK,
    response_model=ClientResponse,
    responses={
        403: {"description": "ADMIN role required"},
        404: {"description": "Client not found"},
        422: {"description": "Empty region or department set"},
    },
)
async def update_relationships(
    request: RelationshipUpdateRequest,
    current_user: RelationshipWriter,
    session: Session,
) -> ClientResponse:
    """Replace a client's regions and departments."""
    client = await RelationshipService(session).update_client_relationships(
        client_id=request.client_id,
        regions=request.regions,
        departments=request.departments,
    )
    await session.commit()
    return ClientResponse.model_validate(client)


@router.get(
    "/{client_id}",
    status_code=status.HTTP_200_OK,
    response_model=ClientDetailResponse,
    responses={404: {"description": "Client not found"}},
)
async def get_client(
    client_id: str,
    current_user: ClientReader,
    session: Session,
) -> ClientDetailResponse:
    """Get a client with the number of collections it owns."""
    client, collection_count = await ClientService(session).get_client(client_id)
    return _client_response(client, collection_count)


@router.put(
    "/{client_id}",
    status_code=status.HTTP_200_OK,
    response_model=ClientResponse,
    responses={
        403: {"description": "ADMIN role required"},
        404: {"description": "Client not found"},
        409: {"description": "Client code already exists"},
    },
)
async def update_client(
    client_id: str,
    request: ClientUpdate,
    current_user: ClientWriter,
    session: Session,
) -> ClientResponse:
    """Replace a client's code, name, regions and departments."""
    client = await ClientService(session).update_client(
        client_id=client_id,
        code=request.code,
        name=request.name,
        regions=request.regions,
        departments=request.departments,
    )
    await session.commit()
    return ClientResponse.model_validate(client)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        403: {"description": "ADMIN role required"},
        404: {"description": "Client not found"},
        409: {"description": "Client still owns collections"},
    },
)
async def delete_client(
    client_id: str,
    current_user: ClientWriter,
    session: Session,
) -> None:
    """Delete a client that owns no collections."""
    await ClientService(session).delete_client(client_id)
    await session.commit()


@router.get(
    "/{client_id}/collections",
    status_code=status.HTTP_200_OK,
    response_model=list[CollectionResponse],
    responses={
        403: {"description": "COLLECTION, PRODUCTION or ADMIN role required"},
        404: {"description": "Client not found"},
        422: {"description": "Region or department not associated with the client"},
    },
)
async def list_reachable_collections(
    client_id: str,
    current_user: RelationshipReader,
    session: Session,
    region: str | None = Query(None, description="Only match on this region of the client"),
    department: str | None = Query(None, description="Only match on this department of the client"),
) -> list[CollectionResponse]:
    """List the collections a client reaches.

    GENERAL collections always, EXCLUSIVE ones it owns, and EXCLUSIVE_GROUP
    ones whose owner shares a region and a department with it.
    """
    collections = await CollectionService(session).reachable_for_client(
        client_id, region=region, department=department
    )
    return [CollectionResponse.model_validate(c) for c in collections]
