"""Product collections API routes.

Reads are open to anonymous callers, who are treated as PUBLIC and only see
GENERAL collections. Writes require the COLLECTION or ADMIN role.
"""

import math
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.core.config import get_settings
from ceramic_catalog.domain.services import COLLECTION_WRITERS, CollectionService
from ceramic_catalog.infrastructure.api.dependencies import (
    CurrentUser,
    OptionalUser,
    get_db_session,
    require_roles,
)
from ceramic_catalog.infrastructure.api.schemas import (
    CollectionCreate,
    CollectionListResponse,
    CollectionResponse,
    CollectionUpdate,
    DuplicateCollectionRequest,
)

router = APIRouter()

CollectionWriter = Annotated[
    CurrentUser, Depends(require_roles(COLLECTION_WRITERS, "manage collections"))
]
Session = Annotated[AsyncSession, Depends(get_db_session)]


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CollectionListResponse,
)
async def list_collections(
    current_user: OptionalUser,
    session: Session,
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int | None = Query(None, ge=1, description="Items per page"),
    search: str | None = Query(None, description="Match on collect, name or design code"),
    client_id: str | None = Query(None, description="Only collections owned by this client"),
    category_code: str | None = Query(None, description="Only collections in this category"),
    collection_type: str | None = Query(None, description="Only collections of this type"),
) -> CollectionListResponse:
    """List the collections visible to the caller, newest first."""
    settings = get_settings()
    page_size = min(page_size or settings.default_page_size, settings.max_page_size)

    collections, total = await CollectionService(session).list_collections(
        role=current_user.role,
        page=page,
        page_size=page_size,
        search=search,
        client_id=client_id,
        category_code=category_code,
        collection_type=collection_type,
    )
    total_pages = math.ceil(total / page_size) if total > 0 else 1

    return CollectionListResponse(
        items=[CollectionResponse.model_validate(c) for c in collections],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CollectionResponse,
    responses={
        403: {"description": "COLLECTION or ADMIN role required"},
        404: {"description": "Client not found"},
        409: {"description": "Collection code already exists"},
        422: {"description": "Exclusive collection without a client"},
    },
)
async def create_collection(
    request: CollectionCreate,
    current_user: CollectionWriter,
    session: Session,
) -> CollectionResponse:
    """Create a collection."""
    collection = await CollectionService(session).create_collection(request.to_attributes())
    await session.commit()
    return CollectionResponse.model_validate(collection)


@router.get(
    "/{collection_id}",
    status_code=status.HTTP_200_OK,
    response_model=CollectionResponse,
    responses={
        403: {"description": "Collection type not visible to the caller"},
        404: {"description": "Collection not found"},
    },
)
async def get_collection(
    collection_id: str,
    current_user: OptionalUser,
    session: Session,
) -> CollectionResponse:
    """Get a single collection the caller may read."""
    collection = await CollectionService(session).get_collection(
        collection_id, role=current_user.role
    )
    return CollectionResponse.model_validate(collection)


@router.put(
    "/{collection_id}",
    status_code=status.HTTP_200_OK,
    response_model=CollectionResponse,
    responses={
        403: {"description": "COLLECTION or ADMIN role required"},
        404: {"description": "Collection or client not found"},
        409: {"description": "Collection code already exists"},
        422: {"description": "Exclusive collection without a client"},
    },
)
async def update_collection(
    collection_id: str,
    request: CollectionUpdate,
    current_user: CollectionWriter,
    session: Session,
) -> CollectionResponse:
    """Replace a collection's attributes."""
    collection = await CollectionService(session).update_collection(
        collection_id, request.to_attributes()
    )
    await session.commit()
    return CollectionResponse.model_validate(collection)


@router.delete(
    "/{collection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        403: {"description": "COLLECTION or ADMIN role required"},
        404: {"description": "Collection not found"},
    },
)
async def delete_collection(
    collection_id: str,
    current_user: CollectionWriter,
    session: Session,
) -> None:
    """Delete a collection."""
    await CollectionService(session).delete_collection(collection_id)
    await session.commit()


@router.post(
    "/{collection_id}/duplicate",
    status_code=status.HTTP_201_CREATED,
    response_model=CollectionResponse,
    responses={
        403: {"description": "COLLECTION or ADMIN role required"},
        404: {"description": "Collection not found"},
        409: {"description": "Collection code already exists"},
    },
)
async def duplicate_collection(
    collection_id: str,
    request: DuplicateCollectionRequest,
    current_user: CollectionWriter,
    session: Session,
) -> CollectionResponse:
    """Copy a collection under a new collect code."""
    collection = await CollectionService(session).duplicate_collection(
        collection_id, request.new_code
    )
    await session.commit()
    return CollectionResponse.model_validate(collection)
