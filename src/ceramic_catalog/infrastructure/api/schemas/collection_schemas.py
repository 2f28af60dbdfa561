"""Pydantic schemas for product collection endpoints."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ceramic_catalog.domain.entities.role import CollectionType
from ceramic_catalog.infrastructure.api.schemas.client_schemas import ClientSummary

# Multi-step processes hold at most four entries
MAX_SLOTS = 4

Slots = list[str]
Temperature = float | None


def _slots(description: str) -> Any:
    return Field(default_factory=list, max_length=MAX_SLOTS, description=description)


def _temperature(description: str) -> Any:
    return Field(None, ge=0, le=1500, description=description)


class ProductionDetails(BaseModel):
    """Production process attributes of a collection.

    Stored as JSON on the collection and never used for access control.
    """

    # Clay & build
    clay: str | None = None
    clay_kg: float | None = Field(None, gt=0, description="Clay weight in kilograms")
    clay_note: str | None = None
    build_tech: str | None = None
    build_tech_note: str | None = None
    rim: str | None = None
    feet: str | None = None

    casting: Slots = _slots("Casting steps")
    casting_note: str | None = None
    extruder: Slots = _slots("Extruder steps")
    extruder_note: str | None = None
    texture: Slots = _slots("Texture steps")
    texture_note: str | None = None
    tools: Slots = _slots("Tools used")
    tools_note: str | None = None
    engobe: Slots = _slots("Engobe layers")
    engobe_note: str | None = None

    bisque_temp: Temperature = _temperature("Bisque firing temperature")
    bisque_temp_note: str | None = None

    stain_oxide: Slots = _slots("Stains and oxides")
    stain_oxide_note: str | None = None

    lustre: Slots = _slots("Lustre layers")
    lustre_temp: Temperature = _temperature("Lustre firing temperature")
    lustre_temp_note: str | None = None
    lustre_note: str | None = None

    glaze: Slots = _slots("Glazes")
    glaze_density: Slots = _slots("Glaze densities, matching the glaze order")
    glaze_technique: str | None = None
    glaze_temp: Temperature = _temperature("Glaze firing temperature")
    glaze_temp_note: str | None = None
    glaze_note: str | None = None

    firing: str | None = None
    firing_note: str | None = None

    # Dimensions
    width: float | None = Field(None, gt=0)
    height: float | None = Field(None, gt=0)
    length: float | None = Field(None, gt=0)
    diameter: float | None = Field(None, gt=0)
    final_size_note: str | None = None


class CollectionBase(BaseModel):
    """Base schema for collection data."""

    collect_code: str = Field(..., min_length=1, max_length=100, description="Unique collection code")
    design_code: str = Field(..., min_length=1, max_length=100)
    name_code: str = Field(..., min_length=1, max_length=100)
    category_code: str = Field(..., min_length=1, max_length=100)
    size_code: str = Field(..., min_length=1, max_length=100)
    texture_code: str = Field(..., min_length=1, max_length=100)
    color_code: str = Field(..., min_length=1, max_length=100)
    material_code: str = Field(..., min_length=1, max_length=100)
    client_id: str | None = Field(None, description="Owning client (required for exclusive types)")
    client_description: str | None = Field(None, max_length=1000)
    collect_date: date | None = None
    tech_draw: str | None = Field(None, max_length=255)
    ref_id: str | None = Field(None, max_length=100)
    collection_type: CollectionType = Field(
        CollectionType.GENERAL, description="GENERAL, EXCLUSIVE or EXCLUSIVE_GROUP"
    )


class CollectionWrite(CollectionBase):
    """Schema for creating or replacing a collection."""

    details: ProductionDetails = Field(default_factory=ProductionDetails)

    def to_attributes(self) -> dict[str, Any]:
        """Flatten into model attribute values for the collection service."""
        attributes = self.model_dump(exclude={"details"})
        attributes["collection_type"] = self.collection_type.value
        attributes["details"] = self.details.model_dump(mode="json", exclude_defaults=True)
        return attributes


class CollectionCreate(CollectionWrite):
    """Schema for creating a collection."""


class CollectionUpdate(CollectionWrite):
    """Schema for replacing a collection."""


class DuplicateCollectionRequest(BaseModel):
    """Schema for duplicating a collection under a new code."""

    new_code: str = Field(..., min_length=1, max_length=100, description="New collection code")


class CollectionResponse(CollectionBase):
    """Schema for collection response."""

    id: str = Field(..., description="Collection ID")
    collection_type: str
    details: dict[str, Any] = Field(default_factory=dict)
    client: ClientSummary | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CollectionListResponse(BaseModel):
    """Paginated collection list."""

    items: list[CollectionResponse] = Field(..., description="List of collections")
    total: int = Field(..., description="Total number of visible collections")
    page: int = Field(..., description="Current page number (1-indexed)")
    page_size: int = Field(..., description="Number of items per page")
    total_pages: int = Field(..., description="Total number of pages")
