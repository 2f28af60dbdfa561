"""Pydantic schemas for client endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ClientBase(BaseModel):
    """Base schema for client data."""

    code: str = Field(..., min_length=1, max_length=50, description="Unique client code")
    name: str = Field(..., min_length=1, max_length=255, description="Client name")
    regions: list[str] = Field(default_factory=list, description="Region labels")
    departments: list[str] = Field(default_factory=list, description="Department labels")


class ClientCreate(ClientBase):
    """Schema for creating a client."""


class ClientUpdate(ClientBase):
    """Schema for replacing a client's attributes."""


class ClientSummary(BaseModel):
    """Short client reference embedded in collection responses."""

    id: str = Field(..., description="Client ID")
    code: str = Field(..., description="Client code")
    name: str = Field(..., description="Client name")

    model_config = ConfigDict(from_attributes=True)


class ClientResponse(ClientBase):
    """Schema for client response."""

    id: str = Field(..., description="Client ID")
    display_name: str = Field(..., description="Label used in the relationship matrix")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ClientDetailResponse(ClientResponse):
    """Schema for a single client including its collection count."""

    collection_count: int = Field(0, description="Number of collections owned by the client")
