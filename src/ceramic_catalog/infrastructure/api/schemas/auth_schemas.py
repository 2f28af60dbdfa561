"""Pydantic schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request body for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=6, description="User's password")
    name: str = Field(..., min_length=1, max_length=255, description="User's name")


class LoginRequest(BaseModel):
    """Request body for user login."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")


class UserResponse(BaseModel):
    """User information in auth responses."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    name: str = Field(..., description="User's name")
    role: str = Field(..., description="User's role")
    client_id: str | None = Field(None, description="Client the user acts for")
    is_active: bool = Field(..., description="Whether the user is active")
    created_at: datetime = Field(..., description="When the user was created")

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response for successful login or registration."""

    token: str = Field(..., description="JWT access token")
    expires_in: int = Field(..., description="Access token expiration time in seconds")
    user: UserResponse = Field(..., description="User information")


class CurrentUserResponse(BaseModel):
    """Caller context decoded from the access token."""

    user_id: str
    email: str
    role: str
    client_id: str | None = None
