"""Authentication API routes.

Provides endpoints for user registration, login and the current caller.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.core.logging import get_logger
from ceramic_catalog.domain.services import UserService
from ceramic_catalog.infrastructure.api.dependencies import AuthenticatedUser, get_db_session
from ceramic_catalog.infrastructure.api.schemas import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from ceramic_catalog.infrastructure.auth import jwt_service
from ceramic_catalog.infrastructure.persistence.models import UserModel

router = APIRouter()
logger = get_logger(__name__)

Session = Annotated[AsyncSession, Depends(get_db_session)]


def _auth_response(user: UserModel) -> AuthResponse:
    token = jwt_service.create_access_token(
        user_id=user.id,
        email=user.email,
        role=user.role,
        client_id=user.client_id,
    )
    return AuthResponse(
        token=token,
        expires_in=jwt_service.get_expires_in(),
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses={409: {"description": "Email already registered"}},
)
async def register(request: RegisterRequest, session: Session) -> AuthResponse:
    """Register a new PUBLIC user and return an access token."""
    user = await UserService(session).register(
        email=request.email,
        password=request.password,
        name=request.name,
    )
    await session.commit()
    return _auth_response(user)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
    responses={401: {"description": "Invalid credentials"}},
)
async def login(request: LoginRequest, session: Session) -> AuthResponse:
    """Authenticate with email and password."""
    user = await UserService(session).authenticate(request.email, request.password)
    if user is None:
        logger.info("Login failed", email=request.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    # Persist a rehashed password, if any
    await session.commit()
    logger.info("Login successful", user_id=user.id)
    return _auth_response(user)


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=CurrentUserResponse,
)
async def me(current_user: AuthenticatedUser) -> CurrentUserResponse:
    """Return the caller context carried by the access token."""
    return CurrentUserResponse(
        user_id=current_user.user_id,
        email=current_user.email,
        role=current_user.role.value,
        client_id=current_user.client_id,
    )
