"""User registration and credential checks."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ceramic_catalog.core.logging import get_logger
from ceramic_catalog.domain.entities.role import Role
from ceramic_catalog.domain.exceptions import ClientNotFoundError, ConflictError
from ceramic_catalog.infrastructure.auth import hash_password, needs_rehash, verify_password
from ceramic_catalog.infrastructure.persistence.models import UserModel
from ceramic_catalog.infrastructure.persistence.repositories import (
    ClientRepository,
    UserRepository,
)

logger = get_logger(__name__)


class UserService:
    """Service for user accounts."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.client_repo = ClientRepository(session)

    async def register(
        self,
        email: str,
        password: str,
        name: str,
        role: Role = Role.PUBLIC,
        client_id: str | None = None,
    ) -> UserModel:
        """Create a user with a hashed password.

        Raises:
            ConflictError: If the email is already registered.
            ClientNotFoundError: If the client does not exist.
        """
        email = email.strip().lower()
        if await self.user_repo.get_by_email(email) is not None:
            raise ConflictError(f"User '{email}' already exists")
        if client_id is not None and await self.client_repo.get_by_id(client_id) is None:
            raise ClientNotFoundError(client_id)

        user = UserModel(
            id=str(uuid.uuid4()),
            email=email,
            name=name.strip(),
            password_hash=hash_password(password),
            role=Role.parse(role).value,
            client_id=client_id,
            is_active=True,
        )
        created = await self.user_repo.create(user)
        logger.info("User registered", user_id=created.id, role=created.role)
        return created

    async def authenticate(self, email: str, password: str) -> UserModel | None:
        """Check credentials.

        Returns:
            The active user on success, None on unknown email, wrong
            password or inactive account.
        """
        user = await self.user_repo.get_by_email(email.strip().lower())
        if user is None or not user.is_active:
            return None
        if not verify_password(password, user.password_hash):
            return None
        if needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
            await self.session.flush()
        return user
