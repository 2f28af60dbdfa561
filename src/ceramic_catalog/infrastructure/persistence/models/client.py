"""SQLAlchemy model for the clients table.

Clients carry their region and department labels as JSON lists. The
relationship matrix is derived from them on every query and never stored.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ceramic_catalog.infrastructure.persistence.database import Base, utcnow


class ClientModel(Base):
    """SQLAlchemy model for the clients table.

    Attributes:
        id: Primary key (UUID string).
        code: Unique client code.
        name: Display name.
        regions: Region labels.
        departments: Department labels.
        created_at: Timestamp when the client was created.
        updated_at: Timestamp when the client was last updated.
    """

    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Client ID (UUID)",
    )
    code: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique client code",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Client display name",
    )
    regions: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Region labels",
    )
    departments: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Department labels",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
    )

    # Relationships
    collections: Mapped[list["ProductCollectionModel"]] = relationship(  # noqa: F821
        "ProductCollectionModel",
        back_populates="client",
        passive_deletes="all",
    )

    @property
    def display_name(self) -> str:
        """Label used for this client inside relationship matrix cells."""
        return f"{self.name} ({self.code})"

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, code={self.code})>"
