"""SQLAlchemy model for the product_collections table."""

from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    String,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ceramic_catalog.infrastructure.persistence.database import Base, utcnow


class ProductCollectionModel(Base):
    """SQLAlchemy model for the product_collections table.

    The owning client is loaded eagerly with every query since visibility
    and reachability checks need its regions and departments.

    Attributes:
        id: Primary key (UUID string).
        collect_code: Unique collection code.
        design_code, name_code, category_code, size_code, texture_code,
        color_code, material_code: Descriptive codes.
        client_id: Owning client, required for exclusive types.
        client_description: Free text about the client's request.
        collect_date: Date the collection was registered.
        tech_draw: Technical drawing reference.
        ref_id: External reference ID.
        collection_type: GENERAL, EXCLUSIVE or EXCLUSIVE_GROUP.
        details: Production process attributes (clay, glaze, firing, ...).
    """

    __tablename__ = "product_collections"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Collection ID (UUID)",
    )
    collect_code: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique collection code",
    )
    design_code: Mapped[str] = mapped_column(String(100), nullable=False)
    name_code: Mapped[str] = mapped_column(String(100), nullable=False)
    category_code: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    size_code: Mapped[str] = mapped_column(String(100), nullable=False)
    texture_code: Mapped[str] = mapped_column(String(100), nullable=False)
    color_code: Mapped[str] = mapped_column(String(100), nullable=False)
    material_code: Mapped[str] = mapped_column(String(100), nullable=False)
    client_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("clients.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
        comment="Owning client (required for exclusive types)",
    )
    client_description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    collect_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    tech_draw: Mapped[str | None] = mapped_column(String(255), nullable=True)
    ref_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    collection_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="GENERAL",
        comment="GENERAL, EXCLUSIVE or EXCLUSIVE_GROUP",
    )
    details: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Production process attributes",
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
    client: Mapped["ClientModel"] = relationship(  # noqa: F821
        "ClientModel",
        back_populates="collections",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint(
            "collection_type IN ('GENERAL', 'EXCLUSIVE', 'EXCLUSIVE_GROUP')",
            name="ck_product_collections_type",
        ),
        CheckConstraint(
            "collection_type = 'GENERAL' OR client_id IS NOT NULL",
            name="ck_product_collections_exclusive_client",
        ),
        Index("ix_product_collections_type_created", "collection_type", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ProductCollection(id={self.id}, collect_code={self.collect_code})>"
