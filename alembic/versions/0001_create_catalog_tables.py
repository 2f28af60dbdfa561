"""create_catalog_tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create clients, product_collections and users tables."""
    op.create_table(
        "clients",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Client ID (UUID)"),
        sa.Column("code", sa.String(length=50), nullable=False, comment="Unique client code"),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Client display name"),
        sa.Column("regions", sa.JSON(), nullable=False, comment="Region labels"),
        sa.Column("departments", sa.JSON(), nullable=False, comment="Department labels"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_clients_code"), "clients", ["code"], unique=True)

    op.create_table(
        "product_collections",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Collection ID (UUID)"),
        sa.Column(
            "collect_code", sa.String(length=100), nullable=False, comment="Unique collection code"
        ),
        sa.Column("design_code", sa.String(length=100), nullable=False),
        sa.Column("name_code", sa.String(length=100), nullable=False),
        sa.Column("category_code", sa.String(length=100), nullable=False),
        sa.Column("size_code", sa.String(length=100), nullable=False),
        sa.Column("texture_code", sa.String(length=100), nullable=False),
        sa.Column("color_code", sa.String(length=100), nullable=False),
        sa.Column("material_code", sa.String(length=100), nullable=False),
        sa.Column(
            "client_id",
            sa.String(length=36),
            nullable=True,
            comment="Owning client (required for exclusive types)",
        ),
        sa.Column("client_description", sa.String(length=1000), nullable=True),
        sa.Column("collect_date", sa.Date(), nullable=True),
        sa.Column("tech_draw", sa.String(length=255), nullable=True),
        sa.Column("ref_id", sa.String(length=100), nullable=True),
        sa.Column(
            "collection_type",
            sa.String(length=20),
            nullable=False,
            comment="GENERAL, EXCLUSIVE or EXCLUSIVE_GROUP",
        ),
        sa.Column("details", sa.JSON(), nullable=False, comment="Production process attributes"),
        *_timestamps(),
        sa.CheckConstraint(
            "collection_type IN ('GENERAL', 'EXCLUSIVE', 'EXCLUSIVE_GROUP')",
            name="ck_product_collections_type",
        ),
        sa.CheckConstraint(
            "collection_type = 'GENERAL' OR client_id IS NOT NULL",
            name="ck_product_collections_exclusive_client",
        ),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_product_collections_collect_code"),
        "product_collections",
        ["collect_code"],
        unique=True,
    )
    op.create_index(
        op.f("ix_product_collections_category_code"),
        "product_collections",
        ["category_code"],
        unique=False,
    )
    op.create_index(
        op.f("ix_product_collections_client_id"),
        "product_collections",
        ["client_id"],
        unique=False,
    )
    op.create_index(
        "ix_product_collections_type_created",
        "product_collections",
        ["collection_type", "created_at"],
        unique=False,
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False, comment="User ID (UUID)"),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column(
            "client_id", sa.String(length=36), nullable=True, comment="Client the user acts for"
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
    op.drop_index("ix_product_collections_type_created", table_name="product_collections")
    op.drop_index(op.f("ix_product_collections_client_id"), table_name="product_collections")
    op.drop_index(op.f("ix_product_collections_category_code"), table_name="product_collections")
    op.drop_index(op.f("ix_product_collections_collect_code"), table_name="product_collections")
    op.drop_table("product_collections")
    op.drop_index(op.f("ix_clients_code"), table_name="clients")
    op.drop_table("clients")
