"""Initial schema: users, catalog, lists, list items, metadata

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ASSEMBLY_STATUSES = ("Not Started", "In Progress", "Assembled")
PAINTING_STATUSES = ("Unpainted", "Primed", "Base Coated", "Detailed", "Finished")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    for table in ("factions", "unit_types"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("name", sa.String(100), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(f"ix_{table}_name", table, ["name"], unique=True)

    op.create_table(
        "miniatures",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("faction_id", sa.Integer(), nullable=True),
        sa.Column("unit_type_id", sa.Integer(), nullable=True),
        sa.Column("points_value", sa.Integer(), nullable=True),
        sa.Column("base_size", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["faction_id"], ["factions.id"]),
        sa.ForeignKeyConstraint(["unit_type_id"], ["unit_types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_miniatures_name", "miniatures", ["name"], unique=False)
    op.create_index("ix_miniatures_faction_id", "miniatures", ["faction_id"], unique=False)
    op.create_index("ix_miniatures_unit_type_id", "miniatures", ["unit_type_id"], unique=False)

    op.create_table(
        "lists",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_lists_user_id", "lists", ["user_id"], unique=False)
    op.create_index("ix_lists_is_public", "lists", ["is_public"], unique=False)

    op.create_table(
        "list_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("list_id", sa.Integer(), nullable=False),
        sa.Column("miniature_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "assembly_status",
            sa.Enum(*ASSEMBLY_STATUSES, name="assembly_status", native_enum=False, length=20),
            nullable=False,
            server_default="Not Started",
        ),
        sa.Column(
            "painting_status",
            sa.Enum(*PAINTING_STATUSES, name="painting_status", native_enum=False, length=20),
            nullable=False,
            server_default="Unpainted",
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("added_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["list_id"], ["lists.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["miniature_id"], ["miniatures.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_list_items_list_id", "list_items", ["list_id"], unique=False)
    op.create_index("ix_list_items_miniature_id", "list_items", ["miniature_id"], unique=False)

    op.create_table(
        "metadata",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("list_item_id", sa.Integer(), nullable=False),
        sa.Column("paint_colors", sa.Text(), nullable=True),
        sa.Column("techniques", sa.Text(), nullable=True),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        sa.Column("cost", sa.Float(), nullable=True),
        sa.Column("storage_location", sa.String(255), nullable=True),
        sa.Column("custom_notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["list_item_id"], ["list_items.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_metadata_list_item_id", "metadata", ["list_item_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_metadata_list_item_id", "metadata")
    op.drop_table("metadata")
    op.drop_index("ix_list_items_miniature_id", "list_items")
    op.drop_index("ix_list_items_list_id", "list_items")
    op.drop_table("list_items")
    op.drop_index("ix_lists_is_public", "lists")
    op.drop_index("ix_lists_user_id", "lists")
    op.drop_table("lists")
    op.drop_index("ix_miniatures_unit_type_id", "miniatures")
    op.drop_index("ix_miniatures_faction_id", "miniatures")
    op.drop_index("ix_miniatures_name", "miniatures")
    op.drop_table("miniatures")
    for table in ("unit_types", "factions"):
        op.drop_index(f"ix_{table}_name", table)
        op.drop_table(table)
    op.drop_index("ix_users_email", "users")
    op.drop_index("ix_users_username", "users")
    op.drop_table("users")
