"""initial_schema

Create the HomieHouse schema:
- Curated lists (named collections of casts, unique per owner FID)
- Curated list items (cast snapshots, unique per list)

Revision ID: 3c1f0a7d9b42
Revises:
Create Date: 2025-11-02 14:12:08.512331

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # CURATED_LISTS table
    # ========================================================================
    op.create_table(
        "curated_lists",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("fid", sa.BigInteger(), nullable=False),
        sa.Column("list_name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("fid", "list_name", name="uq_curated_lists_fid_name"),
    )
    op.create_index("idx_curated_lists_fid", "curated_lists", ["fid"])

    # ========================================================================
    # CURATED_LIST_ITEMS table
    # ========================================================================
    op.create_table(
        "curated_list_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("list_id", sa.Integer(), nullable=False),
        sa.Column("cast_hash", sa.String(66), nullable=False),
        sa.Column("cast_author_fid", sa.BigInteger(), nullable=True),
        sa.Column("cast_text", sa.Text(), nullable=True),
        sa.Column("cast_timestamp", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("added_by_fid", sa.BigInteger(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["list_id"], ["curated_lists.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "list_id", "cast_hash", name="uq_curated_list_items_list_cast"
        ),
    )
    op.create_index(
        "idx_curated_list_items_list_id", "curated_list_items", ["list_id"]
    )

    # ========================================================================
    # updated_at trigger
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_curated_lists_updated_at
        BEFORE UPDATE ON curated_lists
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        "DROP TRIGGER IF EXISTS update_curated_lists_updated_at ON curated_lists"
    )
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    op.drop_table("curated_list_items")
    op.drop_table("curated_lists")
