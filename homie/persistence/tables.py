"""SQLAlchemy table definitions for HomieHouse.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# CURATED LISTS TABLE
# ============================================================================
curated_lists_table = Table(
    "curated_lists",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("fid", BigInteger, nullable=False),  # Owner
    Column("list_name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    UniqueConstraint("fid", "list_name", name="uq_curated_lists_fid_name"),
)

Index("idx_curated_lists_fid", curated_lists_table.c.fid)

# ============================================================================
# CURATED LIST ITEMS TABLE (cast snapshot at time of adding)
# ============================================================================
curated_list_items_table = Table(
    "curated_list_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "list_id",
        Integer,
        ForeignKey("curated_lists.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("cast_hash", String(66), nullable=False),
    Column("cast_author_fid", BigInteger, nullable=True),
    Column("cast_text", Text, nullable=True),
    Column("cast_timestamp", TIMESTAMP(timezone=True), nullable=True),
    Column("added_by_fid", BigInteger, nullable=False),
    Column("notes", Text, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    UniqueConstraint("list_id", "cast_hash", name="uq_curated_list_items_list_cast"),
)

Index("idx_curated_list_items_list_id", curated_list_items_table.c.list_id)
