"""SQLAlchemy table definitions for Muse.

Used through SQLAlchemy Core; rows are mapped to pydantic domain models
in ``muse.persistence.mappers``.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False, unique=True),  # Stored lower-cased
    Column("password_hash", Text, nullable=True),
    Column("federated_id", String(255), nullable=True),  # Google subject id
    Column("theme_defined", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(password_hash IS NOT NULL OR federated_id IS NOT NULL)",
        name="password_or_federated_id_required",
    ),
)

# ============================================================================
# THEMES TABLE (catalog, seeded reference data)
# ============================================================================
themes_table = Table(
    "themes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(100), nullable=False, unique=True),
)

# ============================================================================
# USERS_THEME TABLE (junction table, duplicates allowed)
# ============================================================================
users_theme_table = Table(
    "users_theme",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "theme_id", UUID, ForeignKey("themes.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("seq", BigInteger, Identity(), nullable=False),  # Insertion order
)

Index("idx_users_theme_user_id", users_theme_table.c.user_id, users_theme_table.c.seq)
