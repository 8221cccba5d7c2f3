"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the account service; read here for owner profiles)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("avatar", String(500), nullable=True),
    Column("bio", Text, nullable=True),
    Column("verified", Boolean, nullable=False, default=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)


# ============================================================================
# TRAITS TABLE
# ============================================================================
# No foreign key on owner_id: a trait outlives its owner row and is then listed
# without an owner profile.
traits_table = Table(
    "traits",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("owner_id", String(36), nullable=False),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("category", String(32), nullable=False),  # TraitCategory value
    Column("hourly_rate", Integer, nullable=False),  # cents
    Column("daily_rate", Integer, nullable=True),  # NULL = derived
    Column("weekly_rate", Integer, nullable=True),  # NULL = derived
    Column("available", Boolean, nullable=False, default=True),
    Column("max_users", Integer, nullable=False, default=1),
    Column("success_rate", Float, nullable=False, default=0.0),
    Column("total_rentals", Integer, nullable=False, default=0),
    Column("average_rating", Float, nullable=False, default=0.0),
    Column("verified", Boolean, nullable=False, default=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_traits_owner_id", traits_table.c.owner_id)
Index("idx_traits_category", traits_table.c.category)
Index("idx_traits_available", traits_table.c.available)
Index("idx_traits_category_available", traits_table.c.category, traits_table.c.available)
Index("idx_traits_average_rating", traits_table.c.average_rating)
Index("idx_traits_hourly_rate", traits_table.c.hourly_rate)
Index("idx_traits_verified", traits_table.c.verified)
