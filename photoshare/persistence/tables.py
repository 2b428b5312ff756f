"""SQLAlchemy table definitions for Photoshare.

Used with SQLAlchemy Core; rows are mapped to domain models by hand in
`mappers.py`. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(60), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password", Text, nullable=False),  # passlib hash
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Names and emails are unique regardless of case
Index("uq_users_name_lower", func.lower(users_table.c.name), unique=True)
Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)

# ============================================================================
# PHOTOS TABLE
# ============================================================================
photos_table = Table(
    "photos",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("filename", String(255), nullable=False),
    Column("up_votes", Integer, nullable=False, server_default="0"),
    Column("down_votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("up_votes >= 0", name="ck_photos_up_votes"),
    CheckConstraint("down_votes >= 0", name="ck_photos_down_votes"),
)

Index("idx_photos_owner_id", photos_table.c.owner_id)
Index("idx_photos_created_at", photos_table.c.created_at)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False, unique=True),
)

# ============================================================================
# PHOTO_TAGS TABLE (many-to-many, ordered)
# ============================================================================
photo_tags_table = Table(
    "photo_tags",
    metadata,
    Column(
        "photo_id",
        UUID(as_uuid=True),
        ForeignKey("photos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, nullable=False, server_default="0"),
)

Index("idx_photo_tags_tag_id", photo_tags_table.c.tag_id)

# ============================================================================
# USER_VOTES TABLE (one vote per user per photo)
# ============================================================================
user_votes_table = Table(
    "user_votes",
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "photo_id",
        UUID(as_uuid=True),
        ForeignKey("photos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
