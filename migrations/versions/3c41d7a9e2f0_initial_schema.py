"""initial_schema

Create the Photoshare schema:
- Users (name/email unique regardless of case, passlib password hash)
- Photos (title, owner, stored filename, vote counters)
- Tags and the ordered photo/tag association
- User votes (one vote per user per photo)

Revision ID: 3c41d7a9e2f0
Revises:
Create Date: 2026-10-19 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c41d7a9e2f0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=60), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column(
            "is_admin", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_users_name_lower", "users", [sa.text("lower(name)")], unique=True
    )
    op.create_index(
        "uq_users_email_lower", "users", [sa.text("lower(email)")], unique=True
    )

    # ========================================================================
    # PHOTOS
    # ========================================================================
    op.create_table(
        "photos",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("filename", sa.String(length=255), nullable=False),
        sa.Column("up_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("down_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("up_votes >= 0", name="ck_photos_up_votes"),
        sa.CheckConstraint("down_votes >= 0", name="ck_photos_down_votes"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_photos_owner_id", "photos", ["owner_id"])
    op.create_index("idx_photos_created_at", "photos", ["created_at"])

    # ========================================================================
    # TAGS
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "photo_tags",
        sa.Column("photo_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), server_default="0", nullable=False),
        sa.ForeignKeyConstraint(["photo_id"], ["photos.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("photo_id", "tag_id"),
    )
    op.create_index("idx_photo_tags_tag_id", "photo_tags", ["tag_id"])

    # ========================================================================
    # USER VOTES
    # ========================================================================
    op.create_table(
        "user_votes",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("photo_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["photo_id"], ["photos.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "photo_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("user_votes")
    op.drop_index("idx_photo_tags_tag_id", table_name="photo_tags")
    op.drop_table("photo_tags")
    op.drop_table("tags")
    op.drop_index("idx_photos_created_at", table_name="photos")
    op.drop_index("idx_photos_owner_id", table_name="photos")
    op.drop_table("photos")
    op.drop_index("uq_users_email_lower", table_name="users")
    op.drop_index("uq_users_name_lower", table_name="users")
    op.drop_table("users")
