"""initial_schema

Create the schema for Lets Connect:
- Users (profiles and moderation flags, accounts live in the identity service)
- Posts (feed posts, user and editorial categories)
- Gallery posts (images, reels and YouTube videos)
- Events (poster, location, schedule and attendance)
- Deleted posts (archive of removed user posts)

Posts, gallery posts and events keep their engagement aggregate (likes,
comments with nested replies) in JSONB columns next to the derived counts
and an optimistic-concurrency version.

Revision ID: 3c1f5b7e2a90
Revises:
Create Date: 2026-10-19 10:12:41.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f5b7e2a90"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _engagement_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column(
            "allow_comments", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("allow_shares", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "likes",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("shares", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "comments",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
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
        sa.CheckConstraint("likes_count >= 0"),
        sa.CheckConstraint("comments_count >= 0"),
        sa.CheckConstraint("shares >= 0"),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("role", sa.String(32), nullable=False, server_default="user"),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("show_points", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("show_badges", sa.Boolean(), nullable=False, server_default="true"),
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
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        *_engagement_columns(),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("media_type", sa.String(16), nullable=False),
        sa.Column("media", postgresql.JSONB(), nullable=True),
    )
    op.create_index(
        "idx_posts_category_created_at", "posts", ["category", "created_at"]
    )
    op.create_index(
        "idx_posts_owner_id_created_at", "posts", ["owner_id", "created_at"]
    )

    # ========================================================================
    # GALLERY_POSTS table
    # ========================================================================
    op.create_table(
        "gallery_posts",
        *_engagement_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("category", sa.String(16), nullable=False),
        sa.Column("news_type", sa.String(32), nullable=True),
        sa.Column("media", postgresql.JSONB(), nullable=True),
        sa.Column("youtube_url", sa.Text(), nullable=True),
    )
    op.create_index(
        "idx_gallery_posts_category_created_at",
        "gallery_posts",
        ["category", "created_at"],
    )

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        *_engagement_columns(),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("location", postgresql.JSONB(), nullable=False),
        sa.Column("poster", postgresql.JSONB(), nullable=False),
        sa.Column("start_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("end_time", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("live_url", sa.Text(), nullable=True),
        sa.Column(
            "attendance",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "attendance_count", sa.Integer(), nullable=False, server_default="0"
        ),
    )
    op.create_index("idx_events_start_time", "events", ["start_time"])
    op.create_index("idx_events_end_time", "events", ["end_time"])

    # ========================================================================
    # DELETED_POSTS table (archive, never read back by the feed)
    # ========================================================================
    op.create_table(
        "deleted_posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("original_post_id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("media_type", sa.String(16), nullable=False),
        sa.Column("media", postgresql.JSONB(), nullable=True),
        sa.Column("allow_comments", sa.Boolean(), nullable=False),
        sa.Column("allow_shares", sa.Boolean(), nullable=False),
        sa.Column(
            "likes",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("shares", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "comments",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("post_created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("post_updated_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_deleted_posts_original_post_id", "deleted_posts", ["original_post_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_deleted_posts_original_post_id", table_name="deleted_posts")
    op.drop_table("deleted_posts")
    op.drop_index("idx_events_end_time", table_name="events")
    op.drop_index("idx_events_start_time", table_name="events")
    op.drop_table("events")
    op.drop_index(
        "idx_gallery_posts_category_created_at", table_name="gallery_posts"
    )
    op.drop_table("gallery_posts")
    op.drop_index("idx_posts_owner_id_created_at", table_name="posts")
    op.drop_index("idx_posts_category_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
