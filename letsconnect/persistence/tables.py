"""SQLAlchemy table definitions for lets-connect.

Each content entity is one row; its engagement aggregate (likes, comments
with nested replies, attendance) lives in JSONB columns so it is read and
written as one document. They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _engagement_columns() -> list[Column]:
    """Columns shared by every engageable content table."""
    return [
        Column("id", UUID(as_uuid=True), primary_key=True),
        Column("owner_id", UUID(as_uuid=True), nullable=False),
        Column("allow_comments", Boolean, nullable=False, server_default="true"),
        Column("allow_shares", Boolean, nullable=False, server_default="true"),
        Column("likes", JSONB, nullable=False, server_default="[]"),
        Column("likes_count", Integer, nullable=False, server_default="0"),
        Column("shares", Integer, nullable=False, server_default="0"),
        Column("comments", JSONB, nullable=False, server_default="[]"),
        Column("comments_count", Integer, nullable=False, server_default="0"),
        # Optimistic concurrency token, bumped on every write
        Column("version", Integer, nullable=False, server_default="1"),
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("username", String(50), nullable=False, unique=True),
    Column("role", String(32), nullable=False, server_default="user"),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("show_points", Boolean, nullable=False, server_default="true"),
    Column("show_badges", Boolean, nullable=False, server_default="true"),
    Column("followers", JSONB, nullable=False, server_default="[]"),
    Column("followers_count", Integer, nullable=False, server_default="0"),
    Column("following", JSONB, nullable=False, server_default="[]"),
    Column("following_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    *_engagement_columns(),
    Column("content", Text, nullable=False, server_default=""),
    Column("category", String(32), nullable=False),  # PostCategory
    Column("media_type", String(16), nullable=False),  # MediaType
    Column("media", JSONB, nullable=True),  # MediaFile
)

Index("idx_posts_category_created_at", posts_table.c.category, posts_table.c.created_at)
Index("idx_posts_owner_id_created_at", posts_table.c.owner_id, posts_table.c.created_at)

# ============================================================================
# GALLERY POSTS TABLE
# ============================================================================
gallery_posts_table = Table(
    "gallery_posts",
    metadata,
    *_engagement_columns(),
    Column("title", String(255), nullable=False),
    Column("category", String(16), nullable=False),  # GalleryCategory
    Column("news_type", String(32), nullable=True),  # NewsType
    Column("media", JSONB, nullable=True),
    Column("youtube_url", Text, nullable=True),
)

Index(
    "idx_gallery_posts_category_created_at",
    gallery_posts_table.c.category,
    gallery_posts_table.c.created_at,
)

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    *_engagement_columns(),
    Column("title", String(100), nullable=False),
    Column("location", JSONB, nullable=False),  # {latitude, longitude}
    Column("poster", JSONB, nullable=False),  # MediaFile
    Column("start_time", TIMESTAMP(timezone=True), nullable=False),
    Column("end_time", TIMESTAMP(timezone=True), nullable=True),
    Column("live_url", Text, nullable=True),
    Column("attendance", JSONB, nullable=False, server_default="[]"),
    Column("attendance_count", Integer, nullable=False, server_default="0"),
)

Index("idx_events_start_time", events_table.c.start_time)
Index("idx_events_end_time", events_table.c.end_time)

# ============================================================================
# DELETED POSTS TABLE (archive of user posts)
# ============================================================================
deleted_posts_table = Table(
    "deleted_posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("original_post_id", UUID(as_uuid=True), nullable=False),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("category", String(32), nullable=False),
    Column("media_type", String(16), nullable=False),
    Column("media", JSONB, nullable=True),
    Column("allow_comments", Boolean, nullable=False),
    Column("allow_shares", Boolean, nullable=False),
    Column("likes", JSONB, nullable=False, server_default="[]"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("shares", Integer, nullable=False, server_default="0"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("post_created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("post_updated_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_deleted_posts_original_post_id", deleted_posts_table.c.original_post_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("from_user", UUID(as_uuid=True), nullable=False),
    Column("to_user", UUID(as_uuid=True), nullable=False),
    Column("type", String(16), nullable=False),
    Column("post_id", UUID(as_uuid=True), nullable=True),
    Column("message", String(255), nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_to_user_created_at",
    notifications_table.c.to_user,
    notifications_table.c.created_at,
)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("reporter_id", UUID(as_uuid=True), nullable=False),
    Column("reason", String(32), nullable=False, server_default="other"),
    Column("description", String(200), nullable=True),
    Column("status", String(16), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "reporter_id", name="uq_reports_post_reporter"),
)

Index("idx_reports_status_created_at", reports_table.c.status, reports_table.c.created_at)
