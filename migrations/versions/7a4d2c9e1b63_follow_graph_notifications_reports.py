"""follow_graph_notifications_reports

Add the social layer:
- Follow graph on users (follower and following id lists with counts)
- Notifications (likes, comments, follows and referrals sent to a user)
- Reports (one per reporter and post, reviewed by report handlers)

Revision ID: 7a4d2c9e1b63
Revises: 3c1f5b7e2a90
Create Date: 2026-10-19 15:40:07.204511

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "7a4d2c9e1b63"
down_revision: Union[str, Sequence[str], None] = "3c1f5b7e2a90"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS follow graph
    # ========================================================================
    op.add_column(
        "users",
        sa.Column(
            "followers",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
    )
    op.add_column(
        "users",
        sa.Column("followers_count", sa.Integer(), nullable=False, server_default="0"),
    )
    op.add_column(
        "users",
        sa.Column(
            "following",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
    )
    op.add_column(
        "users",
        sa.Column("following_count", sa.Integer(), nullable=False, server_default="0"),
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("from_user", sa.UUID(), nullable=False),
        sa.Column("to_user", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=True),
        sa.Column("message", sa.String(255), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("read_at", sa.TIMESTAMP(timezone=True), nullable=True),
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
        sa.CheckConstraint(
            "type IN ('follow', 'referred') OR post_id IS NOT NULL",
            name="ck_notifications_post_id",
        ),
    )
    op.create_index(
        "idx_notifications_to_user_created_at",
        "notifications",
        ["to_user", "created_at"],
    )

    # ========================================================================
    # REPORTS table
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.String(32), nullable=False, server_default="other"),
        sa.Column("description", sa.String(200), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
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
        sa.UniqueConstraint("post_id", "reporter_id", name="uq_reports_post_reporter"),
    )
    op.create_index(
        "idx_reports_status_created_at", "reports", ["status", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_reports_status_created_at", table_name="reports")
    op.drop_table("reports")
    op.drop_index("idx_notifications_to_user_created_at", table_name="notifications")
    op.drop_table("notifications")
    op.drop_column("users", "following_count")
    op.drop_column("users", "following")
    op.drop_column("users", "followers_count")
    op.drop_column("users", "followers")
