"""
Initial schema: users, posts, video games and listings.

Revision ID: 20261019_000000_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20261019_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def upgrade() -> None:
    # users
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255)),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column(
            "roles",
            postgresql.ARRAY(sa.String(length=50)),
            nullable=False,
            server_default=sa.text("'{}'::varchar[]"),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )

    # posts
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text()),
        sa.Column("published", sa.Boolean(), server_default=sa.text("false")),
        sa.Column("view_count", sa.Integer(), server_default=sa.text("0")),
        sa.Column("author_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["author_id"], ["users.id"], ondelete="CASCADE", name="posts_author_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="posts_pkey"),
    )
    op.create_index("idx_posts_author", "posts", ["author_id"])
    op.create_index("idx_posts_published", "posts", ["published"])

    # video_games
    op.create_table(
        "video_games",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("published", sa.Boolean(), server_default=sa.text("false")),
        sa.Column("release_date", sa.DateTime(timezone=True)),
        sa.Column(
            "categories",
            postgresql.ARRAY(sa.String(length=100)),
            nullable=False,
            server_default=sa.text("'{}'::varchar[]"),
        ),
        sa.Column("author_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["author_id"], ["users.id"], ondelete="CASCADE", name="video_games_author_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="video_games_pkey"),
    )
    op.create_index("idx_video_games_author", "video_games", ["author_id"])

    # listings
    op.create_table(
        "listings",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("published", sa.Boolean(), server_default=sa.text("false")),
        sa.Column("ratings", sa.Integer(), server_default=sa.text("0")),
        sa.Column(
            "categories",
            postgresql.ARRAY(sa.String(length=100)),
            nullable=False,
            server_default=sa.text("'{}'::varchar[]"),
        ),
        sa.Column("author_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["author_id"], ["users.id"], ondelete="CASCADE", name="listings_author_id_fkey"
        ),
        sa.PrimaryKeyConstraint("id", name="listings_pkey"),
    )
    op.create_index("idx_listings_author", "listings", ["author_id"])


def downgrade() -> None:
    # drop in reverse dependency order
    op.drop_index("idx_listings_author", table_name="listings")
    op.drop_table("listings")

    op.drop_index("idx_video_games_author", table_name="video_games")
    op.drop_table("video_games")

    op.drop_index("idx_posts_published", table_name="posts")
    op.drop_index("idx_posts_author", table_name="posts")
    op.drop_table("posts")

    op.drop_table("users")
