"""
Database models for contenthub (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from datetime import datetime

from sqlalchemy import (
    ARRAY,
    Boolean,
    DateTime,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255))
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    roles: Mapped[list[str]] = mapped_column(
        ARRAY(String(50)), nullable=False, server_default=text("'{}'::varchar[]")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )

    posts: Mapped[list["Posts"]] = relationship("Posts", uselist=True, back_populates="author")
    video_games: Mapped[list["VideoGames"]] = relationship(
        "VideoGames", uselist=True, back_populates="author"
    )
    listings: Mapped[list["Listings"]] = relationship(
        "Listings", uselist=True, back_populates="author"
    )


class Posts(Base):
    __tablename__ = "posts"
    __table_args__ = (
        ForeignKeyConstraint(
            ["author_id"], ["users.id"], ondelete="CASCADE", name="posts_author_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="posts_pkey"),
        Index("idx_posts_author", "author_id"),
        Index("idx_posts_published", "published"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str | None] = mapped_column(Text)
    published: Mapped[bool] = mapped_column(Boolean, server_default=text("false"))
    view_count: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    author_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP"), onupdate=text("CURRENT_TIMESTAMP")
    )

    author: Mapped["Users"] = relationship("Users", back_populates="posts")


class VideoGames(Base):
    __tablename__ = "video_games"
    __table_args__ = (
        ForeignKeyConstraint(
            ["author_id"], ["users.id"], ondelete="CASCADE", name="video_games_author_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="video_games_pkey"),
        Index("idx_video_games_author", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    published: Mapped[bool] = mapped_column(Boolean, server_default=text("false"))
    release_date: Mapped[datetime | None] = mapped_column(DateTime(True))
    categories: Mapped[list[str]] = mapped_column(
        ARRAY(String(100)), nullable=False, server_default=text("'{}'::varchar[]")
    )
    author_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP"), onupdate=text("CURRENT_TIMESTAMP")
    )

    author: Mapped["Users"] = relationship("Users", back_populates="video_games")


class Listings(Base):
    __tablename__ = "listings"
    __table_args__ = (
        ForeignKeyConstraint(
            ["author_id"], ["users.id"], ondelete="CASCADE", name="listings_author_id_fkey"
        ),
        PrimaryKeyConstraint("id", name="listings_pkey"),
        Index("idx_listings_author", "author_id"),
    )

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    published: Mapped[bool] = mapped_column(Boolean, server_default=text("false"))
    ratings: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    categories: Mapped[list[str]] = mapped_column(
        ARRAY(String(100)), nullable=False, server_default=text("'{}'::varchar[]")
    )
    author_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(True), server_default=text("CURRENT_TIMESTAMP"), onupdate=text("CURRENT_TIMESTAMP")
    )

    author: Mapped["Users"] = relationship("Users", back_populates="listings")


target_metadata = Base.metadata

__all__ = ["Base", "Users", "Posts", "VideoGames", "Listings", "target_metadata"]
