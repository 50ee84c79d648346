"""
Post GraphQL type definitions
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from .user import User


@strawberry.enum
class SortOrder(Enum):
    """Sort direction."""

    asc = "asc"
    desc = "desc"


@strawberry.type
class Post:
    """Blog post type for GraphQL API."""

    id: int
    created_at: datetime
    updated_at: datetime
    title: str
    content: str | None
    published: bool
    view_count: int
    author_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, record: Any) -> "Post":
        return cls(
            id=record.id,
            created_at=record.created_at,
            updated_at=record.updated_at,
            title=record.title,
            content=record.content,
            published=bool(record.published),
            view_count=record.view_count or 0,
            author_id=record.author_id,
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this post."""
        from ..resolvers.post import resolve_post_author

        return await resolve_post_author(self, info)


@strawberry.input
class PostCreateInput:
    """Input for creating a draft post."""

    title: str
    content: str | None = None


@strawberry.input
class PostOrderByUpdatedAtInput:
    """Feed ordering by last update."""

    updated_at: SortOrder
