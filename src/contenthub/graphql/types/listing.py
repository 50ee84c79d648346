"""
Listing GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from .user import User


@strawberry.type
class Listing:
    """Classified listing type for GraphQL API."""

    id: int
    title: str
    description: str | None
    published: bool
    ratings: int
    categories: list[str]
    created_at: datetime
    updated_at: datetime
    author_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, record: Any) -> "Listing":
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            published=bool(record.published),
            ratings=record.ratings or 0,
            categories=list(record.categories or []),
            created_at=record.created_at,
            updated_at=record.updated_at,
            author_id=record.author_id,
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user who created this listing."""
        from ..resolvers.listing import resolve_listing_author

        return await resolve_listing_author(self, info)


@strawberry.input
class ListingCreateInput:
    """Input for creating a listing."""

    title: str
    categories: list[str]
    description: str | None = None
    ratings: int | None = None
