"""
Video game GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from .user import User


@strawberry.type
class VideoGame:
    """Video game type for GraphQL API."""

    id: int
    title: str
    description: str | None
    published: bool
    release_date: datetime | None
    categories: list[str]
    author_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, record: Any) -> "VideoGame":
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            published=bool(record.published),
            release_date=record.release_date,
            categories=list(record.categories or []),
            author_id=record.author_id,
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the user who created this video game."""
        from ..resolvers.video_game import resolve_video_game_author

        return await resolve_video_game_author(self, info)


@strawberry.input
class VideoGameCreateInput:
    """Input for creating a video game."""

    title: str
    categories: list[str]
    description: str | None = None
    release_date: datetime | None = None
