"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry

if TYPE_CHECKING:
    from .listing import Listing
    from .post import Post
    from .video_game import VideoGame


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: int
    name: str | None
    email: str
    roles: list[str]

    @classmethod
    def from_model(cls, record: Any) -> "User":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            roles=list(record.roles or []),
        )

    @strawberry.field
    async def posts(self, info: strawberry.Info) -> list[Annotated["Post", strawberry.lazy(".post")]]:
        """Get posts written by this user."""
        from ..resolvers.user import resolve_user_posts

        return await resolve_user_posts(self, info)

    @strawberry.field
    async def video_games(
        self, info: strawberry.Info
    ) -> list[Annotated["VideoGame", strawberry.lazy(".video_game")]]:
        """Get video games created by this user."""
        from ..resolvers.user import resolve_user_video_games

        return await resolve_user_video_games(self, info)

    @strawberry.field
    async def listings(
        self, info: strawberry.Info
    ) -> list[Annotated["Listing", strawberry.lazy(".listing")]]:
        """Get listings created by this user."""
        from ..resolvers.user import resolve_user_listings

        return await resolve_user_listings(self, info)


@strawberry.type
class AuthPayload:
    """Token issued on signup or login, with the user it identifies."""

    token: str | None
    user: User | None


@strawberry.input
class UserUniqueInput:
    """Selects one user by id or email."""

    id: int | None = None
    email: str | None = None
