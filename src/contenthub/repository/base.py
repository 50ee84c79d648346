"""Content store interface and resource kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Protocol

from ..dbmodels import Listings, Posts, Users, VideoGames


class ResourceKind(Enum):
    """The three resource variants subject to ownership checks."""

    POST = "post"
    VIDEO_GAME = "video_game"
    LISTING = "listing"

    @property
    def label(self) -> str:
        """Human readable name used in error messages."""
        return _LABELS[self]

    @property
    def model(self) -> type[Posts] | type[VideoGames] | type[Listings]:
        """ORM model backing this kind."""
        return _MODELS[self]


_LABELS = {
    ResourceKind.POST: "Post",
    ResourceKind.VIDEO_GAME: "VideoGame",
    ResourceKind.LISTING: "Listing",
}

_MODELS = {
    ResourceKind.POST: Posts,
    ResourceKind.VIDEO_GAME: VideoGames,
    ResourceKind.LISTING: Listings,
}


@dataclass(frozen=True)
class UserUnique:
    """Selector for a single user by id or email."""

    id: int | None = None
    email: str | None = None


@dataclass(frozen=True)
class FeedFilter:
    """Filtering, sorting and paging for the published post feed."""

    search: str | None = None
    skip: int | None = None
    take: int | None = None
    order_by_updated_at: Literal["asc", "desc"] | None = None


class ContentStore(Protocol):
    """Storage collaborator consumed by the rule engine and the resolvers.

    Implementations return ORM records (or objects exposing the same
    attributes) and raise ``NotFound`` for writes against absent rows.
    """

    async def find_resource_by_id(self, kind: ResourceKind, resource_id: int) -> Any | None:
        ...

    async def find_author_of(self, kind: ResourceKind, resource_id: int) -> Users | None:
        ...

    async def find_identity_by_id(self, user_id: int) -> Users | None:
        ...

    async def find_user_by_email(self, email: str) -> Users | None:
        ...

    async def find_user(self, selector: UserUnique) -> Users | None:
        ...

    async def list_users(self) -> list[Users]:
        ...

    async def create_user(
        self, *, email: str, password_hash: str, name: str | None = None
    ) -> Users:
        ...

    async def feed(self, feed_filter: FeedFilter) -> list[Posts]:
        ...

    async def list_resources(self, kind: ResourceKind) -> list[Any]:
        ...

    async def resources_by_user(
        self, kind: ResourceKind, selector: UserUnique, *, published: bool | None = None
    ) -> list[Any]:
        ...

    async def create_resource(self, kind: ResourceKind, data: dict[str, Any]) -> Any:
        ...

    async def update_resource(
        self, kind: ResourceKind, resource_id: int, data: dict[str, Any]
    ) -> Any:
        ...

    async def delete_resource(self, kind: ResourceKind, resource_id: int) -> Any:
        ...

    async def toggle_published(self, kind: ResourceKind, resource_id: int) -> Any:
        ...

    async def increment_view_count(self, post_id: int) -> Posts:
        ...
