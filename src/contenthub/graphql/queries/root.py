"""
Root GraphQL query definitions
"""

import strawberry

from ...authz.policy import OperationCategory
from ..operations import dispatch
from ..types.listing import Listing
from ..types.post import Post, PostOrderByUpdatedAtInput
from ..types.user import User, UserUniqueInput
from ..types.video_game import VideoGame

QUERY = OperationCategory.QUERY


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="allUsers")
    async def all_users(self, info: strawberry.Info) -> list[User]:
        """Get every registered user."""
        return await dispatch(info, QUERY, "allUsers")

    @strawberry.field(name="me")
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the current authenticated user."""
        return await dispatch(info, QUERY, "me")

    @strawberry.field(name="postById")
    async def post_by_id(self, info: strawberry.Info, id: int | None = None) -> Post | None:
        """Get a post by ID."""
        return await dispatch(info, QUERY, "postById", id=id)

    @strawberry.field(name="feed")
    async def feed(
        self,
        info: strawberry.Info,
        search_string: str | None = None,
        skip: int | None = None,
        take: int | None = None,
        order_by: PostOrderByUpdatedAtInput | None = None,
    ) -> list[Post]:
        """Get published posts, optionally filtered by a search string."""
        return await dispatch(
            info,
            QUERY,
            "feed",
            search_string=search_string,
            skip=skip,
            take=take,
            order_by=order_by,
        )

    @strawberry.field(name="draftsByUser")
    async def drafts_by_user(
        self, info: strawberry.Info, user_unique_input: UserUniqueInput
    ) -> list[Post] | None:
        """Get unpublished posts of a user."""
        return await dispatch(info, QUERY, "draftsByUser", user_unique_input=user_unique_input)

    @strawberry.field(name="allVideoGames")
    async def all_video_games(self, info: strawberry.Info) -> list[VideoGame]:
        """Get every video game."""
        return await dispatch(info, QUERY, "allVideoGames")

    @strawberry.field(name="videoGameById")
    async def video_game_by_id(
        self, info: strawberry.Info, id: int | None = None
    ) -> VideoGame | None:
        """Get a video game by ID."""
        return await dispatch(info, QUERY, "videoGameById", id=id)

    @strawberry.field(name="videoGamesByUser")
    async def video_games_by_user(
        self, info: strawberry.Info, user_unique_input: UserUniqueInput
    ) -> list[VideoGame]:
        """Get unpublished video games of a user."""
        return await dispatch(info, QUERY, "videoGamesByUser", user_unique_input=user_unique_input)

    @strawberry.field(name="allListings")
    async def all_listings(self, info: strawberry.Info) -> list[Listing]:
        """Get every listing."""
        return await dispatch(info, QUERY, "allListings")

    @strawberry.field(name="listingById")
    async def listing_by_id(self, info: strawberry.Info, id: int | None = None) -> Listing | None:
        """Get a listing by ID."""
        return await dispatch(info, QUERY, "listingById", id=id)

    @strawberry.field(name="listingsByUser")
    async def listings_by_user(
        self, info: strawberry.Info, user_unique_input: UserUniqueInput
    ) -> list[Listing]:
        """Get unpublished listings of a user."""
        return await dispatch(info, QUERY, "listingsByUser", user_unique_input=user_unique_input)
