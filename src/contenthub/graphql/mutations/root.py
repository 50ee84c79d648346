"""
Root GraphQL mutation definitions
"""

import strawberry

from ...authz.policy import OperationCategory
from ..operations import dispatch
from ..types.listing import Listing, ListingCreateInput
from ..types.post import Post, PostCreateInput
from ..types.user import AuthPayload
from ..types.video_game import VideoGame, VideoGameCreateInput

MUTATION = OperationCategory.MUTATION


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Account mutations
    @strawberry.mutation(name="signup")
    async def signup(
        self, info: strawberry.Info, email: str, password: str, name: str | None = None
    ) -> AuthPayload:
        """Register a new user and return a token for it."""
        return await dispatch(info, MUTATION, "signup", email=email, password=password, name=name)

    @strawberry.mutation(name="login")
    async def login(self, info: strawberry.Info, email: str, password: str) -> AuthPayload:
        """Exchange credentials for a token."""
        return await dispatch(info, MUTATION, "login", email=email, password=password)

    # Post mutations
    @strawberry.mutation(name="createDraft")
    async def create_draft(self, info: strawberry.Info, data: PostCreateInput) -> Post:
        """Create an unpublished post owned by the caller."""
        return await dispatch(info, MUTATION, "createDraft", data=data)

    @strawberry.mutation(name="togglePublishPost")
    async def toggle_publish_post(self, info: strawberry.Info, id: int) -> Post:
        """Flip the published flag of a post."""
        return await dispatch(info, MUTATION, "togglePublishPost", id=id)

    @strawberry.mutation(name="incrementPostViewCount")
    async def increment_post_view_count(self, info: strawberry.Info, id: int) -> Post:
        """Add one to the view counter of a post."""
        return await dispatch(info, MUTATION, "incrementPostViewCount", id=id)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, id: int) -> Post:
        """Delete a post."""
        return await dispatch(info, MUTATION, "deletePost", id=id)

    # Video game mutations
    @strawberry.mutation(name="createVideoGame")
    async def create_video_game(self, info: strawberry.Info, data: VideoGameCreateInput) -> VideoGame:
        """Create a video game owned by the caller."""
        return await dispatch(info, MUTATION, "createVideoGame", data=data)

    @strawberry.mutation(name="togglePublishVideoGame")
    async def toggle_publish_video_game(self, info: strawberry.Info, id: int) -> VideoGame:
        """Flip the published flag of a video game."""
        return await dispatch(info, MUTATION, "togglePublishVideoGame", id=id)

    @strawberry.mutation(name="deleteVideoGame")
    async def delete_video_game(self, info: strawberry.Info, id: int) -> VideoGame:
        """Delete a video game."""
        return await dispatch(info, MUTATION, "deleteVideoGame", id=id)

    # Listing mutations
    @strawberry.mutation(name="createListing")
    async def create_listing(self, info: strawberry.Info, data: ListingCreateInput) -> Listing:
        """Create a listing owned by the caller."""
        return await dispatch(info, MUTATION, "createListing", data=data)

    @strawberry.mutation(name="togglePublishListing")
    async def toggle_publish_listing(self, info: strawberry.Info, id: int) -> Listing:
        """Flip the published flag of a listing."""
        return await dispatch(info, MUTATION, "togglePublishListing", id=id)

    @strawberry.mutation(name="deleteListing")
    async def delete_listing(self, info: strawberry.Info, id: int) -> Listing:
        """Delete a listing."""
        return await dispatch(info, MUTATION, "deleteListing", id=id)
