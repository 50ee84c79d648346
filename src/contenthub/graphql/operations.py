"""
Operation table: the action behind every root query and mutation
"""

from typing import Any

import strawberry

from ..authz.gate import Dispatcher
from ..authz.policy import OperationCategory, permissions
from ..config import settings
from .resolvers import listing, post, user, video_game

dispatcher = Dispatcher(
    permissions,
    query={
        "feed": post.feed,
        "allUsers": user.all_users,
        "me": user.me,
        "postById": post.post_by_id,
        "draftsByUser": post.drafts_by_user,
        "allVideoGames": video_game.all_video_games,
        "videoGameById": video_game.video_game_by_id,
        "videoGamesByUser": video_game.video_games_by_user,
        "allListings": listing.all_listings,
        "listingById": listing.listing_by_id,
        "listingsByUser": listing.listings_by_user,
    },
    mutation={
        "signup": user.signup,
        "login": user.login,
        "createDraft": post.create_draft,
        "togglePublishPost": post.toggle_publish_post,
        "incrementPostViewCount": post.increment_post_view_count,
        "deletePost": post.delete_post,
        "createVideoGame": video_game.create_video_game,
        "togglePublishVideoGame": video_game.toggle_publish_video_game,
        "deleteVideoGame": video_game.delete_video_game,
        "createListing": listing.create_listing,
        "togglePublishListing": listing.toggle_publish_listing,
        "deleteListing": listing.delete_listing,
    },
    admin_role=settings.admin_role,
)


async def dispatch(
    info: strawberry.Info, category: OperationCategory, operation: str, /, **args: Any
) -> Any:
    """Run a root operation through the policy gate using this request's context.

    Positional-only so operation arguments such as ``name`` pass through ``args``.
    """
    return await dispatcher.authorize_and_dispatch(
        operation,
        category,
        args,
        info.context["auth"],
        info.context["store"],
    )
