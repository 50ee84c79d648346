from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger
from ...repository.base import ResourceKind
from ..types.user import User
from ..types.video_game import VideoGame
from .common import require_arg, require_user_id, store_from_info, user_unique_from_input

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...repository.base import ContentStore

logger = get_logger(__name__)


# Query actions
async def all_video_games(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> list[VideoGame]:
    records = await store.list_resources(ResourceKind.VIDEO_GAME)
    return [VideoGame.from_model(record) for record in records]


async def video_game_by_id(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> VideoGame | None:
    game_id = args.get("id")
    if game_id is None:
        return None
    record = await store.find_resource_by_id(ResourceKind.VIDEO_GAME, game_id)
    return VideoGame.from_model(record) if record else None


async def video_games_by_user(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> list[VideoGame]:
    """Unpublished video games of one user."""
    selector = user_unique_from_input(args.get("user_unique_input"))
    records = await store.resources_by_user(ResourceKind.VIDEO_GAME, selector, published=False)
    return [VideoGame.from_model(record) for record in records]


# Mutation actions
async def create_video_game(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> VideoGame:
    data = require_arg(args, "data")
    record = await store.create_resource(
        ResourceKind.VIDEO_GAME,
        {
            "title": data.title,
            "description": data.description,
            "release_date": data.release_date,
            "categories": list(data.categories),
            "author_id": require_user_id(auth),
        },
    )
    return VideoGame.from_model(record)


async def toggle_publish_video_game(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> VideoGame:
    game_id = require_arg(args, "id")
    record = await store.toggle_published(ResourceKind.VIDEO_GAME, game_id)
    logger.info("Video game publish state toggled", video_game_id=game_id, published=record.published)
    return VideoGame.from_model(record)


async def delete_video_game(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> VideoGame:
    record = await store.delete_resource(ResourceKind.VIDEO_GAME, require_arg(args, "id"))
    return VideoGame.from_model(record)


# Field resolvers
async def resolve_video_game_author(game: VideoGame, info: strawberry.Info) -> User | None:
    author = await store_from_info(info).find_author_of(ResourceKind.VIDEO_GAME, game.id)
    return User.from_model(author) if author else None
