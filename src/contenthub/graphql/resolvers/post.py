from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger
from ...repository.base import FeedFilter, ResourceKind
from ..types.post import Post
from ..types.user import User
from .common import require_arg, require_user_id, store_from_info, user_unique_from_input

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...repository.base import ContentStore

logger = get_logger(__name__)


# Query actions
async def feed(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> list[Post]:
    """Published posts, optionally searched, ordered and paged."""
    order_by = args.get("order_by")
    records = await store.feed(
        FeedFilter(
            search=args.get("search_string") or None,
            skip=args.get("skip") or None,
            take=args.get("take") or None,
            order_by_updated_at=order_by.updated_at.value if order_by else None,
        )
    )
    return [Post.from_model(record) for record in records]


async def post_by_id(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> Post | None:
    post_id = args.get("id")
    if post_id is None:
        return None
    record = await store.find_resource_by_id(ResourceKind.POST, post_id)
    return Post.from_model(record) if record else None


async def drafts_by_user(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> list[Post]:
    selector = user_unique_from_input(args.get("user_unique_input"))
    records = await store.resources_by_user(ResourceKind.POST, selector, published=False)
    return [Post.from_model(record) for record in records]


# Mutation actions
async def create_draft(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> Post:
    data = require_arg(args, "data")
    record = await store.create_resource(
        ResourceKind.POST,
        {
            "title": data.title,
            "content": data.content,
            "author_id": require_user_id(auth),
        },
    )
    return Post.from_model(record)


async def toggle_publish_post(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> Post:
    post_id = require_arg(args, "id")
    record = await store.toggle_published(ResourceKind.POST, post_id)
    logger.info("Post publish state toggled", post_id=post_id, published=record.published)
    return Post.from_model(record)


async def increment_post_view_count(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> Post:
    record = await store.increment_view_count(require_arg(args, "id"))
    return Post.from_model(record)


async def delete_post(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> Post:
    record = await store.delete_resource(ResourceKind.POST, require_arg(args, "id"))
    return Post.from_model(record)


# Field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    author = await store_from_info(info).find_author_of(ResourceKind.POST, post.id)
    return User.from_model(author) if author else None
