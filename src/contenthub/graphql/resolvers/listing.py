from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger
from ...repository.base import ResourceKind
from ..types.listing import Listing
from ..types.user import User
from .common import require_arg, require_user_id, store_from_info, user_unique_from_input

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...repository.base import ContentStore

logger = get_logger(__name__)


# Query actions
async def all_listings(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> list[Listing]:
    records = await store.list_resources(ResourceKind.LISTING)
    return [Listing.from_model(record) for record in records]


async def listing_by_id(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> Listing | None:
    listing_id = args.get("id")
    if listing_id is None:
        return None
    record = await store.find_resource_by_id(ResourceKind.LISTING, listing_id)
    return Listing.from_model(record) if record else None


async def listings_by_user(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> list[Listing]:
    """Unpublished listings of one user."""
    selector = user_unique_from_input(args.get("user_unique_input"))
    records = await store.resources_by_user(ResourceKind.LISTING, selector, published=False)
    return [Listing.from_model(record) for record in records]


# Mutation actions
async def create_listing(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> Listing:
    data = require_arg(args, "data")
    values: dict[str, Any] = {
        "title": data.title,
        "description": data.description,
        "categories": list(data.categories),
        "author_id": require_user_id(auth),
    }
    # Omitted ratings fall back to the column default
    if data.ratings is not None:
        values["ratings"] = data.ratings
    record = await store.create_resource(ResourceKind.LISTING, values)
    return Listing.from_model(record)


async def toggle_publish_listing(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> Listing:
    listing_id = require_arg(args, "id")
    record = await store.toggle_published(ResourceKind.LISTING, listing_id)
    logger.info("Listing publish state toggled", listing_id=listing_id, published=record.published)
    return Listing.from_model(record)


async def delete_listing(
    store: ContentStore, auth: AuthContext, args: Mapping[str, Any]
) -> Listing:
    record = await store.delete_resource(ResourceKind.LISTING, require_arg(args, "id"))
    return Listing.from_model(record)


# Field resolvers
async def resolve_listing_author(listing: Listing, info: strawberry.Info) -> User | None:
    author = await store_from_info(info).find_author_of(ResourceKind.LISTING, listing.id)
    return User.from_model(author) if author else None
