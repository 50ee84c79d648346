from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import strawberry

from ...auth.adapters.base import AuthenticationError
from ...auth.factory import get_auth_adapter
from ...auth.passwords import hash_password_async, verify_password_async
from ...authz.rules import RuleContext, evaluate, is_admin
from ...config import settings
from ...errors import AuthorizationEvaluationError, ValidationError
from ...logging import get_logger
from ...repository.base import ResourceKind, UserUnique
from ..types.listing import Listing
from ..types.post import Post
from ..types.user import AuthPayload, User
from ..types.video_game import VideoGame
from .common import require_arg, require_user_id, store_from_info

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...repository.base import ContentStore

logger = get_logger(__name__)


# Query actions
async def all_users(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> list[User]:
    return [User.from_model(record) for record in await store.list_users()]


async def me(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> User | None:
    """The user behind the bearer token, if it still exists."""
    record = await store.find_identity_by_id(require_user_id(auth))
    return User.from_model(record) if record else None


# Mutation actions
async def signup(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> AuthPayload:
    """
    Create a user with a bcrypt-hashed password and issue a token for it.
    """
    email = require_arg(args, "email")
    if await store.find_user_by_email(email) is not None:
        raise ValidationError(f"A user with email {email} already exists")

    password_hash = await hash_password_async(require_arg(args, "password"))
    record = await store.create_user(email=email, password_hash=password_hash, name=args.get("name"))

    token = await get_auth_adapter().issue_token(user_id=record.id)
    logger.info("User signed up", user_id=record.id)
    return AuthPayload(token=token, user=User.from_model(record))


async def login(store: ContentStore, auth: AuthContext, args: Mapping[str, Any]) -> AuthPayload:
    """
    Check credentials and issue a token.

    Raises:
        AuthenticationError: Unknown email or wrong password
    """
    email = require_arg(args, "email")
    record = await store.find_user_by_email(email)
    if record is None:
        logger.info("Login for unknown email")
        raise AuthenticationError(f"No user found for email: {email}")

    if not await verify_password_async(require_arg(args, "password"), record.password_hash):
        logger.info("Login with invalid password", user_id=record.id)
        raise AuthenticationError("Invalid password")

    token = await get_auth_adapter().issue_token(user_id=record.id)
    return AuthPayload(token=token, user=User.from_model(record))


# Field resolvers
async def _published_filter(user: User, info: strawberry.Info) -> bool | None:
    """Unpublished records are visible only to their author and to admins."""
    auth = info.context["auth"]
    if auth.user_id is not None and auth.user_id == user.id:
        return None

    ctx = RuleContext(
        auth=auth, args={}, store=store_from_info(info), admin_role=settings.admin_role
    )
    try:
        if await evaluate(is_admin(), ctx):
            return None
    except AuthorizationEvaluationError as e:
        logger.warning("Role lookup failed, hiding unpublished records", user_id=user.id, error=str(e))
    return True


async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    records = await store_from_info(info).resources_by_user(
        ResourceKind.POST, UserUnique(id=user.id), published=await _published_filter(user, info)
    )
    return [Post.from_model(record) for record in records]


async def resolve_user_video_games(user: User, info: strawberry.Info) -> list[VideoGame]:
    records = await store_from_info(info).resources_by_user(
        ResourceKind.VIDEO_GAME,
        UserUnique(id=user.id),
        published=await _published_filter(user, info),
    )
    return [VideoGame.from_model(record) for record in records]


async def resolve_user_listings(user: User, info: strawberry.Info) -> list[Listing]:
    records = await store_from_info(info).resources_by_user(
        ResourceKind.LISTING,
        UserUnique(id=user.id),
        published=await _published_filter(user, info),
    )
    return [Listing.from_model(record) for record in records]
