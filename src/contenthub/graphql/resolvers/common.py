"""Helpers shared by the resolver modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import strawberry

from ...errors import ValidationError
from ...repository.base import UserUnique

if TYPE_CHECKING:
    from ...auth.context import AuthContext
    from ...repository.base import ContentStore


def store_from_info(info: strawberry.Info) -> ContentStore:
    """Get the content store bound to this request."""
    return info.context["store"]


def require_arg(args: Mapping[str, Any], name: str) -> Any:
    value = args.get(name)
    if value is None:
        raise ValidationError(f"Argument '{name}' is required")
    return value


def require_user_id(auth: AuthContext) -> int:
    # Guarded by is_authenticated in the policy table
    if auth.user_id is None:
        raise ValidationError("Operation requires an authenticated caller")
    return auth.user_id


def user_unique_from_input(value: Any) -> UserUnique:
    """Convert a ``UserUniqueInput`` into the store's selector."""
    if value is None or (value.id is None and not value.email):
        raise ValidationError("userUniqueInput requires an id or an email")
    return UserUnique(id=value.id, email=value.email)
