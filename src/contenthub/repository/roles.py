"""Role assignment helpers used by the management CLI."""

from __future__ import annotations

from sqlalchemy import select

from ..database.connection import get_async_session
from ..dbmodels import Users
from ..logging import get_logger

logger = get_logger(__name__)


async def add_role(email: str, role: str) -> list[str] | None:
    """Add a role to a user; returns the new role list or None if no such user."""
    async with get_async_session() as session:
        result = await session.execute(select(Users).where(Users.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        if role not in (user.roles or []):
            user.roles = [*(user.roles or []), role]
            logger.info("Role granted", user_id=user.id, role=role)
        return list(user.roles)


async def remove_role(email: str, role: str) -> list[str] | None:
    """Remove a role from a user; returns the new role list or None if no such user."""
    async with get_async_session() as session:
        result = await session.execute(select(Users).where(Users.email == email))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        if role in (user.roles or []):
            user.roles = [r for r in user.roles if r != role]
            logger.info("Role revoked", user_id=user.id, role=role)
        return list(user.roles or [])
