"""Password hashing with bcrypt."""

from __future__ import annotations

import asyncio

import bcrypt

from ..config import settings


def hash_password(raw_password: str, rounds: int | None = None) -> str:
    """Hash a raw password using bcrypt and return the utf-8 string."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    hashed = bcrypt.hashpw(raw_password.encode(), salt)
    return hashed.decode()


def verify_password(raw_password: str, password_hash: str | None) -> bool:
    """Verify raw password against stored bcrypt hash."""
    if not password_hash:
        return False
    return bcrypt.checkpw(raw_password.encode(), password_hash.encode("utf-8"))


async def hash_password_async(raw_password: str) -> str:
    """Hash off the event loop; bcrypt is CPU bound."""
    return await asyncio.to_thread(hash_password, raw_password)


async def verify_password_async(raw_password: str, password_hash: str | None) -> bool:
    return await asyncio.to_thread(verify_password, raw_password, password_hash)
