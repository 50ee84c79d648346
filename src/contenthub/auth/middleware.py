"""Bearer credential handling for incoming requests."""

from __future__ import annotations

from fastapi import Header, HTTPException

from ..logging import get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .context import ANONYMOUS, AuthContext
from .factory import get_auth_adapter

logger = get_logger(__name__)


async def get_auth_context(
    authorization: str | None = Header(None),
    adapter: AuthAdapter | None = None,
) -> AuthContext:
    """
    Extract authentication context from the Authorization header.

    A missing header yields an anonymous context. A malformed header or an
    invalid token raises HTTP 401.

    Args:
        authorization: Authorization header (Bearer token)
        adapter: Auth adapter to verify with (defaults to the configured one)
    """
    if not authorization:
        return ANONYMOUS

    if not authorization.startswith("Bearer "):
        logger.warning("Invalid authorization format received")
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization format. Expected: Bearer <token>",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[7:]
    if not token:
        logger.warning("Empty token provided")
        raise HTTPException(
            status_code=401,
            detail="Empty token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    adapter = adapter or get_auth_adapter()

    try:
        principal = await adapter.verify_token(token)
        user_id = int(principal["subject"])
    except AuthenticationError as e:
        logger.warning("Authentication failed", error=str(e))
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    except ValueError as e:
        logger.warning("Token subject is not a user id", error=str(e))
        raise HTTPException(
            status_code=401,
            detail="Invalid token subject",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    logger.debug("Request authenticated", user_id=user_id, provider=principal["provider"])
    return AuthContext(user_id=user_id, principal=principal, token=token)


async def get_auth_context_optional(
    authorization: str | None = Header(None),
    adapter: AuthAdapter | None = None,
) -> AuthContext:
    """
    Optional authentication - returns an anonymous context if the token is bad.

    Used by the GraphQL endpoint, where the policy table decides per operation
    whether an identity is required.
    """
    try:
        return await get_auth_context(authorization, adapter)
    except HTTPException:
        return ANONYMOUS
