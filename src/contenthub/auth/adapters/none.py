"""No-auth adapter for local development without token verification."""

from __future__ import annotations

import os

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class NoAuthAdapter:
    """
    No-auth adapter that maps every bearer token onto one development user.

    WARNING: Only use this in development environments!
    """

    def __init__(self, default_user_id: int = 1):
        self.default_user_id = default_user_id

        environment = os.getenv("CONTENTHUB_ENVIRONMENT", "").lower()
        if environment in ("production", "prod"):
            logger.error(
                "NoAuthAdapter detected in production environment",
                environment=environment,
            )
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Please configure the jwt authentication provider."
            )

        logger.warning(
            "NoAuthAdapter is active - every bearer token is accepted",
            user_id=default_user_id,
        )

    async def verify_token(self, token: str) -> Principal:
        """Accept any non-empty token as the default user."""
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")

        return Principal(
            provider="none",
            subject=str(self.default_user_id),
            claims={"mode": "development"},
        )

    async def issue_token(self, user_id: int | None = None, claims: dict | None = None) -> str:
        """Issue a fake development token."""
        token_parts = ["dev-token", str(user_id if user_id is not None else self.default_user_id)]
        if claims:
            token_parts.extend(f"{k}={v}" for k, v in claims.items())
        return "|".join(token_parts)
