"""Factory for creating auth adapters based on configuration."""

from __future__ import annotations

import json
import os

from ..config import settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter
from .adapters.none import NoAuthAdapter


def get_auth_adapter() -> AuthAdapter:
    """Create and return the configured auth adapter."""
    provider = os.getenv("CONTENTHUB_AUTH_PROVIDER", settings.auth_provider)
    config_str = os.getenv("CONTENTHUB_AUTH_CONFIG")

    config = settings.auth_config
    if config_str:
        try:
            config = json.loads(config_str)
        except json.JSONDecodeError:
            config = {}

    if provider == "none":
        return NoAuthAdapter(default_user_id=int(config.get("default_user_id", 1)))

    elif provider == "jwt":
        secret_key = (
            config.get("secret_key") or os.getenv("CONTENTHUB_JWT_SECRET") or settings.jwt_secret
        )
        if not secret_key:
            raise ValueError(
                "JWT secret key is required. Set CONTENTHUB_JWT_SECRET or provide in config."
            )

        return JWTAuthAdapter(
            secret_key=secret_key,
            algorithm=config.get("algorithm", settings.jwt_algorithm),
            issuer=config.get("issuer", settings.jwt_issuer),
            audience=config.get("audience", settings.jwt_audience),
            token_expiry_hours=int(config.get("token_expiry_hours", settings.jwt_expiry_hours)),
        )

    else:
        raise ValueError(f"Unsupported auth provider: {provider}")
