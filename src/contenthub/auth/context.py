"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass

from .adapters.base import Principal


@dataclass(frozen=True)
class AuthContext:
    """Caller identity derived from one request's bearer credential."""

    user_id: int | None
    principal: Principal | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request carries a verified identity."""
        return self.user_id is not None and self.principal is not None

    @property
    def provider(self) -> str | None:
        """Get the authentication provider name."""
        return self.principal["provider"] if self.principal else None


ANONYMOUS = AuthContext(user_id=None)
