"""Base authentication adapter interface and types."""

from __future__ import annotations

from typing import Literal, NotRequired, Protocol, TypedDict


class Principal(TypedDict):
    """Identity extracted from an incoming token."""

    provider: Literal["jwt", "none"]
    subject: str  # user id as issued in the 'sub' claim
    email: NotRequired[str]
    claims: NotRequired[dict]


class AuthAdapter(Protocol):
    """Provider-agnostic authentication adapter interface."""

    async def verify_token(self, token: str) -> Principal:
        """
        Verify a token and return the principal identity.

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def issue_token(self, user_id: int | None = None, claims: dict | None = None) -> str:
        """
        Issue a new signed token for a user.

        Args:
            user_id: User ID stored in the 'sub' claim
            claims: Optional additional claims to include
        """
        ...


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass
