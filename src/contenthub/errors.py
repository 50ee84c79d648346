"""
Error taxonomy shared by the rule engine, the content store and the resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .repository.base import ResourceKind


class ContentHubError(Exception):
    """Base class for errors surfaced to GraphQL clients."""

    pass


class Unauthenticated(ContentHubError):
    """Raised when an operation requires an identity and the caller has none."""

    def __init__(self, operation: str | None = None):
        self.operation = operation
        super().__init__("Not authenticated")


class Forbidden(ContentHubError):
    """Raised when the caller is known but the policy rule denies the operation."""

    def __init__(self, operation: str | None = None):
        self.operation = operation
        super().__init__("Not authorised!")


class AuthorizationEvaluationError(ContentHubError):
    """Raised when a lookup needed to evaluate a rule fails."""

    pass


class NotFound(ContentHubError):
    """Raised when the target resource of a write does not exist."""

    def __init__(self, kind: ResourceKind | str, resource_id: Any):
        self.kind = kind
        self.resource_id = resource_id
        label = getattr(kind, "label", kind)
        super().__init__(f"{label} with ID {resource_id} does not exist in the database.")


class ValidationError(ContentHubError):
    """Raised when an argument is missing or malformed."""

    pass
