"""
Centralized logging configuration using structlog

Every log line emitted while a request is in flight carries the request id,
the caller's user id and, once the dispatch gate has picked it up, the
GraphQL operation being authorized.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Context variables for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)

# Set by the dispatch gate for the operation currently being authorized
operation_ctx: ContextVar[str | None] = ContextVar("operation", default=None)
operation_category_ctx: ContextVar[str | None] = ContextVar("operation_category", default=None)

_CONTEXT_FIELDS = (
    ("request_id", request_id_ctx),
    ("user_id", user_id_ctx),
    ("operation", operation_ctx),
    ("category", operation_category_ctx),
)


class RequestContextFilter:
    """Add request and operation context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # Required by the structlog processor interface
        _ = logger, method_name

        for key, var in _CONTEXT_FIELDS:
            value = var.get()
            # Explicit event fields win over context
            if value and key not in event_dict:
                event_dict[key] = value

        return event_dict


def configure_logging(debug: bool = False) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    # Configure stdlib logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        # Request id, user id, operation
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        # Perform %-style string formatting
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance (name is typically __name__)."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Compact request id: microsecond timestamp plus two random bytes, urlsafe base64."""
    timestamp_us = int(time.time() * 1_000_000)
    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    # Strip padding
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, user_id: str | None = None) -> None:
    """Set request context variables.

    Args:
        request_id: Request ID to set (generates one if None)
        user_id: User ID to set
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    if user_id is not None:
        user_id_ctx.set(user_id)


def set_operation_context(operation: str | None, category: str | None = None) -> None:
    """Bind the GraphQL operation being authorized to subsequent log lines."""
    operation_ctx.set(operation)
    operation_category_ctx.set(category)


def clear_request_context() -> None:
    """Clear request and operation context variables."""
    request_id_ctx.set(None)
    user_id_ctx.set(None)
    operation_ctx.set(None)
    operation_category_ctx.set(None)


def get_request_id() -> str | None:
    """Get the current request ID."""
    return request_id_ctx.get()
