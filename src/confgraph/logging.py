"""
Centralized logging configuration using structlog
"""

import logging
import re
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Context variables for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._-]{1,64}")


class RequestContextFilter:
    """Add request context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add request context to the event dict."""
        # Required by the structlog processor interface
        _ = logger, method_name

        request_id = request_id_ctx.get()
        operation = operation_ctx.get()

        if request_id:
            event_dict["request_id"] = request_id

        if operation:
            event_dict["graphql_operation"] = operation

        return event_dict


def _resolve_level(debug: bool, level: str | None) -> int:
    if level:
        named = logging.getLevelName(level.upper())
        if isinstance(named, int):
            return named
    return logging.DEBUG if debug else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog for the API server and the CLI.

    Args:
        debug: Render human-readable console output instead of JSON lines
        level: Level name such as ``"warning"``; defaults to DEBUG in debug
            mode and INFO otherwise. Unknown names fall back to that default.
    """
    log_level = _resolve_level(debug, level)

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
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a request ID that sorts by creation time.

    Format: 12 hex digits of epoch milliseconds followed by 4 random hex digits.
    """
    return f"{time.time_ns() // 1_000_000:012x}{secrets.token_hex(2)}"


def accept_request_id(candidate: str | None) -> str:
    """Return a client-supplied request ID if it is safe to log and echo back.

    Anything empty, longer than 64 characters or containing characters other
    than letters, digits, ``.``, ``_`` and ``-`` is replaced by a fresh ID.
    """
    if candidate and _REQUEST_ID_RE.fullmatch(candidate):
        return candidate
    return generate_request_id()


def set_request_context(request_id: str | None = None, operation: str | None = None) -> str:
    """Set request context variables and return the request ID in use."""
    request_id = accept_request_id(request_id)

    request_id_ctx.set(request_id)
    if operation is not None:
        operation_ctx.set(operation)
    return request_id


def clear_request_context() -> None:
    """Clear request context variables."""
    request_id_ctx.set(None)
    operation_ctx.set(None)
