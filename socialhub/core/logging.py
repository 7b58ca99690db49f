"""
Structured logging with Loguru.

Request-context helpers on top of socialhub.shared.logging. Modules log
through a bound loguru logger:

    from socialhub.shared.logging import get_logger
"""

from loguru import logger

from socialhub.shared.context import (
    language_var,
    request_id_var,
    set_language,
    set_request_id,
    set_trace_id,
    trace_id_var,
)
from socialhub.shared.logging import InterceptHandler, get_logger, setup_logger

# ==================== Request context ====================


def set_request_context(
    request_id: str | None = None,
    trace_id: str | None = None,
    language: str | None = None,
) -> None:
    """Set request context for logging."""
    if request_id is not None:
        set_request_id(request_id)
    if trace_id is not None:
        set_trace_id(trace_id)
    if language is not None:
        set_language(language)


def clear_request_context() -> None:
    """Clear request context."""
    request_id_var.set("")
    trace_id_var.set("")
    language_var.set("")


def get_request_context() -> dict[str, str | None]:
    """Get current request context."""
    return {
        "request_id": request_id_var.get() or None,
        "trace_id": trace_id_var.get() or None,
        "language": language_var.get() or None,
    }


def setup_logging() -> None:
    """Configure application logging."""
    setup_logger()


__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
    "InterceptHandler",
    "setup_logging",
    "set_request_context",
    "clear_request_context",
    "get_request_context",
]
