"""SocialHub - Logger Configuration.

Loguru-based structured logging configuration.

This module configures a unified logger for the application:
- Loguru for application logs (pretty format, colors, structured data)
- Intercept handler for third-party library logs (uvicorn, fastapi)
- Request context (request_id, trace_id, language) injected into every record
"""

from __future__ import annotations

import json
import logging
import re
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

from socialhub.shared.context import get_language, get_request_id, get_trace_id

if TYPE_CHECKING:
    from socialhub.core.config import Settings

# Sensitive field patterns for redaction
SENSITIVE_PATTERNS = re.compile(
    r"(password|token|secret|api_key|credential|cookie|authorization)",
    re.IGNORECASE,
)

# Fields rendered explicitly in JSON entries
_RESERVED_EXTRA_KEYS = {"request_id", "trace_id", "language", "name"}

# Cache for settings to avoid repeated imports
_settings_cache: Settings | None = None


def _get_settings() -> Settings:
    """Get settings lazily to avoid circular imports."""
    global _settings_cache
    if _settings_cache is None:
        from socialhub.core.config import settings
        _settings_cache = settings
    return _settings_cache


class InterceptHandler(logging.Handler):
    """Handler for intercepting standard logging and redirecting to Loguru.

    uvicorn and fastapi use the standard logging module. To have all logs in
    the unified Loguru format, we intercept them through this handler.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Redirect a single standard logging record to Loguru.

        Args:
            record: Log record from standard logging
        """
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        frame = logging.currentframe()
        depth = 2

        if frame:
            while frame.f_code.co_filename == logging.__file__:
                if frame.f_back:
                    frame = frame.f_back
                    depth += 1
                else:
                    break

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _context_patcher(record: dict[str, Any]) -> None:
    """Copy request context variables into every log record."""
    extra = record["extra"]
    extra.setdefault("request_id", get_request_id() or "-")
    extra.setdefault("trace_id", get_trace_id() or "-")
    extra.setdefault("language", get_language() or "-")


def _redact_sensitive_value(key: str, value: Any) -> Any:
    """Redact sensitive values based on key name.

    Args:
        key: The field name
        value: The field value

    Returns:
        Redacted value if sensitive, original value otherwise
    """
    if SENSITIVE_PATTERNS.search(key):
        return "***REDACTED***"
    return value


def _create_json_sink(service_name: str) -> Any:
    """Create a JSON sink for stdout logging.

    Args:
        service_name: Name of the service for log entries

    Returns:
        Sink function for Loguru
    """
    def json_sink(message: Any) -> None:
        """Write JSON formatted log to stdout."""
        record = message.record
        log_entry: dict[str, Any] = {
            "timestamp": record["time"].isoformat(),
            "level": record["level"].name,
            "message": record["message"],
            "module": record["extra"].get("name", record["name"]),
            "function": record["function"],
            "line": record["line"],
            "request_id": record["extra"].get("request_id"),
            "trace_id": record["extra"].get("trace_id"),
            "language": record["extra"].get("language"),
            "service": service_name,
        }

        for key, value in record["extra"].items():
            if key not in _RESERVED_EXTRA_KEYS:
                log_entry[key] = _redact_sensitive_value(key, value)

        if record.get("exception"):
            exc = record["exception"]
            log_entry["exception"] = {
                "type": exc.type.__name__ if exc.type else None,
                "value": str(exc.value) if exc.value else None,
            }

        sys.stdout.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")
        sys.stdout.flush()

    return json_sink


def setup_logger() -> None:
    """Configure Loguru logger.

    Sets up:
    - Console handler with colored output (dev) or JSON format (prod)
    - Request context correlation
    - Third-party library log interception
    """
    settings = _get_settings()

    logger.remove()
    logger.configure(patcher=_context_patcher)

    is_prod = settings.logging.format.lower() == "json"

    if is_prod:
        logger.add(
            _create_json_sink(settings.app.name),
            level=settings.logging.level.upper(),
            backtrace=True,
            diagnose=False,  # Don't expose internal state in production
            enqueue=True,
        )
    else:
        dev_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level> | "
            "<dim>request_id={extra[request_id]} lang={extra[language]}</dim>"
        )
        logger.add(
            sys.stdout,
            format=dev_format,
            level=settings.logging.level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=settings.app.debug,
            enqueue=True,
        )

    configure_third_party_loggers()

    logger.info(
        "Logger configured",
        level=settings.logging.level,
        format="json" if is_prod else "console",
    )


def configure_third_party_loggers() -> None:
    """Redirect uvicorn and fastapi loggers to Loguru and tune their levels."""
    settings = _get_settings()

    logging.root.handlers = []
    logging.root.setLevel(logging.INFO)

    loggers_to_configure = [
        "",  # root logger
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
    ]

    is_prod = settings.logging.format.lower() == "json"

    for logger_name in loggers_to_configure:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers.clear()
        logging_logger.addHandler(InterceptHandler())
        logging_logger.propagate = False

        if logger_name == "uvicorn.access":
            logging_logger.setLevel(logging.WARNING if is_prod else logging.INFO)
        else:
            logging_logger.setLevel(logging.INFO)

    logger.debug("Third-party loggers configured")


def get_logger(name: str):
    """Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Configured Loguru logger with bound name
    """
    return logger.bind(name=name)
