"""Decorators for error handling.

Per-call protection for best-effort helpers: a failing call degrades to a
fallback value and the pipeline around it keeps going.
"""

import copy
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from socialhub.shared.logging import get_logger

logger = get_logger(__name__)
P = ParamSpec("P")
T = TypeVar("T")


def safe_with_fallback(
    fallback: T,
    level: str = "DEBUG",
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator that returns a fallback value on error instead of raising.

    Usage:
        @safe_with_fallback(fallback={})
        def extract_issue_details(issue: ValidationIssue) -> dict[str, Any]:
            # On any error, returns {} instead of raising
            ...

    Args:
        fallback: Value to return when an exception occurs (a shallow copy
            is returned, so mutable defaults are never shared)
        level: Loguru level name for caught exceptions
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.log(
                    level,
                    "Exception in {function}, returning fallback",
                    function=func.__name__,
                    error=str(e),
                )
                return copy.copy(fallback)

        return wrapper

    return decorator
