"""Shared errors package.

Centralized error handling and exception management.
Exception handlers live in ``socialhub.shared.errors.handlers`` and are
registered by the application factory.
"""

from .base import AppError
from .decorators import safe_with_fallback
from .domain import (
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    UnprocessableEntityError,
    ValidationError,
)
from .schemas import ErrorResponse

__all__ = [
    # Base
    "AppError",
    # Domain errors
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "InternalServerError",
    "ValidationError",
    # Decorators
    "safe_with_fallback",
    # Schemas
    "ErrorResponse",
]
