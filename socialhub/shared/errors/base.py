"""Base exception class for application errors.

Core exception logic with auto-generation of error codes and messages.
"""

import re
from datetime import UTC, datetime
from typing import Any

from socialhub.shared.context import get_request_id
from socialhub.shared.i18n.keys import CommonTranslationKeys

from .schemas import ErrorResponse


class AppError(Exception):
    """Base class for all application errors.

    Features:
    - Auto-generates code from class name (e.g., NotFoundError -> NOT_FOUND)
    - Auto-generates default_message from docstring
    - Carries a translation key so handlers can localize the message
    - Includes request_id from context for request correlation
    """

    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"
    default_message: str = "Internal server error"
    translation_key: str | None = CommonTranslationKeys.INTERNAL_SERVER_ERROR
    is_operational: bool = True

    def __init__(
        self,
        message: str | None = None,
        translation_key: str | None = None,
        metadata: dict[str, Any] | None = None,
        errors: dict[str, Any] | None = None,
        status_code: int | None = None,
        code: str | None = None,
        is_operational: bool | None = None,
    ) -> None:
        # Explicit messages win over translations when the error is rendered
        self.message_overridden = bool(message and message.strip())
        self.message = message or self.default_message
        self.metadata = metadata or {}
        self.errors = errors

        if translation_key is not None:
            self.translation_key = translation_key
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        if is_operational is not None:
            self.is_operational = is_operational

        self.timestamp = datetime.now(UTC).isoformat()
        self.request_id = get_request_id() or None

        super().__init__(self.message)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Auto-generate code and default_message for subclasses."""
        super().__init_subclass__(**kwargs)

        # Auto-generate error code from class name
        if "code" not in cls.__dict__:
            name = cls.__name__
            for suffix in ("Exception", "Error"):
                if name.endswith(suffix):
                    name = name[: -len(suffix)]
                    break
            cls.code = re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()

        # Auto-generate default message from docstring
        if "default_message" not in cls.__dict__ and cls.__doc__:
            cls.default_message = cls.__doc__.strip().split("\n")[0].rstrip(".")

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception to dictionary for JSON response."""
        return self.to_response().to_content()

    def to_response(self, message: str | None = None) -> ErrorResponse:
        """Serialize to Pydantic model, optionally with a localized message."""
        return ErrorResponse(
            message=message or self.message,
            translation_key=self.translation_key,
            code=self.code,
            status_code=self.status_code,
            errors=self.errors,
            metadata=self.metadata or None,
            request_id=self.request_id,
            timestamp=self.timestamp,
        )

    @classmethod
    def openapi_response(cls) -> dict[str, Any]:
        """Generate OpenAPI schema for this exception type."""
        return {
            "model": ErrorResponse,
            "description": cls.default_message,
            "content": {
                "application/json": {
                    "example": {
                        "status": "error",
                        "message": cls.default_message,
                        "translationKey": cls.translation_key,
                        "code": cls.code,
                        "statusCode": cls.status_code,
                        "errors": None,
                        "metadata": None,
                        "requestId": "example-request-id",
                        "timestamp": "2024-01-01T00:00:00+00:00",
                    }
                }
            },
        }
