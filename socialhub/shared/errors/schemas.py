"""Pydantic models for error handling.

Wire format of the error envelope returned by every failing endpoint.
"""

from typing import Any, Literal

from pydantic import Field

from socialhub.shared.schemas import CamelSchema


class ErrorResponse(CamelSchema):
    """Unified error response schema (camelCase on the wire)."""

    status: Literal["error"] = "error"
    message: str = Field(..., description="Localized, human-readable error description")
    translation_key: str | None = Field(default=None, description="Key the message was resolved from")
    code: str = Field(..., description="Error code (SNAKE_CASE)")
    status_code: int = Field(..., description="HTTP status code")
    errors: dict[str, Any] | None = Field(default=None, description="Per-field errors, keyed by unique path")
    metadata: dict[str, Any] | None = Field(default=None)
    request_id: str | None = Field(default=None, description="Request correlation ID")
    timestamp: str = Field(..., description="ISO-8601 UTC time the error was raised")

    def to_content(self) -> dict[str, Any]:
        """JSON-ready body with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")
