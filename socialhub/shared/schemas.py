"""Base Pydantic schemas for API requests and responses."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with the shared configuration.

    All schemas should inherit from this class so that behaviour is
    uniform across the application.
    """

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )


class CamelSchema(BaseSchema):
    """Schema whose wire names are camelCase (``date_of_birth`` <-> ``dateOfBirth``).

    Validation error paths use the wire names, so field-aware error
    translation sees ``dateOfBirth`` rather than ``date_of_birth``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
    )


class PaginationParams(CamelSchema):
    """Pagination parameters for list endpoints."""

    page: int = Field(
        default=1,
        ge=1,
        description="Page number (starting at 1)",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Items per page",
    )

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.page_size


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str = Field(
        ...,
        description="Overall health status",
        examples=["healthy", "unhealthy"],
    )
    version: str | None = Field(
        default=None,
        description="Application version",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Check timestamp",
    )

    @classmethod
    def healthy(cls, version: str | None = None) -> "HealthResponse":
        """Create a healthy response."""
        return cls(status="healthy", version=version)


class SuccessResponse(CamelSchema):
    """Generic success envelope.

    ``message`` is already localized; ``translation_key`` lets clients
    re-translate it.
    """

    status: str = Field(default="success")
    message: str = Field(..., description="Localized success message")
    translation_key: str | None = Field(default=None)
    data: Any | None = Field(default=None, description="Response payload")
