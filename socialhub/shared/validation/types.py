"""Types of the validation-error pipeline.

``ValidationIssue`` is the input (one per failed rule), the formatter outputs
``FormattedFieldError`` objects keyed by a de-duplicated path, plus a
``ValidationErrorSummary`` over the whole pass.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import Field

from socialhub.shared.schemas import CamelSchema

PathSegment = str | int

ROOT_PATH_KEY = "__root__"


class IssueCode(StrEnum):
    """Known failure kinds reported for one field/rule."""

    INVALID_TYPE = "invalid_type"
    INVALID_LITERAL = "invalid_literal"
    CUSTOM = "custom"
    INVALID_UNION = "invalid_union"
    INVALID_UNION_DISCRIMINATOR = "invalid_union_discriminator"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    UNRECOGNIZED_KEYS = "unrecognized_keys"
    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_RETURN_TYPE = "invalid_return_type"
    INVALID_DATE = "invalid_date"
    INVALID_STRING = "invalid_string"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    INVALID_INTERSECTION_TYPES = "invalid_intersection_types"
    NOT_MULTIPLE_OF = "not_multiple_of"
    NOT_FINITE = "not_finite"


class StringValidation(StrEnum):
    """Sub-kinds of ``invalid_string`` issues."""

    EMAIL = "email"
    URL = "url"
    UUID = "uuid"
    CUID = "cuid"
    REGEX = "regex"
    DATETIME = "datetime"
    IP = "ip"
    EMOJI = "emoji"
    ULID = "ulid"
    BASE64 = "base64"
    NANOID = "nanoid"
    INCLUDES = "includes"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"


class RequestSource(StrEnum):
    """Part of the request a validation pass reads from."""

    BODY = "body"
    QUERY = "query"
    PARAMS = "params"
    HEADERS = "headers"
    COOKIES = "cookies"


class ErrorSeverity(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ValidationIssue:
    """One rule failure for one path.

    ``code`` is kept as a plain string so codes outside ``IssueCode`` survive
    the pipeline (they resolve to the unknown-validation key). ``validation``
    only exists on ``invalid_string`` issues and is dropped for other codes.
    """

    code: str
    path: tuple[PathSegment, ...] = ()
    message: str = ""
    validation: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", str(self.code))
        object.__setattr__(self, "path", tuple(self.path))
        if self.code != IssueCode.INVALID_STRING:
            object.__setattr__(self, "validation", None)

    @property
    def path_segments(self) -> list[str]:
        return [str(segment) for segment in self.path]

    @property
    def field_name(self) -> str:
        """Last path segment, or '' for object-level issues."""
        return str(self.path[-1]) if self.path else ""

    @property
    def path_key(self) -> str:
        """Dotted path, or ``__root__`` for object-level issues."""
        return ".".join(self.path_segments) if self.path else ROOT_PATH_KEY


class FormattedFieldError(CamelSchema):
    """Client-facing description of one issue."""

    message: str
    translation_key: str
    path: list[PathSegment] = Field(default_factory=list)
    code: str
    location: RequestSource
    type: str
    details: dict[str, Any] = Field(default_factory=dict)
    severity: ErrorSeverity
    suggestions: list[str] = Field(default_factory=list)

    @property
    def path_key(self) -> str:
        return ".".join(str(segment) for segment in self.path) if self.path else ROOT_PATH_KEY


class ValidationErrorSummary(CamelSchema):
    """Aggregate over all formatted errors of one pass."""

    total_errors: int = 0
    field_count: int = 0
    severity_breakdown: dict[str, int] = Field(
        default_factory=lambda: {severity.value: 0 for severity in ErrorSeverity}
    )
    error_types: dict[str, int] = Field(default_factory=dict)
    affected_fields: list[str] = Field(default_factory=list)


class FormattedValidationError(CamelSchema):
    """Result of formatting one failed validation pass."""

    message: str
    errors: dict[str, FormattedFieldError] = Field(default_factory=dict)
    summary: ValidationErrorSummary = Field(default_factory=ValidationErrorSummary)


class ValidationOptions(CamelSchema):
    """Per-route overrides of the validation defaults.

    Unset options fall back to ``ValidationConfig``.
    """

    abort_early: bool | None = None
    attach_validated: bool | None = None
    log_errors: bool | None = None
