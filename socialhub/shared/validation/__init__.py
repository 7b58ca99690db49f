"""Request validation and validation-error translation.

Pipeline: pydantic errors -> ValidationIssue -> severity, translation key and
suggestions per issue -> FormattedValidationError -> ValidationError (422).
"""

from .dependencies import read_request_source, resolve_options, validate, validate_multiple, validate_schema
from .formatter import (
    ValidationErrorFormatter,
    build_error_summary,
    extract_field_value,
    extract_issue_details,
    format_validation_issues,
)
from .issues import issue_from_pydantic, issues_from_pydantic, issues_from_validation_error
from .severity import get_error_severity
from .suggestions import SuggestionGenerator, get_error_suggestions
from .translation_keys import resolve_translation_key
from .types import (
    ErrorSeverity,
    FormattedFieldError,
    FormattedValidationError,
    IssueCode,
    RequestSource,
    StringValidation,
    ValidationErrorSummary,
    ValidationIssue,
    ValidationOptions,
)

__all__ = [
    # Types
    "ErrorSeverity",
    "FormattedFieldError",
    "FormattedValidationError",
    "IssueCode",
    "RequestSource",
    "StringValidation",
    "ValidationErrorSummary",
    "ValidationIssue",
    "ValidationOptions",
    # Pipeline
    "get_error_severity",
    "resolve_translation_key",
    "SuggestionGenerator",
    "get_error_suggestions",
    "ValidationErrorFormatter",
    "format_validation_issues",
    "build_error_summary",
    "extract_field_value",
    "extract_issue_details",
    # pydantic adapter
    "issue_from_pydantic",
    "issues_from_pydantic",
    "issues_from_validation_error",
    # Dependencies
    "validate",
    "validate_multiple",
    "validate_schema",
    "read_request_source",
    "resolve_options",
]
