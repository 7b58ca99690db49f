"""Validation error formatter.

Turns a list of ``ValidationIssue`` objects into the ``errors`` map and
summary of the API error envelope:

- every issue gets a unique key (``email``, ``email[1]``, ...)
- messages and suggestions are localized through ``I18nService``
- one malformed issue never aborts the whole pass
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from socialhub.shared.errors.decorators import safe_with_fallback
from socialhub.shared.i18n import I18nService, get_i18n_service
from socialhub.shared.i18n.keys import CommonTranslationKeys

from .severity import get_error_severity
from .suggestions import SuggestionGenerator
from .translation_keys import resolve_translation_key
from .types import (
    ErrorSeverity,
    FormattedFieldError,
    FormattedValidationError,
    RequestSource,
    ValidationErrorSummary,
    ValidationIssue,
)

NO_VALUE = "N/A"

EXCLUDED_DETAIL_KEYS = frozenset({"message", "path", "code", "fatal"})

INTERPOLATION_RENAMES = {"minimum": "min", "maximum": "max"}


@safe_with_fallback(fallback={})
def extract_issue_details(issue: ValidationIssue) -> dict[str, Any]:
    """Rule-specific metadata of an issue, without message/path/code."""
    details = {key: value for key, value in issue.metadata.items() if key not in EXCLUDED_DETAIL_KEYS}
    if issue.validation is not None:
        details["validation"] = issue.validation
    return details


@safe_with_fallback(fallback=None)
def _walk(data: Any, path: Sequence[Any]) -> Any:
    value = data
    for segment in path:
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(segment, value.get(str(segment)))
        elif isinstance(value, (list, tuple)) and isinstance(segment, int):
            value = value[segment] if -len(value) <= segment < len(value) else None
        else:
            value = getattr(value, str(segment), None)
    return value


@safe_with_fallback(fallback=None)
def _display_value(data: Any, path: Sequence[Any]) -> str | None:
    value = _walk(data, path)
    return None if value is None else str(value)


def extract_field_value(issue: ValidationIssue, original_data: Any = None) -> str:
    """Displayable value of the field an issue points at.

    The value found in ``original_data`` along the issue path, else the last
    path segment, else ``N/A`` for object-level issues. Values that cannot be
    rendered as text also fall back to the last path segment.
    """
    if not issue.path:
        return NO_VALUE

    fallback = str(issue.path[-1])
    if original_data is None:
        return fallback

    value = _display_value(original_data, issue.path)
    return fallback if value is None else value



def build_interpolation_values(issue: ValidationIssue, details: Mapping[str, Any], display_value: str) -> dict[str, Any]:
    path_key = issue.path_key
    values: dict[str, Any] = {"field": path_key, "value": display_value, "path": path_key}
    for key, value in details.items():
        values[INTERPOLATION_RENAMES.get(key, key)] = value
    return values


def build_error_summary(errors: Mapping[str, FormattedFieldError]) -> ValidationErrorSummary:
    """Aggregate counts over formatted errors.

    Distinct fields are counted on the dotted path, so ``email`` and
    ``email[1]`` are one field.
    """
    severity_breakdown = {severity.value: 0 for severity in ErrorSeverity}
    error_types: dict[str, int] = {}
    fields: dict[str, None] = {}

    for error in errors.values():
        severity_breakdown[error.severity] = severity_breakdown.get(error.severity, 0) + 1
        error_types[error.code] = error_types.get(error.code, 0) + 1
        fields[error.path_key] = None

    return ValidationErrorSummary(
        total_errors=len(errors),
        field_count=len(fields),
        severity_breakdown=severity_breakdown,
        error_types=error_types,
        affected_fields=list(fields),
    )


class ValidationErrorFormatter:
    """Format validation issues into localized field errors plus a summary."""

    def __init__(
        self,
        i18n: I18nService | None = None,
        suggestions: SuggestionGenerator | None = None,
    ) -> None:
        self._i18n = i18n
        self._suggestions = suggestions or SuggestionGenerator(i18n)

    @property
    def i18n(self) -> I18nService:
        return self._i18n or get_i18n_service()

    def format_issue(
        self,
        issue: ValidationIssue,
        source: RequestSource,
        language: str | None = None,
        original_data: Any = None,
    ) -> FormattedFieldError:
        translation_key = resolve_translation_key(issue.code, issue.validation, issue.path)
        details = extract_issue_details(issue)
        values = build_interpolation_values(issue, details, extract_field_value(issue, original_data))

        message = self.i18n.resolve_message(
            translation_key,
            message=issue.message,
            language=language,
            interpolation_values=values,
        )

        return FormattedFieldError(
            message=message,
            translation_key=translation_key,
            path=list(issue.path),
            code=issue.code,
            location=source,
            type=issue.code,
            details=dict(details),
            severity=get_error_severity(issue.code, issue.path),
            suggestions=self._suggestions.suggest(issue, issue.path, language),
        )

    def format(
        self,
        issues: Iterable[ValidationIssue],
        source: RequestSource = RequestSource.BODY,
        language: str | None = None,
        original_data: Any = None,
    ) -> FormattedValidationError:
        """Format one validation pass.

        Args:
            issues: Issues in the order the schema reported them
            source: Request part that was validated
            language: Override language, defaults to the request language
            original_data: Payload that was validated, used for display values

        Returns:
            Envelope message, errors keyed by unique path, and summary
        """
        errors: dict[str, FormattedFieldError] = {}
        occurrences: dict[str, int] = {}

        for issue in issues:
            path_key = issue.path_key
            count = occurrences.get(path_key, 0)
            key = f"{path_key}[{count}]" if count else path_key
            while key in errors:
                count += 1
                key = f"{path_key}[{count}]"
            occurrences[path_key] = count + 1

            errors[key] = self.format_issue(issue, source, language, original_data)

        return FormattedValidationError(
            message=self.i18n.translate(CommonTranslationKeys.VALIDATION_ERROR, language),
            errors=errors,
            summary=build_error_summary(errors),
        )


def format_validation_issues(
    issues: Iterable[ValidationIssue],
    source: RequestSource = RequestSource.BODY,
    language: str | None = None,
    original_data: Any = None,
) -> FormattedValidationError:
    """Format issues with the shared I18nService."""
    return ValidationErrorFormatter().format(issues, source, language, original_data)
