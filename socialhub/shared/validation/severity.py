"""Severity classification of validation issues."""

from collections.abc import Sequence

from .types import ErrorSeverity, IssueCode, PathSegment

SENSITIVE_FIELDS = frozenset({"password", "email", "username"})

CRITICAL_CODES = frozenset({IssueCode.INVALID_TYPE, IssueCode.CUSTOM})

COMMON_CODES = frozenset(
    {
        IssueCode.INVALID_STRING,
        IssueCode.TOO_SMALL,
        IssueCode.TOO_BIG,
        IssueCode.INVALID_ENUM_VALUE,
    }
)


def get_error_severity(code: str, path: Sequence[PathSegment] = ()) -> ErrorSeverity:
    """Classify an issue by its code and the field it concerns.

    Sensitive fields (matched exactly on the last path segment) and
    critical codes are high, common format/size failures are medium,
    everything else is low.
    """
    field_name = str(path[-1]) if path else ""

    if field_name in SENSITIVE_FIELDS or code in CRITICAL_CODES:
        return ErrorSeverity.HIGH
    if code in COMMON_CODES:
        return ErrorSeverity.MEDIUM
    return ErrorSeverity.LOW
