"""Localized hints attached to formatted validation errors."""

from collections.abc import Sequence
from typing import Any

from socialhub.shared.errors.decorators import safe_with_fallback
from socialhub.shared.i18n import I18nService, get_i18n_service
from socialhub.shared.i18n.keys import SuggestionTranslationKeys as Hints

from .types import IssueCode, PathSegment, StringValidation, ValidationIssue

STRING_VALIDATION_HINTS = {
    StringValidation.EMAIL: Hints.EMAIL_FORMAT_HELP,
    StringValidation.URL: Hints.URL_FORMAT_HELP,
    StringValidation.UUID: Hints.UUID_FORMAT_HELP,
}

ENUM_OPTIONS_FALLBACK = "valid options"

KNOWN_CODES = frozenset(IssueCode)


class SuggestionGenerator:
    """Select suggestion keys for an issue and translate them.

    Field names are compared lowercased, so ``mobilePhone`` and
    ``dateOfBirth`` get the phone and birth-date hints.
    """

    def __init__(self, i18n: I18nService | None = None) -> None:
        self._i18n = i18n

    @property
    def i18n(self) -> I18nService:
        return self._i18n or get_i18n_service()

    def suggest(
        self,
        issue: ValidationIssue,
        path: Sequence[PathSegment] | None = None,
        language: str | None = None,
    ) -> list[str]:
        """Return translated hints for ``issue``, in display order."""
        segments = issue.path if path is None else path
        field_name = str(segments[-1]).lower() if segments else ""

        return [
            self.i18n.translate(key, language, values)
            for key, values in self._select(issue, field_name)
        ]

    @safe_with_fallback(fallback=[])
    def _select(self, issue: ValidationIssue, field_name: str) -> list[tuple[str, dict[str, Any] | None]]:
        meta = issue.metadata
        value_type = meta.get("type")

        match issue.code:
            case IssueCode.INVALID_STRING:
                if issue.validation in STRING_VALIDATION_HINTS:
                    return [(STRING_VALIDATION_HINTS[issue.validation], None)]
                if "phone" in field_name or "mobile" in field_name:
                    return [(Hints.PHONE_FORMAT_HELP, None)]
                if "date" in field_name or "birth" in field_name:
                    return [(Hints.DATE_FORMAT_HELP, None)]
                return []

            case IssueCode.TOO_SMALL:
                minimum = {"min": str(meta.get("minimum"))}
                if value_type == "string":
                    if field_name == "password":
                        return [(Hints.PASSWORD_MIN_LENGTH, None), (Hints.PASSWORD_COMPLEXITY, None)]
                    if field_name == "username":
                        return [(Hints.USERNAME_MIN_LENGTH, None)]
                    return [(Hints.STRING_MIN_LENGTH, minimum)]
                if value_type == "number":
                    return [(Hints.NUMBER_MIN_VALUE, minimum)]
                if value_type == "array":
                    return [(Hints.ARRAY_MIN_ITEMS, minimum)]
                return []

            case IssueCode.TOO_BIG:
                maximum = {"max": str(meta.get("maximum"))}
                if value_type == "string":
                    if field_name == "bio":
                        return [(Hints.BIO_MAX_LENGTH, None)]
                    if field_name == "website":
                        return [(Hints.WEBSITE_MAX_LENGTH, None)]
                    if "location" in field_name:
                        return [(Hints.LOCATION_MAX_LENGTH, None)]
                    return [(Hints.STRING_MAX_LENGTH, maximum)]
                if value_type == "number":
                    return [(Hints.NUMBER_MAX_VALUE, maximum)]
                if value_type == "array":
                    return [(Hints.ARRAY_MAX_ITEMS, maximum)]
                return []

            case IssueCode.INVALID_TYPE:
                expected = meta.get("expected")
                if expected == "string":
                    return [(Hints.STRING_REQUIRED, None)]
                if expected == "number":
                    return [(Hints.NUMBER_REQUIRED, None)]
                return [(Hints.TYPE_EXPECTED, {"expected": expected})]

            case IssueCode.INVALID_ENUM_VALUE:
                options = meta.get("options")
                joined = ", ".join(str(option) for option in options) if options else ""
                return [(Hints.ENUM_VALUES, {"options": joined or ENUM_OPTIONS_FALLBACK})]

            case IssueCode.INVALID_DATE:
                if "birth" in field_name:
                    return [(Hints.DATE_OF_BIRTH_HELP, None)]
                return [(Hints.DATE_FORMAT_HELP, None)]

            case code if code in KNOWN_CODES:
                return [(Hints.CUSTOM_VALIDATION_FAILED, None)]

            case _:
                return [(Hints.FIELD_REQUIRED, None)]


def get_error_suggestions(
    issue: ValidationIssue,
    path: Sequence[PathSegment] | None = None,
    language: str | None = None,
) -> list[str]:
    """Shortcut over a SuggestionGenerator bound to the shared I18nService."""
    return SuggestionGenerator().suggest(issue, path, language)
