"""Translation-key resolution for validation issues.

Lookup order, first hit wins:
1. ``FIELD_SPECIFIC_KEYS`` by field name (last path segment) and code
2. for ``invalid_string``: ``STRING_VALIDATION_KEYS`` by sub-kind, else the
   field's own ``invalid_string`` override
3. size errors on known fields (``too_small`` on password, ``too_big`` on
   bio/website/location)
4. ``GENERAL_KEYS`` by code, else ``UNKNOWN_VALIDATION``
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from socialhub.shared.i18n.keys import ValidationTranslationKeys as Keys

from .types import IssueCode, PathSegment, StringValidation

# "required_error" is not an issue code; it covers schemas that raise it as a custom type.
FIELD_SPECIFIC_KEYS: Mapping[str, Mapping[str, Keys]] = MappingProxyType(
    {
        "email": {
            IssueCode.INVALID_STRING: Keys.EMAIL_INVALID_FORMAT,
            "required_error": Keys.REQUIRED,
        },
        "password": {
            IssueCode.TOO_SMALL: Keys.PASSWORD_WEAK,
            IssueCode.CUSTOM: Keys.PASSWORD_COMPLEXITY,
            "required_error": Keys.REQUIRED,
        },
        "username": {
            IssueCode.INVALID_STRING: Keys.USERNAME_INVALID_FORMAT,
            IssueCode.TOO_SMALL: Keys.MIN_LENGTH,
            IssueCode.TOO_BIG: Keys.MAX_LENGTH,
        },
        "phone": {
            IssueCode.INVALID_STRING: Keys.PHONE_INVALID_FORMAT,
        },
        "dateOfBirth": {
            IssueCode.INVALID_DATE: Keys.DATE_OF_BIRTH_INVALID_FORMAT,
            IssueCode.TOO_SMALL: Keys.DATE_OF_BIRTH_TOO_YOUNG,
            IssueCode.TOO_BIG: Keys.DATE_OF_BIRTH_TOO_OLD,
        },
        "bio": {
            IssueCode.TOO_BIG: Keys.BIO_LENGTH,
        },
        "website": {
            IssueCode.INVALID_STRING: Keys.URL_INVALID,
            IssueCode.TOO_BIG: Keys.WEBSITE_LENGTH,
        },
        "location": {
            IssueCode.TOO_BIG: Keys.LOCATION_LENGTH,
        },
        "avatar": {
            IssueCode.INVALID_STRING: Keys.AVATAR_INVALID_FORMAT,
        },
        "cover": {
            IssueCode.INVALID_STRING: Keys.COVER_INVALID_FORMAT,
        },
    }
)

STRING_VALIDATION_KEYS: Mapping[str, Keys] = MappingProxyType(
    {
        StringValidation.EMAIL: Keys.EMAIL_INVALID,
        StringValidation.URL: Keys.URL_INVALID,
        StringValidation.UUID: Keys.UUID_INVALID,
        StringValidation.CUID: Keys.CUID_INVALID,
        StringValidation.REGEX: Keys.REGEX_INVALID,
        StringValidation.DATETIME: Keys.DATE_INVALID,
        StringValidation.IP: Keys.FORMAT_INVALID,
        StringValidation.EMOJI: Keys.FORMAT_INVALID,
        StringValidation.ULID: Keys.FORMAT_INVALID,
        StringValidation.BASE64: Keys.FORMAT_INVALID,
        StringValidation.NANOID: Keys.FORMAT_INVALID,
        StringValidation.INCLUDES: Keys.FORMAT_INVALID,
        StringValidation.STARTS_WITH: Keys.FORMAT_INVALID,
        StringValidation.ENDS_WITH: Keys.FORMAT_INVALID,
    }
)

GENERAL_KEYS: Mapping[str, Keys] = MappingProxyType(
    {
        IssueCode.INVALID_TYPE: Keys.TYPE_MISMATCH,
        IssueCode.INVALID_LITERAL: Keys.LITERAL_MISMATCH,
        IssueCode.CUSTOM: Keys.CUSTOM_VALIDATION,
        IssueCode.INVALID_UNION: Keys.INVALID,
        IssueCode.INVALID_UNION_DISCRIMINATOR: Keys.INVALID,
        IssueCode.INVALID_ENUM_VALUE: Keys.ENUM_INVALID,
        IssueCode.UNRECOGNIZED_KEYS: Keys.UNEXPECTED_KEYS,
        IssueCode.INVALID_ARGUMENTS: Keys.INVALID,
        IssueCode.INVALID_RETURN_TYPE: Keys.INVALID,
        IssueCode.INVALID_DATE: Keys.DATE_INVALID,
        IssueCode.INVALID_STRING: Keys.FORMAT_INVALID,
        IssueCode.TOO_SMALL: Keys.MIN_VALUE,
        IssueCode.TOO_BIG: Keys.MAX_VALUE,
        IssueCode.INVALID_INTERSECTION_TYPES: Keys.INVALID,
        IssueCode.NOT_MULTIPLE_OF: Keys.NUMERIC_INVALID,
        IssueCode.NOT_FINITE: Keys.NUMERIC_INVALID,
    }
)

SIZE_FIELD_KEYS: Mapping[str, Keys] = MappingProxyType(
    {
        "bio": Keys.BIO_LENGTH,
        "website": Keys.WEBSITE_LENGTH,
        "location": Keys.LOCATION_LENGTH,
    }
)


def resolve_translation_key(
    code: str,
    validation: str | None = None,
    path: Sequence[PathSegment] | None = None,
) -> str:
    """Resolve the translation key for an issue. Total: never raises."""
    field_name = str(path[-1]) if path else ""
    field_keys = FIELD_SPECIFIC_KEYS.get(field_name, {})

    if code in field_keys:
        return field_keys[code]

    if code == IssueCode.INVALID_STRING and validation:
        return STRING_VALIDATION_KEYS.get(validation, Keys.FORMAT_INVALID)

    if code == IssueCode.TOO_SMALL:
        return Keys.PASSWORD_WEAK if field_name == "password" else Keys.MIN_VALUE

    if code == IssueCode.TOO_BIG:
        return SIZE_FIELD_KEYS.get(field_name, Keys.MAX_LENGTH)

    return GENERAL_KEYS.get(code, Keys.UNKNOWN_VALIDATION)
