"""Translation keys.

Keys follow the ``namespace:NESTED.KEY`` format. The namespace selects the
locale file (``locales/<lng>/<namespace>.json``), the rest is a dotted path
inside it.
"""

from enum import StrEnum


class CommonTranslationKeys(StrEnum):
    """Keys of the ``common`` namespace (API-level messages)."""

    SUCCESS = "common:SUCCESS"
    CREATED = "common:CREATED"
    BAD_REQUEST = "common:BAD_REQUEST"
    UNAUTHORIZED = "common:UNAUTHORIZED"
    FORBIDDEN = "common:FORBIDDEN"
    NOT_FOUND = "common:NOT_FOUND"
    CONFLICT = "common:CONFLICT"
    METHOD_NOT_ALLOWED = "common:METHOD_NOT_ALLOWED"
    UNPROCESSABLE_ENTITY = "common:UNPROCESSABLE_ENTITY"
    VALIDATION_ERROR = "common:VALIDATION_ERROR"
    RATE_LIMIT_EXCEEDED = "common:RATE_LIMIT_EXCEEDED"
    INTERNAL_SERVER_ERROR = "common:INTERNAL_SERVER_ERROR"
    SERVICE_UNAVAILABLE = "common:SERVICE_UNAVAILABLE"
    UNKNOWN_ERROR = "common:UNKNOWN_ERROR"


class ValidationTranslationKeys(StrEnum):
    """Keys of the ``validation`` namespace (per-field error messages)."""

    # General
    REQUIRED = "validation:REQUIRED"
    INVALID = "validation:INVALID"
    TYPE_MISMATCH = "validation:TYPE_MISMATCH"
    FORMAT_INVALID = "validation:FORMAT_INVALID"
    CUSTOM_VALIDATION = "validation:CUSTOM_VALIDATION"
    UNKNOWN_VALIDATION = "validation:UNKNOWN_VALIDATION"

    # Size & length
    MIN_LENGTH = "validation:MIN_LENGTH"
    MAX_LENGTH = "validation:MAX_LENGTH"
    MIN_VALUE = "validation:MIN_VALUE"
    MAX_VALUE = "validation:MAX_VALUE"

    # Enumerations and object shape
    ENUM_INVALID = "validation:ENUM_INVALID"
    UNEXPECTED_KEYS = "validation:UNEXPECTED_KEYS"
    LITERAL_MISMATCH = "validation:LITERAL_MISMATCH"

    # Formats
    EMAIL_INVALID = "validation:FORMATS.EMAIL_INVALID"
    URL_INVALID = "validation:FORMATS.URL_INVALID"
    UUID_INVALID = "validation:FORMATS.UUID_INVALID"
    CUID_INVALID = "validation:FORMATS.CUID_INVALID"
    REGEX_INVALID = "validation:FORMATS.REGEX_INVALID"
    DATE_INVALID = "validation:FORMATS.DATE_INVALID"
    NUMERIC_INVALID = "validation:FORMATS.NUMERIC_INVALID"
    PASSWORD_COMPLEXITY = "validation:FORMATS.PASSWORD_COMPLEXITY"

    # Field-specific
    EMAIL_INVALID_FORMAT = "validation:FIELDS.EMAIL.INVALID_FORMAT"
    PASSWORD_WEAK = "validation:FIELDS.PASSWORD.WEAK"
    USERNAME_INVALID_FORMAT = "validation:FIELDS.USERNAME.INVALID_FORMAT"
    PHONE_INVALID_FORMAT = "validation:FIELDS.PHONE.INVALID_FORMAT"
    DATE_OF_BIRTH_INVALID_FORMAT = "validation:FIELDS.DATE_OF_BIRTH.INVALID_FORMAT"
    DATE_OF_BIRTH_TOO_YOUNG = "validation:FIELDS.DATE_OF_BIRTH.TOO_YOUNG"
    DATE_OF_BIRTH_TOO_OLD = "validation:FIELDS.DATE_OF_BIRTH.TOO_OLD"
    BIO_LENGTH = "validation:FIELDS.BIO.LENGTH"
    WEBSITE_LENGTH = "validation:FIELDS.WEBSITE.LENGTH"
    LOCATION_LENGTH = "validation:FIELDS.LOCATION.LENGTH"
    AVATAR_INVALID_FORMAT = "validation:FIELDS.AVATAR.INVALID_FORMAT"
    COVER_INVALID_FORMAT = "validation:FIELDS.COVER.INVALID_FORMAT"


class SuggestionTranslationKeys(StrEnum):
    """Keys of the ``suggestions`` namespace (hints attached to field errors)."""

    EMAIL_FORMAT_HELP = "suggestions:EMAIL_FORMAT_HELP"
    URL_FORMAT_HELP = "suggestions:URL_FORMAT_HELP"
    UUID_FORMAT_HELP = "suggestions:UUID_FORMAT_HELP"
    PHONE_FORMAT_HELP = "suggestions:PHONE_FORMAT_HELP"
    DATE_FORMAT_HELP = "suggestions:DATE_FORMAT_HELP"
    DATE_OF_BIRTH_HELP = "suggestions:DATE_OF_BIRTH_HELP"

    PASSWORD_MIN_LENGTH = "suggestions:PASSWORD_MIN_LENGTH"
    PASSWORD_COMPLEXITY = "suggestions:PASSWORD_COMPLEXITY"
    USERNAME_MIN_LENGTH = "suggestions:USERNAME_MIN_LENGTH"
    BIO_MAX_LENGTH = "suggestions:BIO_MAX_LENGTH"
    WEBSITE_MAX_LENGTH = "suggestions:WEBSITE_MAX_LENGTH"
    LOCATION_MAX_LENGTH = "suggestions:LOCATION_MAX_LENGTH"

    STRING_REQUIRED = "suggestions:STRING_REQUIRED"
    STRING_MIN_LENGTH = "suggestions:STRING_MIN_LENGTH"
    STRING_MAX_LENGTH = "suggestions:STRING_MAX_LENGTH"
    NUMBER_REQUIRED = "suggestions:NUMBER_REQUIRED"
    NUMBER_MIN_VALUE = "suggestions:NUMBER_MIN_VALUE"
    NUMBER_MAX_VALUE = "suggestions:NUMBER_MAX_VALUE"
    ARRAY_MIN_ITEMS = "suggestions:ARRAY_MIN_ITEMS"
    ARRAY_MAX_ITEMS = "suggestions:ARRAY_MAX_ITEMS"

    TYPE_EXPECTED = "suggestions:TYPE_EXPECTED"
    ENUM_VALUES = "suggestions:ENUM_VALUES"
    FIELD_REQUIRED = "suggestions:FIELD_REQUIRED"
    CUSTOM_VALIDATION_FAILED = "suggestions:CUSTOM_VALIDATION_FAILED"
