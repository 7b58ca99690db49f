"""Normalize pydantic error dicts into ``ValidationIssue`` objects.

pydantic reports an error ``type`` per failure (``string_too_short``,
``int_parsing``, ...). The pipeline works on the smaller set of
``IssueCode`` families, so each type is folded into its family and the
error ``ctx`` is renamed into the metadata the resolvers read
(``minimum``/``maximum``/``type``/``expected``/``options``/...).
"""

import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timedelta
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .types import IssueCode, StringValidation, ValidationIssue

EXPECTED_TYPES: dict[str, str] = {
    "string_type": "string",
    "string_unicode": "string",
    "string_sub_type": "string",
    "int_type": "number",
    "int_parsing": "number",
    "int_parsing_size": "number",
    "int_from_float": "number",
    "float_type": "number",
    "float_parsing": "number",
    "decimal_type": "number",
    "decimal_parsing": "number",
    "complex_type": "number",
    "complex_str_parsing": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "bytes_type": "bytes",
    "list_type": "array",
    "tuple_type": "array",
    "set_type": "array",
    "frozen_set_type": "array",
    "iterable_type": "array",
    "dict_type": "object",
    "mapping_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "dataclass_type": "object",
    "typed_dict_type": "object",
    "is_instance_of": "object",
    "none_required": "null",
    "callable_type": "function",
}

TOO_SMALL_TYPES = frozenset(
    {"string_too_short", "too_short", "greater_than", "greater_than_equal", "date_future", "datetime_future"}
)
TOO_BIG_TYPES = frozenset(
    {"string_too_long", "too_long", "less_than", "less_than_equal", "date_past", "datetime_past", "url_too_long"}
)
ARGUMENT_TYPES = frozenset(
    {
        "arguments_type",
        "missing_argument",
        "missing_keyword_only_argument",
        "missing_positional_only_argument",
        "unexpected_keyword_argument",
        "unexpected_positional_argument",
        "multiple_argument_values",
    }
)
DATE_TYPE_PREFIXES = ("date_", "datetime_", "time_", "time_delta_", "timezone_")

EMAIL_ERROR_MARKER = "valid email address"

_EXPECTED_SPLIT = re.compile(r",\s*|\s+or\s+")


def _received_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (date, datetime, time, timedelta)):
        return "date"
    return type(value).__name__


def _split_expected(expected: Any) -> list[str]:
    """Turn pydantic's ``"'a', 'b' or 'c'"`` into ``['a', 'b', 'c']``."""
    if isinstance(expected, (list, tuple)):
        return [str(option) for option in expected]
    parts = _EXPECTED_SPLIT.split(str(expected or ""))
    return [part.strip().strip("'\"") for part in parts if part.strip()]


def _clean_context(ctx: Mapping[str, Any] | None) -> dict[str, Any]:
    if not ctx:
        return {}
    return {key: str(value) if isinstance(value, BaseException) else value for key, value in ctx.items()}


def _size_metadata(error_type: str, ctx: dict[str, Any], too_small: bool) -> dict[str, Any]:
    bound_name = "minimum" if too_small else "maximum"

    if error_type in ("string_too_short", "string_too_long", "url_too_long"):
        length_key = "min_length" if too_small else "max_length"
        return {bound_name: ctx.get(length_key), "type": "string", "inclusive": True}

    if error_type in ("too_short", "too_long"):
        length_key = "min_length" if too_small else "max_length"
        metadata = {bound_name: ctx.get(length_key), "type": "array", "inclusive": True}
        if "actual_length" in ctx:
            metadata["actual_length"] = ctx["actual_length"]
        return metadata

    if error_type.endswith(("_future", "_past")):
        return {"type": "date", "inclusive": False}

    for key, inclusive in (("gt", False), ("ge", True), ("lt", False), ("le", True)):
        if key in ctx:
            limit = ctx[key]
            value_type = "date" if isinstance(limit, (date, datetime)) else "number"
            return {bound_name: limit, "type": value_type, "inclusive": inclusive}

    return {"type": "number", **ctx}


def _string_validation(ctx: dict[str, Any]) -> str | None:
    validation = ctx.pop("validation", None)
    if isinstance(validation, Mapping):
        # {"includes": "x"} style sub-kinds
        for name in (StringValidation.INCLUDES, StringValidation.STARTS_WITH, StringValidation.ENDS_WITH):
            if name in validation:
                ctx.update(validation)
                return name
        return "default"
    return str(validation) if validation else None


def _parent_path(loc: tuple[Any, ...]) -> tuple[Any, ...]:
    return loc[:-1]


def issue_from_pydantic(error: Mapping[str, Any]) -> ValidationIssue:
    """Convert one pydantic error dict (``ValidationError.errors()`` item)."""
    error_type = str(error.get("type", ""))
    loc = tuple(error.get("loc", ()))
    message = str(error.get("msg", ""))
    ctx = _clean_context(error.get("ctx"))
    value = error.get("input")

    if error_type == "missing":
        return ValidationIssue(
            code=IssueCode.INVALID_TYPE,
            path=loc,
            message=message,
            metadata={"expected": "value", "received": "undefined"},
        )

    if error_type in EXPECTED_TYPES:
        return ValidationIssue(
            code=IssueCode.INVALID_TYPE,
            path=loc,
            message=message,
            metadata={"expected": EXPECTED_TYPES[error_type], "received": _received_type(value)},
        )

    if error_type in TOO_SMALL_TYPES:
        return ValidationIssue(
            code=IssueCode.TOO_SMALL,
            path=loc,
            message=message,
            metadata=_size_metadata(error_type, ctx, too_small=True),
        )

    if error_type in TOO_BIG_TYPES:
        return ValidationIssue(
            code=IssueCode.TOO_BIG,
            path=loc,
            message=message,
            metadata=_size_metadata(error_type, ctx, too_small=False),
        )

    if error_type == "string_pattern_mismatch":
        return ValidationIssue(
            code=IssueCode.INVALID_STRING,
            path=loc,
            message=message,
            validation=StringValidation.REGEX,
            metadata=ctx,
        )

    if error_type.startswith("url_"):
        return ValidationIssue(
            code=IssueCode.INVALID_STRING,
            path=loc,
            message=message,
            validation=StringValidation.URL,
            metadata=ctx,
        )

    if error_type.startswith("uuid_"):
        return ValidationIssue(
            code=IssueCode.INVALID_STRING,
            path=loc,
            message=message,
            validation=StringValidation.UUID,
            metadata=ctx,
        )

    if error_type == "value_error" and EMAIL_ERROR_MARKER in message:
        return ValidationIssue(
            code=IssueCode.INVALID_STRING,
            path=loc,
            message=message,
            validation=StringValidation.EMAIL,
            metadata=ctx,
        )

    if error_type in ("value_error", "assertion_error"):
        metadata = {"reason": ctx["error"]} if "error" in ctx else ctx
        return ValidationIssue(code=IssueCode.CUSTOM, path=loc, message=message, metadata=metadata)

    if error_type in ("enum", "literal_error"):
        options = _split_expected(ctx.get("expected"))
        if error_type == "literal_error" and len(options) == 1:
            return ValidationIssue(
                code=IssueCode.INVALID_LITERAL,
                path=loc,
                message=message,
                metadata={"expected": options[0]},
            )
        return ValidationIssue(
            code=IssueCode.INVALID_ENUM_VALUE,
            path=loc,
            message=message,
            metadata={"options": options},
        )

    if error_type.startswith(DATE_TYPE_PREFIXES):
        return ValidationIssue(code=IssueCode.INVALID_DATE, path=loc, message=message, metadata=ctx)

    if error_type == "extra_forbidden":
        key = str(loc[-1]) if loc else ""
        return ValidationIssue(
            code=IssueCode.UNRECOGNIZED_KEYS,
            path=_parent_path(loc),
            message=message,
            metadata={"keys": [key]},
        )

    if error_type == "multiple_of":
        return ValidationIssue(code=IssueCode.NOT_MULTIPLE_OF, path=loc, message=message, metadata=ctx)

    if error_type == "finite_number":
        return ValidationIssue(code=IssueCode.NOT_FINITE, path=loc, message=message, metadata=ctx)

    if error_type in ("union_tag_invalid", "union_tag_not_found"):
        metadata = dict(ctx)
        if "expected_tags" in metadata:
            metadata["options"] = _split_expected(metadata.pop("expected_tags"))
        return ValidationIssue(
            code=IssueCode.INVALID_UNION_DISCRIMINATOR,
            path=loc,
            message=message,
            metadata=metadata,
        )

    if error_type in ARGUMENT_TYPES:
        return ValidationIssue(code=IssueCode.INVALID_ARGUMENTS, path=loc, message=message, metadata=ctx)

    # PydanticCustomError raised with an issue code as its type, or an unknown type
    validation = _string_validation(ctx) if error_type == IssueCode.INVALID_STRING else None
    return ValidationIssue(code=error_type, path=loc, message=message, validation=validation, metadata=ctx)


def issues_from_pydantic(errors: Iterable[Mapping[str, Any]]) -> list[ValidationIssue]:
    """Convert a list of pydantic error dicts, preserving order."""
    return [issue_from_pydantic(error) for error in errors]


def issues_from_validation_error(exc: PydanticValidationError) -> list[ValidationIssue]:
    return issues_from_pydantic(exc.errors(include_url=False))
