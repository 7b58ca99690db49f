"""Unit tests for converting pydantic errors into ValidationIssue objects.

Errors come from the real request schemas so the adapter is checked against
what pydantic actually reports.
"""

from datetime import date
from typing import Literal

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from socialhub.modules.posts.schemas import CreatePostRequest, PostIdParams
from socialhub.modules.users.schemas import RegisterUserRequest, UserIdParams
from socialhub.shared.validation import (
    IssueCode,
    StringValidation,
    ValidationIssue,
    issue_from_pydantic,
    issues_from_pydantic,
    issues_from_validation_error,
)

VALID_REGISTRATION = {
    "username": "jane_doe",
    "email": "jane@example.com",
    "password": "Str0ng!Pass",
    "confirmPassword": "Str0ng!Pass",
    "dateOfBirth": "2000-01-31",
}


def collect(schema, data) -> list[ValidationIssue]:
    with pytest.raises(PydanticValidationError) as exc_info:
        TypeAdapter(schema).validate_python(data)
    return issues_from_validation_error(exc_info.value)


def register_issues(**overrides) -> list[ValidationIssue]:
    return collect(RegisterUserRequest, {**VALID_REGISTRATION, **overrides})


class TestValidationIssue:
    """ValidationIssue value object."""

    def test_path_key(self):
        assert ValidationIssue(code="custom", path=("tags", 0)).path_key == "tags.0"
        assert ValidationIssue(code="custom").path_key == "__root__"

    def test_field_name(self):
        assert ValidationIssue(code="custom", path=["profile", "bio"]).field_name == "bio"
        assert ValidationIssue(code="custom").field_name == ""

    def test_path_is_tuple(self):
        assert ValidationIssue(code="custom", path=["a", 1]).path == ("a", 1)

    def test_validation_dropped_for_other_codes(self):
        assert ValidationIssue(code=IssueCode.TOO_BIG, validation="email").validation is None
        assert ValidationIssue(code=IssueCode.INVALID_STRING, validation="email").validation == "email"


class TestTypeErrors:
    """Missing values and type mismatches."""

    def test_missing_fields(self):
        issues = collect(RegisterUserRequest, {})
        paths = [issue.path for issue in issues]

        assert ("username",) in paths
        assert ("confirmPassword",) in paths
        assert ("dateOfBirth",) in paths
        assert ("phone",) not in paths
        for issue in issues:
            assert issue.code == IssueCode.INVALID_TYPE
            assert issue.metadata == {"expected": "value", "received": "undefined"}

    def test_int_parsing(self):
        [issue] = collect(UserIdParams, {"userId": "abc"})
        assert issue.code == IssueCode.INVALID_TYPE
        assert issue.path == ("userId",)
        assert issue.metadata == {"expected": "number", "received": "string"}

    def test_nested_array_item(self):
        [issue] = collect(CreatePostRequest, {"content": "Hello", "tags": ["ok", 1]})
        assert issue.path == ("tags", 1)
        assert issue.metadata == {"expected": "string", "received": "number"}


class TestSizeErrors:
    """Length and range violations."""

    def test_string_too_short(self):
        [issue] = register_issues(username="ab")
        assert issue.code == IssueCode.TOO_SMALL
        assert issue.path == ("username",)
        assert issue.metadata == {"minimum": 3, "type": "string", "inclusive": True}

    def test_stripped_string_too_short(self):
        [issue] = collect(CreatePostRequest, {"content": "   "})
        assert issue.code == IssueCode.TOO_SMALL
        assert issue.metadata["minimum"] == 1

    def test_list_too_long(self):
        [issue] = collect(CreatePostRequest, {"content": "Hello", "tags": [f"t{i}" for i in range(11)]})
        assert issue.code == IssueCode.TOO_BIG
        assert issue.path == ("tags",)
        assert issue.metadata["maximum"] == 10
        assert issue.metadata["type"] == "array"

    def test_number_too_small(self):
        [issue] = collect(UserIdParams, {"userId": 0})
        assert issue.code == IssueCode.TOO_SMALL
        assert issue.metadata == {"minimum": 1, "type": "number", "inclusive": True}

    def test_exclusive_bound(self):
        error = {"type": "less_than", "loc": ("score",), "msg": "Input should be less than 5", "ctx": {"lt": 5}}
        issue = issue_from_pydantic(error)
        assert issue.code == IssueCode.TOO_BIG
        assert issue.metadata == {"maximum": 5, "type": "number", "inclusive": False}

    def test_date_of_birth_too_young(self):
        [issue] = register_issues(dateOfBirth=date.today().isoformat())
        assert issue.code == IssueCode.TOO_SMALL
        assert issue.path == ("dateOfBirth",)
        assert issue.metadata == {"minimum": 13, "type": "date", "inclusive": True}
        assert issue.message == "You must be at least 13 years old"

    def test_date_of_birth_too_old(self):
        [issue] = register_issues(dateOfBirth="1850-01-01")
        assert issue.code == IssueCode.TOO_BIG
        assert issue.metadata["maximum"] == 120


class TestStringErrors:
    """Format violations become invalid_string with a sub-kind."""

    def test_pattern_mismatch(self):
        [issue] = register_issues(username="bad name!")
        assert issue.code == IssueCode.INVALID_STRING
        assert issue.validation == StringValidation.REGEX
        assert "pattern" in issue.metadata

    def test_email(self):
        [issue] = register_issues(email="not-an-email")
        assert issue.code == IssueCode.INVALID_STRING
        assert issue.validation == StringValidation.EMAIL
        assert issue.path == ("email",)

    def test_uuid(self):
        [issue] = collect(PostIdParams, {"postId": "xyz"})
        assert issue.code == IssueCode.INVALID_STRING
        assert issue.validation == StringValidation.UUID

    def test_custom_invalid_string_with_subtype(self):
        error = {
            "type": "invalid_string",
            "loc": ("slug",),
            "msg": "Must start with post-",
            "ctx": {"validation": {"startsWith": "post-"}},
        }
        issue = issue_from_pydantic(error)
        assert issue.validation == StringValidation.STARTS_WITH
        assert issue.metadata == {"startsWith": "post-"}


class TestCustomErrors:
    """Validator failures."""

    def test_field_validator(self):
        [issue] = register_issues(password="weakpassword", confirmPassword="weakpassword")
        assert issue.code == IssueCode.CUSTOM
        assert issue.path == ("password",)

    def test_model_validator_is_object_level(self):
        [issue] = register_issues(confirmPassword="Different!1")
        assert issue.code == IssueCode.CUSTOM
        assert issue.path == ()
        assert issue.metadata == {"reason": "Passwords do not match"}

    def test_invalid_date(self):
        [issue] = register_issues(dateOfBirth="not-a-date")
        assert issue.code == IssueCode.INVALID_DATE
        assert issue.path == ("dateOfBirth",)


class TestShapeErrors:
    """Enums, literals and unexpected keys."""

    def test_enum(self):
        [issue] = collect(CreatePostRequest, {"content": "Hello", "visibility": "secret"})
        assert issue.code == IssueCode.INVALID_ENUM_VALUE
        assert issue.metadata == {"options": ["public", "friends", "private"]}

    def test_single_literal(self):
        [issue] = collect(Literal["v1"], "v2")
        assert issue.code == IssueCode.INVALID_LITERAL
        assert issue.metadata == {"expected": "v1"}

    def test_literal_choice(self):
        [issue] = collect(Literal["asc", "desc"], "up")
        assert issue.code == IssueCode.INVALID_ENUM_VALUE
        assert issue.metadata == {"options": ["asc", "desc"]}

    def test_extra_forbidden(self):
        [issue] = register_issues(isAdmin=True)
        assert issue.code == IssueCode.UNRECOGNIZED_KEYS
        assert issue.path == ()
        assert issue.metadata == {"keys": ["isAdmin"]}


class TestUnknownErrors:
    """Error types without a family keep their type as code."""

    def test_unknown_type_passes_through(self):
        issue = issue_from_pydantic({"type": "brand_new_error", "loc": ("x",), "msg": "Nope", "ctx": {"a": 1}})
        assert issue.code == "brand_new_error"
        assert issue.metadata == {"a": 1}

    def test_order_is_preserved(self):
        errors = [
            {"type": "missing", "loc": ("b",), "msg": "Field required"},
            {"type": "missing", "loc": ("a",), "msg": "Field required"},
        ]
        assert [issue.path for issue in issues_from_pydantic(errors)] == [("b",), ("a",)]
