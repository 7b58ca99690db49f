"""Unit tests for ValidationErrorFormatter."""

import pytest

from socialhub.shared.i18n import I18nService, TranslationCatalog
from socialhub.shared.i18n.keys import ValidationTranslationKeys as Keys
from socialhub.shared.validation import (
    ErrorSeverity,
    IssueCode,
    RequestSource,
    StringValidation,
    ValidationErrorFormatter,
    ValidationIssue,
    build_error_summary,
    extract_field_value,
    extract_issue_details,
)


def issue(code, path=(), validation=None, message="", **metadata) -> ValidationIssue:
    return ValidationIssue(code=code, path=tuple(path), message=message, validation=validation, metadata=metadata)


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class TestScenarios:
    """End-to-end formatting of single issues."""

    def test_password_too_short(self, formatter):
        result = formatter.format([issue(IssueCode.TOO_SMALL, ["password"], minimum=8, type="string")])
        error = result.errors["password"]

        assert error.severity == ErrorSeverity.HIGH
        assert error.translation_key == Keys.PASSWORD_WEAK
        assert error.message == "Password is too weak, it must be at least 8 characters"
        assert error.suggestions == [
            "Use at least 8 characters",
            "Mix uppercase and lowercase letters, numbers and symbols",
        ]

    def test_email_format(self, formatter):
        result = formatter.format([issue(IssueCode.INVALID_STRING, ["email"], StringValidation.EMAIL)])
        error = result.errors["email"]

        assert error.translation_key == Keys.EMAIL_INVALID_FORMAT
        assert error.message == "Please enter a valid email address"
        assert error.severity == ErrorSeverity.HIGH
        assert error.suggestions == ["Use a format like name@example.com"]
        assert error.details == {"validation": "email"}

    def test_repeated_path_gets_unique_keys(self, formatter):
        result = formatter.format(
            [
                issue(IssueCode.TOO_SMALL, ["username"], minimum=3, type="string"),
                issue(IssueCode.TOO_BIG, ["username"], maximum=30, type="string"),
            ]
        )

        assert list(result.errors) == ["username", "username[1]"]
        assert result.errors["username"].code == IssueCode.TOO_SMALL
        assert result.errors["username[1]"].code == IssueCode.TOO_BIG
        assert result.summary.total_errors == 2
        assert result.summary.field_count == 1

    def test_object_level_issue(self, formatter):
        root_issue = issue(IssueCode.CUSTOM, message="Passwords do not match")
        result = formatter.format([root_issue], original_data={"password": "a"})

        assert list(result.errors) == ["__root__"]
        assert result.errors["__root__"].path == []
        assert extract_field_value(root_issue, {"password": "a"}) == "N/A"

    def test_bio_too_long(self, formatter):
        result = formatter.format([issue(IssueCode.TOO_BIG, ["bio"], maximum=500, type="string")])
        error = result.errors["bio"]

        assert error.translation_key == Keys.BIO_LENGTH
        assert error.message == "Bio must be at most 500 characters"
        assert error.suggestions == ["Keep your bio under 500 characters"]

    def test_unknown_code(self, formatter):
        result = formatter.format([issue("weird_code", ["nickname"])])
        error = result.errors["nickname"]

        assert error.severity == ErrorSeverity.LOW
        assert error.translation_key == Keys.UNKNOWN_VALIDATION
        assert error.message == "nickname is invalid"
        assert error.suggestions == ["Make sure this field is filled in correctly"]


class TestFormat:
    """Formatter output shape."""

    def test_keys_are_unique_and_ordered(self, formatter):
        issues = [
            issue(IssueCode.CUSTOM, ["a"]),
            issue(IssueCode.CUSTOM, ["b"]),
            issue(IssueCode.CUSTOM, ["a"]),
            issue(IssueCode.CUSTOM, ["a"]),
        ]
        result = formatter.format(issues)
        assert list(result.errors) == ["a", "b", "a[1]", "a[2]"]

    def test_generated_key_does_not_overwrite_literal_key(self, formatter):
        issues = [
            issue(IssueCode.CUSTOM, ["a"]),
            issue(IssueCode.CUSTOM, ["a"]),
            issue(IssueCode.CUSTOM, ["a[1]"]),
        ]
        result = formatter.format(issues)
        assert len(result.errors) == 3
        assert result.summary.total_errors == 3

    def test_literal_key_reported_first_is_kept(self, formatter):
        issues = [
            issue(IssueCode.CUSTOM, ["a[1]"]),
            issue(IssueCode.CUSTOM, ["a"]),
            issue(IssueCode.CUSTOM, ["a"]),
        ]
        result = formatter.format(issues)
        assert list(result.errors) == ["a[1]", "a", "a[2]"]
        assert result.errors["a[1]"].path == ["a[1]"]


    def test_nested_path_key(self, formatter):
        result = formatter.format([issue(IssueCode.INVALID_TYPE, ["tags", 1], expected="string", received="number")])
        error = result.errors["tags.1"]

        assert error.path == ["tags", 1]
        assert error.message == "tags.1 must be of type string, received number"
        assert error.suggestions == ["Enter a text value"]

    def test_location_and_type(self, formatter):
        result = formatter.format([issue(IssueCode.TOO_SMALL, ["page"], minimum=1, type="number")], RequestSource.QUERY)
        error = result.errors["page"]

        assert error.location == RequestSource.QUERY
        assert error.type == error.code == IssueCode.TOO_SMALL
        assert error.message == "page must be at least 1"

    def test_envelope_message(self, formatter):
        assert formatter.format([]).message == "Validation failed"
        assert formatter.format([], language="vi").message == "Dữ liệu không hợp lệ"

    def test_language_override(self, formatter):
        result = formatter.format([issue(IssueCode.INVALID_STRING, ["email"], StringValidation.EMAIL)], language="vi")
        assert result.errors["email"].message == "Vui lòng nhập địa chỉ email hợp lệ"
        assert result.errors["email"].suggestions == ["Sử dụng định dạng như ten@example.com"]

    def test_untranslated_key_falls_back_to_issue_message(self, memory_catalog):
        formatter = ValidationErrorFormatter(I18nService(catalog=memory_catalog))
        result = formatter.format([issue(IssueCode.TOO_SMALL, ["age"], message="Too small", minimum=1, type="number")])
        assert result.errors["age"].message == "Too small"

    def test_enum_options_interpolated(self, formatter):
        result = formatter.format(
            [issue(IssueCode.INVALID_ENUM_VALUE, ["visibility"], options=["public", "friends", "private"])]
        )
        assert result.errors["visibility"].message == "visibility must be one of: public, friends, private"

    def test_camel_case_dump(self, formatter):
        result = formatter.format([issue(IssueCode.TOO_BIG, ["bio"], maximum=500, type="string")])
        dumped = result.model_dump(by_alias=True, mode="json")

        assert dumped["errors"]["bio"]["translationKey"] == Keys.BIO_LENGTH
        assert dumped["errors"]["bio"]["location"] == "body"
        assert dumped["summary"]["totalErrors"] == 1
        assert dumped["summary"]["affectedFields"] == ["bio"]


class TestSummary:
    """Error summary aggregation."""

    def test_counts(self, formatter):
        result = formatter.format(
            [
                issue(IssueCode.TOO_SMALL, ["password"], minimum=8, type="string"),
                issue(IssueCode.TOO_BIG, ["bio"], maximum=500, type="string"),
                issue(IssueCode.UNRECOGNIZED_KEYS, [], keys=["isAdmin"]),
                issue(IssueCode.TOO_BIG, ["bio"], maximum=500, type="string"),
            ]
        )
        summary = result.summary

        assert summary.total_errors == 4
        assert summary.field_count == 3
        assert summary.severity_breakdown == {"high": 1, "medium": 2, "low": 1}
        assert summary.error_types == {"too_small": 1, "too_big": 2, "unrecognized_keys": 1}
        assert summary.affected_fields == ["password", "bio", "__root__"]

    def test_empty(self):
        summary = build_error_summary({})
        assert summary.total_errors == 0
        assert summary.field_count == 0
        assert summary.severity_breakdown == {"high": 0, "medium": 0, "low": 0}
        assert summary.affected_fields == []


class TestFieldValue:
    """Display value extraction."""

    def test_value_from_data(self):
        assert extract_field_value(issue(IssueCode.TOO_SMALL, ["username"]), {"username": "ab"}) == "ab"

    def test_nested_value(self):
        data = {"profile": {"tags": ["a", 5]}}
        assert extract_field_value(issue(IssueCode.INVALID_TYPE, ["profile", "tags", 1]), data) == "5"

    @pytest.mark.parametrize("data", [None, {}, {"username": None}, ["not", "a", "mapping"]])
    def test_falls_back_to_field_name(self, data):
        assert extract_field_value(issue(IssueCode.TOO_SMALL, ["username"]), data) == "username"

    def test_out_of_range_index(self):
        assert extract_field_value(issue(IssueCode.INVALID_TYPE, ["tags", 9]), {"tags": []}) == "9"

    def test_unprintable_value_falls_back_to_field_name(self):
        assert extract_field_value(issue(IssueCode.CUSTOM, ["x"]), {"x": Unprintable()}) == "x"

    def test_unprintable_value_keeps_other_errors(self, formatter):
        result = formatter.format(
            [issue(IssueCode.CUSTOM, ["x"]), issue(IssueCode.CUSTOM, ["y"])],
            original_data={"x": Unprintable(), "y": 1},
        )
        assert list(result.errors) == ["x", "y"]
        assert result.summary.total_errors == 2


    def test_value_interpolated_into_message(self):
        catalog = TranslationCatalog({"en": {"validation": {"MIN_LENGTH": "'{{value}}' is too short for {{field}}"}}})
        formatter = ValidationErrorFormatter(I18nService(catalog=catalog))
        result = formatter.format(
            [issue(IssueCode.TOO_SMALL, ["username"], minimum=3, type="string")],
            original_data={"username": "ab"},
        )
        assert result.errors["username"].message == "'ab' is too short for username"


class TestIssueDetails:
    """Rule metadata exposed as details."""

    def test_excludes_reserved_keys(self):
        raw = ValidationIssue(code=IssueCode.TOO_SMALL, path=("a",), metadata={"minimum": 1, "code": "x", "fatal": True})
        details = extract_issue_details(raw)
        assert details == {"minimum": 1}

    def test_includes_string_validation(self):
        details = extract_issue_details(issue(IssueCode.INVALID_STRING, ["a"], StringValidation.URL))
        assert details == {"validation": "url"}
