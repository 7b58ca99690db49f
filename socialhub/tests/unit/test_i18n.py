"""Unit tests for the translation catalogue and I18nService."""

import json

import pytest

from socialhub.shared.context import set_language
from socialhub.shared.i18n import CommonTranslationKeys, I18nService, TranslationCatalog
from socialhub.shared.i18n.keys import SuggestionTranslationKeys, ValidationTranslationKeys


class TestTranslationCatalog:
    """Loading and looking up JSON resources."""

    def test_load_from_directory(self, tmp_path):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "common.json").write_text(json.dumps({"A": {"B": "nested"}}), encoding="utf-8")

        catalog = TranslationCatalog.load(tmp_path, ["en"], ["common"])

        assert catalog.languages == ["en"]
        assert catalog.lookup("en", "common:A.B") == "nested"

    def test_missing_and_broken_files_are_empty(self, tmp_path):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "common.json").write_text("{not json", encoding="utf-8")

        catalog = TranslationCatalog.load(tmp_path, ["en", "vi"], ["common", "validation"])

        assert catalog.languages == ["en", "vi"]
        assert catalog.lookup("en", "common:A") is None
        assert catalog.lookup("vi", "validation:A") is None

    def test_split_key(self, memory_catalog):
        assert memory_catalog.split_key("validation:FIELDS.EMAIL") == ("validation", "FIELDS.EMAIL")
        assert memory_catalog.split_key("HELLO") == ("common", "HELLO")

    def test_lookup(self, memory_catalog):
        assert memory_catalog.lookup("en", "HELLO") == "Hello {{name}}"
        assert memory_catalog.lookup("en", "validation:FIELDS.EMAIL") == {"INVALID_FORMAT": "Bad email"}
        assert memory_catalog.lookup("en", "validation:FIELDS.EMAIL.INVALID_FORMAT.DEEPER") is None
        assert memory_catalog.lookup("fr", "common:HELLO") is None
        assert memory_catalog.lookup("en", "unknown:HELLO") is None


class TestTranslate:
    """I18nService.translate."""

    @pytest.fixture
    def service(self, memory_catalog) -> I18nService:
        return I18nService(catalog=memory_catalog)

    def test_interpolation(self, service):
        assert service.translate("common:HELLO", "en", {"name": "Jane"}) == "Hello Jane"
        assert service.translate("common:HELLO", "vi", {"name": "Jane"}) == "Xin chào Jane"

    def test_unknown_placeholder_is_kept(self, service):
        assert service.translate("common:HELLO", "en", {"other": 1}) == "Hello {{name}}"

    def test_list_and_none_values(self, service):
        assert service.translate("common:HELLO", "en", {"name": ["a", "b"]}) == "Hello a, b"
        assert service.translate("common:HELLO", "en", {"name": None}) == "Hello "

    def test_missing_key_returns_key(self, service):
        assert service.translate("common:MISSING", "en") == "common:MISSING"

    def test_non_string_resource_returns_key(self, service):
        assert service.translate("validation:FIELDS.EMAIL", "en") == "validation:FIELDS.EMAIL"

    def test_fallback_language(self, service):
        assert service.translate("common:ONLY_EN", "vi") == "English only"

    def test_base_language(self, service):
        assert service.translate("common:HELLO", "vi-VN", {"name": "An"}) == "Xin chào An"

    def test_language_from_context(self, service):
        set_language("vi")
        assert service.translate("common:HELLO", values={"name": "An"}) == "Xin chào An"

    def test_default_language(self, service):
        assert service.get_language() == "en"
        assert service.get_language("VI") == "vi"

    def test_has_translation_key(self, service):
        assert service.has_translation_key("common:HELLO", "vi")
        assert service.has_translation_key("common:ONLY_EN", "vi")
        assert not service.has_translation_key("common:MISSING", "en")

    def test_cache_is_cleared(self, service, memory_catalog):
        assert service.translate("common:HELLO", "en") == "Hello {{name}}"
        memory_catalog._resources["en"]["common"]["HELLO"] = "Hi"
        service.clear_cache()
        assert service.translate("common:HELLO", "en") == "Hi"


class TestResolveMessage:
    """I18nService.resolve_message."""

    @pytest.fixture
    def service(self, memory_catalog) -> I18nService:
        return I18nService(catalog=memory_catalog)

    def test_translation_preferred(self, service):
        assert service.resolve_message("common:HELLO", "Hi there", "en", {"name": "Jane"}) == "Hello Jane"

    def test_message_kept_when_not_prioritized(self, service):
        result = service.resolve_message("common:HELLO", "Hi there", "en", prioritize_translated=False)
        assert result == "Hi there"

    def test_translation_when_message_blank(self, service):
        result = service.resolve_message("common:HELLO", "   ", "en", {"name": "Jane"}, prioritize_translated=False)
        assert result == "Hello Jane"

    def test_missing_key_uses_message(self, service):
        assert service.resolve_message("common:MISSING", "  Original  ", "en") == "Original"

    def test_missing_key_and_message_uses_default(self, service):
        assert service.resolve_message("common:MISSING", None, "en") == I18nService.DEFAULT_MESSAGE
        assert service.resolve_message(None, "", "en", default_message="Oops") == "Oops"


class TestBundledLocales:
    """The shipped locale files cover every key enum in every language."""

    @pytest.mark.parametrize("language", ["en", "vi"])
    @pytest.mark.parametrize(
        "key",
        [*CommonTranslationKeys, *ValidationTranslationKeys, *SuggestionTranslationKeys],
    )
    def test_key_is_translated(self, i18n, language, key):
        template = i18n.catalog.lookup(language, key)
        assert isinstance(template, str)
        assert template.strip()
