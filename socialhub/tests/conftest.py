"""Pytest configuration and fixtures for SocialHub backend tests."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from socialhub.core.config import I18nConfig
from socialhub.shared.context import set_language
from socialhub.shared.i18n import I18nService, TranslationCatalog
from socialhub.shared.validation import SuggestionGenerator, ValidationErrorFormatter


# ==================== Context Fixtures ====================


@pytest.fixture(autouse=True)
def reset_language_context() -> Generator[None, None, None]:
    """Start every test without a detected request language."""
    set_language("")
    yield
    set_language("")


# ==================== i18n Fixtures ====================


@pytest.fixture
def i18n_config() -> I18nConfig:
    """Default i18n configuration (en + vi, bundled locale files)."""
    return I18nConfig()


@pytest.fixture
def i18n(i18n_config: I18nConfig) -> I18nService:
    """Translation service backed by the bundled locale files."""
    return I18nService(config=i18n_config)


@pytest.fixture
def memory_catalog() -> TranslationCatalog:
    """Small in-memory catalogue for service tests."""
    return TranslationCatalog(
        {
            "en": {
                "common": {"HELLO": "Hello {{name}}", "ONLY_EN": "English only"},
                "validation": {"FIELDS": {"EMAIL": {"INVALID_FORMAT": "Bad email"}}},
            },
            "vi": {
                "common": {"HELLO": "Xin chào {{name}}"},
                "validation": {},
            },
        }
    )


# ==================== Validation Fixtures ====================


@pytest.fixture
def suggestions(i18n: I18nService) -> SuggestionGenerator:
    """Suggestion generator bound to the bundled translations."""
    return SuggestionGenerator(i18n)


@pytest.fixture
def formatter(i18n: I18nService) -> ValidationErrorFormatter:
    """Validation error formatter bound to the bundled translations."""
    return ValidationErrorFormatter(i18n)


# ==================== Application Fixtures ====================


@pytest.fixture
def app() -> FastAPI:
    """Fresh application instance."""
    from socialhub.main import create_app

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client; server errors are rendered instead of re-raised."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
