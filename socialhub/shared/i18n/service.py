"""Translation service.

Resolves translation keys into localized text for the language of the current
request, with interpolation of ``{{name}}`` placeholders.
"""

import re
from functools import lru_cache
from typing import Any

from socialhub.core.config import I18nConfig, settings
from socialhub.shared.context import get_language as get_context_language
from socialhub.shared.logging import get_logger

from .catalog import TranslationCatalog

logger = get_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([\w.]+)\s*\}\}")

InterpolationValues = dict[str, Any]


class I18nService:
    """Translation and message resolution on top of a TranslationCatalog.

    Language priority for every call:
    1. Language passed explicitly
    2. Language detected for the current request (context variable)
    3. Configured default language

    Lookups try the language, then its base language ('vi-VN' -> 'vi'),
    then the fallback language. Lookups are cached in a bounded LRU cache.
    """

    DEFAULT_MESSAGE = "Default message"

    def __init__(
        self,
        catalog: TranslationCatalog | None = None,
        config: I18nConfig | None = None,
    ) -> None:
        config = config or settings.i18n
        self.default_language = config.default_language
        self.fallback_language = config.fallback_language
        self.supported_languages = config.supported_languages_list
        self._catalog = catalog or TranslationCatalog.load(
            config.locales_dir,
            self.supported_languages,
            config.namespaces_list,
        )
        self._lookup = lru_cache(maxsize=config.cache_size)(self._lookup_template)

    @property
    def catalog(self) -> TranslationCatalog:
        return self._catalog

    def get_language(self, language: str | None = None) -> str:
        """Language to translate into for this call."""
        return (language or get_context_language() or self.default_language).lower()

    def _candidate_languages(self, language: str) -> list[str]:
        candidates = [language, language.split("-")[0], self.fallback_language]
        return list(dict.fromkeys(candidates))

    def _lookup_template(self, language: str, key: str) -> str | None:
        for lng in self._candidate_languages(language):
            value = self._catalog.lookup(lng, key)
            if isinstance(value, str):
                return value
        return None

    @staticmethod
    def _format_value(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple, set, frozenset)):
            return ", ".join(str(item) for item in value)
        return str(value)

    def _interpolate(self, template: str, values: InterpolationValues | None) -> str:
        if not values:
            return template

        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in values:
                return match.group(0)
            return self._format_value(values[name])

        return PLACEHOLDER_PATTERN.sub(replace, template)

    def translate(
        self,
        key: str,
        language: str | None = None,
        values: InterpolationValues | None = None,
    ) -> str:
        """Translate ``key``; returns the key itself when no translation exists.

        Args:
            key: Translation key (e.g. 'common:BAD_REQUEST')
            language: Optional override language code
            values: Optional interpolation values

        Returns:
            Translated and interpolated text
        """
        lng = self.get_language(language)
        try:
            template = self._lookup(lng, str(key))
            if template is None:
                return str(key)
            return self._interpolate(template, values)
        except Exception as e:
            logger.warning("Translation failed", key=str(key), language=lng, error=str(e))
            return str(key)

    def has_translation_key(self, key: str, language: str | None = None) -> bool:
        """Whether ``key`` resolves in the language (or its base/fallback language)."""
        try:
            return self._lookup(self.get_language(language), str(key)) is not None
        except Exception as e:
            logger.warning("Translation key check failed", key=str(key), error=str(e))
            return False

    def resolve_message(
        self,
        translation_key: str | None,
        message: str | None = None,
        language: str | None = None,
        interpolation_values: InterpolationValues | None = None,
        default_message: str = DEFAULT_MESSAGE,
        prioritize_translated: bool = True,
    ) -> str:
        """Resolve a message from a translation key, falling back to ``message``.

        Resolution order:
        - No key, or key absent in the language: ``message`` or ``default_message``
        - ``prioritize_translated`` is False and ``message`` is non-blank: ``message``
        - Otherwise the translation

        Never raises.
        """
        fallback = (message or "").strip() or default_message

        if not translation_key or not self.has_translation_key(translation_key, language):
            return fallback

        if not prioritize_translated and message and message.strip():
            return message

        translated = self.translate(translation_key, language, interpolation_values)
        if not translated or translated.strip() == str(translation_key):
            return fallback
        return translated

    def clear_cache(self) -> None:
        """Drop cached lookups (after locale files were reloaded)."""
        self._lookup.cache_clear()


@lru_cache
def get_i18n_service() -> I18nService:
    """Get the I18nService singleton (cached)."""
    return I18nService()
