"""Shared i18n package.

Translation keys, JSON locale catalogue and the translation service.
"""

from .catalog import TranslationCatalog
from .keys import CommonTranslationKeys, SuggestionTranslationKeys, ValidationTranslationKeys
from .service import I18nService, InterpolationValues, get_i18n_service

__all__ = [
    "CommonTranslationKeys",
    "ValidationTranslationKeys",
    "SuggestionTranslationKeys",
    "TranslationCatalog",
    "I18nService",
    "InterpolationValues",
    "get_i18n_service",
]
