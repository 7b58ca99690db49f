"""
Application configuration.
All values come from environment variables (or .env), with development defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

LOCALES_DIR = Path(__file__).resolve().parent.parent / "shared" / "i18n" / "locales"


class AppConfig(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    name: str = "SocialHub"
    version: str = "1.0.0"
    debug: bool = False
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        """List of CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",")]


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"
    # "console" for coloured development output, "json" for production
    format: str = "console"


class I18nConfig(BaseSettings):
    """Translation catalogue and language detection configuration."""

    model_config = SettingsConfigDict(env_prefix="I18N_", env_file=".env", extra="ignore")

    default_language: str = "en"
    fallback_language: str = "en"
    supported_languages: str = "en,vi"
    namespaces: str = "common,validation,suggestions"
    locales_dir: Path = LOCALES_DIR
    cookie_name: str = "lang"
    query_param: str = "lang"
    cookie_max_age: int = 30 * 24 * 60 * 60  # 30 days
    # Max entries of the translation lookup cache
    cache_size: int = 1000

    @property
    def supported_languages_list(self) -> list[str]:
        """List of supported language codes."""
        return [lng.strip().lower() for lng in self.supported_languages.split(",") if lng.strip()]

    @property
    def namespaces_list(self) -> list[str]:
        """List of translation namespaces."""
        return [ns.strip() for ns in self.namespaces.split(",") if ns.strip()]


class ValidationConfig(BaseSettings):
    """Defaults for request validation dependencies."""

    model_config = SettingsConfigDict(env_prefix="VALIDATION_", env_file=".env", extra="ignore")

    abort_early: bool = False
    attach_validated: bool = True
    log_errors: bool = True


class Settings:
    """Aggregator of all configurations."""

    def __init__(self) -> None:
        self.app = AppConfig()
        self.logging = LoggingConfig()
        self.i18n = I18nConfig()
        self.validation = ValidationConfig()


@lru_cache
def get_settings() -> Settings:
    """Get the settings singleton (cached)."""
    return Settings()


settings = get_settings()
