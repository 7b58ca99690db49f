"""Translation catalogue backed by JSON locale files.

Layout on disk::

    locales/
        en/
            common.json
            validation.json
            suggestions.json
        vi/
            ...
"""

import json
from pathlib import Path
from typing import Any

from socialhub.shared.logging import get_logger

logger = get_logger(__name__)

NAMESPACE_SEPARATOR = ":"
KEY_SEPARATOR = "."


class TranslationCatalog:
    """In-memory store of translation resources, keyed by language and namespace."""

    def __init__(self, resources: dict[str, dict[str, dict[str, Any]]], default_namespace: str = "common") -> None:
        self._resources = resources
        self.default_namespace = default_namespace

    @classmethod
    def load(
        cls,
        locales_dir: Path,
        languages: list[str],
        namespaces: list[str],
        default_namespace: str = "common",
    ) -> "TranslationCatalog":
        """Load every ``<language>/<namespace>.json`` file under ``locales_dir``.

        Missing or unreadable files are logged and treated as empty, so one broken
        locale never takes the service down.
        """
        resources: dict[str, dict[str, dict[str, Any]]] = {}
        for language in languages:
            resources[language] = {}
            for namespace in namespaces:
                path = Path(locales_dir) / language / f"{namespace}.json"
                try:
                    resources[language][namespace] = json.loads(path.read_text(encoding="utf-8"))
                except FileNotFoundError:
                    logger.warning("Locale file not found", path=str(path))
                    resources[language][namespace] = {}
                except (OSError, json.JSONDecodeError) as e:
                    logger.error("Failed to load locale file", path=str(path), error=str(e))
                    resources[language][namespace] = {}

        logger.debug("Translation catalogue loaded", languages=languages, namespaces=namespaces)
        return cls(resources, default_namespace=default_namespace)

    @property
    def languages(self) -> list[str]:
        """Languages present in the catalogue."""
        return list(self._resources)

    def split_key(self, key: str) -> tuple[str, str]:
        """Split ``namespace:PATH`` into its parts; keys without a namespace use the default."""
        if NAMESPACE_SEPARATOR in key:
            namespace, path = key.split(NAMESPACE_SEPARATOR, 1)
            return namespace, path
        return self.default_namespace, key

    def lookup(self, language: str, key: str) -> Any | None:
        """Return the raw resource stored under ``key`` for ``language``, or None."""
        namespace, path = self.split_key(key)
        node: Any = self._resources.get(language, {}).get(namespace)
        for part in path.split(KEY_SEPARATOR):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node
