"""Locale catalogs stored as nested JSON under ``locales/``."""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Mapping

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"


@lru_cache(maxsize=None)
def load_catalog(language_code: str) -> Mapping[str, Any]:
    """Parsed catalog for *language_code*; empty when no file ships for it."""

    path = LOCALES_DIR / f"{language_code}.json"
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError:
        logger.warning("No locale file for language %r", language_code)
        return {}


def _lookup(catalog: Mapping[str, Any], dotted_key: str) -> Any | None:
    node: Any = catalog
    for part in dotted_key.split("."):
        if not isinstance(node, Mapping):
            return None
        node = node.get(part)
    return node


def get_translation(
    key: str,
    *,
    language_code: str,
    fallback_language: str | None = None,
) -> Any | None:
    """Look *key* up in *language_code*, then in *fallback_language*."""

    codes = [language_code]
    if fallback_language and fallback_language != language_code:
        codes.append(fallback_language)
    for code in codes:
        entry = _lookup(load_catalog(code), key)
        if entry is None:
            continue
        if code != language_code:
            logger.debug("Key %r missing in %r, using %r", key, language_code, code)
        return entry
    return None


def available_translation_files() -> List[str]:
    return sorted(path.stem for path in LOCALES_DIR.glob("*.json"))


__all__ = [
    "LOCALES_DIR",
    "available_translation_files",
    "get_translation",
    "load_catalog",
]
