"""Convenience helpers for localization and language selection."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

import streamlit as st

from .languages import (
    DEFAULT_LANGUAGE,
    LanguageDefinition,
    available_languages,
    get_language_definition,
)
from .translations import available_translation_files, get_translation

SETTINGS_KEY = "app_settings"


@dataclass(frozen=True)
class LanguageStatus:
    """Computed state describing the active language."""

    code: str
    label: str
    status: str
    locale: str


def _normalize_language(code: str) -> str:
    if not code:
        return DEFAULT_LANGUAGE
    try:
        get_language_definition(code)
    except KeyError:
        return DEFAULT_LANGUAGE
    return code


def list_language_codes() -> List[str]:
    """Return the configured language codes."""

    return [definition.code for definition in available_languages()]


def get_current_language() -> str:
    """Return the language code stored in the current session state."""

    settings = st.session_state.get(SETTINGS_KEY, {})
    if isinstance(settings, dict):
        return _normalize_language(str(settings.get("language", DEFAULT_LANGUAGE)))
    return DEFAULT_LANGUAGE


def translation(key: str, *, language: str | None = None) -> Any:
    """Fetch the raw translation entry for ``key``."""

    language_code = _normalize_language(language) if language else get_current_language()
    return get_translation(key, language_code=language_code, fallback_language=DEFAULT_LANGUAGE)


def translate(key: str, *, language: str | None = None, **kwargs: Any) -> str:
    """Return the localized string for ``key`` with optional formatting."""

    value = translation(key, language=language)
    if isinstance(value, str):
        if kwargs:
            try:
                return value.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return value
        return value
    if value is None:
        return key
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return "\n".join(str(item) for item in value)
    return str(value)


def get_language_label(code: str, *, language: str | None = None) -> str:
    return translate(f"languages.{code}.label", language=language)


def get_language_status(language_code: str | None = None) -> LanguageStatus:
    """Return the presentation metadata for ``language_code``."""

    code = _normalize_language(language_code or get_current_language())
    definition = get_language_definition(code)
    return LanguageStatus(
        code=code,
        label=get_language_label(code, language=code),
        status=definition.status,
        locale=definition.locale,
    )


def update_language(language_code: str) -> None:
    """Update the UI language stored in the session state."""

    definition = get_language_definition(_normalize_language(language_code))
    current_settings = dict(st.session_state.get(SETTINGS_KEY, {}))
    current_settings["language"] = definition.code
    current_settings["locale"] = definition.locale
    st.session_state[SETTINGS_KEY] = current_settings


def render_language_status_alert() -> None:
    """Render a warning banner when the active language is not stable."""

    status = get_language_status()
    if status.status == "stable":
        return
    status_label = translate(f"languages.status_labels.{status.status}")
    message = translate(f"languages.status_messages.{status.status}")
    st.warning(f"**{status_label}**: {message}")


def ensure_language_defaults() -> None:
    """Create default session entries when missing."""

    settings = st.session_state.get(SETTINGS_KEY)
    if not isinstance(settings, dict):
        settings = {}
    language = _normalize_language(str(settings.get("language", DEFAULT_LANGUAGE)))
    settings["language"] = language
    settings.setdefault("locale", get_language_definition(language).locale)
    st.session_state[SETTINGS_KEY] = settings


__all__ = [
    "LanguageDefinition",
    "LanguageStatus",
    "available_translation_files",
    "ensure_language_defaults",
    "get_current_language",
    "get_language_label",
    "get_language_status",
    "list_language_codes",
    "render_language_status_alert",
    "translate",
    "translation",
    "update_language",
]
