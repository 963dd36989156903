"""Utilities for managing Streamlit session state defaults and resets."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, MutableMapping, Tuple

import streamlit as st

from calc import apply_preset, default_input
from models import CalculatorInput, ProjectDetails

logger = logging.getLogger(__name__)

StateFactory = Callable[[], Any]
TypeHint = type | tuple[type, ...] | None
Session = MutableMapping[str, Any]


@dataclass(frozen=True)
class StateSpec:
    """Definition of a session state entry."""

    default_factory: StateFactory
    type_hint: TypeHint
    description: str

    def create_default(self) -> Any:
        """Return a new default value for the state entry."""
        return self.default_factory()

    def is_valid(self, value: Any) -> bool:
        """Check whether *value* matches the declared type hint."""
        if self.type_hint is None:
            return True
        hints = self.type_hint if isinstance(self.type_hint, tuple) else (self.type_hint,)
        return isinstance(value, hints)


STATE_SPECS: Dict[str, StateSpec] = {
    "calculator_input": StateSpec(default_input, CalculatorInput, "Current calculator input"),
    "project_details": StateSpec(ProjectDetails, ProjectDetails, "Client, project name and type"),
    "show_usd": StateSpec(lambda: False, bool, "Render currency figures in USD"),
    "app_settings": StateSpec(lambda: {"language": "en"}, dict, "Shared UI settings"),
}

CALCULATOR_STATE_KEYS: Tuple[str, ...] = (
    "calculator_input",
    "project_details",
)


def _session(session: Session | None) -> Session:
    return st.session_state if session is None else session


def ensure_session_defaults(
    overrides: Mapping[str, Any] | None = None, *, session: Session | None = None
) -> None:
    """Populate the session with defaults and type-validate entries."""

    state = _session(session)
    overrides = overrides or {}
    for key, spec in STATE_SPECS.items():
        if key in overrides:
            state[key] = overrides[key]
            continue
        if key not in state or not spec.is_valid(state[key]):
            state[key] = spec.create_default()


def reset_session_keys(keys: Iterable[str] | None = None, *, session: Session | None = None) -> None:
    """Reset selected state keys to their default values."""

    state = _session(session)
    target_keys = list(keys) if keys is not None else list(STATE_SPECS.keys())
    for key in target_keys:
        if key in STATE_SPECS:
            state[key] = STATE_SPECS[key].create_default()
        elif key in state:
            del state[key]


def load_calculator_input(*, session: Session | None = None) -> CalculatorInput:
    """Return the current calculator input, seeding the default when missing."""

    state = _session(session)
    value = state.get("calculator_input")
    if isinstance(value, CalculatorInput):
        return value
    fresh = STATE_SPECS["calculator_input"].create_default()
    state["calculator_input"] = fresh
    return fresh


def store_calculator_input(value: CalculatorInput, *, session: Session | None = None) -> None:
    if not isinstance(value, CalculatorInput):
        raise TypeError("calculator_input must be a CalculatorInput")
    _session(session)["calculator_input"] = value


def update_calculator_input(
    update: Callable[[CalculatorInput], CalculatorInput], *, session: Session | None = None
) -> CalculatorInput:
    """Apply a pure *update* to the stored input and store the result."""

    updated = update(load_calculator_input(session=session))
    store_calculator_input(updated, session=session)
    return updated


def apply_preset_to_session(key: str, *, session: Session | None = None) -> CalculatorInput:
    logger.info("Loading job preset %s", key)
    return update_calculator_input(lambda current: apply_preset(current, key), session=session)


def load_project_details(*, session: Session | None = None) -> ProjectDetails:
    state = _session(session)
    value = state.get("project_details")
    if isinstance(value, ProjectDetails):
        return value
    fresh = ProjectDetails()
    state["project_details"] = fresh
    return fresh


def store_project_details(value: ProjectDetails, *, session: Session | None = None) -> None:
    _session(session)["project_details"] = value


def reset_calculator(*, session: Session | None = None) -> None:
    """Restore the default input and blank project details.

    Display toggles such as the currency switch are kept.
    """

    logger.info("Resetting calculator to defaults")
    reset_session_keys(CALCULATOR_STATE_KEYS, session=session)


__all__ = [
    "CALCULATOR_STATE_KEYS",
    "STATE_SPECS",
    "StateSpec",
    "apply_preset_to_session",
    "ensure_session_defaults",
    "load_calculator_input",
    "load_project_details",
    "reset_calculator",
    "reset_session_keys",
    "store_calculator_input",
    "store_project_details",
    "update_calculator_input",
]
