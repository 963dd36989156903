"""Shared chart and logging helpers for the calculator application."""

from __future__ import annotations

from . import charts, logging_config

__all__ = [
    "charts",
    "logging_config",
]
