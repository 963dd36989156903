"""Streamlit entry point for the project profit calculator."""

from __future__ import annotations

from core.logging_config import setup_logging
from localization import ensure_language_defaults
from state import ensure_session_defaults
from ui.chrome import apply_app_chrome
from views import render_calculator_page


def main() -> None:
    """Configure Streamlit and render the calculator page."""

    setup_logging()
    ensure_session_defaults()
    ensure_language_defaults()
    apply_app_chrome()
    render_calculator_page()


if __name__ == "__main__":
    main()
