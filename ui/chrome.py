from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import streamlit as st

from localization import get_current_language, get_language_label, list_language_codes, translate, update_language

APP_PAGE_LAYOUT = "wide"
SHOW_USD_KEY = "show_usd"
LANGUAGE_WIDGET_KEY = "language_selector"
FOOTER_CREDIT = "Built by MOTTO Digital for Skill Hunter"


def apply_app_chrome() -> None:
    """Configure the Streamlit page and global chrome elements."""

    language = get_current_language()
    st.set_page_config(
        page_title=translate("app.page_title", language=language),
        page_icon=translate("app.page_icon", language=language),
        layout=APP_PAGE_LAYOUT,
    )
    _render_language_sidebar(language)


def _render_language_sidebar(language: str) -> None:
    codes = list_language_codes()
    with st.sidebar:
        selected = st.selectbox(
            translate("header.language"),
            options=codes,
            index=codes.index(language) if language in codes else 0,
            format_func=lambda code: get_language_label(code, language=code),
            key=LANGUAGE_WIDGET_KEY,
        )
    if selected != language:
        update_language(selected)
        st.rerun()


@dataclass(frozen=True)
class HeaderActions:
    """User interactions emitted from the global header."""

    show_usd: bool = False
    reset_requested: bool = False


def render_app_header(*, exchange_rate: Decimal) -> HeaderActions:
    """Render the title row with the currency toggle and reset button."""

    with st.container():
        title_col, toggle_col, reset_col = st.columns([4, 1, 1], gap="large")
        with title_col:
            st.title(translate("app.title"))
            st.caption(translate("app.subtitle"))
        with toggle_col:
            show_usd = st.toggle(translate("header.show_usd"), key=SHOW_USD_KEY)
            st.caption(translate("header.rate_badge", rate=f"{exchange_rate:,.0f}"))
        with reset_col:
            reset_requested = st.button(
                translate("header.reset"),
                icon=":material/restart_alt:",
                use_container_width=True,
                key="header_reset_button",
            )

    return HeaderActions(show_usd=bool(show_usd), reset_requested=reset_requested)


def render_app_footer() -> None:
    """Render the global footer."""

    st.divider()
    st.caption(f"{FOOTER_CREDIT} | {translate('app.footer')}")


__all__ = [
    "apply_app_chrome",
    "HeaderActions",
    "render_app_footer",
    "render_app_header",
]
