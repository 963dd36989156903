"""Render logic for the single-page profitability calculator."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from calc import (
    COST_ITEMS,
    DEFAULT_SETTINGS,
    build_verdict_cards,
    compute_profitability,
    cost_breakdown,
    cost_breakdown_frame,
    list_presets,
    reference_jobs_frame,
    summarize_metrics,
)
from calc.constants import COST_STEPS
from core import charts
from formatting import format_currency, format_days, format_jpy, format_percent, format_signed_currency
from localization import render_language_status_alert, translate
from models import PROJECT_TYPES, CalculatorInput, CalculatorOutput, CalculatorSettings, ProjectDetails
from state import (
    apply_preset_to_session,
    load_calculator_input,
    load_project_details,
    reset_calculator,
    store_project_details,
    update_calculator_input,
)
from ui.chrome import render_app_footer, render_app_header

logger = logging.getLogger(__name__)

WIDGET_PREFIX = "input_"
TEAM_WIDGET_PREFIX = "team_days_"
PROJECT_WIDGET_KEYS: Dict[str, str] = {
    "client_name": "project_client_name",
    "project_name": "project_project_name",
    "project_type": "project_project_type",
}
TEAM_DAYS_MAX = 30.0
TOTAL_DAYS_MAX = 60.0


def widget_key(field: str) -> str:
    return f"{WIDGET_PREFIX}{field}"


def team_widget_key(member_id: str) -> str:
    return f"{TEAM_WIDGET_PREFIX}{member_id}"


def widget_values(inputs: CalculatorInput, settings: CalculatorSettings = DEFAULT_SETTINGS) -> Dict[str, Any]:
    """Map the calculator input onto the widget keys used by this page."""

    values: Dict[str, Any] = {
        widget_key("quote_amount"): float(inputs.quote_amount),
        widget_key("total_days"): float(inputs.total_days),
        widget_key("include_overhead"): inputs.include_overhead,
    }
    for bucket, amount in inputs.direct_costs.items():
        values[widget_key(bucket)] = float(amount)
    for member in settings.roster:
        values[team_widget_key(member.member_id)] = float(inputs.days_for(member.member_id))
    return values


def project_widget_values(details: ProjectDetails) -> Dict[str, Any]:
    return {
        PROJECT_WIDGET_KEYS["client_name"]: details.client_name,
        PROJECT_WIDGET_KEYS["project_name"]: details.project_name,
        PROJECT_WIDGET_KEYS["project_type"]: details.project_type,
    }


def _push_state_to_widgets() -> None:
    st.session_state.update(widget_values(load_calculator_input()))
    st.session_state.update(project_widget_values(load_project_details()))


def _ensure_widget_state() -> None:
    expected = list(widget_values(load_calculator_input())) + list(PROJECT_WIDGET_KEYS.values())
    if any(key not in st.session_state for key in expected):
        _push_state_to_widgets()


def _on_field_change(field: str) -> None:
    value = st.session_state.get(widget_key(field))
    update_calculator_input(lambda current: current.with_field(field, value))


def _on_team_days_change(member_id: str) -> None:
    value = st.session_state.get(team_widget_key(member_id))
    update_calculator_input(lambda current: current.with_team_days(member_id, value))


def _on_project_change() -> None:
    store_project_details(
        ProjectDetails(
            client_name=st.session_state.get(PROJECT_WIDGET_KEYS["client_name"], ""),
            project_name=st.session_state.get(PROJECT_WIDGET_KEYS["project_name"], ""),
            project_type=st.session_state.get(PROJECT_WIDGET_KEYS["project_type"], ""),
        )
    )


def _on_preset_click(key: str, label: str) -> None:
    apply_preset_to_session(key)
    _push_state_to_widgets()
    st.toast(translate("presets.loaded", label=label), icon="🎬")


def _render_presets() -> None:
    st.markdown(f"#### 🎬 {translate('presets.header')}")
    presets = list_presets()
    columns = st.columns(3)
    for index, preset in enumerate(presets):
        columns[index % 3].button(
            preset.label,
            key=f"preset_{preset.key}",
            on_click=_on_preset_click,
            args=(preset.key, preset.label),
            use_container_width=True,
        )


def _render_benchmark(output: CalculatorOutput, settings: CalculatorSettings) -> None:
    benchmarks = settings.benchmarks
    with st.container(border=True):
        st.markdown(f"**📊 {translate('benchmark.header')}**")
        zone_labels = (
            translate("benchmark.zone_low", low=f"{benchmarks.low:.0f}"),
            translate("benchmark.zone_ok", low=f"{benchmarks.low:.0f}", good=f"{benchmarks.good:.0f}"),
            translate("benchmark.zone_great", good=f"{benchmarks.good:.0f}"),
        )
        figure = charts.build_benchmark_figure(
            output.gross_margin,
            benchmarks,
            zone_labels=zone_labels,
            marker_label=translate("benchmark.marker"),
        )
        st.plotly_chart(figure, use_container_width=True)
        st.markdown(
            translate(
                "benchmark.summary",
                margin=format_percent(output.gross_margin),
                average=format_percent(benchmarks.average),
            )
        )


def _render_project_panel() -> None:
    with st.container(border=True):
        st.markdown(f"**🏢 {translate('project.title')}**")
        st.caption(translate("project.description"))
        st.text_input(
            translate("project.client"),
            placeholder=translate("project.client_placeholder"),
            key=PROJECT_WIDGET_KEYS["client_name"],
            on_change=_on_project_change,
        )
        st.text_input(
            translate("project.name"),
            placeholder=translate("project.name_placeholder"),
            key=PROJECT_WIDGET_KEYS["project_name"],
            on_change=_on_project_change,
        )
        st.selectbox(
            translate("project.type"),
            options=list(PROJECT_TYPES.keys()),
            format_func=lambda code: PROJECT_TYPES[code],
            key=PROJECT_WIDGET_KEYS["project_type"],
            on_change=_on_project_change,
        )


def _render_quote_panel(output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> None:
    inputs = load_calculator_input()
    rate = settings.exchange_rate
    with st.container(border=True):
        st.markdown(f"**💴 {translate('quote.title')}**")
        st.caption(translate("quote.description"))
        st.number_input(
            translate("quote.amount"),
            min_value=0.0,
            step=50000.0,
            format="%.0f",
            help=translate("quote.amount_hint"),
            key=widget_key("quote_amount"),
            on_change=_on_field_change,
            args=("quote_amount",),
        )
        if show_usd:
            st.caption(translate("quote.usd_equivalent", amount=format_currency(inputs.quote_amount, True, exchange_rate=rate)))
        st.divider()
        st.number_input(
            translate("quote.days"),
            min_value=0.0,
            max_value=TOTAL_DAYS_MAX,
            step=1.0,
            format="%.1f",
            help=translate("quote.days_hint"),
            key=widget_key("total_days"),
            on_change=_on_field_change,
            args=("total_days",),
        )
        st.metric(
            translate("quote.revenue_per_day"),
            format_currency(output.daily_revenue, show_usd, exchange_rate=rate),
        )


def _render_costs_panel(output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> None:
    rate = settings.exchange_rate
    with st.container(border=True):
        st.markdown(f"**🎥 {translate('costs.title')}**")
        st.caption(translate("costs.description"))
        for code, label, hint in COST_ITEMS:
            st.number_input(
                f"{label} (¥)",
                min_value=0.0,
                step=float(COST_STEPS[code]),
                format="%.0f",
                help=hint,
                key=widget_key(code),
                on_change=_on_field_change,
                args=(code,),
            )
        st.divider()
        st.metric(
            translate("costs.total"),
            format_currency(output.total_direct_costs, show_usd, exchange_rate=rate),
        )
        gross_label = "costs.gross_profit" if output.is_profitable else "costs.gross_loss"
        st.metric(
            translate(gross_label),
            format_currency(abs(output.gross_profit), show_usd, exchange_rate=rate),
        )


def _render_team_panel(output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> None:
    inputs = load_calculator_input()
    rate = settings.exchange_rate
    with st.container(border=True):
        st.markdown(f"**👥 {translate('team.title')}**")
        st.caption(translate("team.description"))
        for member in settings.roster:
            name_col, days_col = st.columns([1, 1])
            days_col.number_input(
                member.name,
                min_value=0.0,
                max_value=TEAM_DAYS_MAX,
                step=0.5,
                format="%.1f",
                key=team_widget_key(member.member_id),
                on_change=_on_team_days_change,
                args=(member.member_id,),
                label_visibility="collapsed",
            )
            name_col.markdown(f"**{member.name}**")
            name_col.caption(
                translate(
                    "team.member_rate",
                    rate=format_jpy(member.daily_rate),
                    cost=format_currency(
                        inputs.days_for(member.member_id) * member.daily_rate,
                        show_usd,
                        exchange_rate=rate,
                    ),
                )
            )
        st.divider()
        st.metric(
            translate("team.total", days=format_days(output.total_team_days)),
            format_currency(output.team_time_cost, show_usd, exchange_rate=rate),
        )
        if output.total_team_days > 0:
            st.caption(
                f"{translate('team.revenue_per_team_day')}: "
                f"{format_currency(output.revenue_per_team_day, show_usd, exchange_rate=rate)}"
            )


def _pnl_rows(inputs: CalculatorInput, output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> List[Dict[str, str]]:
    rate = settings.exchange_rate
    rows = [
        {"": translate("overhead.quote"), "¥": format_signed_currency(inputs.quote_amount, show_usd, exchange_rate=rate)},
        {"": translate("overhead.direct_costs"), "¥": format_signed_currency(-output.total_direct_costs, show_usd, exchange_rate=rate)},
        {"": translate("overhead.team_time"), "¥": format_signed_currency(-output.team_time_cost, show_usd, exchange_rate=rate)},
    ]
    if inputs.include_overhead:
        rows.append(
            {"": translate("overhead.overhead"), "¥": format_signed_currency(-output.overhead_allocation, show_usd, exchange_rate=rate)}
        )
    net_label = "overhead.net_profit" if output.is_net_profitable else "overhead.net_loss"
    rows.append({"": translate(net_label), "¥": format_signed_currency(output.net_profit, show_usd, exchange_rate=rate)})
    return rows


def _render_overhead_panel(output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> None:
    inputs = load_calculator_input()
    rate = settings.exchange_rate
    with st.container(border=True):
        st.markdown(f"**🏗️ {translate('overhead.title')}**")
        st.caption(
            translate(
                "overhead.description",
                overhead=format_jpy(settings.monthly_overhead),
                days=f"{settings.working_days_per_month:.0f}",
            )
        )
        st.toggle(
            translate("overhead.toggle"),
            key=widget_key("include_overhead"),
            on_change=_on_field_change,
            args=("include_overhead",),
        )
        if inputs.include_overhead:
            st.caption(
                f"{translate('overhead.per_day')}: "
                f"{format_currency(output.overhead_per_day, show_usd, exchange_rate=rate)} "
                f"{translate('overhead.project_days', days=format_days(inputs.total_days))} = "
                f"{format_currency(output.overhead_allocation, show_usd, exchange_rate=rate)}"
            )
        st.divider()
        st.dataframe(
            pd.DataFrame(_pnl_rows(inputs, output, show_usd, settings)),
            hide_index=True,
            use_container_width=True,
        )


def breakdown_table(
    inputs: CalculatorInput, output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings
) -> pd.DataFrame:
    """Cost breakdown frame with display-formatted amounts and shares."""

    rate = settings.exchange_rate
    frame = cost_breakdown_frame(inputs, output)
    return pd.DataFrame(
        {
            "Item": frame["Item"],
            "Amount": [format_currency(value, show_usd, exchange_rate=rate) for value in frame["Amount"]],
            "Share": [format_percent(value) for value in frame["Share (%)"]],
        }
    )


def metrics_table(output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> pd.DataFrame:
    rate = settings.exchange_rate
    rows = []
    for label, value in summarize_metrics(output).items():
        if label.endswith("(%)"):
            display = format_percent(value)
        else:
            display = format_signed_currency(value, show_usd, exchange_rate=rate)
        rows.append({"Metric": label, "Value": display})
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def _render_breakdown(output: CalculatorOutput, show_usd: bool, settings: CalculatorSettings) -> None:
    inputs = load_calculator_input()
    rate = settings.exchange_rate
    rows = cost_breakdown(inputs, output)
    with st.container(border=True):
        st.markdown(f"**📉 {translate('breakdown.title')}**")
        st.plotly_chart(charts.build_cost_breakdown_figure(rows), use_container_width=True)
        st.dataframe(breakdown_table(inputs, output, show_usd, settings), hide_index=True, use_container_width=True)
        total_col, quote_col, net_col = st.columns(3)
        total_col.metric(
            translate("breakdown.total_costs"),
            format_currency(output.fully_loaded_costs, show_usd, exchange_rate=rate),
        )
        quote_col.metric(
            translate("breakdown.quote"),
            format_currency(inputs.quote_amount, show_usd, exchange_rate=rate),
        )
        net_col.metric(
            translate("breakdown.net_profit"),
            format_signed_currency(output.net_profit, show_usd, exchange_rate=rate),
        )
        with st.expander(translate("breakdown.all_metrics")):
            st.dataframe(metrics_table(output, show_usd, settings), hide_index=True, use_container_width=True)


def _render_reference(show_usd: bool, settings: CalculatorSettings) -> None:
    rate = settings.exchange_rate
    frame = reference_jobs_frame(benchmarks=settings.benchmarks)
    tier_icons = {"high": "🟢", "mid": "🟡", "low": "🔴"}
    display = pd.DataFrame(
        {
            "Job": frame["Job"],
            "Revenue": [format_currency(value, show_usd, exchange_rate=rate) for value in frame["Revenue"]],
            "Costs": [format_currency(value, show_usd, exchange_rate=rate) for value in frame["Costs"]],
            "Profit": [format_currency(value, show_usd, exchange_rate=rate) for value in frame["Profit"]],
            "Margin": [
                f"{tier_icons[tier]} {format_percent(margin)}"
                for margin, tier in zip(frame["Margin (%)"], frame["Tier"], strict=True)
            ],
        }
    )
    with st.container(border=True):
        st.markdown(f"**🎯 {translate('reference.title')}**")
        st.caption(translate("reference.description"))
        st.dataframe(display, hide_index=True, use_container_width=True)


def render_calculator_page(settings: CalculatorSettings = DEFAULT_SETTINGS) -> None:
    """Render the full calculator page for the current session."""

    render_language_status_alert()
    actions = render_app_header(exchange_rate=settings.exchange_rate)
    if actions.reset_requested:
        reset_calculator()
        _push_state_to_widgets()
        st.toast(translate("header.reset_done"), icon="🔄")
    _ensure_widget_state()

    show_usd = actions.show_usd
    _render_presets()
    st.divider()

    inputs = load_calculator_input()
    output = compute_profitability(inputs, settings)
    logger.debug(
        "Recomputed profitability: gross_margin=%s net_margin=%s",
        output.gross_margin,
        output.net_margin,
    )

    st.markdown(f"#### {translate('verdict.header')}")
    charts.render_metric_cards(build_verdict_cards(inputs, output, show_usd=show_usd, settings=settings))
    _render_benchmark(output, settings)

    first_col, second_col, third_col = st.columns(3)
    with first_col:
        _render_project_panel()
        _render_quote_panel(output, show_usd, settings)
    with second_col:
        _render_costs_panel(output, show_usd, settings)
    with third_col:
        _render_team_panel(output, show_usd, settings)
        _render_overhead_panel(output, show_usd, settings)

    _render_breakdown(output, show_usd, settings)
    _render_reference(show_usd, settings)
    render_app_footer()


__all__ = [
    "breakdown_table",
    "metrics_table",
    "project_widget_values",
    "render_calculator_page",
    "team_widget_key",
    "widget_key",
    "widget_values",
]
