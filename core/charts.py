"""Visualization helpers for the calculator page."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

import plotly.graph_objects as go
import streamlit as st

from calc import BreakdownRow, MetricCard, benchmark_position
from models import MarginBenchmarks

ZONE_COLORS = {
    "low": "#fca5a5",
    "ok": "#fcd34d",
    "great": "#6ee7b7",
}
BREAKDOWN_COLORS = {
    "crew": "#3b82f6",
    "travel": "#f59e0b",
    "equipment": "#a855f7",
    "outsourcing": "#ef4444",
    "other": "#6b7280",
    "team_time": "#6366f1",
    "overhead": "#94a3b8",
}
TREND_DELTA_COLORS = {
    "positive": "normal",
    "negative": "inverse",
    "neutral": "off",
}


def build_benchmark_figure(
    gross_margin: Decimal,
    benchmarks: MarginBenchmarks,
    *,
    zone_labels: Sequence[str] = ("Low", "OK", "Great"),
    marker_label: str = "Your margin",
) -> go.Figure:
    """Horizontal 0-100 bar with low/ok/great zones and a margin marker."""

    low = float(benchmarks.low)
    good = float(benchmarks.good)
    zones = [
        (zone_labels[0], 0.0, low, ZONE_COLORS["low"]),
        (zone_labels[1], low, good - low, ZONE_COLORS["ok"]),
        (zone_labels[2], good, 100.0 - good, ZONE_COLORS["great"]),
    ]

    figure = go.Figure()
    for label, start, width, color in zones:
        figure.add_trace(
            go.Bar(
                x=[width],
                y=["margin"],
                base=[start],
                orientation="h",
                name=label,
                marker_color=color,
                hoverinfo="name",
            )
        )
    position = float(benchmark_position(gross_margin))
    figure.add_trace(
        go.Scatter(
            x=[position],
            y=["margin"],
            mode="markers",
            name=marker_label,
            marker={"symbol": "line-ns-open", "size": 28, "line": {"width": 4}, "color": "#111827"},
        )
    )
    figure.update_layout(
        barmode="overlay",
        height=140,
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        xaxis={"range": [0, 100], "ticksuffix": "%"},
        yaxis={"visible": False},
        legend={"orientation": "h"},
    )
    return figure


def build_cost_breakdown_figure(rows: Sequence[BreakdownRow]) -> go.Figure:
    """Horizontal bar chart of each cost bucket's share of total cost."""

    figure = go.Figure(
        go.Bar(
            x=[float(row.share) for row in rows],
            y=[row.label for row in rows],
            orientation="h",
            marker_color=[BREAKDOWN_COLORS.get(row.code, "#9ca3af") for row in rows],
            text=[f"{float(row.share):.1f}%" for row in rows],
            textposition="auto",
        )
    )
    figure.update_layout(
        height=60 + 40 * len(rows),
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        xaxis={"range": [0, 100], "ticksuffix": "%"},
        yaxis={"autorange": "reversed"},
    )
    return figure


def render_metric_cards(cards: Sequence[MetricCard]) -> None:
    """Render verdict cards as Streamlit metric tiles."""

    if not cards:
        return
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards, strict=False):
        column.metric(
            card.title,
            card.value,
            delta=card.badge,
            delta_color=TREND_DELTA_COLORS[card.trend],
        )
        if card.subtitle:
            column.caption(card.subtitle)


__all__ = [
    "build_benchmark_figure",
    "build_cost_breakdown_figure",
    "render_metric_cards",
]
