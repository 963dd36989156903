from __future__ import annotations

from decimal import Decimal

from calc import BENCHMARKS, compute_profitability, cost_breakdown
from core.charts import build_benchmark_figure, build_cost_breakdown_figure


def test_benchmark_figure_has_three_zones_and_marker():
    figure = build_benchmark_figure(Decimal("120"), BENCHMARKS)

    bars = [trace for trace in figure.data if trace.type == "bar"]
    assert [trace.name for trace in bars] == ["Low", "OK", "Great"]
    assert [trace.base[0] for trace in bars] == [0.0, 53.0, 73.0]
    assert [trace.x[0] for trace in bars] == [53.0, 20.0, 27.0]
    marker = figure.data[-1]
    assert marker.x[0] == 100.0


def test_cost_breakdown_figure_follows_rows(scenario_one, settings):
    rows = cost_breakdown(scenario_one, compute_profitability(scenario_one, settings))
    figure = build_cost_breakdown_figure(rows)

    bar = figure.data[0]
    assert list(bar.y) == [row.label for row in rows]
    assert len(bar.x) == len(rows)
