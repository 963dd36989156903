from __future__ import annotations

from decimal import Decimal

import pytest

from calc import benchmark_position, build_verdict_cards, compute_profitability
from calc.verdict import daily_profit_trend, margin_badge


def test_cards_for_scenario_one(scenario_one, settings):
    out = compute_profitability(scenario_one, settings)
    gross, net, per_day, direct = build_verdict_cards(scenario_one, out, settings=settings)

    assert gross.title == "Gross Profit"
    assert gross.value == "¥1,600,000"
    assert gross.subtitle == "80.0% margin"
    assert gross.trend == "positive"
    assert gross.badge == "80%+"

    assert net.value == "¥834,500"
    assert net.badge == "Take it"
    assert net.subtitle == "41.7% after overhead"

    assert per_day.value == "¥320,000"
    assert per_day.subtitle == "5 working days"
    assert per_day.trend == "positive"

    assert direct.value == "¥400,000"
    assert direct.subtitle == "20.0% of quote"
    assert direct.trend == "neutral"


def test_loss_making_quote(scenario_one, settings):
    inputs = scenario_one.with_field("quote_amount", 300000)
    out = compute_profitability(inputs, settings)
    gross, net, per_day, _ = build_verdict_cards(inputs, out, show_usd=True, settings=settings)

    assert gross.trend == "negative"
    assert gross.badge == "Low"
    assert gross.value == "$667"
    assert net.badge == "Pass"
    assert net.trend == "negative"
    assert per_day.trend == "negative"


@pytest.mark.parametrize(
    "value, expected",
    [("200001", "positive"), ("200000", "neutral"), ("100001", "neutral"), ("100000", "negative")],
)
def test_daily_profit_trend(value, expected):
    assert daily_profit_trend(Decimal(value)) == expected


def test_margin_badges():
    assert [margin_badge(rating) for rating in ("great", "good", "ok", "bad")] == ["80%+", "73%+", "OK", "Low"]


def test_benchmark_position_is_clamped():
    assert benchmark_position(Decimal("-25")) == 0
    assert benchmark_position(Decimal("64.5")) == Decimal("64.5")
    assert benchmark_position(Decimal("140")) == 100
