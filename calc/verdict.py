"""Verdict cards summarising whether a quote is worth taking."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Literal

from formatting import format_currency, format_days, format_percent
from models import CalculatorInput, CalculatorOutput, CalculatorSettings, MarginRating

from .constants import DEFAULT_SETTINGS
from .profitability import direct_cost_share

Trend = Literal["positive", "negative", "neutral"]

MARGIN_BADGES: Dict[MarginRating, str] = {
    "great": "80%+",
    "good": "73%+",
    "ok": "OK",
    "bad": "Low",
}

DAILY_PROFIT_STRONG = Decimal("200000")
DAILY_PROFIT_FAIR = Decimal("100000")


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str
    subtitle: str = ""
    trend: Trend = "neutral"
    badge: str | None = None


def margin_badge(rating: MarginRating) -> str:
    return MARGIN_BADGES[rating]


def daily_profit_trend(daily_profit: Decimal) -> Trend:
    if daily_profit > DAILY_PROFIT_STRONG:
        return "positive"
    if daily_profit > DAILY_PROFIT_FAIR:
        return "neutral"
    return "negative"


def benchmark_position(gross_margin: Decimal) -> Decimal:
    """Clamp *gross_margin* to the 0-100 range of the benchmark bar."""

    return min(max(gross_margin, Decimal("0")), Decimal("100"))


def build_verdict_cards(
    inputs: CalculatorInput,
    output: CalculatorOutput,
    *,
    show_usd: bool = False,
    settings: CalculatorSettings = DEFAULT_SETTINGS,
) -> List[MetricCard]:
    """Return the four headline cards shown above the inputs."""

    rate = settings.exchange_rate
    gross_trend: Trend = "positive" if output.is_profitable else "negative"
    net_trend: Trend = "positive" if output.is_net_profitable else "negative"
    return [
        MetricCard(
            title="Gross Profit",
            value=format_currency(abs(output.gross_profit), show_usd, exchange_rate=rate),
            subtitle=f"{format_percent(output.gross_margin)} margin",
            trend=gross_trend,
            badge=margin_badge(output.margin_rating),
        ),
        MetricCard(
            title="Net Profit (Fully Loaded)",
            value=format_currency(abs(output.net_profit), show_usd, exchange_rate=rate),
            subtitle=f"{format_percent(output.net_margin)} after overhead",
            trend=net_trend,
            badge="Take it" if output.is_net_profitable else "Pass",
        ),
        MetricCard(
            title="Profit per Day",
            value=format_currency(abs(output.daily_profit), show_usd, exchange_rate=rate),
            subtitle=f"{format_days(inputs.total_days)} working days",
            trend=daily_profit_trend(output.daily_profit),
        ),
        MetricCard(
            title="Direct Costs",
            value=format_currency(output.total_direct_costs, show_usd, exchange_rate=rate),
            subtitle=f"{format_percent(direct_cost_share(inputs, output))} of quote",
        ),
    ]


__all__ = [
    "MARGIN_BADGES",
    "MetricCard",
    "Trend",
    "benchmark_position",
    "build_verdict_cards",
    "daily_profit_trend",
    "margin_badge",
]
