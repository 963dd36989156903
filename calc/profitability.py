"""Profitability calculations built on top of the typed calculator models."""
from __future__ import annotations

import logging
from decimal import Decimal, getcontext
from typing import Dict

from models import CalculatorInput, CalculatorOutput, CalculatorSettings, MarginBenchmarks, MarginRating

from .constants import DEFAULT_SETTINGS

getcontext().prec = 28

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return ``numerator / denominator`` or ``0`` when the denominator is zero."""

    if denominator == 0:
        return ZERO
    return numerator / denominator


def classify_margin(margin: Decimal, benchmarks: MarginBenchmarks) -> MarginRating:
    """Rate *margin* against the benchmarks using inclusive lower bounds."""

    if margin >= benchmarks.great:
        return "great"
    if margin >= benchmarks.good:
        return "good"
    if margin >= benchmarks.low:
        return "ok"
    return "bad"


def compute_team_time_cost(inputs: CalculatorInput, settings: CalculatorSettings) -> Decimal:
    unknown = [member_id for member_id in inputs.team_days if member_id not in settings.roster]
    if unknown:
        logger.warning("Ignoring team days for ids outside the roster: %s", ", ".join(sorted(unknown)))
    return sum(
        (inputs.days_for(member.member_id) * member.daily_rate for member in settings.roster),
        start=ZERO,
    )


def compute_total_team_days(inputs: CalculatorInput, settings: CalculatorSettings) -> Decimal:
    return sum((inputs.days_for(member_id) for member_id in settings.roster.member_ids()), start=ZERO)


def compute_profitability(
    inputs: CalculatorInput,
    settings: CalculatorSettings = DEFAULT_SETTINGS,
) -> CalculatorOutput:
    """Derive every profitability metric from *inputs*.

    The function is pure and total over non-negative finite inputs. Ratios
    whose denominator is zero (quote, total days, team days) resolve to
    ``0`` instead of raising.
    """

    quote = inputs.quote_amount
    total_direct_costs = inputs.direct_costs.total()

    gross_profit = quote - total_direct_costs
    gross_margin = safe_ratio(gross_profit, quote) * HUNDRED

    team_time_cost = compute_team_time_cost(inputs, settings)

    overhead_per_day = settings.overhead_per_day
    overhead_allocation = inputs.total_days * overhead_per_day if inputs.include_overhead else ZERO

    fully_loaded_costs = total_direct_costs + team_time_cost + overhead_allocation

    net_profit = quote - fully_loaded_costs
    net_margin = safe_ratio(net_profit, quote) * HUNDRED

    daily_revenue = safe_ratio(quote, inputs.total_days)
    daily_profit = safe_ratio(gross_profit, inputs.total_days)

    total_team_days = compute_total_team_days(inputs, settings)
    revenue_per_team_day = safe_ratio(quote, total_team_days)

    return CalculatorOutput(
        total_direct_costs=total_direct_costs,
        gross_profit=gross_profit,
        gross_margin=gross_margin,
        team_time_cost=team_time_cost,
        overhead_per_day=overhead_per_day,
        overhead_allocation=overhead_allocation,
        fully_loaded_costs=fully_loaded_costs,
        net_profit=net_profit,
        net_margin=net_margin,
        daily_revenue=daily_revenue,
        daily_profit=daily_profit,
        total_team_days=total_team_days,
        revenue_per_team_day=revenue_per_team_day,
        margin_rating=classify_margin(gross_margin, settings.benchmarks),
    )


def direct_cost_share(inputs: CalculatorInput, output: CalculatorOutput) -> Decimal:
    """Direct costs as a percentage of the quote."""

    return safe_ratio(output.total_direct_costs, inputs.quote_amount) * HUNDRED


def summarize_metrics(output: CalculatorOutput) -> Dict[str, Decimal]:
    """Return headline metrics keyed by display label."""

    return {
        "Direct Costs": output.total_direct_costs,
        "Gross Profit": output.gross_profit,
        "Gross Margin (%)": output.gross_margin,
        "Team Time Cost": output.team_time_cost,
        "Overhead Allocation": output.overhead_allocation,
        "Fully Loaded Costs": output.fully_loaded_costs,
        "Net Profit": output.net_profit,
        "Net Margin (%)": output.net_margin,
        "Revenue per Day": output.daily_revenue,
        "Profit per Day": output.daily_profit,
        "Revenue per Team-Day": output.revenue_per_team_day,
    }


__all__ = [
    "classify_margin",
    "compute_profitability",
    "compute_team_time_cost",
    "compute_total_team_days",
    "direct_cost_share",
    "safe_ratio",
    "summarize_metrics",
]
