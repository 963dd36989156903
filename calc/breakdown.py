"""Cost breakdown rows shared by the breakdown chart and table."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List

import pandas as pd

from models import CalculatorInput, CalculatorOutput

from .constants import BREAKDOWN_LABELS
from .profitability import HUNDRED, safe_ratio


@dataclass(frozen=True)
class BreakdownRow:
    code: str
    label: str
    amount: Decimal
    share: Decimal


def cost_breakdown(inputs: CalculatorInput, output: CalculatorOutput) -> List[BreakdownRow]:
    """Split fully loaded costs into buckets with their share of the total.

    The overhead row only appears when overhead is included.
    """

    amounts = list(inputs.direct_costs.items())
    amounts.append(("team_time", output.team_time_cost))
    if inputs.include_overhead:
        amounts.append(("overhead", output.overhead_allocation))

    total = output.fully_loaded_costs
    return [
        BreakdownRow(
            code=code,
            label=BREAKDOWN_LABELS[code],
            amount=amount,
            share=safe_ratio(amount, total) * HUNDRED,
        )
        for code, amount in amounts
    ]


def cost_breakdown_frame(inputs: CalculatorInput, output: CalculatorOutput) -> pd.DataFrame:
    rows = cost_breakdown(inputs, output)
    return pd.DataFrame(
        [
            {
                "Item": row.label,
                "Amount": float(row.amount),
                "Share (%)": float(row.share),
            }
            for row in rows
        ],
        columns=["Item", "Amount", "Share (%)"],
    )


__all__ = ["BreakdownRow", "cost_breakdown", "cost_breakdown_frame"]
