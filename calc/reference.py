"""Reference margins from completed 2025 video jobs."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Literal

import pandas as pd

from models import MarginBenchmarks

from .constants import BENCHMARKS
from .profitability import HUNDRED, safe_ratio

ReferenceTier = Literal["high", "mid", "low"]


@dataclass(frozen=True)
class ReferenceJob:
    job: str
    revenue: Decimal
    costs: Decimal

    @property
    def profit(self) -> Decimal:
        return self.revenue - self.costs

    @property
    def margin(self) -> Decimal:
        return safe_ratio(self.profit, self.revenue) * HUNDRED


REFERENCE_JOBS: List[ReferenceJob] = [
    ReferenceJob("Tsubame (SeaSwallow) - Video/HP/Photos", Decimal("6292000"), Decimal("1499500")),
    ReferenceJob("HGI Kyoto - Brand Movie", Decimal("3432550"), Decimal("900000")),
    ReferenceJob("Hilton Tokyo - MICE Video", Decimal("2087800"), Decimal("400000")),
    ReferenceJob("Hilton Japan - Alan Watts", Decimal("1485979"), Decimal("550000")),
    ReferenceJob("Hilton Worldwide - Alan Watts 2026", Decimal("1094030"), Decimal("300000")),
    ReferenceJob("Hilton Fukuoka - F&B Conference", Decimal("954800"), Decimal("350000")),
    ReferenceJob("Seeds - Takayama Naoko Video", Decimal("825000"), Decimal("160000")),
    ReferenceJob("Elephant Stone - Canopy Filming", Decimal("665235"), Decimal("200000")),
    ReferenceJob("Hilton Odawara - Conference", Decimal("528000"), Decimal("250000")),
]


def reference_tier(margin: Decimal, benchmarks: MarginBenchmarks = BENCHMARKS) -> ReferenceTier:
    if margin >= benchmarks.good:
        return "high"
    if margin >= benchmarks.low:
        return "mid"
    return "low"


def reference_jobs_frame(
    jobs: List[ReferenceJob] | None = None,
    benchmarks: MarginBenchmarks = BENCHMARKS,
) -> pd.DataFrame:
    """Tabulate reference jobs with derived profit, margin and tier."""

    rows = [
        {
            "Job": job.job,
            "Revenue": job.revenue,
            "Costs": job.costs,
            "Profit": job.profit,
            "Margin (%)": job.margin,
            "Tier": reference_tier(job.margin, benchmarks),
        }
        for job in (REFERENCE_JOBS if jobs is None else jobs)
    ]
    return pd.DataFrame(rows, columns=["Job", "Revenue", "Costs", "Profit", "Margin (%)", "Tier"])


__all__ = ["REFERENCE_JOBS", "ReferenceJob", "reference_jobs_frame", "reference_tier"]
