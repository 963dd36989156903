"""Shared constants for profitability calculations and reporting."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Tuple

from models import CalculatorSettings, MarginBenchmarks, TeamMember, TeamRoster

JPY_PER_USD = Decimal("150")
MONTHLY_OVERHEAD = Decimal("2476000")
WORKING_DAYS_PER_MONTH = Decimal("20")

# 2025 benchmarks from completed video jobs.
BENCHMARKS = MarginBenchmarks(
    great=Decimal("80"),
    good=Decimal("73"),
    low=Decimal("53"),
    average=Decimal("70"),
)

# Member id, display name, monthly salary (JPY).
TEAM_SALARIES: List[Tuple[str, str, int]] = [
    ("andrew", "Andrew", 450000),
    ("david", "David", 450000),
    ("robert", "Robert", 340000),
    ("paulina", "Paulina", 300000),
    ("yuki", "Yuki", 220000),
]


def build_team_roster(
    salaries: List[Tuple[str, str, int]] = TEAM_SALARIES,
    working_days_per_month: Decimal = WORKING_DAYS_PER_MONTH,
) -> TeamRoster:
    """Build a roster whose daily rates derive from monthly salaries."""

    return TeamRoster(
        [
            TeamMember.from_monthly_salary(member_id, name, monthly, working_days_per_month)
            for member_id, name, monthly in salaries
        ]
    )


DEFAULT_ROSTER = build_team_roster()

DEFAULT_SETTINGS = CalculatorSettings(
    exchange_rate=JPY_PER_USD,
    monthly_overhead=MONTHLY_OVERHEAD,
    working_days_per_month=WORKING_DAYS_PER_MONTH,
    benchmarks=BENCHMARKS,
    roster=DEFAULT_ROSTER,
)

# Code, display label, input hint for each direct-cost bucket.
COST_ITEMS: List[Tuple[str, str, str]] = [
    ("crew", "Crew / Extra Staff", "Freelance camera ops, assistants, models"),
    ("travel", "Travel & Accommodation", "Transport, hotels, meals on location"),
    ("equipment", "Equipment Rental", "Camera gear, lighting, audio, drones"),
    ("outsourcing", "Outsourcing / Post-Production", "Freelance editors, color grading, music"),
    ("other", "Other Direct Costs", "Location fees, permits, props, catering"),
]

COST_LABELS: Dict[str, str] = {code: label for code, label, _ in COST_ITEMS}

COST_STEPS: Dict[str, int] = {
    "crew": 10000,
    "travel": 10000,
    "equipment": 5000,
    "outsourcing": 10000,
    "other": 5000,
}

# Short labels used in the cost breakdown chart.
BREAKDOWN_LABELS: Dict[str, str] = {
    "crew": "Crew / Staff",
    "travel": "Travel",
    "equipment": "Equipment",
    "outsourcing": "Outsourcing",
    "other": "Other Direct",
    "team_time": "Team Time (salaries)",
    "overhead": "Overhead Share",
}


__all__ = [
    "BENCHMARKS",
    "BREAKDOWN_LABELS",
    "COST_ITEMS",
    "COST_LABELS",
    "COST_STEPS",
    "DEFAULT_ROSTER",
    "DEFAULT_SETTINGS",
    "JPY_PER_USD",
    "MONTHLY_OVERHEAD",
    "TEAM_SALARIES",
    "WORKING_DAYS_PER_MONTH",
    "build_team_roster",
]
