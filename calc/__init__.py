"""Calculation helpers for project profitability outputs."""

from .constants import (
    BENCHMARKS,
    COST_ITEMS,
    COST_LABELS,
    DEFAULT_ROSTER,
    DEFAULT_SETTINGS,
    build_team_roster,
)
from .profitability import (
    classify_margin,
    compute_profitability,
    direct_cost_share,
    safe_ratio,
    summarize_metrics,
)
from .presets import DEFAULT_INPUT, JOB_PRESETS, JobPreset, apply_preset, default_input, list_presets
from .breakdown import BreakdownRow, cost_breakdown, cost_breakdown_frame
from .reference import REFERENCE_JOBS, ReferenceJob, reference_jobs_frame, reference_tier
from .verdict import MetricCard, benchmark_position, build_verdict_cards

__all__ = [
    "BENCHMARKS",
    "COST_ITEMS",
    "COST_LABELS",
    "DEFAULT_ROSTER",
    "DEFAULT_SETTINGS",
    "build_team_roster",
    "classify_margin",
    "compute_profitability",
    "direct_cost_share",
    "safe_ratio",
    "summarize_metrics",
    "DEFAULT_INPUT",
    "JOB_PRESETS",
    "JobPreset",
    "apply_preset",
    "default_input",
    "list_presets",
    "BreakdownRow",
    "cost_breakdown",
    "cost_breakdown_frame",
    "REFERENCE_JOBS",
    "ReferenceJob",
    "reference_jobs_frame",
    "reference_tier",
    "MetricCard",
    "benchmark_position",
    "build_verdict_cards",
]
