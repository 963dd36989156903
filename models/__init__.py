"""Typed models shared by the calculator, state and views."""

from .project import (
    COST_BUCKETS,
    DEFAULT_PROJECT_TYPE,
    PROJECT_TYPES,
    CalculatorInput,
    CalculatorOutput,
    CalculatorSettings,
    DirectCosts,
    MarginBenchmarks,
    MarginRating,
    ProjectDetails,
    TeamMember,
    TeamRoster,
    ValidationError,
    coerce_amount,
    coerce_flag,
)

__all__ = [
    "COST_BUCKETS",
    "DEFAULT_PROJECT_TYPE",
    "PROJECT_TYPES",
    "CalculatorInput",
    "CalculatorOutput",
    "CalculatorSettings",
    "DirectCosts",
    "MarginBenchmarks",
    "MarginRating",
    "ProjectDetails",
    "TeamMember",
    "TeamRoster",
    "ValidationError",
    "coerce_amount",
    "coerce_flag",
]
