"""Job templates from past projects and the hard-coded default input."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Dict, List

from models import CalculatorInput, DirectCosts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobPreset:
    """Quote, cost and duration values drawn from a historical job."""

    key: str
    label: str
    revenue: Decimal
    crew: Decimal
    travel: Decimal
    equipment: Decimal
    outsourcing: Decimal
    other: Decimal
    days: Decimal

    def direct_costs(self) -> DirectCosts:
        return DirectCosts(
            crew=self.crew,
            travel=self.travel,
            equipment=self.equipment,
            outsourcing=self.outsourcing,
            other=self.other,
        )


def _preset(key: str, label: str, revenue: int, crew: int, travel: int, equipment: int,
            outsourcing: int, other: int, days: int) -> JobPreset:
    return JobPreset(
        key=key,
        label=label,
        revenue=Decimal(revenue),
        crew=Decimal(crew),
        travel=Decimal(travel),
        equipment=Decimal(equipment),
        outsourcing=Decimal(outsourcing),
        other=Decimal(other),
        days=Decimal(days),
    )


_PRESET_LIST: List[JobPreset] = [
    _preset("blank", "Start Fresh", 0, 0, 0, 0, 0, 0, 3),
    _preset(
        "brand-video-large",
        "Brand Video (Large) - e.g. HGI Kyoto ¥3.4M",
        3400000, 400000, 200000, 100000, 150000, 50000, 8,
    ),
    _preset(
        "brand-video-medium",
        "Brand Video (Medium) - e.g. Hilton MICE ¥2M",
        2000000, 150000, 100000, 50000, 80000, 20000, 5,
    ),
    _preset(
        "event-coverage",
        "Event / Conference - e.g. Fukuoka F&B ¥955K",
        950000, 150000, 100000, 30000, 50000, 20000, 3,
    ),
    _preset(
        "small-video",
        "Small Project - e.g. Seeds ¥825K",
        825000, 60000, 50000, 20000, 20000, 10000, 2,
    ),
    _preset(
        "multi-day-shoot",
        "Multi-Day Shoot - e.g. Alan Watts ¥1.5M",
        1500000, 200000, 150000, 80000, 80000, 40000, 5,
    ),
]

JOB_PRESETS: Dict[str, JobPreset] = {preset.key: preset for preset in _PRESET_LIST}


DEFAULT_INPUT = CalculatorInput(
    quote_amount=Decimal("2000000"),
    direct_costs=DirectCosts(
        crew=Decimal("150000"),
        travel=Decimal("100000"),
        equipment=Decimal("50000"),
        outsourcing=Decimal("80000"),
        other=Decimal("20000"),
    ),
    total_days=Decimal("5"),
    team_days={
        "andrew": Decimal("2"),
        "david": Decimal("3"),
        "robert": Decimal("2"),
        "paulina": Decimal("0"),
        "yuki": Decimal("0"),
    },
    include_overhead=True,
)


def default_input() -> CalculatorInput:
    """Return a fresh copy of the default calculator input."""

    return replace(DEFAULT_INPUT)


def apply_preset(inputs: CalculatorInput, key: str) -> CalculatorInput:
    """Replace quote, costs and days with the preset *key*.

    Team-day allocations and the overhead toggle are left untouched. An
    unknown key returns *inputs* unchanged.
    """

    preset = JOB_PRESETS.get(key)
    if preset is None:
        logger.debug("Ignoring unknown preset key %r", key)
        return inputs
    return replace(
        inputs,
        quote_amount=preset.revenue,
        direct_costs=preset.direct_costs(),
        total_days=preset.days,
    )


def list_presets() -> List[JobPreset]:
    return list(JOB_PRESETS.values())


__all__ = [
    "DEFAULT_INPUT",
    "JOB_PRESETS",
    "JobPreset",
    "apply_preset",
    "default_input",
    "list_presets",
]
