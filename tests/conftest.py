from __future__ import annotations

from decimal import Decimal

import pytest

from calc import DEFAULT_SETTINGS, default_input
from models import CalculatorInput, DirectCosts


@pytest.fixture
def settings():
    return DEFAULT_SETTINGS


@pytest.fixture
def scenario_one() -> CalculatorInput:
    return CalculatorInput(
        quote_amount=Decimal("2000000"),
        direct_costs=DirectCosts(
            crew=Decimal("150000"),
            travel=Decimal("100000"),
            equipment=Decimal("50000"),
            outsourcing=Decimal("80000"),
            other=Decimal("20000"),
        ),
        total_days=Decimal("5"),
        team_days={"andrew": 2, "david": 3, "robert": 2, "paulina": 0, "yuki": 0},
        include_overhead=True,
    )


@pytest.fixture
def defaults() -> CalculatorInput:
    return default_input()


@pytest.fixture
def session() -> dict:
    return {}
