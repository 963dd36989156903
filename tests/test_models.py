from __future__ import annotations

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from models import (
    CalculatorInput,
    DirectCosts,
    MarginBenchmarks,
    ProjectDetails,
    TeamMember,
    TeamRoster,
    ValidationError,
    coerce_amount,
    coerce_flag,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1500", Decimal("1500")),
        ("1,500", Decimal("1500")),
        (" 2.5 ", Decimal("2.5")),
        (2.5, Decimal("2.5")),
        (3, Decimal("3")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        ("abc", Decimal("0")),
        ("NaN", Decimal("0")),
        ("inf", Decimal("0")),
        (float("inf"), Decimal("0")),
        (Decimal("7"), Decimal("7")),
    ],
)
def test_coerce_amount(raw, expected):
    assert coerce_amount(raw) == expected


def test_coerce_amount_keeps_negative_values():
    assert coerce_amount("-10") == Decimal("-10")


@pytest.mark.parametrize("raw", ["1e999999", "-1e999999", "1e-999990", Decimal("1e999990")])
def test_coerce_amount_zeroes_magnitudes_outside_float_range(raw):
    assert coerce_amount(raw) == 0


@pytest.mark.parametrize(
    "raw, expected",
    [
        (True, True),
        (False, False),
        ("false", False),
        ("False", False),
        ("0", False),
        ("off", False),
        ("yes", True),
        (" TRUE ", True),
        (1, True),
        (0, False),
    ],
)
def test_coerce_flag(raw, expected):
    assert coerce_flag(raw) is expected


def test_coerce_flag_rejects_unreadable_text():
    with pytest.raises(ValueError):
        coerce_flag("maybe")


def test_with_field_returns_new_value(scenario_one):
    updated = scenario_one.with_field("quote_amount", "3000000")

    assert updated.quote_amount == Decimal("3000000")
    assert scenario_one.quote_amount == Decimal("2000000")


def test_with_field_updates_cost_bucket(scenario_one):
    updated = scenario_one.with_field("travel", "oops")
    assert updated.direct_costs.travel == 0
    assert updated.direct_costs.crew == Decimal("150000")


def test_with_field_rejects_unknown_name(scenario_one):
    with pytest.raises(KeyError):
        scenario_one.with_field("discount", 5)


def test_with_direct_cost_rejects_unknown_bucket(scenario_one):
    with pytest.raises(KeyError):
        scenario_one.with_direct_cost("catering", 5)


def test_with_team_days_copies_mapping(scenario_one):
    updated = scenario_one.with_team_days("paulina", "1.5")

    assert updated.days_for("paulina") == Decimal("1.5")
    assert scenario_one.days_for("paulina") == 0
    assert updated.days_for("nobody") == 0


def test_input_is_immutable(scenario_one):
    with pytest.raises(FrozenInstanceError):
        scenario_one.quote_amount = Decimal("1")  # type: ignore[misc]


def test_from_dict_round_trip(scenario_one):
    dumped = scenario_one.model_dump(mode="json")
    assert dumped["quote_amount"] == 2000000.0
    assert dumped["direct_costs"]["crew"] == 150000.0

    restored = CalculatorInput.from_dict(scenario_one.model_dump())
    assert restored == scenario_one


def test_from_dict_collects_errors():
    with pytest.raises(ValidationError) as excinfo:
        CalculatorInput.from_dict(
            {
                "quote_amount": "lots",
                "direct_costs": {"crew": "x"},
                "team_days": {"andrew": "two"},
            }
        )
    locs = [error["loc"] for error in excinfo.value.errors()]
    assert ("quote_amount",) in locs
    assert ("direct_costs", "crew") in locs
    assert ("team_days", "andrew") in locs


def test_from_dict_requires_mapping():
    with pytest.raises(ValidationError):
        CalculatorInput.from_dict(["not", "a", "mapping"])
    with pytest.raises(ValidationError):
        DirectCosts.from_dict("crew=1")


def test_team_member_daily_rate_derives_from_salary():
    member = TeamMember.from_monthly_salary("robert", "Robert", 340000, 20)
    assert member.daily_rate == Decimal("17000")

    with pytest.raises(ValueError):
        TeamMember.from_monthly_salary("robert", "Robert", 340000, 0)


def test_roster_rejects_duplicates_and_unknown_ids():
    member = TeamMember.from_monthly_salary("a", "A", 100, 10)
    with pytest.raises(ValueError):
        TeamRoster([member, member])

    roster = TeamRoster([member])
    assert "a" in roster
    assert roster.daily_rate("a") == Decimal("10")
    with pytest.raises(KeyError):
        roster.daily_rate("b")


def test_benchmarks_must_be_ordered():
    with pytest.raises(ValueError):
        MarginBenchmarks(great=50, good=73, low=53, average=70)


def test_project_details_falls_back_to_default_type():
    details = ProjectDetails(client_name="Hilton Tokyo", project_type="unknown")
    assert details.project_type == "brand-video"
    assert details.project_type_label == "Brand Video"


def test_team_days_cannot_be_mutated_in_place(scenario_one):
    with pytest.raises(TypeError):
        scenario_one.team_days["andrew"] = Decimal("99")  # type: ignore[index]
    assert scenario_one.days_for("andrew") == Decimal("2")


def test_input_is_hashable(scenario_one):
    twin = CalculatorInput.from_dict(scenario_one.model_dump())
    assert hash(twin) == hash(scenario_one)
    assert len({scenario_one, twin}) == 1


def test_model_dump_returns_plain_team_days(scenario_one):
    dumped = scenario_one.model_dump(mode="json")
    assert type(dumped["team_days"]) is dict
    assert dumped["team_days"]["david"] == 3.0


def test_include_overhead_text_is_parsed(scenario_one):
    assert CalculatorInput(include_overhead="false").include_overhead is False
    assert scenario_one.with_field("include_overhead", "off").include_overhead is False

    restored = CalculatorInput.from_dict({"quote_amount": 1, "include_overhead": "false"})
    assert restored.include_overhead is False


def test_from_dict_reports_unreadable_include_overhead():
    with pytest.raises(ValidationError) as excinfo:
        CalculatorInput.from_dict({"quote_amount": 1, "include_overhead": "maybe"})
    assert [error["loc"] for error in excinfo.value.errors()] == [("include_overhead",)]
