from __future__ import annotations

from decimal import Decimal

import pytest

from calc import DEFAULT_INPUT, JOB_PRESETS, apply_preset, default_input, list_presets


def test_small_video_preset_replaces_quote_costs_and_days(scenario_one):
    loaded = apply_preset(scenario_one, "small-video")

    assert loaded.quote_amount == Decimal("825000")
    assert loaded.direct_costs.crew == Decimal("60000")
    assert loaded.direct_costs.travel == Decimal("50000")
    assert loaded.direct_costs.equipment == Decimal("20000")
    assert loaded.direct_costs.outsourcing == Decimal("20000")
    assert loaded.direct_costs.other == Decimal("10000")
    assert loaded.total_days == Decimal("2")


def test_preset_leaves_team_days_and_overhead_untouched(scenario_one):
    edited = scenario_one.with_team_days("yuki", 4).with_field("include_overhead", False)
    loaded = apply_preset(edited, "brand-video-large")

    assert loaded.team_days == edited.team_days
    assert loaded.include_overhead is False
    assert loaded.quote_amount == Decimal("3400000")


def test_preset_returns_new_value(scenario_one):
    loaded = apply_preset(scenario_one, "event-coverage")
    assert loaded is not scenario_one
    assert scenario_one.quote_amount == Decimal("2000000")


def test_unknown_preset_is_noop(scenario_one):
    assert apply_preset(scenario_one, "does-not-exist") is scenario_one


def test_blank_preset_zeroes_money_but_keeps_three_days(scenario_one):
    loaded = apply_preset(scenario_one, "blank")
    assert loaded.quote_amount == 0
    assert loaded.direct_costs.total() == 0
    assert loaded.total_days == Decimal("3")


def test_catalogue_keys():
    assert list(JOB_PRESETS) == [
        "blank",
        "brand-video-large",
        "brand-video-medium",
        "event-coverage",
        "small-video",
        "multi-day-shoot",
    ]
    assert [preset.key for preset in list_presets()] == list(JOB_PRESETS)


def test_reset_restores_defaults_after_edits():
    edited = (
        default_input()
        .with_field("quote_amount", 999)
        .with_field("crew", 1)
        .with_field("total_days", 40)
        .with_field("include_overhead", False)
        .with_team_days("paulina", 6)
        .with_team_days("yuki", 3)
    )
    edited = apply_preset(edited, "multi-day-shoot")

    restored = default_input()
    assert restored == DEFAULT_INPUT
    assert restored != edited
    assert restored.quote_amount == Decimal("2000000")
    assert restored.direct_costs.items() == [
        ("crew", Decimal("150000")),
        ("travel", Decimal("100000")),
        ("equipment", Decimal("50000")),
        ("outsourcing", Decimal("80000")),
        ("other", Decimal("20000")),
    ]
    assert restored.total_days == Decimal("5")
    assert restored.team_days == {
        "andrew": Decimal("2"),
        "david": Decimal("3"),
        "robert": Decimal("2"),
        "paulina": Decimal("0"),
        "yuki": Decimal("0"),
    }
    assert restored.include_overhead is True


def test_default_input_is_a_fresh_copy():
    first = default_input()
    assert first.team_days is not DEFAULT_INPUT.team_days


def test_default_input_team_days_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_INPUT.team_days["andrew"] = Decimal("99")  # type: ignore[index]
    assert default_input().days_for("andrew") == Decimal("2")
    assert hash(default_input()) == hash(DEFAULT_INPUT)
