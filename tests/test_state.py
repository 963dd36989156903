from __future__ import annotations

from decimal import Decimal

import pytest

from calc import DEFAULT_INPUT
from models import CalculatorInput, ProjectDetails
from state import (
    STATE_SPECS,
    apply_preset_to_session,
    ensure_session_defaults,
    load_calculator_input,
    load_project_details,
    reset_calculator,
    reset_session_keys,
    store_calculator_input,
    store_project_details,
    update_calculator_input,
)


def test_defaults_are_seeded(session):
    ensure_session_defaults(session=session)

    assert set(STATE_SPECS).issubset(session)
    assert session["calculator_input"] == DEFAULT_INPUT
    assert session["show_usd"] is False
    assert session["project_details"] == ProjectDetails()


def test_invalid_entries_are_replaced(session):
    session["calculator_input"] = {"quote_amount": 5}
    session["show_usd"] = "yes"
    ensure_session_defaults(session=session)

    assert isinstance(session["calculator_input"], CalculatorInput)
    assert session["show_usd"] is False


def test_overrides_win(session):
    ensure_session_defaults({"show_usd": True}, session=session)
    assert session["show_usd"] is True


def test_update_stores_new_value(session):
    before = load_calculator_input(session=session)
    after = update_calculator_input(lambda current: current.with_field("quote_amount", 1), session=session)

    assert after.quote_amount == Decimal("1")
    assert session["calculator_input"] is after
    assert before.quote_amount == Decimal("2000000")


def test_store_rejects_other_types(session):
    with pytest.raises(TypeError):
        store_calculator_input({"quote_amount": 1}, session=session)  # type: ignore[arg-type]


def test_preset_scenario_keeps_team_days(session, scenario_one):
    store_calculator_input(scenario_one.with_team_days("yuki", 2), session=session)
    loaded = apply_preset_to_session("small-video", session=session)

    assert loaded.quote_amount == Decimal("825000")
    assert loaded.total_days == Decimal("2")
    assert loaded.days_for("yuki") == Decimal("2")
    assert loaded.days_for("david") == Decimal("3")
    assert session["calculator_input"] == loaded


def test_unknown_preset_leaves_session_alone(session, scenario_one):
    store_calculator_input(scenario_one, session=session)
    assert apply_preset_to_session("nope", session=session) == scenario_one


def test_reset_restores_defaults_and_keeps_display_toggle(session):
    ensure_session_defaults({"show_usd": True}, session=session)
    update_calculator_input(lambda current: current.with_team_days("paulina", 9), session=session)
    store_project_details(ProjectDetails(client_name="Hilton Tokyo"), session=session)

    reset_calculator(session=session)

    assert load_calculator_input(session=session) == DEFAULT_INPUT
    assert load_project_details(session=session) == ProjectDetails()
    assert session["show_usd"] is True


def test_reset_session_keys_drops_unknown_keys(session):
    session["scratch"] = 1
    reset_session_keys(["scratch", "show_usd"], session=session)
    assert "scratch" not in session
    assert session["show_usd"] is False
