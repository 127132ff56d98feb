"""
Tests for the form defaults and reset behaviour.
"""
import logging

from estimation.categories import ELECTRICITY
from estimation.estimator import EstimatorInputs, compute
from estimation.factors import DEFAULT_FACTORS
from ui.form import (
    CAR_FUELS,
    DEFAULT_FORM,
    DIET_TYPES,
    ERROR_KEY,
    HEATING_TYPES,
    RESULT_KEY,
    ensure_defaults,
    inputs_from_state,
    reset_form,
    run_calculation,
)


def test_defaults_are_valid_options():
    assert DEFAULT_FORM["car_fuel"] in CAR_FUELS
    assert DEFAULT_FORM["heating_type"] in HEATING_TYPES
    assert DEFAULT_FORM["diet_type"] in DIET_TYPES


def test_default_form_matches_default_inputs():
    state = dict(DEFAULT_FORM)
    assert inputs_from_state(state) == EstimatorInputs()


def test_reset_restores_defaults_and_drops_result(default_result):
    state = {"car_km_week": 999.0, "diet_type": "vegan", RESULT_KEY: default_result}
    reset_form(state)
    assert state == DEFAULT_FORM
    assert RESULT_KEY not in state


def test_ensure_defaults_keeps_user_values():
    state = {"car_km_week": 10.0}
    ensure_defaults(state)
    assert state["car_km_week"] == 10.0
    assert state["diet_type"] == "average"


def test_result_recomputed_from_state():
    state = dict(DEFAULT_FORM, car_km_week="0", flights_short="3")
    result = compute(inputs_from_state(state))
    assert result.breakdown["Car (annual kg CO₂)"] == 0
    assert result.breakdown["Flights (annual kg CO₂)"] == 450


def test_default_form_tracks_input_defaults():
    defaults = EstimatorInputs()
    assert DEFAULT_FORM["food_waste"] == defaults.food_waste_kg_month
    assert "food_waste_kg_month" not in DEFAULT_FORM
    for key in ("car_km_week", "car_fuel", "pt_km_week", "flights_short", "flights_long",
                "elec_kwh_month", "heating_type", "diet_type"):
        assert DEFAULT_FORM[key] == getattr(defaults, key)
    assert list(DEFAULT_FORM) == [
        "car_km_week", "car_fuel", "pt_km_week", "flights_short", "flights_long",
        "elec_kwh_month", "heating_type", "diet_type", "food_waste",
    ]


def test_run_calculation_stores_result():
    state = dict(DEFAULT_FORM, **{ERROR_KEY: "stale"})
    run_calculation(state, DEFAULT_FACTORS)
    assert state[RESULT_KEY].total == 5164.7
    assert ERROR_KEY not in state


def test_run_calculation_uses_given_factors():
    state = dict(DEFAULT_FORM)
    run_calculation(state, DEFAULT_FACTORS.with_overrides(electricity_grid=0.3))
    assert state[RESULT_KEY].breakdown[ELECTRICITY] == 900


def test_run_calculation_logs_failure(caplog, default_result):
    """A broken factor table is reported in the state and logged with its traceback."""
    state = dict(DEFAULT_FORM, **{RESULT_KEY: default_result})
    with caplog.at_level(logging.ERROR, logger="ui.form"):
        run_calculation(state, None)
    assert RESULT_KEY not in state
    assert state[ERROR_KEY]
    records = [r for r in caplog.records if r.name == "ui.form"]
    assert len(records) == 1
    assert records[0].getMessage() == f"Calculation failed: {state[ERROR_KEY]}"
    assert records[0].exc_info is not None
