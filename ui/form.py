from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Dict, MutableMapping

from estimation.estimator import EstimatorInputs, compute
from estimation.factors import EmissionFactors

logger = logging.getLogger(__name__)

CAR_FUELS = ("petrol", "diesel", "ev")
HEATING_TYPES = ("gas", "electric", "heatpump")
DIET_TYPES = ("omnivore", "average", "vegetarian", "vegan")

# Widget keys that differ from the EstimatorInputs field names
FORM_KEYS = {"food_waste_kg_month": "food_waste"}

# Form defaults, keyed by widget key
DEFAULT_FORM: Dict[str, Any] = {
    FORM_KEYS.get(f.name, f.name): f.default for f in fields(EstimatorInputs)
}

RESULT_KEY = "result"
ERROR_KEY = "calc_error"


def reset_form(state: MutableMapping[str, Any]) -> None:
    """Restore the form defaults and drop any previous result."""
    for key, value in DEFAULT_FORM.items():
        state[key] = value
    state.pop(RESULT_KEY, None)


def ensure_defaults(state: MutableMapping[str, Any]) -> None:
    for key, value in DEFAULT_FORM.items():
        if key not in state:
            state[key] = value


def inputs_from_state(state: MutableMapping[str, Any]) -> EstimatorInputs:
    return EstimatorInputs.from_form({key: state.get(key) for key in DEFAULT_FORM})


def run_calculation(state: MutableMapping[str, Any], factors: EmissionFactors) -> None:
    """Compute from the form state and store the result, replacing any previous one."""
    try:
        state[RESULT_KEY] = compute(inputs_from_state(state), factors)
    except Exception as e:
        logger.exception("Calculation failed: %s", e)
        state.pop(RESULT_KEY, None)
        state[ERROR_KEY] = str(e)
    else:
        state.pop(ERROR_KEY, None)
