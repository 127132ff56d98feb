"""
Pytest configuration and shared fixtures.
"""
import logging

import pytest

from estimation.estimator import EstimatorInputs, compute

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture
def default_inputs():
    """Form defaults: 120 km/week petrol car, 250 kWh/month, gas heating, average diet."""
    return EstimatorInputs()


@pytest.fixture
def default_result(default_inputs):
    return compute(default_inputs)


@pytest.fixture
def zero_inputs():
    """Inputs with every numeric field at 0, so only the diet baseline remains."""
    return EstimatorInputs(
        car_km_week=0,
        pt_km_week=0,
        flights_short=0,
        flights_long=0,
        elec_kwh_month=0,
        food_waste_kg_month=0,
    )
