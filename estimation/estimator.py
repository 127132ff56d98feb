"""Personal carbon footprint estimator (travel, home energy, diet).

Annualizes a handful of lifestyle inputs with fixed emission factors:
- Car, public transport and flights (travel)
- Electricity and heating (home)
- Diet baseline and food waste (diet)

Each category is rounded to one decimal place, and the total is the rounded
sum of those already-rounded figures. The estimate is pure: the same inputs
and factor table always give an identical result.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .assessment import classify, suggest
from .categories import CATEGORIES, CAR, DIET, ELECTRICITY, FLIGHTS, FOOD_WASTE, HEATING, PUBLIC_TRANSPORT
from .diet import diet_emissions_kg, food_waste_emissions_kg
from .factors import (
    DEFAULT_CAR_FUEL,
    DEFAULT_DIET_TYPE,
    DEFAULT_FACTORS,
    DEFAULT_HEATING_TYPE,
    EmissionFactors,
)
from .home import electricity_emissions_kg, heating_emissions_kg
from .travel import car_emissions_kg, flight_emissions_kg, public_transport_emissions_kg

logger = logging.getLogger(__name__)

# Leading decimal literal, the part of a string that parseFloat-style parsing reads.
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_ENUM_FIELDS = ("car_fuel", "heating_type", "diet_type")


def to_number(value: Any) -> float:
    """Coerce a form value to a finite float; anything unparseable or non-finite is 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, numbers.Real):
            n = float(value)
        else:
            # Decimal and other number-likes are read from their text, like strings
            m = _LEADING_NUMBER.match(str(value).lstrip())
            if m is None:
                return 0.0
            n = float(m.group(0))
    except OverflowError:
        return 0.0
    return n if math.isfinite(n) else 0.0


def round_1dp(v: float) -> float:
    """Round to one decimal place, halves away from zero.

    Values too large to scale (and inf or nan) are returned unchanged.
    """
    if not math.isfinite(v * 10):
        return v
    return math.copysign(math.floor(abs(v) * 10 + 0.5), v) / 10


@dataclass(frozen=True)
class EstimatorInputs:
    # Travel
    car_km_week: float = 120.0
    car_fuel: str = DEFAULT_CAR_FUEL
    pt_km_week: float = 20.0
    flights_short: float = 1  # per year
    flights_long: float = 0  # per year

    # Home
    elec_kwh_month: float = 250.0
    heating_type: str = DEFAULT_HEATING_TYPE

    # Diet
    diet_type: str = DEFAULT_DIET_TYPE
    food_waste_kg_month: float = 4.0

    @classmethod
    def from_form(cls, values: Mapping[str, Any]) -> "EstimatorInputs":
        """Build inputs from raw form values.

        Numbers are coerced with :func:`to_number`; the form key ``food_waste`` is
        accepted for ``food_waste_kg_month``. Missing keys keep their defaults.
        """
        values = dict(values)
        if "food_waste" in values and "food_waste_kg_month" not in values:
            values["food_waste_kg_month"] = values.pop("food_waste")

        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in values:
                continue
            raw = values[f.name]
            if f.name in _ENUM_FIELDS:
                kwargs[f.name] = "" if raw is None else str(raw)
            else:
                kwargs[f.name] = to_number(raw)
        return cls(**kwargs)


@dataclass(frozen=True)
class EstimatorResult:
    total: float
    breakdown: Mapping[str, float]
    context: str
    suggestions: Tuple[str, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_kgco2": self.total,
            "breakdown_kgco2": dict(self.breakdown),
            "context": self.context,
            "suggestions": list(self.suggestions),
        }


def _log_fallback(name: str, value: str, table: Mapping[str, float], default: str) -> None:
    if value not in table:
        logger.debug("Unknown %s %r, using the %r factor", name, value, default)


def compute(inputs: EstimatorInputs, factors: EmissionFactors = DEFAULT_FACTORS) -> EstimatorResult:
    """Return the annual footprint, its breakdown, context text and suggestions."""
    car_km_week = to_number(inputs.car_km_week)
    pt_km_week = to_number(inputs.pt_km_week)
    flights_short = to_number(inputs.flights_short)
    flights_long = to_number(inputs.flights_long)
    elec_kwh_month = to_number(inputs.elec_kwh_month)
    food_waste_kg_month = to_number(inputs.food_waste_kg_month)

    _log_fallback("car fuel", inputs.car_fuel, factors.car, DEFAULT_CAR_FUEL)
    _log_fallback("heating type", inputs.heating_type, factors.heating, DEFAULT_HEATING_TYPE)
    _log_fallback("diet type", inputs.diet_type, factors.diet, DEFAULT_DIET_TYPE)

    annual = {
        CAR: car_emissions_kg(km_per_week=car_km_week, fuel=inputs.car_fuel, factors=factors),
        PUBLIC_TRANSPORT: public_transport_emissions_kg(km_per_week=pt_km_week, factors=factors),
        FLIGHTS: flight_emissions_kg(short_haul=flights_short, long_haul=flights_long, factors=factors),
        ELECTRICITY: electricity_emissions_kg(kwh_per_month=elec_kwh_month, factors=factors),
        HEATING: heating_emissions_kg(
            electricity_kwh_per_month=elec_kwh_month,
            heating_type=inputs.heating_type,
            factors=factors,
        ),
        DIET: diet_emissions_kg(diet_type=inputs.diet_type, factors=factors),
        FOOD_WASTE: food_waste_emissions_kg(kg_per_month=food_waste_kg_month, factors=factors),
    }

    breakdown = {label: round_1dp(annual[label]) for label in CATEGORIES}
    # Sum of the rounded figures, not of the raw ones.
    total = round_1dp(sum(breakdown.values()))

    logger.debug("Estimated %s kg CO2 / year", total)

    return EstimatorResult(
        total=total,
        breakdown=MappingProxyType(breakdown),
        context=classify(total),
        suggestions=suggest(breakdown),
    )
