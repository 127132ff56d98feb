from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

# Emission factors (approximate & indicative).
# Tune with EmissionFactors.with_overrides to match local grid intensity or authoritative sources.
_CAR_KG_PER_KM = {
    "petrol": 0.192,
    "diesel": 0.171,
    "ev": 0.050,  # depends on grid
}
_HEATING_KG_PER_KWH = {
    "gas": 0.2,
    "electric": 0.45,
    "heatpump": 0.07,
}
_DIET_KG_PER_YEAR = {
    "omnivore": 2900,
    "average": 2100,
    "vegetarian": 1500,
    "vegan": 1200,
}

DEFAULT_CAR_FUEL = "petrol"
DEFAULT_HEATING_TYPE = "gas"
DEFAULT_DIET_TYPE = "average"

__all__ = [
    "DEFAULT_CAR_FUEL",
    "DEFAULT_DIET_TYPE",
    "DEFAULT_FACTORS",
    "DEFAULT_HEATING_TYPE",
    "EmissionFactors",
    "factor_for",
]


def _frozen(table: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class EmissionFactors:
    car: Mapping[str, float] = field(default_factory=lambda: _frozen(_CAR_KG_PER_KM))  # kg CO2 per km
    public_transport: float = 0.041  # average bus/train kg CO2 per passenger km
    flight_short: float = 150.0  # kg CO2 per short-haul flight (per trip)
    flight_long: float = 900.0  # kg CO2 per long-haul flight (per trip)
    electricity_grid: float = 0.45  # kg CO2 per kWh (global average)
    heating: Mapping[str, float] = field(default_factory=lambda: _frozen(_HEATING_KG_PER_KWH))  # kg CO2 per kWh-equivalent
    diet: Mapping[str, float] = field(default_factory=lambda: _frozen(_DIET_KG_PER_YEAR))  # kg CO2 per year baseline
    food_waste: float = 0.5  # kg CO2 per kg food wasted

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Mapping):
                for key, v in value.items():
                    _check_factor(f"{f.name}[{key!r}]", v)
                if not isinstance(value, MappingProxyType):
                    object.__setattr__(self, f.name, _frozen(value))
            else:
                _check_factor(f.name, value)

    def with_overrides(self, **changes: Any) -> "EmissionFactors":
        """Return a new factor table with the given factors replaced.

        Mapping factors (car, heating, diet) are merged onto the current table,
        so ``with_overrides(car={"ev": 0.02})`` keeps the petrol and diesel values.
        """
        merged: dict[str, Any] = {}
        for name, value in changes.items():
            current = getattr(self, name, None)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                merged[name] = {**current, **value}
            else:
                merged[name] = value
        return replace(self, **merged)


def _check_factor(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite number >= 0")


def factor_for(table: Mapping[str, float], key: str, default_key: str) -> float:
    """Look up ``key`` in a factor table, falling back to ``default_key`` for unknown keys."""
    if key in table:
        return float(table[key])
    return float(table[default_key])


DEFAULT_FACTORS = EmissionFactors()
