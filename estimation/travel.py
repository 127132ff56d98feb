from __future__ import annotations

from .factors import DEFAULT_CAR_FUEL, DEFAULT_FACTORS, EmissionFactors, factor_for

WEEKS_PER_YEAR = 52

__all__ = [
    "WEEKS_PER_YEAR",
    "car_emissions_kg",
    "flight_emissions_kg",
    "public_transport_emissions_kg",
]


def car_emissions_kg(
    *,
    km_per_week: float,
    fuel: str,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    """Annual car emissions. Unknown fuel types use the petrol factor."""
    ef = factor_for(factors.car, fuel, DEFAULT_CAR_FUEL)
    return float(km_per_week * WEEKS_PER_YEAR * ef)


def public_transport_emissions_kg(
    *,
    km_per_week: float,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    return float(km_per_week * WEEKS_PER_YEAR * factors.public_transport)


def flight_emissions_kg(
    *,
    short_haul: float,
    long_haul: float,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    """Annual flight emissions from trip counts (per-trip averages, no distance)."""
    return float(short_haul * factors.flight_short + long_haul * factors.flight_long)
