from __future__ import annotations

from .factors import DEFAULT_FACTORS, DEFAULT_HEATING_TYPE, EmissionFactors, factor_for

MONTHS_PER_YEAR = 12

# Heating has no input of its own: half of the monthly electricity kWh is taken
# as the heating energy equivalent.
HEATING_SHARE_OF_ELECTRICITY = 0.5

__all__ = [
    "HEATING_SHARE_OF_ELECTRICITY",
    "MONTHS_PER_YEAR",
    "electricity_emissions_kg",
    "heating_emissions_kg",
]


def electricity_emissions_kg(
    *,
    kwh_per_month: float,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    return float(kwh_per_month * MONTHS_PER_YEAR * factors.electricity_grid)


def heating_emissions_kg(
    *,
    electricity_kwh_per_month: float,
    heating_type: str,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    """Annual heating emissions, estimated from electricity use.

    Unknown heating types use the gas factor.
    """
    ef = factor_for(factors.heating, heating_type, DEFAULT_HEATING_TYPE)
    return float(electricity_kwh_per_month * HEATING_SHARE_OF_ELECTRICITY * MONTHS_PER_YEAR * ef)
