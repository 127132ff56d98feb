from __future__ import annotations

from .factors import DEFAULT_DIET_TYPE, DEFAULT_FACTORS, EmissionFactors, factor_for
from .home import MONTHS_PER_YEAR

__all__ = [
    "diet_emissions_kg",
    "food_waste_emissions_kg",
]


def diet_emissions_kg(
    *,
    diet_type: str,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    """Annual diet baseline for one person. Unknown diet types use the average diet."""
    return factor_for(factors.diet, diet_type, DEFAULT_DIET_TYPE)


def food_waste_emissions_kg(
    *,
    kg_per_month: float,
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> float:
    return float(kg_per_month * MONTHS_PER_YEAR * factors.food_waste)
