from __future__ import annotations

from typing import List, Mapping, Tuple

from .categories import CAR, DIET, ELECTRICITY, FLIGHTS, FOOD_WASTE

# Context bands (kg CO2 / year); values are indicative only
GOOD_BELOW_KG = 2000
AVERAGE_BELOW_KG = 5000

CONTEXT_GOOD = "Good — your footprint is relatively low vs global averages."
CONTEXT_AVERAGE = "Average — there are several easy wins to reduce it."
CONTEXT_HIGH = "High — consider changes in travel, electricity source, and diet to reduce emissions."

SUGGEST_CAR_HIGH = "Consider carpooling, switching to public transport, or switching to an EV."
SUGGEST_CAR_LOW = "Your car emissions are relatively low — maintain efficient driving habits."
SUGGEST_FLIGHTS_HIGH = "Reduce flights where possible or choose fewer long-haul trips; compensate emissions if needed."
SUGGEST_ELECTRICITY_HIGH = "Lower electricity use and consider switching to a renewable tariff or rooftop solar."
SUGGEST_ELECTRICITY_LOW = "Keep optimizing appliance efficiency (LEDs, smart thermostats)."
SUGGEST_DIET_HIGH = "Try reducing red meat and replacing with plant-based proteins a few times a week."
SUGGEST_DIET_LOW = "Maintain your sustainable diet habits and reduce food waste."
SUGGEST_FOOD_WASTE_HIGH = "Reduce food waste: plan meals, freeze leftovers, and compost when possible."

CAR_THRESHOLD_KG = 1000
FLIGHTS_THRESHOLD_KG = 300
ELECTRICITY_THRESHOLD_KG = 1200
DIET_THRESHOLD_KG = 2000
FOOD_WASTE_THRESHOLD_KG = 50

__all__ = ["classify", "suggest"]


def classify(total: float) -> str:
    if total < GOOD_BELOW_KG:
        return CONTEXT_GOOD
    if total < AVERAGE_BELOW_KG:
        return CONTEXT_AVERAGE
    return CONTEXT_HIGH


def suggest(breakdown: Mapping[str, float]) -> Tuple[str, ...]:
    """Rule-based suggestions from a breakdown, in fixed order (3 to 5 entries).

    Car, electricity and diet always contribute one message each; flights and
    food waste only when above their thresholds.
    """
    suggestions: List[str] = []
    if breakdown.get(CAR, 0) > CAR_THRESHOLD_KG:
        suggestions.append(SUGGEST_CAR_HIGH)
    else:
        suggestions.append(SUGGEST_CAR_LOW)
    if breakdown.get(FLIGHTS, 0) > FLIGHTS_THRESHOLD_KG:
        suggestions.append(SUGGEST_FLIGHTS_HIGH)
    if breakdown.get(ELECTRICITY, 0) > ELECTRICITY_THRESHOLD_KG:
        suggestions.append(SUGGEST_ELECTRICITY_HIGH)
    else:
        suggestions.append(SUGGEST_ELECTRICITY_LOW)
    if breakdown.get(DIET, 0) > DIET_THRESHOLD_KG:
        suggestions.append(SUGGEST_DIET_HIGH)
    else:
        suggestions.append(SUGGEST_DIET_LOW)
    if breakdown.get(FOOD_WASTE, 0) > FOOD_WASTE_THRESHOLD_KG:
        suggestions.append(SUGGEST_FOOD_WASTE_HIGH)
    return tuple(suggestions)
