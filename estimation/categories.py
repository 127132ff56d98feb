from __future__ import annotations

# Breakdown labels, in display order.
CAR = "Car (annual kg CO₂)"
PUBLIC_TRANSPORT = "Public Transport (annual kg CO₂)"
FLIGHTS = "Flights (annual kg CO₂)"
ELECTRICITY = "Electricity (annual kg CO₂)"
HEATING = "Heating (annual kg CO₂ est.)"
DIET = "Diet (annual kg CO₂ est.)"
FOOD_WASTE = "Food waste (annual kg CO₂)"

CATEGORIES = (
    CAR,
    PUBLIC_TRANSPORT,
    FLIGHTS,
    ELECTRICITY,
    HEATING,
    DIET,
    FOOD_WASTE,
)
