"""
Tests for the plain-text report export.
"""
import pytest

from estimation.report import (
    REPORT_FILENAME,
    format_kg,
    format_total,
    render_report,
    report_bytes,
)

EXPECTED_DEFAULT_REPORT = """Eco Calculator — Report
-----------------------
Estimate: 5,164.7 kg CO₂ / year

Breakdown:
Car (annual kg CO₂): 1,198.1 kg
Public Transport (annual kg CO₂): 42.6 kg
Flights (annual kg CO₂): 150 kg
Electricity (annual kg CO₂): 1,350 kg
Heating (annual kg CO₂ est.): 300 kg
Diet (annual kg CO₂ est.): 2,100 kg
Food waste (annual kg CO₂): 24 kg

Suggestions:
Consider carpooling, switching to public transport, or switching to an EV.
Lower electricity use and consider switching to a renewable tariff or rooftop solar.
Try reducing red meat and replacing with plant-based proteins a few times a week."""


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0"),
        (-0.0, "0"),
        (24.0, "24"),
        (42.6, "42.6"),
        (1350.0, "1,350"),
        (1198.1, "1,198.1"),
        (1234567.8, "1,234,567.8"),
        (-99.8, "-99.8"),
    ],
)
def test_format_kg(value, expected):
    assert format_kg(value) == expected


def test_format_total():
    assert format_total(5164.7) == "5,164.7 kg CO₂ / year"


def test_render_default_report(default_result):
    assert render_report(default_result) == EXPECTED_DEFAULT_REPORT


def test_report_bytes_are_utf8(default_result):
    data = report_bytes(default_result)
    assert data.decode("utf-8") == EXPECTED_DEFAULT_REPORT
    assert REPORT_FILENAME == "eco_report.txt"


def test_report_lists_every_suggestion():
    from estimation.estimator import EstimatorInputs, compute

    result = compute(EstimatorInputs(flights_long=1, food_waste_kg_month=10))
    lines = render_report(result).splitlines()
    suggestions = lines[lines.index("Suggestions:") + 1:]
    assert suggestions == list(result.suggestions)
    assert len(suggestions) == 5
