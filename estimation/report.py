from __future__ import annotations

import math
from typing import List

from .estimator import EstimatorResult

REPORT_TITLE = "Eco Calculator — Report"
REPORT_FILENAME = "eco_report.txt"
REPORT_MIME = "text/plain;charset=utf-8"

PLACEHOLDER_TOTAL = "— kg CO₂ / year"
PLACEHOLDER_CONTEXT = "Enter your details and click Calculate."

__all__ = [
    "PLACEHOLDER_CONTEXT",
    "PLACEHOLDER_TOTAL",
    "REPORT_FILENAME",
    "REPORT_MIME",
    "format_kg",
    "format_total",
    "render_report",
    "report_bytes",
]


def format_kg(v: float) -> str:
    """Format a kg figure with thousands separators and at most three decimals.

    >>> format_kg(1350.0), format_kg(1198.1), format_kg(5164.7)
    ('1,350', '1,198.1', '5,164.7')
    """
    if not math.isfinite(v):
        return str(v)
    text = f"{v:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_total(total: float) -> str:
    return f"{format_kg(total)} kg CO₂ / year"


def render_report(result: EstimatorResult) -> str:
    lines: List[str] = [
        REPORT_TITLE,
        "-" * len(REPORT_TITLE),
        f"Estimate: {format_total(result.total)}",
        "",
        "Breakdown:",
    ]
    lines += [f"{label}: {format_kg(value)} kg" for label, value in result.breakdown.items()]
    lines += ["", "Suggestions:"]
    lines += list(result.suggestions)
    return "\n".join(lines)


def report_bytes(result: EstimatorResult) -> bytes:
    return render_report(result).encode("utf-8")
