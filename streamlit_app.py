from __future__ import annotations

import json
import logging

import streamlit as st

from estimation.estimator import EstimatorResult
from estimation.factors import DEFAULT_FACTORS
from estimation.report import (
    PLACEHOLDER_CONTEXT,
    PLACEHOLDER_TOTAL,
    REPORT_FILENAME,
    REPORT_MIME,
    format_kg,
    format_total,
    report_bytes,
)
from ui.chart import breakdown_figure
from ui.form import (
    CAR_FUELS,
    DIET_TYPES,
    ERROR_KEY,
    HEATING_TYPES,
    RESULT_KEY,
    ensure_defaults,
    reset_form,
    run_calculation,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

st.set_page_config(page_title="Eco Calculator", layout="wide")
st.title("Eco Calculator")

st.caption(
    "Estimate your annual carbon footprint from travel, home energy and diet. "
    "Emission factors are approximate and indicative; tune the grid intensity under Emission factors."
)

ensure_defaults(st.session_state)

# --------- Sidebar inputs ---------
with st.sidebar:
    st.header("Travel")
    st.number_input("Car distance per week (km)", min_value=0.0, step=10.0, key="car_km_week")
    st.selectbox("Car fuel", CAR_FUELS, key="car_fuel")
    st.number_input("Public transport per week (km)", min_value=0.0, step=5.0, key="pt_km_week")
    st.number_input("Short-haul flights per year", min_value=0, step=1, key="flights_short")
    st.number_input("Long-haul flights per year", min_value=0, step=1, key="flights_long")

    st.divider()
    st.header("Home")
    st.number_input(
        "Electricity use per month (kWh)",
        min_value=0.0,
        step=10.0,
        key="elec_kwh_month",
        help="Also used as the heating energy proxy (half of it is counted as heating).",
    )
    st.selectbox("Heating type", HEATING_TYPES, key="heating_type")

    st.divider()
    st.header("Diet")
    st.selectbox("Diet type", DIET_TYPES, key="diet_type")
    st.number_input("Food waste per month (kg)", min_value=0.0, step=0.5, key="food_waste")

    st.divider()
    st.header("Emission factors")
    grid_ef_override = st.number_input(
        "Optional: override grid EF (kgCO2/kWh)",
        min_value=0.0,
        value=0.0,
        key="grid_ef_override",
        help=f"Default {DEFAULT_FACTORS.electricity_grid} kgCO2/kWh (global average). Leave 0 to keep it.",
    )

factors = DEFAULT_FACTORS
if float(grid_ef_override) > 0:
    factors = factors.with_overrides(electricity_grid=float(grid_ef_override))

st.divider()
c1, c2 = st.columns([1, 1])
with c1:
    st.button(
        "Calculate footprint",
        type="primary",
        on_click=run_calculation,
        args=(st.session_state, factors),
    )
with c2:
    st.button("Reset", on_click=reset_form, args=(st.session_state,))

# --------- Results ---------
if ERROR_KEY in st.session_state:
    st.error(f"Calculation error: {st.session_state[ERROR_KEY]}")

result: EstimatorResult | None = st.session_state.get(RESULT_KEY)

if result is None:
    st.metric("Estimate", PLACEHOLDER_TOTAL)
    st.write(PLACEHOLDER_CONTEXT)
else:
    st.metric("Estimate", format_total(result.total))
    st.write(result.context)

    left, right = st.columns([1, 1])
    with left:
        st.subheader("Breakdown")
        rows = [{"category": k, "kgCO2": f"{format_kg(v)} kg"} for k, v in result.breakdown.items()]
        st.table(rows)

        st.subheader("Suggestions")
        st.markdown("\n".join(f"- {s}" for s in result.suggestions))

    with right:
        st.subheader("Chart")
        with breakdown_figure(result.breakdown) as fig:
            st.pyplot(fig)

    d1, d2 = st.columns([1, 1])
    with d1:
        st.download_button(
            "Download report",
            data=report_bytes(result),
            file_name=REPORT_FILENAME,
            mime=REPORT_MIME,
        )
    with d2:
        st.download_button(
            "Download result JSON",
            data=json.dumps(result.as_dict(), indent=2, ensure_ascii=False),
            file_name="eco_result.json",
            mime="application/json",
        )
