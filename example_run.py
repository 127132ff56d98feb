import logging

from estimation.estimator import EstimatorInputs, compute
from estimation.report import render_report

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

inputs = EstimatorInputs(
    car_km_week=120,
    car_fuel="petrol",
    pt_km_week=20,
    flights_short=1,
    flights_long=0,
    elec_kwh_month=250,
    heating_type="gas",
    diet_type="average",
    food_waste_kg_month=4,
)

print(render_report(compute(inputs)))
