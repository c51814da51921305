"""Engine — pure cost-model functions."""

from solar_switch.engine.grid import compute_grid_cost
from solar_switch.engine.generator import (
    average_hours,
    compute_generator_cost,
    lookup_fuel_burn_rate,
)
from solar_switch.engine.solar import compute_solar_cost, payback_years, select_solar_package
from solar_switch.engine.calculator import compute_results

__all__ = [
    "compute_grid_cost",
    "average_hours",
    "compute_generator_cost",
    "lookup_fuel_burn_rate",
    "compute_solar_cost",
    "payback_years",
    "select_solar_package",
    "compute_results",
]
