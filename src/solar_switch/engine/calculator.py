"""Cost-model entry point — snapshot in, three scenarios + summary out.

Pipeline:
  1. Grid cost from the tier table
  2. Generator cost from the weekly hour profile and fuel table
  3. Solar package + payback against the generator bill
  4. Power distribution and savings summary

Pure and cache-free: calling it twice with the same snapshot gives equal
results, and every call recomputes from scratch.
"""

from __future__ import annotations

import math

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import HOURS_PER_DAY, SOLAR_LIFESPAN_YEARS
from solar_switch.engine.generator import average_hours, compute_generator_cost
from solar_switch.engine.grid import compute_grid_cost
from solar_switch.engine.solar import compute_solar_cost
from solar_switch.models.results import (
    CostComparison,
    GeneratorScenario,
    GridScenario,
    PowerDistribution,
    SavingsSummary,
    SolarScenario,
)


def compute_power_distribution(snapshot: InputSnapshot) -> PowerDistribution:
    """Average daily hours covered by the grid, the generator, and neither."""
    grid_hours = average_hours([snapshot.grid_hours_min, snapshot.grid_hours_max])
    generator_hours = average_hours(snapshot.daily_generator_hours)
    return PowerDistribution(
        grid_hours=grid_hours,
        generator_hours=generator_hours,
        uncovered_hours=max(HOURS_PER_DAY - grid_hours - generator_hours, 0.0),
    )


def compute_savings_summary(
    grid: GridScenario,
    generator: GeneratorScenario,
    solar: SolarScenario,
) -> SavingsSummary:
    """Roll the three scenarios into the recommendation figures."""
    lifetime_savings = solar.yearly_savings * SOLAR_LIFESPAN_YEARS - solar.system_cost

    # Switch only when the system pays for itself within its service life
    pays_back = (
        math.isfinite(solar.payback_years)
        and 0 < solar.payback_years <= SOLAR_LIFESPAN_YEARS
    )

    return SavingsSummary(
        current_yearly_cost=grid.yearly_cost + generator.yearly_cost,
        with_solar_yearly_cost=grid.yearly_cost + solar.yearly_cost,
        yearly_savings=solar.yearly_savings,
        payback_years=solar.payback_years,
        system_lifespan_years=SOLAR_LIFESPAN_YEARS,
        lifetime_savings=lifetime_savings,
        recommendation="switch" if pays_back else "keep_generator",
    )


def compute_results(snapshot: InputSnapshot) -> CostComparison:
    """Run the full cost comparison for one snapshot."""
    grid = compute_grid_cost(snapshot)
    generator = compute_generator_cost(snapshot)
    solar = compute_solar_cost(snapshot, generator)

    return CostComparison(
        grid=grid,
        generator=generator,
        solar=solar,
        distribution=compute_power_distribution(snapshot),
        summary=compute_savings_summary(grid, generator, solar),
    )
