"""Result types — the contract between engine, flow, API, and dashboard.

Everything here is derived from an ``InputSnapshot`` on demand and never
stored beyond the session that asked for it.  Figures are left unrounded;
rounding is a presentation concern.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from solar_switch.config.tables import PackageName


# ═══════════════════════════════════════════════════════════════════════════
# Per-scenario results
# ═══════════════════════════════════════════════════════════════════════════

class ScenarioResult(BaseModel):
    """Fields every scenario reports."""

    daily_cost: float
    """Cost per day (₦)."""
    monthly_cost: float
    """daily_cost × 30."""
    yearly_cost: float
    """daily_cost × 365."""
    daily_energy_kwh: float
    """Energy attributed to this source per day (kWh)."""


class GridScenario(ScenarioResult):
    """Grid-only supply, billed on the tier's nominal consumption."""

    tier: str | None = None
    tariff: float = 0.0
    """₦/kWh for the selected tier, 0 when no tier is set."""


class GeneratorScenario(ScenarioResult):
    """Backup generator running the weekly hour profile."""

    avg_hours_per_day: float
    fuel_burn_rate_lph: float
    """Full-load burn rate from the fuel table; 0 when the rating has no entry."""
    daily_fuel_liters: float
    daily_fuel_cost: float
    daily_maintenance_cost: float


class SolarScenario(ScenarioResult):
    """Solar package replacing the generator outright."""

    package: PackageName
    capacity_kw: float
    system_cost: float
    yearly_savings: float
    """Equal to the generator scenario's yearly cost."""
    payback_years: float
    """system_cost / yearly_savings; ``inf`` when there is nothing to save."""


# ═══════════════════════════════════════════════════════════════════════════
# Comparison bundle
# ═══════════════════════════════════════════════════════════════════════════

class PowerDistribution(BaseModel):
    """Average hours per day covered by each source."""

    grid_hours: float
    generator_hours: float
    uncovered_hours: float


class SavingsSummary(BaseModel):
    """Headline numbers behind the recommendation."""

    current_yearly_cost: float
    """grid.yearly_cost + generator.yearly_cost."""
    with_solar_yearly_cost: float
    """grid.yearly_cost + solar.yearly_cost."""
    yearly_savings: float
    payback_years: float
    system_lifespan_years: int
    lifetime_savings: float
    """yearly_savings × lifespan − system_cost."""
    recommendation: Literal["switch", "keep_generator"]


class CostComparison(BaseModel):
    """Output of ``compute_results`` — three scenarios plus summary."""

    grid: GridScenario
    generator: GeneratorScenario
    solar: SolarScenario
    distribution: PowerDistribution
    summary: SavingsSummary
