"""Grid-only scenario.

Billing uses the tier's nominal daily consumption, not the hours actually
received: the tool models flat-rate band billing.
"""

from __future__ import annotations

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import DAYS_PER_MONTH, DAYS_PER_YEAR, TIER_TABLE
from solar_switch.models.results import GridScenario


def compute_grid_cost(snapshot: InputSnapshot) -> GridScenario:
    """Daily / monthly / yearly grid cost for the selected tier."""
    if snapshot.service_tier is None:
        return GridScenario(
            daily_cost=0.0, monthly_cost=0.0, yearly_cost=0.0,
            daily_energy_kwh=0.0, tier=None, tariff=0.0,
        )

    tier = TIER_TABLE[snapshot.service_tier]
    daily_energy_kwh = tier.avg_kwh_per_day
    daily_cost = daily_energy_kwh * tier.tariff

    return GridScenario(
        daily_cost=daily_cost,
        monthly_cost=daily_cost * DAYS_PER_MONTH,
        yearly_cost=daily_cost * DAYS_PER_YEAR,
        daily_energy_kwh=daily_energy_kwh,
        tier=snapshot.service_tier,
        tariff=tier.tariff,
    )
