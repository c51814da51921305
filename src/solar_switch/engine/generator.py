"""Generator-backup scenario.

Fuel burn is taken at full load from the rating table; running hours come
from the weekly profile the user entered.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import (
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    FUEL_CONSUMPTION_LPH,
    HOURS_PER_DAY,
)
from solar_switch.models.results import GeneratorScenario


def average_hours(hours: Sequence[float]) -> float:
    """Arithmetic mean of an hour profile; 0 for an empty profile."""
    if len(hours) == 0:
        return 0.0
    return float(np.mean(hours))


def nearest_rating(capacity_kva: float) -> int:
    """Round a KVA rating to the nearest whole number, halves rounding down."""
    return int(math.ceil(capacity_kva - 0.5))


def lookup_fuel_burn_rate(capacity_kva: float) -> float:
    """Full-load litres/hour for a rating, or 0 when the table has no entry."""
    if not math.isfinite(capacity_kva):
        return 0.0
    return FUEL_CONSUMPTION_LPH.get(nearest_rating(capacity_kva), 0.0)


def compute_generator_cost(snapshot: InputSnapshot) -> GeneratorScenario:
    """Daily / monthly / yearly cost of running the generator profile."""

    # ── Running hours & energy ────────────────────────────────────────
    avg_hours = average_hours(snapshot.daily_generator_hours)
    daily_energy_kwh = snapshot.avg_daily_consumption_kwh * avg_hours / HOURS_PER_DAY

    # ── Fuel ──────────────────────────────────────────────────────────
    burn_rate = lookup_fuel_burn_rate(snapshot.generator_capacity_kva)
    daily_fuel_liters = avg_hours * burn_rate
    daily_fuel_cost = avg_hours * burn_rate * snapshot.fuel_price_per_liter

    # ── Maintenance, spread evenly over the year ──────────────────────
    daily_maintenance = snapshot.yearly_maintenance_cost / DAYS_PER_YEAR

    daily_cost = daily_fuel_cost + daily_maintenance

    return GeneratorScenario(
        daily_cost=daily_cost,
        monthly_cost=daily_cost * DAYS_PER_MONTH,
        yearly_cost=daily_cost * DAYS_PER_YEAR,
        daily_energy_kwh=daily_energy_kwh,
        avg_hours_per_day=avg_hours,
        fuel_burn_rate_lph=burn_rate,
        daily_fuel_liters=daily_fuel_liters,
        daily_fuel_cost=daily_fuel_cost,
        daily_maintenance_cost=daily_maintenance,
    )
