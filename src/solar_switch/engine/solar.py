"""Solar-replacement scenario.

Package size is a fixed step function of the generator rating, not a
sizing calculation.  Solar is assumed to displace the generator completely,
so the generator's yearly bill is the yearly saving.
"""

from __future__ import annotations

import math

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import (
    LARGE_PACKAGE_MIN_KVA,
    SMALL_PACKAGE_MAX_KVA,
    SOLAR_PACKAGES_BY_NAME,
    SolarPackage,
)
from solar_switch.models.results import GeneratorScenario, SolarScenario


def select_solar_package(capacity_kva: float) -> SolarPackage:
    """Pick the catalog package that replaces a generator of this rating."""
    if capacity_kva <= SMALL_PACKAGE_MAX_KVA:
        return SOLAR_PACKAGES_BY_NAME["SMALL"]
    if capacity_kva >= LARGE_PACKAGE_MIN_KVA:
        return SOLAR_PACKAGES_BY_NAME["LARGE"]
    return SOLAR_PACKAGES_BY_NAME["MEDIUM"]


def payback_years(system_cost: float, yearly_savings: float) -> float:
    """Years to recover ``system_cost``; ``inf`` when savings are zero."""
    if yearly_savings == 0:
        return math.inf
    return system_cost / yearly_savings


def compute_solar_cost(snapshot: InputSnapshot, generator: GeneratorScenario) -> SolarScenario:
    """Solar package, its price, and payback against the generator bill."""
    package = select_solar_package(snapshot.generator_capacity_kva)
    yearly_savings = generator.yearly_cost

    return SolarScenario(
        daily_cost=0.0,
        monthly_cost=0.0,
        yearly_cost=0.0,
        daily_energy_kwh=snapshot.avg_daily_consumption_kwh,
        package=package.name,
        capacity_kw=package.capacity_kw,
        system_cost=package.price,
        yearly_savings=yearly_savings,
        payback_years=payback_years(package.price, yearly_savings),
    )
