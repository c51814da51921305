"""Static lookup tables — service tiers, generator fuel burn, solar packages.

Read-only, process-wide.  Changing a figure means editing this file and
redeploying; nothing here is mutated at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field


ServiceTier = Literal["A", "B", "C", "D", "E"]
SERVICE_TIERS: tuple[ServiceTier, ...] = ("A", "B", "C", "D", "E")

PackageName = Literal["SMALL", "MEDIUM", "LARGE"]

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

MIN_GENERATOR_KVA = 3.0
MAX_GENERATOR_KVA = 10.0

SOLAR_LIFESPAN_YEARS = 25


# ═══════════════════════════════════════════════════════════════════════════
# Tariff / band table
# ═══════════════════════════════════════════════════════════════════════════

class TierInfo(BaseModel):
    """Nominal supply and billing figures for one grid service tier."""

    model_config = ConfigDict(frozen=True)

    min_hours: float = Field(description="Minimum supply hours per day")
    max_hours: float = Field(description="Maximum supply hours per day")
    tariff: float = Field(description="Energy charge (₦/kWh)")
    avg_kwh_per_day: float = Field(description="Nominal average daily consumption (kWh)")
    description: str = ""


TIER_TABLE: Mapping[ServiceTier, TierInfo] = MappingProxyType({
    "A": TierInfo(
        min_hours=20, max_hours=24, tariff=225, avg_kwh_per_day=32,
        description="Premium service with minimum of 20 hours daily power supply",
    ),
    "B": TierInfo(
        min_hours=16, max_hours=20, tariff=210, avg_kwh_per_day=24,
        description="Very good service with 16-20 hours daily power supply",
    ),
    "C": TierInfo(
        min_hours=12, max_hours=16, tariff=200, avg_kwh_per_day=16,
        description="Medium service level with 12-16 hours daily power supply",
    ),
    "D": TierInfo(
        min_hours=8, max_hours=12, tariff=188, avg_kwh_per_day=12,
        description="Basic service with 8-12 hours daily power supply",
    ),
    "E": TierInfo(
        min_hours=4, max_hours=8, tariff=175, avg_kwh_per_day=8,
        description="Basic service with 4-8 hours daily power supply",
    ),
})


# ═══════════════════════════════════════════════════════════════════════════
# Generator fuel consumption (full load, litres/hour) keyed by KVA
# ═══════════════════════════════════════════════════════════════════════════

FUEL_CONSUMPTION_LPH: Mapping[int, float] = MappingProxyType({
    3: 1.2,
    4: 1.6,
    5: 2.0,
    6: 2.4,
    7: 2.8,
    8: 3.2,
    9: 3.6,
    10: 4.0,
})


# ═══════════════════════════════════════════════════════════════════════════
# Solar package catalog
# ═══════════════════════════════════════════════════════════════════════════

class SolarPackage(BaseModel):
    """One fixed solar + storage offering."""

    model_config = ConfigDict(frozen=True)

    name: PackageName
    capacity_kw: float = Field(description="Array / inverter size (kW)")
    price: float = Field(description="Installed system price (₦)")
    description: str = ""


SOLAR_PACKAGES: tuple[SolarPackage, ...] = (
    SolarPackage(name="SMALL", capacity_kw=3, price=2_000_000,
                 description="Suitable for 3-4 KVA generators"),
    SolarPackage(name="MEDIUM", capacity_kw=5, price=2_750_000,
                 description="Suitable for 5-7 KVA generators"),
    SolarPackage(name="LARGE", capacity_kw=10, price=5_700_000,
                 description="Suitable for 8-10 KVA generators"),
)

SOLAR_PACKAGES_BY_NAME: Mapping[PackageName, SolarPackage] = MappingProxyType(
    {p.name: p for p in SOLAR_PACKAGES}
)

# Step thresholds over generator capacity (KVA)
SMALL_PACKAGE_MAX_KVA = 4.0
LARGE_PACKAGE_MIN_KVA = 8.0
