"""Configuration — input snapshot, static tables, runtime settings."""

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.settings import ApiSettings, configure_logging
from solar_switch.config.tables import (
    FUEL_CONSUMPTION_LPH,
    SERVICE_TIERS,
    SOLAR_PACKAGES,
    TIER_TABLE,
    ServiceTier,
    SolarPackage,
    TierInfo,
)

__all__ = [
    "InputSnapshot",
    "ApiSettings",
    "configure_logging",
    "FUEL_CONSUMPTION_LPH",
    "SERVICE_TIERS",
    "SOLAR_PACKAGES",
    "TIER_TABLE",
    "ServiceTier",
    "SolarPackage",
    "TierInfo",
]
