"""Input snapshot — everything the user enters across the wizard."""

from pydantic import BaseModel, ConfigDict, Field

from solar_switch.config.tables import ServiceTier


class InputSnapshot(BaseModel):
    """Complete input bundle for one cost comparison.

    Domain ranges are listed in the field descriptions but are not enforced
    here: the stage guards decide what may pass, and anything else flows
    straight into the arithmetic.  Types and field names are enforced.
    """

    model_config = ConfigDict(extra="forbid")

    # --- Grid ---
    service_tier: ServiceTier | None = Field(
        default=None,
        description="Grid service tier (A–E). None until the user picks one.",
    )
    grid_hours_min: float = Field(default=6.0, description="Minimum grid supply hours/day (0–24)")
    grid_hours_max: float = Field(default=10.0, description="Maximum grid supply hours/day (0–24)")
    avg_daily_consumption_kwh: float = Field(
        default=20.0,
        description="Average daily consumption (kWh). Reset from the tier table "
                    "whenever a tier is chosen, then user-editable.",
    )

    # --- Generator ---
    generator_capacity_kva: float = Field(default=5.0, description="Generator rating (KVA), 3–10")
    fuel_price_per_liter: float = Field(default=1_200.0, description="Diesel/petrol price (₦/L), > 0")
    yearly_maintenance_cost: float = Field(default=100_000.0, description="Generator upkeep per year (₦), ≥ 0")

    # --- Usage pattern ---
    daily_generator_hours: list[float] = Field(
        default_factory=lambda: [4.0] * 7,
        description="Generator run hours for each day of the week (Monday first), each 0–24",
    )
