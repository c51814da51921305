"""Narrative generator — plain-English reading of a cost comparison.

Turns a ``CostComparison`` into a short report: what each option costs,
what solar would save, and whether switching pays off.
"""

from __future__ import annotations

import math

from solar_switch.models.results import CostComparison


def format_naira(amount: float) -> str:
    """₦ with thousands separators, no decimals."""
    if not math.isfinite(amount):
        return "n/a"
    sign = "-" if amount < 0 else ""
    return f"{sign}₦{abs(amount):,.0f}"


def format_years(years: float) -> str:
    if not math.isfinite(years):
        return "never"
    return f"{years:.1f} years"


def generate_narrative(result: CostComparison) -> str:
    """Generate the comparison report.

    Sections:
      1. Current supply mix
      2. Cost of each option
      3. Solar verdict
    """
    g = result.grid
    gen = result.generator
    sol = result.solar
    dist = result.distribution
    s = result.summary

    sections: list[str] = []

    # ── 1. Supply mix ──
    sections.append("=" * 60)
    sections.append("CURRENT SUPPLY")
    sections.append("=" * 60)
    if g.tier is None:
        sections.append("No grid band selected — grid costs are shown as zero.")
    else:
        sections.append(
            f"Band {g.tier} grid supply averages {dist.grid_hours:.1f} h/day "
            f"at {format_naira(g.tariff)}/kWh."
        )
    sections.append(
        f"The generator runs {dist.generator_hours:.1f} h/day on average, "
        f"burning {gen.daily_fuel_liters:.1f} L/day "
        f"({gen.fuel_burn_rate_lph:.1f} L/h at full load)."
    )
    if dist.uncovered_hours > 0:
        sections.append(f"About {dist.uncovered_hours:.1f} h/day are left without power.")
    sections.append("")

    # ── 2. Costs ──
    sections.append("=" * 60)
    sections.append("COSTS")
    sections.append("=" * 60)
    sections.append(
        f"Grid:      {format_naira(g.daily_cost)}/day · {format_naira(g.monthly_cost)}/month · "
        f"{format_naira(g.yearly_cost)}/year ({g.daily_energy_kwh:.1f} kWh/day)"
    )
    sections.append(
        f"Generator: {format_naira(gen.daily_cost)}/day · {format_naira(gen.monthly_cost)}/month · "
        f"{format_naira(gen.yearly_cost)}/year ({gen.daily_energy_kwh:.1f} kWh/day)"
    )
    sections.append(
        f"  of which fuel {format_naira(gen.daily_fuel_cost)}/day, "
        f"maintenance {format_naira(gen.daily_maintenance_cost)}/day"
    )
    sections.append(f"Current total: {format_naira(s.current_yearly_cost)}/year")
    sections.append("")

    # ── 3. Solar ──
    sections.append("=" * 60)
    sections.append("SOLAR OPTION")
    sections.append("=" * 60)
    sections.append(
        f"Recommended package: {sol.package} ({sol.capacity_kw:g} kW) "
        f"for {format_naira(sol.system_cost)}."
    )
    sections.append(f"Replacing the generator saves {format_naira(s.yearly_savings)}/year.")
    sections.append(f"Payback: {format_years(s.payback_years)}.")
    sections.append(
        f"Over a {s.system_lifespan_years}-year system life that is "
        f"{format_naira(s.lifetime_savings)} net of the purchase."
    )
    if s.recommendation == "switch":
        sections.append("VERDICT: switching to solar pays for itself within the system's life.")
    else:
        sections.append("VERDICT: solar does not pay back within its life at these inputs.")

    return "\n".join(sections)
