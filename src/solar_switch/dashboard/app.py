"""Solar Switch — Streamlit wizard.

Layout: progress header → one form per stage → Previous / Next buttons.
The wizard state lives in a ``CalculatorSession`` kept in
``st.session_state``; every widget change goes through ``session.update``.

Run with:
    streamlit run src/solar_switch/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from solar_switch.api.narrative import format_naira, format_years, generate_narrative
from solar_switch.config import SERVICE_TIERS, TIER_TABLE, configure_logging
from solar_switch.engine.generator import lookup_fuel_burn_rate
from solar_switch.engine.solar import select_solar_package
from solar_switch.flow import CalculatorSession, Stage
from solar_switch.models.results import CostComparison
from solar_switch.telemetry import LoggingSink

_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

configure_logging()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Solar Switch Calculator", page_icon="☀️", layout="centered")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: rgba(22,163,74,0.06);
    border: 1px solid rgba(22,163,74,0.18);
    border-radius: 10px;
    padding: 12px 14px;
}
</style>
""", unsafe_allow_html=True)


def _session() -> CalculatorSession:
    if "calc" not in st.session_state:
        st.session_state["calc"] = CalculatorSession(sink=LoggingSink())
    return st.session_state["calc"]


calc = _session()

# ---------------------------------------------------------------------------
# Header + progress
# ---------------------------------------------------------------------------
st.title("☀️ Solar Switch Calculator")
st.caption("Grid vs generator vs solar — what your power really costs")

cols = st.columns(len(Stage))
for col, stage in zip(cols, Stage):
    marker = "🟢" if stage <= calc.stage else "⚪"
    col.markdown(f"{marker} **{stage + 1}. {stage.title}**")
st.progress((calc.stage + 1) / len(Stage))
st.markdown("---")


# ---------------------------------------------------------------------------
# Stage forms
# ---------------------------------------------------------------------------
def _render_tier_selection() -> None:
    st.subheader("Select your power band")
    labels = {
        t: f"Band {t} — {TIER_TABLE[t].min_hours:g}-{TIER_TABLE[t].max_hours:g} h/day · "
           f"₦{TIER_TABLE[t].tariff:g}/kWh"
        for t in SERVICE_TIERS
    }
    current = calc.snapshot.service_tier
    choice = st.radio(
        "Service band",
        options=list(SERVICE_TIERS),
        index=SERVICE_TIERS.index(current) if current else None,
        format_func=lambda t: labels[t],
    )
    if choice is not None and choice != current:
        calc.update(service_tier=choice)
        st.rerun()
    if current:
        st.info(TIER_TABLE[current].description)


def _render_generator_details() -> None:
    st.subheader("Generator details")
    snap = calc.snapshot
    kva = st.number_input(
        "Generator capacity (KVA)", value=float(snap.generator_capacity_kva), step=0.5,
        help="Between 3 and 10 KVA",
    )
    if not 3 <= kva <= 10:
        st.error("Please enter a value between 3 and 10 KVA")
    fuel = st.number_input("Diesel/petrol price (₦/L)", value=float(snap.fuel_price_per_liter), step=50.0)
    maint = st.number_input("Yearly maintenance (₦)", value=float(snap.yearly_maintenance_cost), step=10_000.0)

    if (kva, fuel, maint) != (snap.generator_capacity_kva, snap.fuel_price_per_liter, snap.yearly_maintenance_cost):
        calc.update(generator_capacity_kva=kva, fuel_price_per_liter=fuel, yearly_maintenance_cost=maint)

    pkg = select_solar_package(kva)
    burn = lookup_fuel_burn_rate(kva)
    st.caption(
        f"Matching solar package: **{pkg.name}** ({pkg.capacity_kw:g} kW). "
        + (f"Full-load burn ≈ {burn:.1f} L/h." if burn else "No fuel figure for this rating.")
    )


def _render_usage_pattern() -> None:
    st.subheader("Power supply hours")
    snap = calc.snapshot
    c1, c2 = st.columns(2)
    raw_min = c1.slider("Grid minimum hours/day", 0.0, 20.0, float(min(snap.grid_hours_min, 20.0)), 0.5)
    raw_max = c2.slider("Grid maximum hours/day", 0.0, 24.0, float(snap.grid_hours_max), 0.5)
    # Min never above max, max never below min
    g_min = min(raw_min, snap.grid_hours_max)
    g_max = max(raw_max, g_min)
    consumption = st.number_input("Average daily consumption (kWh)",
                                  value=float(snap.avg_daily_consumption_kwh), step=1.0)

    st.markdown("**Generator hours by day**")
    hours: list[float] = []
    day_cols = st.columns(7)
    for i, (col, day) in enumerate(zip(day_cols, _DAYS)):
        current = snap.daily_generator_hours[i] if i < len(snap.daily_generator_hours) else 0.0
        hours.append(col.number_input(day[:3], 0.0, 24.0, float(current), 0.5, key=f"gen_{i}"))

    changes = {}
    if g_min != snap.grid_hours_min:
        changes["grid_hours_min"] = g_min
    if g_max != snap.grid_hours_max:
        changes["grid_hours_max"] = g_max
    if consumption != snap.avg_daily_consumption_kwh:
        changes["avg_daily_consumption_kwh"] = consumption
    if hours != snap.daily_generator_hours:
        changes["daily_generator_hours"] = hours
    if changes:
        calc.update(**changes)

    avg_total = (g_min + g_max) / 2 + sum(hours) / 7
    st.caption(f"Average grid + generator: {avg_total:.1f} of 24 h/day")
    if avg_total > 24:
        st.error("Grid and generator hours together exceed a full day on average.")


def _render_results(res: CostComparison) -> None:
    st.subheader("Cost comparison")
    s = res.summary

    m1, m2, m3 = st.columns(3)
    m1.metric("Grid / year", format_naira(res.grid.yearly_cost))
    m2.metric("Generator / year", format_naira(res.generator.yearly_cost))
    m3.metric("Solar system", format_naira(res.solar.system_cost), res.solar.package)

    m4, m5, m6 = st.columns(3)
    m4.metric("Yearly savings", format_naira(s.yearly_savings))
    m5.metric("Payback", format_years(s.payback_years))
    m6.metric(f"{s.system_lifespan_years}-yr net savings", format_naira(s.lifetime_savings))

    fig = go.Figure(go.Bar(
        x=["Grid", "Generator", "Solar (running)"],
        y=[res.grid.yearly_cost, res.generator.yearly_cost, res.solar.yearly_cost],
        marker_color=["#0984e3", "#e17055", "#00b894"],
    ))
    fig.update_layout(title="Yearly cost by source (₦)", height=320, margin=dict(t=40, b=20))
    st.plotly_chart(fig, use_container_width=True)

    df = pd.DataFrame([
        {"Source": name, "kWh/day": sc.daily_energy_kwh,
         "Daily": format_naira(sc.daily_cost), "Monthly": format_naira(sc.monthly_cost),
         "Yearly": format_naira(sc.yearly_cost)}
        for name, sc in (("Grid", res.grid), ("Generator", res.generator), ("Solar", res.solar))
    ])
    st.dataframe(df, hide_index=True, use_container_width=True)

    with st.expander("Full report"):
        st.code(generate_narrative(res), language=None)


if calc.stage is Stage.TIER_SELECTION:
    _render_tier_selection()
elif calc.stage is Stage.GENERATOR_DETAILS:
    _render_generator_details()
elif calc.stage is Stage.USAGE_PATTERN:
    _render_usage_pattern()
elif calc.results is not None:
    _render_results(calc.results)

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------
st.markdown("---")
nav_prev, nav_restart, nav_next = st.columns(3)
if nav_prev.button("← Previous", disabled=calc.stage is Stage.TIER_SELECTION, use_container_width=True):
    calc.previous()
    st.rerun()
if nav_restart.button("↺ Start over", use_container_width=True):
    calc.restart()
    for i in range(7):
        st.session_state.pop(f"gen_{i}", None)
    st.rerun()
if calc.stage is not Stage.RESULTS:
    if nav_next.button("Next →", type="primary", disabled=not calc.can_advance, use_container_width=True):
        calc.next()
        st.rerun()
