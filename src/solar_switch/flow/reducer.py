"""Snapshot reducer — the single place where user input changes state.

``apply_update(current, changes) -> new``.  The current snapshot is never
mutated.  Switching to a different tier resets grid hours and daily
consumption to that tier's table figures, overwriting whatever was there
(including values sent in the same change set).  Re-sending the current tier
leaves them alone.
"""

from __future__ import annotations

from typing import Any, Mapping

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import TIER_TABLE
from solar_switch.flow.stages import FIRST_STAGE, Stage


def tier_defaults(snapshot: InputSnapshot) -> dict[str, float]:
    """Grid fields implied by the snapshot's tier; empty when no tier is set."""
    if snapshot.service_tier is None:
        return {}
    info = TIER_TABLE[snapshot.service_tier]
    return {
        "grid_hours_min": info.min_hours,
        "grid_hours_max": info.max_hours,
        "avg_daily_consumption_kwh": info.avg_kwh_per_day,
    }


def apply_update(snapshot: InputSnapshot, changes: Mapping[str, Any]) -> InputSnapshot:
    """Merge ``changes`` into a copy of ``snapshot``.

    Raises ``pydantic.ValidationError`` for unknown fields or values of the
    wrong type.  Numeric ranges are not checked here.
    """
    merged = snapshot.model_dump()
    merged.update(changes)
    updated = InputSnapshot.model_validate(merged)

    if updated.service_tier is not None and updated.service_tier != snapshot.service_tier:
        updated = updated.model_copy(update=tier_defaults(updated))
    return updated


def restart() -> tuple[Stage, InputSnapshot]:
    """Fresh wizard state: first stage, default snapshot."""
    return FIRST_STAGE, InputSnapshot()
