"""Wizard stages and their forward gates.

Linear: tier → generator → usage → results.  Moving forward requires the
current stage's gate to hold against the snapshot; moving back never does.
"""

from __future__ import annotations

from enum import IntEnum

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MAX_GENERATOR_KVA,
    MIN_GENERATOR_KVA,
)
from solar_switch.engine.generator import average_hours


class Stage(IntEnum):
    TIER_SELECTION = 0
    GENERATOR_DETAILS = 1
    USAGE_PATTERN = 2
    RESULTS = 3

    @property
    def title(self) -> str:
        return STAGE_TITLES[self]


STAGE_TITLES: dict[Stage, str] = {
    Stage.TIER_SELECTION: "Power Band",
    Stage.GENERATOR_DETAILS: "Generator",
    Stage.USAGE_PATTERN: "Supply Hours",
    Stage.RESULTS: "Results",
}

FIRST_STAGE = Stage.TIER_SELECTION
LAST_STAGE = Stage.RESULTS


def _tier_selected(snapshot: InputSnapshot) -> bool:
    return snapshot.service_tier is not None


def _generator_valid(snapshot: InputSnapshot) -> bool:
    return (
        MIN_GENERATOR_KVA <= snapshot.generator_capacity_kva <= MAX_GENERATOR_KVA
        and snapshot.fuel_price_per_liter > 0
    )


def _usage_valid(snapshot: InputSnapshot) -> bool:
    hours = snapshot.daily_generator_hours
    if snapshot.grid_hours_min < 0 or snapshot.grid_hours_max > HOURS_PER_DAY:
        return False
    if len(hours) != DAYS_PER_WEEK:
        return False
    # Grid and generator together cannot exceed a full day on average
    avg_grid = average_hours([snapshot.grid_hours_min, snapshot.grid_hours_max])
    return avg_grid + average_hours(hours) <= HOURS_PER_DAY


_GUARDS = {
    Stage.TIER_SELECTION: _tier_selected,
    Stage.GENERATOR_DETAILS: _generator_valid,
    Stage.USAGE_PATTERN: _usage_valid,
    Stage.RESULTS: lambda snapshot: True,
}


def can_advance(stage: Stage, snapshot: InputSnapshot) -> bool:
    """True when ``stage``'s gate holds for ``snapshot``."""
    return _GUARDS[Stage(stage)](snapshot)


def advance(stage: Stage, snapshot: InputSnapshot) -> Stage:
    """Next stage if the gate holds, otherwise ``stage`` unchanged.

    The results stage is terminal: advancing from it stays put.
    """
    stage = Stage(stage)
    if not can_advance(stage, snapshot):
        return stage
    return Stage(min(stage + 1, LAST_STAGE))


def retreat(stage: Stage) -> Stage:
    """Previous stage, never below the first."""
    return Stage(max(Stage(stage) - 1, FIRST_STAGE))
