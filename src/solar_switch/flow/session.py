"""Calculator session — stage + snapshot + results for one user.

Single-threaded by contract: each call completes before the next input is
accepted.  Results are computed when the results stage is reached and
recomputed after any later update; nothing is cached across snapshots.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from pydantic import BaseModel

from solar_switch.config.snapshot import InputSnapshot
from solar_switch.engine.calculator import compute_results
from solar_switch.flow.reducer import apply_update, restart
from solar_switch.flow.stages import Stage, advance, can_advance, retreat
from solar_switch.models.results import CostComparison
from solar_switch.telemetry.events import StepEvent, StepEventSink, emit_step_event


log = logging.getLogger(__name__)


class SessionView(BaseModel):
    """Serializable picture of a session for the API and dashboard."""

    session_id: str
    stage: int
    stage_name: str
    can_advance: bool
    snapshot: InputSnapshot
    results: CostComparison | None = None


class CalculatorSession:
    """Drives one pass through the wizard."""

    def __init__(self, sink: StepEventSink | None = None, session_id: str | None = None):
        self.session_id = session_id or uuid.uuid4().hex
        self._sink = sink
        self.stage, self.snapshot = restart()
        self.results: CostComparison | None = None
        self._notify()

    # ── Queries ───────────────────────────────────────────────────────

    @property
    def can_advance(self) -> bool:
        return can_advance(self.stage, self.snapshot)

    def view(self) -> SessionView:
        return SessionView(
            session_id=self.session_id,
            stage=int(self.stage),
            stage_name=self.stage.title,
            can_advance=self.can_advance,
            snapshot=self.snapshot,
            results=self.results,
        )

    # ── Commands ──────────────────────────────────────────────────────

    def update(self, **changes: Any) -> InputSnapshot:
        """Apply user edits; stale results are dropped or recomputed."""
        self.snapshot = apply_update(self.snapshot, changes)
        self.results = compute_results(self.snapshot) if self.stage is Stage.RESULTS else None
        return self.snapshot

    def next(self) -> bool:
        """Try to move forward.  Returns True only if the stage changed."""
        new_stage = advance(self.stage, self.snapshot)
        if new_stage == self.stage:
            log.debug("session %s: advance from %s refused", self.session_id, self.stage.name)
            return False

        self.stage = new_stage
        if self.stage is Stage.RESULTS:
            self.results = compute_results(self.snapshot)
        self._notify()
        return True

    def previous(self) -> bool:
        """Step back one stage.  Returns False at the first stage."""
        new_stage = retreat(self.stage)
        if new_stage == self.stage:
            return False
        self.stage = new_stage
        self.results = None
        self._notify()
        return True

    def restart(self) -> None:
        """Back to the first stage with default inputs."""
        stage, snapshot = restart()
        self.stage, self.snapshot, self.results = stage, snapshot, None
        self._notify()

    # ── Telemetry ─────────────────────────────────────────────────────

    def _notify(self) -> None:
        emit_step_event(self._sink, StepEvent(
            session_id=self.session_id,
            step=int(self.stage),
            step_name=self.stage.title,
            service_tier=self.snapshot.service_tier,
            generator_capacity_kva=(
                self.snapshot.generator_capacity_kva
                if self.stage > Stage.GENERATOR_DETAILS else None
            ),
            completed=self.stage is Stage.RESULTS,
        ))
