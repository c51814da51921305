"""Step telemetry — one-way notifications of which wizard step a user reached.

The core only ever *emits*; it never reads anything back.  A failing sink
is logged and ignored so it can never block or break a calculation.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Protocol

from pydantic import BaseModel, Field


log = logging.getLogger(__name__)


class StepEvent(BaseModel):
    """A user reached (or completed) a wizard step."""

    session_id: str
    step: int
    step_name: str
    service_tier: str | None = None
    generator_capacity_kva: float | None = None
    completed: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class StepEventSink(Protocol):
    """Anything callable with a ``StepEvent``."""

    def __call__(self, event: StepEvent) -> None: ...


class StepMetrics(BaseModel):
    """Per-step aggregate over recorded events."""

    step_number: int
    step_name: str
    total_views: int = 0
    unique_visitors: int = 0
    completions: int = 0
    tier_selections: int = 0
    generator_selections: int = 0


def emit_step_event(sink: StepEventSink | None, event: StepEvent) -> None:
    """Hand ``event`` to ``sink``; sink failures are logged, never raised."""
    if sink is None:
        return
    try:
        sink(event)
    except Exception as exc:
        log.warning("Step telemetry failed for session %s step %d: %s",
                    event.session_id, event.step, exc)


class LoggingSink:
    """Writes each step event to the log at INFO."""

    def __init__(self, logger: logging.Logger | None = None):
        self._log = logger or log

    def __call__(self, event: StepEvent) -> None:
        self._log.info(
            "session=%s step=%d (%s) tier=%s kva=%s completed=%s",
            event.session_id, event.step, event.step_name,
            event.service_tier, event.generator_capacity_kva, event.completed,
        )


class InMemoryStepStore:
    """Process-local event buffer with per-step aggregation.

    Lives as long as the process; nothing is written to disk.
    """

    def __init__(self) -> None:
        self._events: list[StepEvent] = []

    def __call__(self, event: StepEvent) -> None:
        self._events.append(event)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[StepEvent]:
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()

    def summarize(self) -> list[StepMetrics]:
        """Aggregate views, visitors and completions per step, ordered by step."""
        metrics: dict[int, StepMetrics] = {}
        sessions: dict[int, set[str]] = {}

        for ev in self._events:
            m = metrics.get(ev.step)
            if m is None:
                m = metrics[ev.step] = StepMetrics(step_number=ev.step, step_name=ev.step_name)
                sessions[ev.step] = set()

            m.total_views += 1
            if ev.session_id not in sessions[ev.step]:
                sessions[ev.step].add(ev.session_id)
                m.unique_visitors += 1
            if ev.completed:
                m.completions += 1
            if ev.service_tier:
                m.tier_selections += 1
            if ev.generator_capacity_kva:
                m.generator_selections += 1

        return [metrics[k] for k in sorted(metrics)]
