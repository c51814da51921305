"""Telemetry — fire-and-forget step events."""

from solar_switch.telemetry.events import (
    InMemoryStepStore,
    LoggingSink,
    StepEvent,
    StepEventSink,
    StepMetrics,
    emit_step_event,
)

__all__ = [
    "InMemoryStepStore",
    "LoggingSink",
    "StepEvent",
    "StepEventSink",
    "StepMetrics",
    "emit_step_event",
]
