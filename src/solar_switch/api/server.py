"""FastAPI server — HTTP access to the cost calculator and wizard sessions.

Run with:
    uvicorn solar_switch.api.server:app --reload --port 8000

Or:
    solar-switch-api

Endpoints:
    GET  /tables                 — tier table, fuel table, solar catalog
    GET  /schema                 — JSON Schema for InputSnapshot
    GET  /snapshot/defaults      — default snapshot
    POST /calculate              — one-shot comparison from a partial snapshot
    POST /sessions               — start a wizard session
    GET  /sessions/{id}          — current stage, snapshot, results
    POST /sessions/{id}/update   — apply field changes
    POST /sessions/{id}/next     — gated advance
    POST /sessions/{id}/previous — step back
    POST /sessions/{id}/restart  — reset to defaults
    GET  /analytics              — per-step aggregates
    POST /analytics/clear        — drop recorded step events
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from solar_switch.config.settings import ApiSettings, configure_logging
from solar_switch.config.snapshot import InputSnapshot
from solar_switch.config.tables import FUEL_CONSUMPTION_LPH, SOLAR_PACKAGES, TIER_TABLE
from solar_switch.engine.calculator import compute_results
from solar_switch.flow.reducer import apply_update
from solar_switch.flow.session import CalculatorSession
from solar_switch.api.narrative import generate_narrative
from solar_switch.telemetry.events import InMemoryStepStore, LoggingSink, StepEvent


log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Solar Switch Calculator API",
    version="1.0",
    description=(
        "Compare grid, generator, and solar electricity costs from a household's "
        "supply profile, and step through the guided input wizard."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# In-process state; gone when the server stops.
_sessions: dict[str, CalculatorSession] = {}
_step_store = InMemoryStepStore()
_step_logger = LoggingSink()


def _record_step(event: StepEvent) -> None:
    _step_logger(event)
    _step_store(event)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    snapshot: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial InputSnapshot. Setting service_tier also resets grid hours "
                    "and consumption to the tier's defaults. "
                    "Example: {'service_tier': 'B', 'generator_capacity_kva': 7}",
    )


class UpdateRequest(BaseModel):
    """Request body for /sessions/{id}/update."""
    changes: dict[str, Any] = Field(default_factory=dict)


class CalculateResponse(BaseModel):
    """Response from /calculate."""
    snapshot: dict[str, Any]
    result: dict[str, Any]
    narrative: str = ""


class TransitionResponse(BaseModel):
    """Response from /next and /previous."""
    moved: bool
    session: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _to_json(model: BaseModel) -> dict[str, Any]:
    """Dump through pydantic's JSON encoder (infinite payback becomes null)."""
    return json.loads(model.model_dump_json())


def _apply(snapshot: InputSnapshot, changes: dict[str, Any]) -> InputSnapshot:
    try:
        return apply_update(snapshot, changes)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc


def _get_session(session_id: str) -> CalculatorSession:
    session = _sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return session


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — welcome message and pointers."""
    return {
        "name": "Solar Switch Calculator API",
        "version": "1.0",
        "start_here": "POST /sessions",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/tables")
def get_tables():
    """Static lookup tables used by the cost model."""
    return {
        "tiers": {name: info.model_dump() for name, info in TIER_TABLE.items()},
        "fuel_consumption_lph": {str(kva): lph for kva, lph in FUEL_CONSUMPTION_LPH.items()},
        "solar_packages": [p.model_dump() for p in SOLAR_PACKAGES],
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for InputSnapshot — field types, defaults, descriptions."""
    return InputSnapshot.model_json_schema()


@app.get("/snapshot/defaults")
def get_defaults():
    """Default InputSnapshot. Use as a starting point for modifications."""
    return InputSnapshot().model_dump()


@app.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    """One-shot comparison, no wizard gating.

    Example minimal request:
    ```json
    {"snapshot": {"service_tier": "C", "generator_capacity_kva": 3.5}}
    ```
    """
    snapshot = _apply(InputSnapshot(), req.snapshot)
    result = compute_results(snapshot)
    return CalculateResponse(
        snapshot=snapshot.model_dump(),
        result=_to_json(result),
        narrative=generate_narrative(result),
    )


@app.post("/sessions", status_code=201)
def create_session():
    """Start a wizard session at the first stage with default inputs."""
    session = CalculatorSession(sink=_record_step)
    _sessions[session.session_id] = session
    log.info("Created session %s", session.session_id)
    return _to_json(session.view())


@app.get("/sessions/{session_id}")
def get_session(session_id: str):
    return _to_json(_get_session(session_id).view())


@app.post("/sessions/{session_id}/update")
def update_session(session_id: str, req: UpdateRequest):
    """Apply field changes to the session's snapshot."""
    session = _get_session(session_id)
    # Validate first so a bad change set leaves the session untouched
    _apply(session.snapshot, req.changes)
    session.update(**req.changes)
    return _to_json(session.view())


@app.post("/sessions/{session_id}/next", response_model=TransitionResponse)
def next_stage(session_id: str):
    """Advance if the current stage's gate holds; ``moved`` says whether it did."""
    session = _get_session(session_id)
    moved = session.next()
    return TransitionResponse(moved=moved, session=_to_json(session.view()))


@app.post("/sessions/{session_id}/previous", response_model=TransitionResponse)
def previous_stage(session_id: str):
    session = _get_session(session_id)
    moved = session.previous()
    return TransitionResponse(moved=moved, session=_to_json(session.view()))


@app.post("/sessions/{session_id}/restart")
def restart_session(session_id: str):
    session = _get_session(session_id)
    session.restart()
    return _to_json(session.view())


@app.get("/analytics")
def get_analytics():
    """Per-step view, visitor and completion counts."""
    return [m.model_dump() for m in _step_store.summarize()]


@app.post("/analytics/clear")
def clear_analytics():
    _step_store.clear()
    return {"success": True}


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = ApiSettings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "solar_switch.api.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
