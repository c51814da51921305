"""Shared test fixtures — snapshots matching the worked examples."""

from __future__ import annotations

import pytest

from solar_switch.config import InputSnapshot
from solar_switch.flow import CalculatorSession
from solar_switch.telemetry import InMemoryStepStore


@pytest.fixture
def snapshot() -> InputSnapshot:
    """Band B household, 5 KVA generator running 4 h every day."""
    return InputSnapshot(
        service_tier="B",
        generator_capacity_kva=5,
        grid_hours_min=16,
        grid_hours_max=20,
        fuel_price_per_liter=1_200,
        yearly_maintenance_cost=100_000,
        avg_daily_consumption_kwh=20,
        daily_generator_hours=[4, 4, 4, 4, 4, 4, 4],
    )


@pytest.fixture
def no_tier_snapshot(snapshot: InputSnapshot) -> InputSnapshot:
    return snapshot.model_copy(update={"service_tier": None})


@pytest.fixture
def idle_generator_snapshot(snapshot: InputSnapshot) -> InputSnapshot:
    return snapshot.model_copy(update={"daily_generator_hours": [0.0] * 7})


@pytest.fixture
def store() -> InMemoryStepStore:
    return InMemoryStepStore()


@pytest.fixture
def session(store: InMemoryStepStore) -> CalculatorSession:
    return CalculatorSession(sink=store, session_id="test-session")
