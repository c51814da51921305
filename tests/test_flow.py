"""Tests for flow/ — stage gates, transitions, the snapshot reducer, restart."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from solar_switch.config import InputSnapshot, TIER_TABLE
from solar_switch.engine import compute_results
from solar_switch.flow import Stage, advance, apply_update, can_advance, restart, retreat


# ═══════════════════════════════════════════════════════════════════════════
# Gates
# ═══════════════════════════════════════════════════════════════════════════

class TestTierGate:

    def test_blocked_without_tier(self):
        assert not can_advance(Stage.TIER_SELECTION, InputSnapshot())

    def test_open_with_tier(self):
        assert can_advance(Stage.TIER_SELECTION, InputSnapshot(service_tier="E"))


class TestGeneratorGate:

    @pytest.mark.parametrize("kva", [3, 5.5, 10])
    def test_capacity_in_range(self, kva):
        assert can_advance(Stage.GENERATOR_DETAILS, InputSnapshot(generator_capacity_kva=kva))

    @pytest.mark.parametrize("kva", [0, 2.99, 10.01, -4])
    def test_capacity_out_of_range(self, kva):
        assert not can_advance(Stage.GENERATOR_DETAILS, InputSnapshot(generator_capacity_kva=kva))

    @pytest.mark.parametrize("price", [0, -1])
    def test_fuel_price_must_be_positive(self, price):
        assert not can_advance(Stage.GENERATOR_DETAILS, InputSnapshot(fuel_price_per_liter=price))


class TestUsageGate:

    def test_defaults_pass(self):
        # grid avg 8 + generator avg 4
        assert can_advance(Stage.USAGE_PATTERN, InputSnapshot())

    def test_supply_over_a_full_day_is_blocked(self):
        s = InputSnapshot(grid_hours_min=20, grid_hours_max=24, daily_generator_hours=[4] * 7)
        # 22 + 4 = 26 > 24
        assert not can_advance(Stage.USAGE_PATTERN, s)

    def test_exactly_a_full_day_passes(self):
        s = InputSnapshot(grid_hours_min=16, grid_hours_max=24, daily_generator_hours=[4] * 7)
        assert can_advance(Stage.USAGE_PATTERN, s)

    @pytest.mark.parametrize("hours", [[4] * 6, [4] * 8, []])
    def test_needs_seven_days(self, hours):
        assert not can_advance(Stage.USAGE_PATTERN, InputSnapshot(daily_generator_hours=hours))

    def test_negative_grid_minimum_blocked(self):
        assert not can_advance(Stage.USAGE_PATTERN, InputSnapshot(grid_hours_min=-1))

    def test_grid_maximum_over_24_blocked(self):
        s = InputSnapshot(grid_hours_min=0, grid_hours_max=25, daily_generator_hours=[0] * 7)
        assert not can_advance(Stage.USAGE_PATTERN, s)


def test_results_gate_always_open():
    assert can_advance(Stage.RESULTS, InputSnapshot(generator_capacity_kva=99))


# ═══════════════════════════════════════════════════════════════════════════
# Transitions
# ═══════════════════════════════════════════════════════════════════════════

class TestTransitions:

    def test_advance_moves_one_stage(self):
        s = InputSnapshot(service_tier="A")
        assert advance(Stage.TIER_SELECTION, s) is Stage.GENERATOR_DETAILS

    def test_rejected_advance_keeps_stage(self):
        assert advance(Stage.TIER_SELECTION, InputSnapshot()) is Stage.TIER_SELECTION

    def test_full_walk(self):
        s = InputSnapshot(service_tier="C")
        stage = Stage.TIER_SELECTION
        for expected in (Stage.GENERATOR_DETAILS, Stage.USAGE_PATTERN, Stage.RESULTS):
            stage = advance(stage, s)
            assert stage is expected

    def test_results_is_terminal(self):
        assert advance(Stage.RESULTS, InputSnapshot()) is Stage.RESULTS

    def test_retreat(self):
        assert retreat(Stage.RESULTS) is Stage.USAGE_PATTERN
        assert retreat(Stage.GENERATOR_DETAILS) is Stage.TIER_SELECTION

    def test_retreat_floors_at_first_stage(self):
        assert retreat(Stage.TIER_SELECTION) is Stage.TIER_SELECTION

    def test_plain_ints_accepted(self):
        assert advance(0, InputSnapshot(service_tier="A")) is Stage.GENERATOR_DETAILS
        assert retreat(2) is Stage.GENERATOR_DETAILS


# ═══════════════════════════════════════════════════════════════════════════
# Reducer
# ═══════════════════════════════════════════════════════════════════════════

class TestApplyUpdate:

    def test_merges_changes(self):
        s = apply_update(InputSnapshot(), {"fuel_price_per_liter": 1_500})
        assert s.fuel_price_per_liter == 1_500
        assert s.generator_capacity_kva == 5

    def test_does_not_mutate_input(self):
        original = InputSnapshot()
        apply_update(original, {"daily_generator_hours": [1] * 7, "service_tier": "A"})
        assert original == InputSnapshot()

    @pytest.mark.parametrize("tier", ["A", "B", "C", "D", "E"])
    def test_tier_change_resets_grid_defaults(self, tier):
        s = apply_update(InputSnapshot(), {"service_tier": tier})
        info = TIER_TABLE[tier]
        assert s.grid_hours_min == info.min_hours
        assert s.grid_hours_max == info.max_hours
        assert s.avg_daily_consumption_kwh == info.avg_kwh_per_day

    def test_tier_change_overwrites_manual_edits(self):
        s = apply_update(InputSnapshot(service_tier="A"), {"grid_hours_min": 3, "avg_daily_consumption_kwh": 50})
        s = apply_update(s, {"service_tier": "D"})
        assert (s.grid_hours_min, s.grid_hours_max, s.avg_daily_consumption_kwh) == (8, 12, 12)

    def test_tier_defaults_win_over_same_batch_edits(self):
        s = apply_update(InputSnapshot(), {"service_tier": "B", "grid_hours_min": 1})
        assert s.grid_hours_min == 16

    def test_reselecting_same_tier_keeps_manual_values(self):
        s = apply_update(InputSnapshot(), {"service_tier": "B"})
        s = apply_update(s, {"avg_daily_consumption_kwh": 20, "grid_hours_max": 18})
        s = apply_update(s, {"service_tier": "B"})
        assert s.avg_daily_consumption_kwh == 20
        assert s.grid_hours_max == 18

    def test_full_form_resubmit_keeps_manual_values(self):
        s = apply_update(InputSnapshot(), {"service_tier": "C"})
        s = apply_update(s, s.model_dump() | {"grid_hours_min": 9})
        assert s.grid_hours_min == 9
        assert s.avg_daily_consumption_kwh == 16

    def test_grid_min_above_max_passes_through(self):
        s = apply_update(InputSnapshot(), {"service_tier": "D"})
        s = apply_update(s, {"grid_hours_min": 14, "grid_hours_max": 10})
        assert (s.grid_hours_min, s.grid_hours_max) == (14, 10)
        assert can_advance(Stage.USAGE_PATTERN, s)
        dist = compute_results(s).distribution
        assert dist.grid_hours == pytest.approx(12)

    def test_other_edits_keep_manual_values(self):
        s = apply_update(InputSnapshot(), {"service_tier": "B"})
        s = apply_update(s, {"grid_hours_min": 10})
        s = apply_update(s, {"fuel_price_per_liter": 900})
        assert s.grid_hours_min == 10

    def test_clearing_tier_keeps_grid_fields(self):
        s = apply_update(InputSnapshot(), {"service_tier": "A"})
        s = apply_update(s, {"service_tier": None})
        assert s.service_tier is None
        assert s.grid_hours_min == 20

    def test_out_of_range_values_pass_through(self):
        s = apply_update(InputSnapshot(), {"generator_capacity_kva": 50, "fuel_price_per_liter": -3})
        assert s.generator_capacity_kva == 50
        assert s.fuel_price_per_liter == -3

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            apply_update(InputSnapshot(), {"solar_panels": 12})

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValidationError):
            apply_update(InputSnapshot(), {"service_tier": "F"})

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError):
            apply_update(InputSnapshot(), {"fuel_price_per_liter": "cheap"})


class TestRestart:

    def test_returns_defaults(self):
        stage, snapshot = restart()
        assert stage is Stage.TIER_SELECTION
        assert snapshot == InputSnapshot()
        assert snapshot.service_tier is None
        assert snapshot.daily_generator_hours == [4.0] * 7

    def test_independent_of_history(self):
        _, first = restart()
        apply_update(first, {"service_tier": "A"})
        first.daily_generator_hours.append(9)
        _, second = restart()
        assert second == InputSnapshot()
        assert second.daily_generator_hours is not first.daily_generator_hours
