from __future__ import annotations

import math

import pytest

from sleep_or_cram.engine.scoring import (
    blend_confidence,
    cognitive_state_factor,
    confidence_multiplier,
    cram_benefit,
    floor_tenth,
    hours_until,
    max_sleep_scenario,
    parse_clock,
    round_half_up,
    sleep_benefit,
    strategic_split_scenario,
)


# ── Clock parsing ────────────────────────────────────────────────────────


class TestParseClock:
    def test_whole_hour(self):
        assert parse_clock("09:00") == 9.0

    def test_half_hour(self):
        assert parse_clock("23:30") == 23.5

    def test_single_digit_hour(self):
        assert parse_clock("7:15") == 7.25

    def test_midnight(self):
        assert parse_clock("00:00") == 0.0

    @pytest.mark.parametrize("text", ["25:00", "12:60", "noon", "12-30", "", "1230", "12:3"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            parse_clock(text)


# ── Available time ───────────────────────────────────────────────────────


class TestHoursUntil:
    def test_same_day(self):
        assert hours_until(5.0, 9.0) == 4.0

    def test_overnight_wrap(self):
        assert hours_until(23.0, 1.0) == 2.0

    def test_late_evening_to_morning(self):
        assert hours_until(22.0, 9.0) == 11.0

    def test_equal_clocks_give_zero(self):
        assert hours_until(9.0, 9.0) == 0.0

    def test_fractional(self):
        assert hours_until(parse_clock("22:45"), parse_clock("07:15")) == 8.5


# ── Rounding helpers ─────────────────────────────────────────────────────


def test_round_half_up_goes_up_on_half():
    assert round_half_up(4.5) == 5
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(4.49) == 4


def test_floor_tenth_truncates():
    assert floor_tenth(2.99) == 2.9
    assert floor_tenth(11.0) == 11.0
    assert floor_tenth(0.05) == 0.0


# ── Confidence blend ─────────────────────────────────────────────────────


class TestBlendConfidence:
    def test_zero_quiz_neutral_slider(self):
        assert blend_confidence([0, 0, 0], 50) == 15

    def test_quiz_values_are_summed_not_averaged(self):
        assert blend_confidence([33, 67, 0], 40) == 82

    def test_result_is_not_clamped_to_100(self):
        assert blend_confidence([100, 100, 100], 100) == 240


# ── Cognitive state ──────────────────────────────────────────────────────


class TestCognitiveState:
    def test_fresh_daytime(self):
        assert cognitive_state_factor(14.0, 0) == 1.0

    def test_late_night_halves(self):
        assert cognitive_state_factor(22.0, 0) == 0.5

    def test_early_morning_counts_as_late_night(self):
        assert cognitive_state_factor(4.0, 0) == 0.5
        assert cognitive_state_factor(4.5, 0) == 1.0

    def test_moderate_fatigue(self):
        assert cognitive_state_factor(14.0, 2.5) == pytest.approx(0.6)
        assert cognitive_state_factor(14.0, 2.4) == 1.0

    def test_heavy_fatigue(self):
        assert cognitive_state_factor(14.0, 4) == pytest.approx(0.4)

    def test_fatigue_and_late_night_combine(self):
        assert cognitive_state_factor(23.0, 5) == pytest.approx(0.2)

    @pytest.mark.parametrize("hours", [-1.0, math.nan, math.inf])
    def test_rejects_bad_study_hours(self, hours):
        with pytest.raises(ValueError):
            cognitive_state_factor(14.0, hours)


# ── Sleep benefit ────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "hours, expected",
    [
        (10, 25),
        (8, 25),
        (7.99, 15),
        (6, 15),
        (5.9, 5),
        (4, 5),
        (3.9, -25),
        (0.1, -25),
        (0, -40),
    ],
)
def test_sleep_benefit_breakpoints(hours, expected):
    assert sleep_benefit(hours) == expected


# ── Cram benefit ─────────────────────────────────────────────────────────


class TestCramBenefit:
    def test_tiers_accumulate(self):
        assert cram_benefit(0.9, 1.0, 50) == 0
        assert cram_benefit(1, 1.0, 50) == 20
        assert cram_benefit(2, 1.0, 50) == 32
        assert cram_benefit(3, 1.0, 50) == 40

    def test_no_fourth_tier(self):
        assert cram_benefit(5, 1.0, 50) == 40

    def test_cognitive_factor_scales(self):
        assert cram_benefit(3, 0.5, 50) == 20

    def test_high_confidence_reduces(self):
        neutral = cram_benefit(3, 1.0, 50)
        assert cram_benefit(3, 1.0, 75) < neutral
        assert cram_benefit(3, 1.0, 75) == 30

    def test_low_confidence_increases(self):
        neutral = cram_benefit(3, 1.0, 50)
        assert cram_benefit(3, 1.0, 35) > neutral
        assert cram_benefit(3, 1.0, 35) == 50

    def test_multiplier_boundaries(self):
        assert confidence_multiplier(35) == 1.25
        assert confidence_multiplier(36) == 1.0
        assert confidence_multiplier(74) == 1.0
        assert confidence_multiplier(75) == 0.75

    def test_late_night_low_confidence_example(self):
        assert cram_benefit(3, 0.5, 15) == 25

    def test_rejects_negative_hours(self):
        with pytest.raises(ValueError):
            cram_benefit(-1, 1.0, 50)


# ── Scenarios ────────────────────────────────────────────────────────────


class TestScenarios:
    def test_max_sleep_keeps_routine_hour(self):
        s = max_sleep_scenario(11.0)
        assert s.sleep_hours == 10.0
        assert s.study_hours == 0.0
        assert s.boost == 25

    def test_max_sleep_never_negative_hours(self):
        s = max_sleep_scenario(0.5)
        assert s.sleep_hours == 0.0
        assert s.boost == -40

    def test_split_caps_study_at_three_hours(self):
        s = strategic_split_scenario(11.0, 0.5, 15)
        assert s.study_hours == 3.0
        assert s.sleep_hours == 7.0
        assert s.cram_benefit == 25
        assert s.sleep_benefit == 15
        assert s.boost == 40

    def test_split_without_room_to_study(self):
        s = strategic_split_scenario(6.0, 1.0, 50)
        assert s.study_hours == 0.0
        assert s.sleep_hours == 5.0
        assert s.boost == 5

    def test_split_partial_study(self):
        s = strategic_split_scenario(8.5, 1.0, 84)
        assert s.study_hours == 1.5
        assert s.sleep_hours == 6.0
        assert s.cram_benefit == 15
