"""
Scoring primitives for the sleep-vs-study trade-off.

Every function here is pure: the same inputs always give the same score.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (4.5 -> 5, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def floor_tenth(value: float) -> float:
    """Truncate to one decimal place."""
    return math.floor(value * 10) / 10


def parse_clock(text: str) -> float:
    """Convert an ``HH:MM`` wall-clock string to fractional hours since midnight."""
    match = _CLOCK_RE.fullmatch(text.strip())
    if not match:
        raise ValueError(f"Invalid clock time {text!r}, expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Clock time out of range: {text!r}")
    return hours + minutes / 60


def _check_hours(value: float, name: str) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite non-negative number, got {value!r}")


def blend_confidence(
    quiz_scores: list[int],
    slider_confidence: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> int:
    """Blend quiz answers (objective) with the slider (subjective).

    The quiz answers are summed rather than averaged, so the result can
    exceed 100 when the student aces the quiz.
    """
    objective = sum(quiz_scores)
    return round_half_up(
        config.quiz_weight * objective + config.slider_weight * slider_confidence
    )


def hours_until(current_hour: float, exam_hour: float) -> float:
    """Hours from now until the next occurrence of the exam clock time."""
    available = exam_hour - current_hour
    if available < 0:
        available += 24
    return available


def is_late_night(current_hour: float, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> bool:
    return current_hour >= config.late_night_start or current_hour <= config.late_night_end


def cognitive_state_factor(
    current_hour: float,
    hours_studied_today: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> float:
    """Encoding efficiency from accumulated fatigue and time of day, in (0, 1]."""
    _check_hours(hours_studied_today, "hours_studied_today")

    if hours_studied_today >= config.heavy_study_hours:
        fatigue = config.heavy_study_factor
    elif hours_studied_today >= config.moderate_study_hours:
        fatigue = config.moderate_study_factor
    else:
        fatigue = 1.0

    time_factor = config.late_night_factor if is_late_night(current_hour, config) else 1.0
    return fatigue * time_factor


def confidence_multiplier(
    final_confidence: int, config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> float:
    # Low confidence leaves more to gain from new material
    if final_confidence <= config.low_confidence:
        return config.low_confidence_multiplier
    if final_confidence >= config.high_confidence:
        return config.high_confidence_multiplier
    return 1.0


def cram_benefit(
    study_hours: float,
    cognitive_factor: float,
    final_confidence: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> float:
    """Projected gain from studying, with diminishing returns per hour."""
    _check_hours(study_hours, "study_hours")

    base = 0.0
    for hour, points in enumerate(config.cram_tiers, start=1):
        if study_hours >= hour:
            base += points

    base *= cognitive_factor
    return base * confidence_multiplier(final_confidence, config)


def sleep_benefit(sleep_hours: float, config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> float:
    """Consolidation gain from sleep; a penalty cliff below the short-sleep mark."""
    if sleep_hours >= config.optimal_sleep:
        return config.optimal_sleep_points
    if sleep_hours >= config.min_sleep_needed:
        return config.min_sleep_points
    if sleep_hours >= config.short_sleep:
        return config.short_sleep_points
    if sleep_hours > 0:
        return config.deprived_sleep_points
    return config.no_sleep_points


@dataclass(frozen=True)
class Scenario:
    label: str
    study_hours: float
    sleep_hours: float
    cram_benefit: float
    sleep_benefit: float

    @property
    def boost(self) -> float:
        return self.cram_benefit + self.sleep_benefit


def max_sleep_scenario(
    available_hours: float, config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Scenario:
    """Go to bed now, keeping only the routine hour back."""
    sleep_hours = max(0.0, available_hours - config.routine_hours)
    return Scenario(
        label="Max Sleep",
        study_hours=0.0,
        sleep_hours=sleep_hours,
        cram_benefit=0.0,
        sleep_benefit=sleep_benefit(sleep_hours, config),
    )


def strategic_split_scenario(
    available_hours: float,
    cognitive_factor: float,
    final_confidence: int,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Scenario:
    """Study only what still leaves room for the minimum night's sleep."""
    spare = available_hours - config.min_sleep_needed - config.routine_hours
    study_hours = min(config.max_productive_study, max(0.0, spare))
    sleep_hours = max(0.0, available_hours - study_hours - config.routine_hours)
    return Scenario(
        label="Strategic Study",
        study_hours=study_hours,
        sleep_hours=sleep_hours,
        cram_benefit=cram_benefit(study_hours, cognitive_factor, final_confidence, config),
        sleep_benefit=sleep_benefit(sleep_hours, config),
    )
