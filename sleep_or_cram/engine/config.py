from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Tunable constants for the sleep-vs-study trade-off.
    """

    # Sleep targets (hours)
    min_sleep_needed: float = 6.0
    optimal_sleep: float = 8.0
    short_sleep: float = 4.0

    # Time reserved for pre-sleep routine and waking up
    routine_hours: float = 1.0
    max_productive_study: float = 3.0
    # Below this many hours until the exam the answer is always "sleep"
    short_window_hours: float = 5.0

    # Fatigue: encoding efficiency drops after sustained study
    heavy_study_hours: float = 4.0
    heavy_study_factor: float = 0.4
    moderate_study_hours: float = 2.5
    moderate_study_factor: float = 0.6

    # Late night covers hour >= late_night_start or hour <= late_night_end
    late_night_start: float = 22.0
    late_night_end: float = 4.0
    late_night_factor: float = 0.5

    # Confidence blend and its effect on cramming
    quiz_weight: float = 0.7
    slider_weight: float = 0.3
    low_confidence: int = 35
    high_confidence: int = 75
    low_confidence_multiplier: float = 1.25
    high_confidence_multiplier: float = 0.75

    # Points for reaching the 1st, 2nd and 3rd study hour
    cram_tiers: tuple[float, ...] = (20.0, 12.0, 8.0)

    # Sleep consolidation points
    optimal_sleep_points: float = 25.0
    min_sleep_points: float = 15.0
    short_sleep_points: float = 5.0
    deprived_sleep_points: float = -25.0
    no_sleep_points: float = -40.0


DEFAULT_ENGINE_CONFIG = EngineConfig()
