from __future__ import annotations

import logging

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import Decision, DecisionRecord, RecommendationRequest, ScenarioOutcome
from .plans import Plan, SleepPlan, StrategicCramPlan
from .scoring import (
    Scenario,
    blend_confidence,
    cognitive_state_factor,
    floor_tenth,
    hours_until,
    max_sleep_scenario,
    parse_clock,
    round_half_up,
    strategic_split_scenario,
)

logger = logging.getLogger(__name__)


def choose_plan(
    available_hours: float,
    max_sleep: Scenario,
    split: Scenario,
    cognitive_factor: float,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> Plan:
    """Pick the winning plan.

    Sleep wins outright on a short night, or when max sleep scores higher
    and still reaches the minimum sleep target. Otherwise the split wins.
    """
    short_window = available_hours < config.short_window_hours
    if short_window or (
        max_sleep.boost > split.boost and max_sleep.sleep_hours >= config.min_sleep_needed
    ):
        return SleepPlan(
            sleep_hours=max_sleep.sleep_hours,
            sleep_benefit=max_sleep.sleep_benefit,
            short_window=short_window,
        )
    return StrategicCramPlan(
        study_hours=split.study_hours,
        sleep_hours=split.sleep_hours,
        cognitive_factor=cognitive_factor,
        cram_benefit=split.cram_benefit,
        sleep_benefit=split.sleep_benefit,
    )


def _outcome(scenario: Scenario) -> ScenarioOutcome:
    return ScenarioOutcome(
        label=scenario.label,
        study_hours=floor_tenth(scenario.study_hours),
        sleep_hours=floor_tenth(scenario.sleep_hours),
        cram_benefit=round_half_up(scenario.cram_benefit),
        sleep_benefit=round_half_up(scenario.sleep_benefit),
        boost=round_half_up(scenario.boost),
    )


def get_recommendation(
    request: RecommendationRequest,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> DecisionRecord:
    """Score both plans for the request and return the decision record."""
    current_hour = parse_clock(request.current_time)
    exam_hour = parse_clock(request.exam_time)

    final_confidence = blend_confidence(request.quiz_scores, request.slider_confidence, config)
    available = hours_until(current_hour, exam_hour)
    cognitive = cognitive_state_factor(current_hour, request.hours_studied_today, config)

    max_sleep = max_sleep_scenario(available, config)
    split = strategic_split_scenario(available, cognitive, final_confidence, config)
    plan = choose_plan(available, max_sleep, split, cognitive, config)

    chosen = split if plan.decision is Decision.strategic_cram else max_sleep
    logger.debug(
        "available=%.2fh cognitive=%.2f confidence=%d boost_s1=%.2f boost_s2=%.2f -> %s",
        available, cognitive, final_confidence, max_sleep.boost, split.boost,
        plan.decision.value,
    )

    max_sleep_out = _outcome(max_sleep)
    split_out = _outcome(split)

    return DecisionRecord(
        decision=plan.decision,
        title=plan.title,
        reasoning=plan.reasoning,
        projected_boost=round_half_up(max(0.0, chosen.boost)),
        action_plan=plan.action_plan,
        science_note=plan.science_note,
        available_hours=floor_tenth(available),
        effective_study_hours=floor_tenth(
            split.study_hours if plan.decision is Decision.strategic_cram else 0.0
        ),
        cognitive_state_percent=round_half_up(cognitive * 100),
        adjusted_confidence=final_confidence,
        max_sleep=max_sleep_out,
        strategic_split=split_out,
        boost_margin=abs(max_sleep_out.boost - split_out.boost),
    )


def recommend(
    current_time: str,
    exam_time: str,
    hours_studied_today: float,
    slider_confidence: float,
    quiz_scores: list[int],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> DecisionRecord:
    """Validate the raw inputs and return the decision record.

    Raises ``pydantic.ValidationError`` (a ``ValueError``) on malformed input.
    """
    request = RecommendationRequest(
        current_time=current_time,
        exam_time=exam_time,
        hours_studied_today=hours_studied_today,
        slider_confidence=slider_confidence,
        quiz_scores=quiz_scores,
    )
    return get_recommendation(request, config)
