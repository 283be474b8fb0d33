from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..quiz.models import ANSWER_SCORES
from .scoring import parse_clock


class RecommendationRequest(BaseModel):
    current_time: str = Field(default="22:00", description="Wall-clock time now, HH:MM (24h)")
    exam_time: str = Field(
        default="09:00", description="Exam start, HH:MM (24h); next occurrence is assumed",
    )
    hours_studied_today: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    slider_confidence: float = Field(default=50, ge=0, le=100, allow_inf_nan=False)
    quiz_scores: list[int] = Field(
        default_factory=lambda: [0, 0, 0],
        min_length=3,
        max_length=3,
        description="Readiness quiz answers, each one of 0/33/67/100",
    )

    @field_validator("current_time", "exam_time")
    @classmethod
    def check_clock(cls, value: str) -> str:
        parse_clock(value)
        return value.strip()

    @field_validator("quiz_scores")
    @classmethod
    def check_quiz_scores(cls, value: list[int]) -> list[int]:
        for score in value:
            if score not in ANSWER_SCORES:
                raise ValueError(f"Quiz score {score} must be one of {list(ANSWER_SCORES)}")
        return value


class Decision(str, Enum):
    sleep = "sleep"
    strategic_cram = "strategic-cram"


class ScenarioOutcome(BaseModel):
    label: str
    study_hours: float
    sleep_hours: float
    cram_benefit: int
    sleep_benefit: int
    boost: int


class DecisionRecord(BaseModel):
    decision: Decision
    title: str
    reasoning: str
    projected_boost: int = Field(ge=0)
    action_plan: list[str]
    science_note: str
    available_hours: float
    effective_study_hours: float
    cognitive_state_percent: int
    adjusted_confidence: int
    max_sleep: ScenarioOutcome
    strategic_split: ScenarioOutcome
    boost_margin: int
