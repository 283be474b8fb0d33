"""
Recommendation engine.

Responsibilities:
- Blend quiz answers and self-reported confidence into one readiness score.
- Work out the hours left before the exam and the student's cognitive state.
- Score a "max sleep" plan against a "strategic study + sleep" plan.
- Return the winning plan as a decision record.
"""
from .models import Decision, DecisionRecord, RecommendationRequest, ScenarioOutcome
from .recommender import get_recommendation, recommend

__all__ = [
    "Decision",
    "DecisionRecord",
    "RecommendationRequest",
    "ScenarioOutcome",
    "get_recommendation",
    "recommend",
]
