from __future__ import annotations

import logging

from fastapi import FastAPI

from .config import DEFAULT_APP_CONFIG
from .engine.models import DecisionRecord, RecommendationRequest
from .engine.recommender import get_recommendation
from .quiz.models import QuizAnswers, QuizResponse, QuizScores
from .quiz.questions import get_quiz, score_answers

logging.basicConfig(level=DEFAULT_APP_CONFIG.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=DEFAULT_APP_CONFIG.title, version=DEFAULT_APP_CONFIG.version)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Readiness quiz ───────────────────────────────────────────────────────


@app.get("/quiz", response_model=QuizResponse)
def quiz() -> QuizResponse:
    return get_quiz()


@app.post("/quiz/score", response_model=QuizScores)
def quiz_score(body: QuizAnswers) -> QuizScores:
    return QuizScores(quiz_scores=score_answers(body.choices))


# ── Recommendation ───────────────────────────────────────────────────────


@app.post("/recommend", response_model=DecisionRecord)
def recommend(body: RecommendationRequest) -> DecisionRecord:
    record = get_recommendation(body)
    logger.info(
        "Recommended %s for %.1fh window (boost +%d%%, confidence %d)",
        record.decision.value,
        record.available_hours,
        record.projected_boost,
        record.adjusted_confidence,
    )
    return record
