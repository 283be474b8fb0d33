from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

# Graded readiness levels, weakest to strongest
ANSWER_SCORES: tuple[int, ...] = (0, 33, 67, 100)


class QuizOption(BaseModel):
    value: int
    label: str


class QuizQuestion(BaseModel):
    id: str
    prompt: str
    options: list[QuizOption]


class QuizResponse(BaseModel):
    questions: list[QuizQuestion]
    note: str


class QuizAnswers(BaseModel):
    choices: list[Annotated[int, Field(ge=0, le=len(ANSWER_SCORES) - 1)]] = Field(
        ..., min_length=3, max_length=3, description="Selected option index per question",
    )


class QuizScores(BaseModel):
    quiz_scores: list[int]
