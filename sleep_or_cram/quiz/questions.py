from __future__ import annotations

from .models import ANSWER_SCORES, QuizOption, QuizQuestion, QuizResponse

QUIZ_NOTE = (
    "Research shows that self-assessed confidence is often inaccurate. "
    "These questions measure your actual readiness through recall and "
    "application ability."
)

# (id, prompt, option labels ordered to match ANSWER_SCORES)
_QUESTION_BANK: list[tuple[str, str, tuple[str, ...]]] = [
    (
        "explain",
        "If someone asked you to explain the core concept right now, you would:",
        (
            "Struggle significantly or freeze up",
            "Give a vague or incomplete explanation",
            "Explain it reasonably well with minor gaps",
            "Confidently explain it clearly and accurately",
        ),
    ),
    (
        "recall",
        "Without looking at your notes, how much of the material can you actively recall?",
        (
            "Less than 25% - mostly blanks",
            "About 25-50% - recognize but can't reproduce",
            "About 50-75% - can recall main points",
            "Over 75% - can recall details confidently",
        ),
    ),
    (
        "apply",
        "If you had to solve a practice problem similar to the exam right now:",
        (
            "Wouldn't know where to start",
            "Could start but would get stuck quickly",
            "Could work through it with some effort",
            "Could solve it smoothly and quickly",
        ),
    ),
]


def get_questions() -> list[QuizQuestion]:
    """Return the readiness questions in display order."""
    return [
        QuizQuestion(
            id=qid,
            prompt=prompt,
            options=[
                QuizOption(value=score, label=label)
                for score, label in zip(ANSWER_SCORES, labels)
            ],
        )
        for qid, prompt, labels in _QUESTION_BANK
    ]


def get_quiz() -> QuizResponse:
    return QuizResponse(questions=get_questions(), note=QUIZ_NOTE)


def score_answers(choices: list[int]) -> list[int]:
    """Map one selected option index per question to its readiness score.

    Raises ``ValueError`` when the number of answers does not match the
    question bank or an index points outside a question's options.
    """
    if len(choices) != len(_QUESTION_BANK):
        raise ValueError(
            f"Expected {len(_QUESTION_BANK)} answers, got {len(choices)}"
        )

    scores: list[int] = []
    for (qid, _, labels), choice in zip(_QUESTION_BANK, choices):
        if not 0 <= choice < len(labels):
            raise ValueError(f"Unknown option {choice!r} for question {qid!r}")
        scores.append(ANSWER_SCORES[choice])
    return scores
