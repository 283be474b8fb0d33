from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .models import Decision
from .scoring import floor_tenth, round_half_up


def _format_hours(hours: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5"
    return f"{hours:g}"


@dataclass(frozen=True)
class SleepPlan:
    """Go to bed now. ``short_window`` marks a night too short to study at all."""

    decision: ClassVar[Decision] = Decision.sleep
    title: ClassVar[str] = "Sleep Now"

    sleep_hours: float
    sleep_benefit: float
    short_window: bool

    @property
    def reasoning(self) -> str:
        if self.short_window:
            return (
                "You have very limited time. Sleep deprivation will hurt you "
                "more than cramming will help."
            )
        return (
            "Maximizing sleep yields the highest projected score boost. "
            "Your knowledge is best consolidated now."
        )

    @property
    def action_plan(self) -> list[str]:
        if self.short_window:
            return [
                "Go to sleep right now.",
                "Focus on getting maximum rest.",
                "Quick review of key formulas/concepts when you wake up.",
            ]
        return [
            f"Sleep {math.floor(self.sleep_hours)} hours minimum.",
            "Limit screen time 30 mins before bed.",
            "Light, focused review in the morning.",
        ]

    @property
    def science_note(self) -> str:
        if self.short_window:
            return (
                "With less than 5 hours, your brain needs rest more than new "
                "information. Sleep consolidates what you already know."
            )
        return (
            f"The consolidation benefit of {math.floor(self.sleep_hours)} hours of sleep "
            f"(Boost: +{round_half_up(self.sleep_benefit)}%) outweighs the minimal "
            "gain from more studying."
        )


@dataclass(frozen=True)
class StrategicCramPlan:
    """Targeted study block, then enough sleep to consolidate it."""

    decision: ClassVar[Decision] = Decision.strategic_cram
    title: ClassVar[str] = "Strategic Study + Sleep"

    study_hours: float
    sleep_hours: float
    cognitive_factor: float
    cram_benefit: float
    sleep_benefit: float

    @property
    def reasoning(self) -> str:
        return (
            "The Strategic Split maximizes your net gain by balancing crucial "
            "rest and targeted study."
        )

    @property
    def action_plan(self) -> list[str]:
        study = _format_hours(floor_tenth(self.study_hours))
        sleep = _format_hours(floor_tenth(self.sleep_hours))
        return [
            f"Study for {study} hours. Focus ONLY on high-value/low-confidence topics.",
            "Use active recall (practice problems, flashcards), not just reading.",
            f"Sleep {sleep} hours minimum.",
            "Wake up early for quick review and proper breakfast.",
        ]

    @property
    def science_note(self) -> str:
        return (
            f"Your current cognitive state is at {round_half_up(self.cognitive_factor * 100)}%. "
            f"Focused encoding now (Boost: +{round_half_up(self.cram_benefit)}%) combined "
            f"with consolidation (Boost: +{round_half_up(self.sleep_benefit)}%) provides "
            "the optimal strategy."
        )


Plan = SleepPlan | StrategicCramPlan
