"""Scoring and classification of a completed assessment.

All functions are *pure*: no side-effects, no I/O. Percentages use
round-half-up in exact integer arithmetic so that results do not depend on
float representation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from lib_assessment.engine.accumulator import AnswerAccumulator
from lib_assessment.errors import InsufficientData
from lib_assessment.personality_types import PERSONALITY_PROFILES, PersonalityTypeName


HIGH_THRESHOLD = 60


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class AxisScore(BaseModel):
    """Raw summed option weights per category, pre-normalization."""

    extroversion: int = Field(default=0, ge=0)
    introversion: int = Field(default=0, ge=0)
    thinking: int = Field(default=0, ge=0)
    feeling: int = Field(default=0, ge=0)


class DetailedScores(BaseModel):
    """Four trait percentages for charting; each opposing pair sums to 100."""

    extroversion: int = Field(..., ge=0, le=100)
    introversion: int = Field(..., ge=0, le=100)
    thinking: int = Field(..., ge=0, le=100)
    feeling: int = Field(..., ge=0, le=100)


class Report(BaseModel):
    """Final scoring/classification output for one completed assessment."""

    model_config = {"frozen": True}

    personality_type: PersonalityTypeName
    overall_score: int = Field(..., ge=0, le=100)
    description: str
    recommendations: list[str]
    extroversion_pct: int = Field(..., ge=0, le=100)
    thinking_pct: int = Field(..., ge=0, le=100)

    def detailed_scores(self) -> DetailedScores:
        return DetailedScores(
            extroversion=self.extroversion_pct,
            introversion=100 - self.extroversion_pct,
            thinking=self.thinking_pct,
            feeling=100 - self.thinking_pct,
        )

    def to_export_dict(self, include_detailed: bool = True) -> dict[str, Any]:
        """Flat structure handed to export and email collaborators."""
        data: dict[str, Any] = {
            "personalityType": self.personality_type,
            "score": self.overall_score,
            "description": self.description,
            "recommendations": list(self.recommendations),
        }
        if include_detailed:
            data["detailedScores"] = self.detailed_scores().model_dump()
        return data


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest int, halves going up.

    Both arguments must be non-negative and *denominator* non-zero.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def axis_totals(answers: AnswerAccumulator) -> AxisScore:
    """Sum weights per category across all recorded answers."""
    totals = {"extroversion": 0, "introversion": 0, "thinking": 0, "feeling": 0}
    for _, entry in answers.entries():
        totals[entry.category] += entry.value
    return AxisScore(**totals)


def normalize_axis(high: int, low: int) -> int:
    """Percentage of *high* on a bipolar axis; raises ``InsufficientData`` if both poles are 0."""
    total = high + low
    if total == 0:
        raise InsufficientData("No answers recorded for either pole of the axis")
    return round_half_up(100 * high, total)


def classify(extroversion_pct: int, thinking_pct: int) -> PersonalityTypeName:
    """Map the two axis percentages to a personality type (60 is "high")."""
    if extroversion_pct >= HIGH_THRESHOLD and thinking_pct >= HIGH_THRESHOLD:
        return "Extroverted Thinker"
    elif extroversion_pct >= HIGH_THRESHOLD and thinking_pct < HIGH_THRESHOLD:
        return "Extroverted Feeler"
    elif extroversion_pct < HIGH_THRESHOLD and thinking_pct >= HIGH_THRESHOLD:
        return "Introverted Thinker"
    elif extroversion_pct < HIGH_THRESHOLD and thinking_pct < HIGH_THRESHOLD:
        return "Introverted Feeler"
    # Unreachable under the two-threshold policy; kept for looser policies.
    return "Balanced"


def score(answers: AnswerAccumulator) -> Report:
    """Turn recorded answers into a :class:`Report`."""
    totals = axis_totals(answers)
    extroversion_pct = normalize_axis(totals.extroversion, totals.introversion)
    thinking_pct = normalize_axis(totals.thinking, totals.feeling)

    personality_type = classify(extroversion_pct, thinking_pct)
    profile = PERSONALITY_PROFILES[personality_type]

    return Report(
        personality_type=personality_type,
        overall_score=round_half_up(extroversion_pct + thinking_pct, 2),
        description=profile.description,
        recommendations=list(profile.recommendations),
        extroversion_pct=extroversion_pct,
        thinking_pct=thinking_pct,
    )
