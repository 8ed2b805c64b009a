"""Personality type definitions for the assessment report.

Five types: four quadrants of the energy (extroversion/introversion) and
decision (thinking/feeling) axes, plus ``Balanced`` as the fallback.
Descriptions and recommendations are authored content, not computed.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


PersonalityTypeName = Literal[
    "Extroverted Thinker",
    "Extroverted Feeler",
    "Introverted Thinker",
    "Introverted Feeler",
    "Balanced",
]


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class PersonalityProfile(BaseModel):
    """Static text bundle attached to a resolved personality type."""

    model_config = {"frozen": True}

    name: PersonalityTypeName
    description: str = Field(..., min_length=5)
    recommendations: tuple[str, ...] = Field(..., min_length=1)
    color: str = Field(default="#6B7280")


# ---------------------------------------------------------------------------
# Pre-defined 5 personality types
# ---------------------------------------------------------------------------
PERSONALITY_PROFILES: dict[str, PersonalityProfile] = {
    "Extroverted Thinker": PersonalityProfile(
        name="Extroverted Thinker",
        description=(
            "You are energized by social interaction and prefer to make decisions based on logic "
            "and objective analysis. You're likely a natural leader who enjoys problem-solving "
            "and challenging discussions."
        ),
        recommendations=(
            "Consider careers in management, consulting, or entrepreneurship",
            "Join debate clubs or leadership organizations",
            "Seek roles that involve strategic planning and team coordination",
            "Practice active listening to balance your analytical approach",
        ),
        color="#3B82F6",
    ),
    "Extroverted Feeler": PersonalityProfile(
        name="Extroverted Feeler",
        description=(
            "You thrive in social settings and make decisions based on values and how they affect "
            "others. You're naturally empathetic and excel at building relationships and "
            "motivating people."
        ),
        recommendations=(
            "Explore careers in counseling, teaching, or human resources",
            "Volunteer for community organizations",
            "Develop skills in conflict resolution and mediation",
            "Consider roles in sales, marketing, or public relations",
        ),
        color="#22C55E",
    ),
    "Introverted Thinker": PersonalityProfile(
        name="Introverted Thinker",
        description=(
            "You prefer quiet environments for deep thinking and make decisions based on careful "
            "analysis. You're likely detail-oriented and excel at independent work requiring "
            "concentration."
        ),
        recommendations=(
            "Consider careers in research, engineering, or software development",
            "Seek roles that allow for independent work and minimal interruptions",
            "Develop expertise in specialized technical areas",
            "Practice presenting your ideas clearly to others",
        ),
        color="#8B5CF6",
    ),
    "Introverted Feeler": PersonalityProfile(
        name="Introverted Feeler",
        description=(
            "You value quiet reflection and make decisions based on personal values and empathy. "
            "You're likely creative, compassionate, and prefer meaningful one-on-one connections."
        ),
        recommendations=(
            "Explore careers in writing, art, or counseling",
            "Seek roles that align with your personal values",
            "Consider working in small teams or one-on-one settings",
            "Develop skills in creative expression and emotional intelligence",
        ),
        color="#EC4899",
    ),
    "Balanced": PersonalityProfile(
        name="Balanced",
        description=(
            "You show a balanced approach between different personality dimensions. You can adapt "
            "your style based on the situation, drawing from both introverted and extroverted, "
            "thinking and feeling approaches."
        ),
        recommendations=(
            "Consider careers that require versatility and adaptability",
            "Develop skills in multiple areas to leverage your flexibility",
            "Seek roles that offer variety in tasks and interactions",
            "Practice being intentional about when to use different approaches",
        ),
        color="#EAB308",
    ),
}

_FALLBACK_COLOR = "#6B7280"


def get_profile(name: str) -> PersonalityProfile | None:
    """Look up a personality profile by type name."""
    return PERSONALITY_PROFILES.get(name)


def type_color(name: str) -> str:
    """Display colour for a stored type label; grey for unknown labels."""
    profile = PERSONALITY_PROFILES.get(name)
    return profile.color if profile else _FALLBACK_COLOR
