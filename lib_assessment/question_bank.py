"""Question bank for the personality assessment.

Holds the fixed, ordered battery of 12 multiple-choice questions. Every
question offers one option per weight 4..1 and stays on a single axis
(extroversion/introversion or thinking/feeling).
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, Field, field_validator

from lib_assessment.errors import OutOfRange


# ---------------------------------------------------------------------------
# Trait enums
# ---------------------------------------------------------------------------
TraitCategory = Literal["extroversion", "introversion", "thinking", "feeling"]
Axis = Literal["energy", "decision"]

TRAIT_CATEGORIES: tuple[str, ...] = get_args(TraitCategory)
VALID_WEIGHTS: frozenset[int] = frozenset({1, 2, 3, 4})

CATEGORY_AXIS: dict[str, Axis] = {
    "extroversion": "energy",
    "introversion": "energy",
    "thinking": "decision",
    "feeling": "decision",
}


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class Option(BaseModel):
    """A single selectable answer."""

    model_config = {"frozen": True}

    text: str = Field(..., min_length=1)
    value: int = Field(..., ge=1, le=4)
    category: TraitCategory


class Question(BaseModel):
    """A prompt with exactly four options, one per weight."""

    model_config = {"frozen": True}

    id: int = Field(..., ge=1)
    question: str = Field(..., min_length=1)
    options: tuple[Option, ...] = Field(..., min_length=4, max_length=4)

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: tuple[Option, ...]) -> tuple[Option, ...]:
        """One option per weight, all on the same axis."""
        if sorted(o.value for o in v) != [1, 2, 3, 4]:
            raise ValueError("options must cover weights 1-4 exactly once")
        if len({CATEGORY_AXIS[o.category] for o in v}) != 1:
            raise ValueError("options must not mix axes")
        return v

    @property
    def axis(self) -> Axis:
        return CATEGORY_AXIS[self.options[0].category]


class QuestionBank:
    """Immutable ordered sequence of questions."""

    def __init__(self, questions: list[Question] | tuple[Question, ...]) -> None:
        ids = [q.id for q in questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate question ids found")
        self._questions: tuple[Question, ...] = tuple(questions)
        self._by_id = {q.id: q for q in self._questions}

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self):
        return iter(self._questions)

    def question_count(self) -> int:
        return len(self._questions)

    def question_at(self, index: int) -> Question:
        """Return the question at *index*; raises ``OutOfRange`` outside [0, N)."""
        if not 0 <= index < len(self._questions):
            raise OutOfRange(f"Question index {index} outside [0, {len(self._questions)})")
        return self._questions[index]

    def question_ids(self) -> list[int]:
        return [q.id for q in self._questions]

    def get(self, question_id: int) -> Question | None:
        return self._by_id.get(question_id)


# ---------------------------------------------------------------------------
# Reference bank
# ---------------------------------------------------------------------------
def _q(qid: int, prompt: str, options: list[tuple[str, int, str]]) -> Question:
    return Question(
        id=qid,
        question=prompt,
        options=tuple(Option(text=t, value=v, category=c) for t, v, c in options),
    )


DEFAULT_QUESTIONS: tuple[Question, ...] = (
    _q(1, "In social situations, you usually:", [
        ("Seek out conversations with many people", 4, "extroversion"),
        ("Enjoy talking with a few close friends", 3, "extroversion"),
        ("Prefer to listen rather than talk", 2, "introversion"),
        ("Feel drained by too much social interaction", 1, "introversion"),
    ]),
    _q(2, "When making decisions, you tend to:", [
        ("Rely heavily on logic and facts", 4, "thinking"),
        ("Consider both logic and feelings", 3, "thinking"),
        ("Follow your gut feelings", 2, "feeling"),
        ("Prioritize how others will be affected", 1, "feeling"),
    ]),
    _q(3, "Your ideal weekend involves:", [
        ("Hosting a party or gathering", 4, "extroversion"),
        ("Going out with close friends", 3, "extroversion"),
        ("A quiet day with a good book", 2, "introversion"),
        ("Solo activities at home", 1, "introversion"),
    ]),
    _q(4, "When working on projects, you prefer to:", [
        ("Brainstorm with a team", 4, "extroversion"),
        ("Collaborate with a few people", 3, "extroversion"),
        ("Work independently with occasional input", 2, "introversion"),
        ("Work completely alone", 1, "introversion"),
    ]),
    _q(5, "In conflicts, you typically:", [
        ("Address issues directly with facts", 4, "thinking"),
        ("Try to find logical solutions", 3, "thinking"),
        ("Consider everyone's feelings first", 2, "feeling"),
        ("Seek harmony and compromise", 1, "feeling"),
    ]),
    _q(6, "You recharge your energy by:", [
        ("Being around lots of people", 4, "extroversion"),
        ("Socializing with friends", 3, "extroversion"),
        ("Having quiet time alone", 2, "introversion"),
        ("Engaging in solitary hobbies", 1, "introversion"),
    ]),
    _q(7, "When learning something new, you prefer:", [
        ("Group discussions and workshops", 4, "extroversion"),
        ("Interactive learning with others", 3, "extroversion"),
        ("Self-study with some guidance", 2, "introversion"),
        ("Independent research and practice", 1, "introversion"),
    ]),
    _q(8, "Your communication style is:", [
        ("Direct and straightforward", 4, "thinking"),
        ("Clear but considerate", 3, "thinking"),
        ("Gentle and tactful", 2, "feeling"),
        ("Very diplomatic and careful", 1, "feeling"),
    ]),
    _q(9, "In groups, you usually:", [
        ("Take charge and lead discussions", 4, "extroversion"),
        ("Actively participate in conversations", 3, "extroversion"),
        ("Contribute when you have something important to say", 2, "introversion"),
        ("Prefer to observe and listen", 1, "introversion"),
    ]),
    _q(10, "When stressed, you cope by:", [
        ("Talking through problems with others", 4, "extroversion"),
        ("Seeking advice from trusted friends", 3, "extroversion"),
        ("Taking time to think things through alone", 2, "introversion"),
        ("Withdrawing and processing internally", 1, "introversion"),
    ]),
    _q(11, "Your decision-making process involves:", [
        ("Analyzing all available data", 4, "thinking"),
        ("Weighing pros and cons logically", 3, "thinking"),
        ("Considering personal values", 2, "feeling"),
        ("Thinking about impact on relationships", 1, "feeling"),
    ]),
    _q(12, "You value feedback that is:", [
        ("Direct and specific", 4, "thinking"),
        ("Honest but constructive", 3, "thinking"),
        ("Delivered with care and empathy", 2, "feeling"),
        ("Focused on encouragement", 1, "feeling"),
    ]),
)

DEFAULT_QUESTION_BANK = QuestionBank(DEFAULT_QUESTIONS)
