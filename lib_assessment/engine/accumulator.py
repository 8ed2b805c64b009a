"""Answer accumulator: one selected (weight, category) per question id."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, Field

from lib_assessment.errors import InvalidAnswer
from lib_assessment.question_bank import TRAIT_CATEGORIES, VALID_WEIGHTS, QuestionBank, TraitCategory


class AnswerEntry(BaseModel):
    """The chosen option's weight and trait category."""

    model_config = {"frozen": True}

    value: int = Field(..., ge=1, le=4)
    category: TraitCategory


class AnswerAccumulator:
    """Mutable mapping of question id -> answer; later answers overwrite earlier ones."""

    def __init__(self) -> None:
        self._answers: dict[int, AnswerEntry] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def record_answer(self, question_id: int, value: int, category: str) -> AnswerEntry:
        """Insert or overwrite the answer for *question_id*."""
        if not isinstance(value, int) or isinstance(value, bool) or value not in VALID_WEIGHTS:
            raise InvalidAnswer(f"Answer weight must be one of 1-4, got {value!r}")
        if category not in TRAIT_CATEGORIES:
            raise InvalidAnswer(f"Unknown trait category {category!r}")
        entry = AnswerEntry(value=value, category=category)
        self._answers[int(question_id)] = entry
        return entry

    def get(self, question_id: int) -> AnswerEntry | None:
        return self._answers.get(question_id)

    def is_answered(self, question_id: int) -> bool:
        return question_id in self._answers

    def is_complete(self, bank: QuestionBank) -> bool:
        """True iff every question in *bank* has a recorded answer."""
        return all(qid in self._answers for qid in bank.question_ids())

    def answered_count(self) -> int:
        return len(self._answers)

    def total_count(self, bank: QuestionBank) -> int:
        return bank.question_count()

    def progress(self, bank: QuestionBank) -> float:
        """Share of *bank* answered, as a 0-100 percentage."""
        total = bank.question_count()
        if total == 0:
            return 0.0
        answered = sum(1 for qid in bank.question_ids() if qid in self._answers)
        return answered / total * 100

    def entries(self) -> Iterator[tuple[int, AnswerEntry]]:
        return iter(sorted(self._answers.items()))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def as_dict(self) -> dict[int, dict[str, Any]]:
        """Plain mapping used by the persistence layer."""
        return {qid: entry.model_dump() for qid, entry in sorted(self._answers.items())}

    @classmethod
    def from_dict(cls, data: Mapping[Any, Mapping[str, Any]]) -> AnswerAccumulator:
        """Rebuild from :meth:`as_dict` output; JSON string keys are accepted."""
        acc = cls()
        for qid, entry in data.items():
            acc.record_answer(int(qid), entry["value"], entry["category"])
        return acc

    def __len__(self) -> int:
        return len(self._answers)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._answers
