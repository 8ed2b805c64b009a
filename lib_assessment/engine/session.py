"""Assessment session: linear question navigation ending in a scored report.

States: ``in_progress`` (with a current question index) -> ``complete``
(holding the report). Guards raise instead of silently clamping.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, Literal, Protocol

from lib_assessment.engine.accumulator import AnswerAccumulator, AnswerEntry
from lib_assessment.engine.scorer import Report, score
from lib_assessment.errors import AnswerRequired, AssessmentError, IncompleteAssessment, OutOfRange
from lib_assessment.question_bank import DEFAULT_QUESTION_BANK, Question, QuestionBank

if TYPE_CHECKING:
    from lib_assessment.result_repository import AssessmentResult


logger = logging.getLogger(__name__)

SessionState = Literal["in_progress", "complete"]


class ResultStore(Protocol):
    """Persistence handle accepted by :meth:`AssessmentSession.submit`."""

    def save_result(
        self, user_id: str, report: Report, answers: AnswerAccumulator
    ) -> AssessmentResult: ...


class AssessmentSession:
    """One user's pass through the question bank."""

    def __init__(
        self,
        bank: QuestionBank = DEFAULT_QUESTION_BANK,
        answers: AnswerAccumulator | None = None,
    ) -> None:
        if bank.question_count() == 0:
            raise ValueError("Question bank is empty")
        self.bank = bank
        self.answers = answers if answers is not None else AnswerAccumulator()
        self._index = 0
        self._report: Report | None = None
        self._saved: AssessmentResult | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def state(self) -> SessionState:
        return "complete" if self._report is not None else "in_progress"

    @property
    def is_complete(self) -> bool:
        return self._report is not None

    @property
    def report(self) -> Report | None:
        return self._report

    @property
    def saved_result(self) -> AssessmentResult | None:
        """Record returned by the store on a persisted submit."""
        return self._saved

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def is_last_question(self) -> bool:
        return self._index == self.bank.question_count() - 1

    @property
    def can_proceed(self) -> bool:
        """Whether the current question has an answer."""
        return self.answers.is_answered(self.current_question().id)

    def current_question(self) -> Question:
        return self.bank.question_at(self._index)

    def progress(self) -> float:
        """Position-based progress (0-100) for the progress bar."""
        return (self._index + 1) / self.bank.question_count() * 100

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def answer_current(self, value: int, category: str) -> AnswerEntry:
        self._ensure_in_progress()
        return self.answers.record_answer(self.current_question().id, value, category)

    def advance(self) -> int:
        """Move to the next question; returns the new index."""
        self._ensure_in_progress()
        if not self.can_proceed:
            raise AnswerRequired(f"Question {self.current_question().id} has no answer")
        if self.is_last_question:
            raise OutOfRange("Already at the last question")
        self._index += 1
        return self._index

    def retreat(self) -> int:
        """Move to the previous question; returns the new index."""
        self._ensure_in_progress()
        if self._index == 0:
            raise OutOfRange("Already at the first question")
        self._index -= 1
        return self._index

    def submit(
        self,
        repository: ResultStore | None = None,
        user_id: str | None = None,
    ) -> Report:
        """Score the answers and complete the session.

        When *repository* is given the report is saved for *user_id* before the
        session completes; a failed save leaves the session in progress so the
        caller can retry.
        """
        if repository is not None and not user_id:
            raise ValueError("user_id is required when saving the result")
        if self._report is not None:
            # Completed without a store earlier: persist the cached report once.
            if repository is not None and self._saved is None:
                self._save(repository, user_id, self._report)
            return self._report
        if not self.answers.is_complete(self.bank):
            missing = [qid for qid in self.bank.question_ids() if not self.answers.is_answered(qid)]
            raise IncompleteAssessment(f"Unanswered questions: {missing}")

        report = score(self.answers)
        if repository is not None:
            self._save(repository, user_id, report)
        self._report = report
        return report

    def _save(self, repository: ResultStore, user_id: str, report: Report) -> None:
        self._saved = repository.save_result(user_id, report, self.answers)
        logger.info("Saved assessment result %s for user %s", self._saved.id, user_id)

    def _ensure_in_progress(self) -> None:
        if self._report is not None:
            raise AssessmentError("Assessment already submitted")


SESSION_KEY = "assessment_session"


def start_new_session(
    state: MutableMapping[str, Any], bank: QuestionBank = DEFAULT_QUESTION_BANK
) -> AssessmentSession:
    """Replace the session stored in *state* with a fresh one at question 1."""
    session = AssessmentSession(bank)
    state[SESSION_KEY] = session
    return session
