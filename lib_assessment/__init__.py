"""Personality assessment: question bank, scoring engine and report collaborators."""

from .engine.accumulator import AnswerAccumulator
from .engine.scorer import Report, score
from .engine.session import AssessmentSession
from .question_bank import DEFAULT_QUESTION_BANK, QuestionBank

__all__ = [
    "DEFAULT_QUESTION_BANK",
    "AnswerAccumulator",
    "AssessmentSession",
    "QuestionBank",
    "Report",
    "score",
]
