"""Exception taxonomy for the assessment engine and its collaborators.

Every error is local and recoverable by the caller; nothing here is fatal
to the process and the engine never retries on its own.
"""

from __future__ import annotations


class AssessmentError(Exception):
    """Base class for all assessment errors."""


class InvalidAnswer(AssessmentError, ValueError):
    """Answer weight or trait category outside the allowed set."""


class OutOfRange(AssessmentError, IndexError):
    """Question index or navigation step outside the bank bounds."""


class AnswerRequired(AssessmentError):
    """The current question must be answered before moving forward."""


class IncompleteAssessment(AssessmentError):
    """Submit attempted while some questions are still unanswered."""


class InsufficientData(AssessmentError):
    """An axis has no recorded weight on either pole, so it cannot be normalized."""


class EmailDeliveryError(AssessmentError):
    """The report email could not be handed to the mail provider."""
