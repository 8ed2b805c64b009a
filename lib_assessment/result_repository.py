"""Repository for assessment result persistence (JSON file)."""

from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
from pathlib import Path
import threading
import uuid

from pydantic import BaseModel, Field

from lib_assessment.engine.accumulator import AnswerAccumulator, AnswerEntry
from lib_assessment.engine.scorer import Report


logger = logging.getLogger(__name__)

_DEFAULT_PATH = "assessment_results.json"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class AssessmentResult(BaseModel):
    """A stored report together with the raw answers that produced it."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    user_id: str = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    report: Report
    answers: dict[int, AnswerEntry] = Field(default_factory=dict)

    def answer_accumulator(self) -> AnswerAccumulator:
        return AnswerAccumulator.from_dict({k: v.model_dump() for k, v in self.answers.items()})


class ResultsDatabase(BaseModel):
    """On-disk document holding every stored result."""

    version: str = "1.0"
    results: list[AssessmentResult] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------
class ResultRepository:
    """Thread-safe persistence layer for AssessmentResult records."""

    def __init__(self, results_path: str = _DEFAULT_PATH) -> None:
        self._path = Path(results_path)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def save_result(
        self,
        user_id: str,
        report: Report,
        answers: AnswerAccumulator,
    ) -> AssessmentResult:
        """Append a new result and persist it (atomic write)."""
        result = AssessmentResult(
            user_id=user_id,
            report=report,
            answers=answers.as_dict(),
        )
        with self._lock:
            db = self._load_without_lock()
            self._atomic_write(ResultsDatabase(version=db.version, results=[*db.results, result]))
        logger.info("Stored result %s (%s) for user %s", result.id, report.personality_type, user_id)
        return result

    def get_result(self, result_id: str) -> AssessmentResult | None:
        """Look up a result by id."""
        with self._lock:
            db = self._load_without_lock()
        return next((r for r in db.results if r.id == result_id), None)

    def list_results_for_user(self, user_id: str) -> list[AssessmentResult]:
        """All results of *user_id*, newest first."""
        with self._lock:
            db = self._load_without_lock()
        # Ties on created_at fall back to insertion order.
        ordered = sorted(
            ((i, r) for i, r in enumerate(db.results) if r.user_id == user_id),
            key=lambda pair: (pair[1].created_at, pair[0]),
            reverse=True,
        )
        return [r for _, r in ordered]

    def delete_result(self, result_id: str) -> bool:
        """Remove a result; returns ``False`` when no such id exists."""
        with self._lock:
            db = self._load_without_lock()
            remaining = [r for r in db.results if r.id != result_id]
            if len(remaining) == len(db.results):
                return False
            self._atomic_write(ResultsDatabase(version=db.version, results=remaining))
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _load_without_lock(self) -> ResultsDatabase:
        if not self._path.exists():
            return ResultsDatabase()
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
            return ResultsDatabase.model_validate(data)
        except Exception as exc:
            raise ValueError(f"Failed to load assessment results: {exc}") from exc

    def _atomic_write(self, db: ResultsDatabase) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(db.model_dump(mode="json"), fh, indent=2, ensure_ascii=False)
            tmp.replace(self._path)
        except Exception as exc:
            if tmp.exists():
                tmp.unlink()
            raise ValueError(f"Failed to save assessment results: {exc}") from exc
