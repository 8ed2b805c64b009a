"""Tests for lib_assessment/question_bank.py - models, reference bank, bounds."""

from lib_assessment.errors import OutOfRange
from lib_assessment.question_bank import (
    DEFAULT_QUESTION_BANK,
    Option,
    Question,
    QuestionBank,
)
from pydantic import ValidationError
import pytest


def _options(categories: list[str]) -> tuple[Option, ...]:
    return tuple(
        Option(text=f"opt {v}", value=v, category=c)
        for v, c in zip((4, 3, 2, 1), categories)
    )


class TestOption:
    def test_valid_option(self):
        opt = Option(text="Talk a lot", value=4, category="extroversion")
        assert opt.value == 4

    def test_weight_out_of_range(self):
        with pytest.raises(ValidationError):
            Option(text="x", value=5, category="extroversion")

    def test_unknown_category(self):
        with pytest.raises(ValidationError):
            Option(text="x", value=2, category="sensing")


class TestQuestion:
    def test_axis_pure_question(self):
        q = Question(
            id=1,
            question="Prompt?",
            options=_options(["thinking", "thinking", "feeling", "feeling"]),
        )
        assert q.axis == "decision"

    def test_mixed_axes_rejected(self):
        with pytest.raises(ValidationError, match="mix axes"):
            Question(
                id=1,
                question="Prompt?",
                options=_options(["extroversion", "thinking", "feeling", "feeling"]),
            )

    def test_duplicate_weights_rejected(self):
        opts = (
            Option(text="a", value=4, category="thinking"),
            Option(text="b", value=4, category="thinking"),
            Option(text="c", value=2, category="feeling"),
            Option(text="d", value=1, category="feeling"),
        )
        with pytest.raises(ValidationError, match="weights"):
            Question(id=1, question="Prompt?", options=opts)

    def test_requires_four_options(self):
        with pytest.raises(ValidationError):
            Question(id=1, question="Prompt?", options=_options(["thinking", "thinking", "feeling"]))


class TestQuestionBank:
    def test_duplicate_ids_rejected(self):
        q = Question(id=1, question="Q", options=_options(["thinking", "thinking", "feeling", "feeling"]))
        with pytest.raises(ValueError, match="Duplicate"):
            QuestionBank([q, q])

    def test_question_at_bounds(self):
        bank = DEFAULT_QUESTION_BANK
        assert bank.question_at(0).id == 1
        assert bank.question_at(bank.question_count() - 1).id == 12
        with pytest.raises(OutOfRange):
            bank.question_at(-1)
        with pytest.raises(OutOfRange):
            bank.question_at(bank.question_count())

    def test_get_by_id(self):
        assert DEFAULT_QUESTION_BANK.get(5).question == "In conflicts, you typically:"
        assert DEFAULT_QUESTION_BANK.get(99) is None


class TestReferenceBank:
    def test_twelve_questions_in_order(self):
        assert DEFAULT_QUESTION_BANK.question_count() == 12
        assert DEFAULT_QUESTION_BANK.question_ids() == list(range(1, 13))

    def test_both_axes_covered(self):
        axes = [q.axis for q in DEFAULT_QUESTION_BANK]
        assert axes.count("energy") == 7
        assert axes.count("decision") == 5

    def test_high_weights_on_first_pole(self):
        """Weights 4/3 belong to extroversion or thinking, 2/1 to the opposite pole."""
        for q in DEFAULT_QUESTION_BANK:
            by_value = {o.value: o.category for o in q.options}
            assert by_value[4] == by_value[3]
            assert by_value[2] == by_value[1]
            assert by_value[4] in ("extroversion", "thinking")

    def test_questions_are_immutable(self):
        q = DEFAULT_QUESTION_BANK.question_at(0)
        with pytest.raises(ValidationError):
            q.question = "changed"
