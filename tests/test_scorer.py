"""Tests for lib_assessment/engine/scorer.py - normalization, classification, report."""

from lib_assessment.engine.accumulator import AnswerAccumulator
from lib_assessment.engine.scorer import (
    Report,
    axis_totals,
    classify,
    normalize_axis,
    round_half_up,
    score,
)
from lib_assessment.errors import InsufficientData
from lib_assessment.personality_types import PERSONALITY_PROFILES
from lib_assessment.question_bank import DEFAULT_QUESTION_BANK
import pytest


QUADRANT_TYPES = {
    "Extroverted Thinker",
    "Extroverted Feeler",
    "Introverted Thinker",
    "Introverted Feeler",
}


def _acc(entries: list[tuple[int, str]]) -> AnswerAccumulator:
    """Accumulator from (weight, category) pairs on consecutive ids."""
    acc = AnswerAccumulator()
    for qid, (value, category) in enumerate(entries, start=1):
        acc.record_answer(qid, value, category)
    return acc


def _answer_bank(option_index: int) -> AnswerAccumulator:
    acc = AnswerAccumulator()
    for q in DEFAULT_QUESTION_BANK:
        opt = q.options[option_index]
        acc.record_answer(q.id, opt.value, opt.category)
    return acc


class TestRounding:
    def test_half_goes_up(self):
        assert round_half_up(121, 2) == 61
        assert round_half_up(1, 2) == 1

    def test_below_half_goes_down(self):
        assert round_half_up(200, 3) == 67
        assert round_half_up(100, 3) == 33

    def test_normalize_half_up(self):
        # 100 * 1 / 8 = 12.5
        assert normalize_axis(1, 7) == 13


class TestNormalizeAxis:
    def test_spec_scenario_eighty(self):
        assert normalize_axis(12, 3) == 80

    def test_one_pole_only(self):
        assert normalize_axis(24, 0) == 100
        assert normalize_axis(0, 9) == 0

    def test_zero_denominator(self):
        with pytest.raises(InsufficientData):
            normalize_axis(0, 0)

    @pytest.mark.parametrize("high,low", [(1, 1), (7, 3), (13, 29), (28, 0)])
    def test_poles_sum_to_hundred(self, high, low):
        pct = normalize_axis(high, low)
        assert 0 <= pct <= 100
        assert pct + (100 - pct) == 100
        assert normalize_axis(low, high) == 100 - pct


class TestClassify:
    def test_quadrants(self):
        assert classify(80, 80) == "Extroverted Thinker"
        assert classify(80, 20) == "Extroverted Feeler"
        assert classify(20, 80) == "Introverted Thinker"
        assert classify(40, 30) == "Introverted Feeler"

    def test_threshold_inclusive_high(self):
        assert classify(60, 0) == "Extroverted Feeler"
        assert classify(59, 0) == "Introverted Feeler"
        assert classify(0, 60) == "Introverted Thinker"
        assert classify(0, 59) == "Introverted Feeler"

    def test_total_over_grid(self):
        for e in range(101):
            for t in range(101):
                assert classify(e, t) in QUADRANT_TYPES

    def test_balanced_fallback_branch(self):
        """Values that fail every quadrant comparison land on Balanced."""
        assert classify(float("nan"), 50) == "Balanced"


class TestAxisTotals:
    def test_sums_per_category(self):
        totals = axis_totals(_acc([(4, "extroversion"), (2, "introversion"), (3, "thinking"), (1, "feeling"), (4, "extroversion")]))
        assert totals.extroversion == 8
        assert totals.introversion == 2
        assert totals.thinking == 3
        assert totals.feeling == 1

    def test_overwritten_answer_counts_once(self):
        acc = AnswerAccumulator()
        acc.record_answer(1, 4, "extroversion")
        acc.record_answer(1, 1, "introversion")
        totals = axis_totals(acc)
        assert totals.extroversion == 0
        assert totals.introversion == 1


class TestScore:
    def test_extroverted_thinker_scenario(self):
        acc = _acc(
            [(4, "extroversion")] * 3 + [(1, "introversion")] * 3
            + [(4, "thinking")] * 3 + [(1, "feeling")] * 3
        )
        report = score(acc)
        assert report.extroversion_pct == 80
        assert report.thinking_pct == 80
        assert report.personality_type == "Extroverted Thinker"
        assert report.overall_score == 80

    def test_introverted_feeler_scenario(self):
        # extroversion 2/(2+3) = 40, thinking 3/(3+7) = 30
        acc = _acc([(2, "extroversion"), (3, "introversion"), (3, "thinking"), (4, "feeling"), (3, "feeling")])
        report = score(acc)
        assert (report.extroversion_pct, report.thinking_pct) == (40, 30)
        assert report.personality_type == "Introverted Feeler"
        assert report.overall_score == 35

    def test_overall_score_half_up(self):
        # extroversion 12/15 = 80, thinking 13/20 = 65 -> overall 72.5 -> 73
        acc = _acc(
            [(4, "extroversion")] * 3 + [(1, "introversion")] * 3
            + [(4, "thinking")] * 3 + [(1, "thinking"), (4, "feeling"), (3, "feeling")]
        )
        report = score(acc)
        assert (report.extroversion_pct, report.thinking_pct) == (80, 65)
        assert report.overall_score == 73

    def test_all_high_options(self):
        report = score(_answer_bank(0))
        assert report.personality_type == "Extroverted Thinker"
        assert report.extroversion_pct == 100
        assert report.overall_score == 100

    def test_all_low_options(self):
        report = score(_answer_bank(3))
        assert report.personality_type == "Introverted Feeler"
        assert report.extroversion_pct == 0
        assert report.thinking_pct == 0

    def test_mixed_bank(self):
        # energy: 7 x weight 2 introversion -> 0%; decision: 5 x weight 3 thinking -> 100%
        acc = AnswerAccumulator()
        for q in DEFAULT_QUESTION_BANK:
            opt = q.options[2] if q.axis == "energy" else q.options[1]
            acc.record_answer(q.id, opt.value, opt.category)
        report = score(acc)
        assert report.personality_type == "Introverted Thinker"
        assert report.overall_score == 50

    def test_text_bundle_attached(self):
        report = score(_answer_bank(0))
        profile = PERSONALITY_PROFILES["Extroverted Thinker"]
        assert report.description == profile.description
        assert report.recommendations == list(profile.recommendations)

    def test_missing_axis_raises(self):
        with pytest.raises(InsufficientData):
            score(_acc([(4, "extroversion"), (1, "introversion")]))

    def test_empty_raises(self):
        with pytest.raises(InsufficientData):
            score(AnswerAccumulator())

    def test_deterministic(self):
        acc = _answer_bank(1)
        first = score(acc)
        second = score(acc)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_does_not_mutate_answers(self):
        acc = _answer_bank(1)
        before = acc.as_dict()
        score(acc)
        assert acc.as_dict() == before


class TestReportOutputs:
    def _report(self) -> Report:
        return score(_acc([(4, "extroversion"), (1, "introversion"), (3, "thinking"), (2, "feeling")]))

    def test_detailed_scores_are_complementary(self):
        report = self._report()
        detailed = report.detailed_scores()
        assert detailed.extroversion == report.extroversion_pct == 80
        assert detailed.introversion == 20
        assert detailed.thinking == report.thinking_pct == 60
        assert detailed.feeling == 40

    def test_export_dict_fields(self):
        data = self._report().to_export_dict()
        assert data["personalityType"] == "Extroverted Thinker"
        assert data["score"] == 70
        assert isinstance(data["description"], str)
        assert isinstance(data["recommendations"], list)
        assert data["detailedScores"] == {"extroversion": 80, "introversion": 20, "thinking": 60, "feeling": 40}

    def test_export_dict_without_detail(self):
        assert "detailedScores" not in self._report().to_export_dict(include_detailed=False)
