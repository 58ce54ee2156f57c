"""Tests for the MatchScorer."""

import logging

import pytest

from prof_match.models.analysis import StudentAnalysis
from prof_match.models.professor import ProfessorRecord
from prof_match.scoring.algorithmic import MatchScorer, rescale
from prof_match.scoring.models import ScoreOutcome


@pytest.fixture
def scorer() -> MatchScorer:
    """Create a MatchScorer instance."""
    return MatchScorer()


class TestMatchScorerWeights:
    """Tests for MatchScorer weight configuration."""

    def test_weights_sum_to_hundred(self, scorer: MatchScorer) -> None:
        assert sum(scorer.WEIGHTS.values()) == 100

    def test_weights_contain_expected_keys(self, scorer: MatchScorer) -> None:
        assert scorer.WEIGHTS == {
            "research": 40,
            "career": 30,
            "department": 20,
            "availability": 10,
        }


class TestRescale:
    """Tests for mapping raw scores to presented scores."""

    @pytest.mark.parametrize(
        ("raw", "presented"),
        [(0, 60), (50, 75), (100, 90), (25, 68), (75, 83), (32.5, 70), (90, 87)],
    )
    def test_known_values(self, raw: float, presented: int) -> None:
        assert rescale(raw) == presented

    def test_rounds_half_up(self) -> None:
        # 82.5 rounds to 83, not to the even 82
        assert rescale(75) == 83

    def test_raw_above_hundred_keeps_order(self) -> None:
        assert rescale(112.5) == 94
        assert rescale(120) == 96

    def test_presented_value_clamped_to_hundred(self) -> None:
        assert rescale(500) == 100

    def test_monotonic(self) -> None:
        values = [rescale(raw) for raw in range(0, 101)]
        assert values == sorted(values)
        assert values[0] == 60
        assert values[-1] == 90


class TestMatchScorerBreakdown:
    """Tests for individual sub-scores."""

    def test_full_example(
        self,
        scorer: MatchScorer,
        ml_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
    ) -> None:
        breakdown = scorer.compute_breakdown(ml_professor, sample_analysis)

        assert breakdown.research == pytest.approx(60.0)  # similarity 1.5 * 40
        assert breakdown.career == 0.0
        assert breakdown.department == 20.0
        assert breakdown.availability == 10.0
        assert breakdown.raw_total == pytest.approx(90.0)

    def test_career_uses_target_field(
        self,
        scorer: MatchScorer,
        data_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
    ) -> None:
        breakdown = scorer.compute_breakdown(data_professor, sample_analysis)

        # "AI Ethics" vs "AI research" = 0.75
        assert breakdown.career == pytest.approx(22.5)
        assert breakdown.research == 0.0
        assert breakdown.department == 0.0

    def test_career_uses_path_type(self, scorer: MatchScorer) -> None:
        professor = ProfessorRecord(professor_id="p1", research_areas=["Industry Partnerships"])
        analysis = StudentAnalysis.model_validate(
            {
                "studentProfile": {"interests": ["art"]},
                "careerGoals": {"pathType": "industry", "targetField": "finance"},
            }
        )

        breakdown = scorer.compute_breakdown(professor, analysis)

        # "industry" appears in both: 1.5 * 2 / 3
        assert breakdown.career == pytest.approx(30.0)

    def test_department_match_is_case_sensitive(
        self,
        scorer: MatchScorer,
        ml_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
    ) -> None:
        professor = ml_professor.model_copy(update={"department": "computer science"})

        assert scorer.compute_breakdown(professor, sample_analysis).department == 0.0

    def test_no_slots_no_availability(
        self,
        scorer: MatchScorer,
        ml_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
    ) -> None:
        professor = ml_professor.model_copy(update={"available_slots": 0})

        assert scorer.compute_breakdown(professor, sample_analysis).availability == 0.0

    def test_empty_research_areas_score_zero(
        self, scorer: MatchScorer, sample_analysis: StudentAnalysis
    ) -> None:
        professor = ProfessorRecord(professor_id="p1", department="History")

        breakdown = scorer.compute_breakdown(professor, sample_analysis)

        assert breakdown.research == 0.0
        assert breakdown.career == 0.0
        assert breakdown.raw_total == 0.0


class TestMatchScorerEvaluate:
    """Tests for evaluate() and score()."""

    def test_evaluate_returns_outcome(
        self,
        scorer: MatchScorer,
        ml_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
    ) -> None:
        outcome = scorer.evaluate(ml_professor, sample_analysis)

        assert isinstance(outcome, ScoreOutcome)
        assert outcome.match_score == 87
        assert outcome.fallback is False
        assert outcome.breakdown is not None

    def test_score_returns_presented_value(
        self,
        scorer: MatchScorer,
        data_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
    ) -> None:
        assert scorer.score(data_professor, sample_analysis) == 70

    def test_presented_score_in_range(
        self,
        scorer: MatchScorer,
        candidate_pool: list[ProfessorRecord],
        sample_analysis: StudentAnalysis,
    ) -> None:
        for professor in candidate_pool:
            assert 60 <= scorer.score(professor, sample_analysis) <= 90

    def test_large_raw_score_clamped_to_hundred(self, scorer: MatchScorer) -> None:
        professor = ProfessorRecord(
            professor_id="p1",
            department="AI",
            research_areas=["ai ai ai"],
            available_slots=1,
        )
        analysis = StudentAnalysis.model_validate(
            {
                "studentProfile": {"major": "AI", "interests": ["ai ai ai"]},
                "careerGoals": {"targetField": "ai ai ai"},
            }
        )

        outcome = scorer.evaluate(professor, analysis)

        assert outcome.breakdown is not None
        assert outcome.breakdown.raw_total > 100
        assert outcome.match_score == 100

    def test_malformed_record_uses_neutral_score(
        self, scorer: MatchScorer, sample_analysis: StudentAnalysis
    ) -> None:
        broken = ProfessorRecord.model_construct(professor_id="broken", research_areas=None)

        outcome = scorer.evaluate(broken, sample_analysis)

        assert outcome.match_score == 60
        assert outcome.fallback is True
        assert outcome.breakdown is None
        assert outcome.error

    def test_logs_matching_details(
        self,
        scorer: MatchScorer,
        ml_professor: ProfessorRecord,
        sample_analysis: StudentAnalysis,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="prof_match.scoring.algorithmic"):
            scorer.evaluate(ml_professor, sample_analysis)

        record = next(r for r in caplog.records if "Matching details" in r.getMessage())
        details = record.match_details
        assert details["professor_id"] == "p-ml"
        assert details["scores"]["department"] == 20.0
        assert details["raw_score"] == pytest.approx(90.0)
        assert details["match_score"] == 87
