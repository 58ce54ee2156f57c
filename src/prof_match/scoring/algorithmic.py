"""Weighted multi-factor scoring of a professor against a student analysis.

Computes deterministic, reproducible sub-scores and rescales their sum into
the range shown to students.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prof_match.models.analysis import StudentAnalysis
    from prof_match.models.professor import ProfessorRecord

from prof_match.scoring.models import ScoreBreakdown, ScoreOutcome
from prof_match.scoring.similarity import best_similarity, similarity

logger = logging.getLogger(__name__)


# Presented scores never drop below this, and it is also the neutral score
# used when a professor cannot be scored
PRESENTED_FLOOR = 60
PRESENTED_SPAN = 30
PRESENTED_CEILING = 100


def rescale(raw_score: float) -> int:
    """Map a raw 0-100 score onto the presented 60-90 range.

    Raw scores above 100 (possible because similarity is unclamped) keep
    rescaling linearly so their order is preserved; only the presented
    value is clamped to 100. Rounds half up.
    """
    presented = math.floor(PRESENTED_FLOOR + (max(raw_score, 0.0) / 100) * PRESENTED_SPAN + 0.5)
    return min(presented, PRESENTED_CEILING)


class MatchScorer:
    """Score professors for one student.

    Four weighted components: research overlap with the student's interests,
    research overlap with career goals, department equal to the major, and
    open advising slots.
    """

    WEIGHTS = {
        "research": 40,
        "career": 30,
        "department": 20,
        "availability": 10,
    }

    FALLBACK_SCORE = PRESENTED_FLOOR

    def evaluate(
        self,
        professor: ProfessorRecord,
        analysis: StudentAnalysis,
    ) -> ScoreOutcome:
        """Score a professor, substituting the neutral score on failure.

        Args:
            professor: Directory record to score.
            analysis: Structured student analysis.

        Returns:
            ScoreOutcome with the presented score and, unless the fallback
            was used, the sub-score breakdown.
        """
        try:
            breakdown = self.compute_breakdown(professor, analysis)
        except Exception as e:
            logger.warning(
                f"Could not score professor {getattr(professor, 'professor_id', '?')}, "
                f"using neutral score {self.FALLBACK_SCORE}: {e}"
            )
            return ScoreOutcome(
                match_score=self.FALLBACK_SCORE,
                fallback=True,
                error=str(e) or type(e).__name__,
            )

        match_score = rescale(breakdown.raw_total)
        details = {
            "professor_id": professor.professor_id,
            "name": professor.name,
            "scores": breakdown.model_dump(exclude={"raw_total"}),
            "raw_score": breakdown.raw_total,
            "match_score": match_score,
        }
        logger.info(
            f"Matching details for {professor.professor_id} ({professor.name}): "
            f"research={breakdown.research:.1f} career={breakdown.career:.1f} "
            f"department={breakdown.department:.0f} availability={breakdown.availability:.0f} "
            f"raw={breakdown.raw_total:.1f} presented={match_score}",
            extra={"match_details": details},
        )
        return ScoreOutcome(match_score=match_score, breakdown=breakdown)

    def score(self, professor: ProfessorRecord, analysis: StudentAnalysis) -> int:
        """Presented score for a professor (60-90, or 60 on failure)."""
        return self.evaluate(professor, analysis).match_score

    def compute_breakdown(
        self,
        professor: ProfessorRecord,
        analysis: StudentAnalysis,
    ) -> ScoreBreakdown:
        """Compute the weighted sub-scores. Raises on malformed input."""
        research = self._research_score(professor, analysis)
        career = self._career_score(professor, analysis)
        department = self._department_score(professor, analysis)
        availability = self._availability_score(professor)

        return ScoreBreakdown(
            research=research,
            career=career,
            department=department,
            availability=availability,
            raw_total=research + career + department + availability,
        )

    def _research_score(self, professor: ProfessorRecord, analysis: StudentAnalysis) -> float:
        """Best research area vs. interest similarity, weighted."""
        best = best_similarity(
            list(professor.research_areas), list(analysis.student_profile.interests)
        )
        return best * self.WEIGHTS["research"]

    def _career_score(self, professor: ProfessorRecord, analysis: StudentAnalysis) -> float:
        """Best research area vs. target field or path type similarity, weighted."""
        goals = analysis.career_goals
        best = max(
            (
                max(similarity(area, goals.target_field), similarity(area, goals.path_type))
                for area in professor.research_areas
            ),
            default=0.0,
        )
        return best * self.WEIGHTS["career"]

    def _department_score(self, professor: ProfessorRecord, analysis: StudentAnalysis) -> float:
        """Full weight when the department equals the major exactly."""
        if professor.department == analysis.student_profile.major:
            return float(self.WEIGHTS["department"])
        return 0.0

    def _availability_score(self, professor: ProfessorRecord) -> float:
        """Full weight when the professor has any open slot."""
        return float(self.WEIGHTS["availability"]) if professor.available_slots > 0 else 0.0
