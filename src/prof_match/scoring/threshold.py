"""Per-professor minimum acceptance score."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prof_match.models.analysis import StudentAnalysis
    from prof_match.models.professor import ProfessorRecord

from prof_match.scoring.similarity import similarity


class ThresholdPolicy:
    """Compute the score a professor must reach to be recommended.

    The threshold lives in raw score space (0-100) but is compared against
    the presented score. Same-department professors and professors whose
    research clearly overlaps the student's interests get a lower bar; both
    discounts stack, down to ``floor``.
    """

    def __init__(
        self,
        base: float = 30.0,
        floor: float = 20.0,
        department_discount: float = 0.8,
        overlap_discount: float = 0.9,
        overlap_cutoff: float = 0.5,
    ) -> None:
        self.base = base
        self.floor = floor
        self.department_discount = department_discount
        self.overlap_discount = overlap_discount
        self.overlap_cutoff = overlap_cutoff

    def threshold(self, professor: ProfessorRecord, analysis: StudentAnalysis) -> float:
        """Minimum presented score this professor needs to qualify."""
        value = self.base

        if professor.department == analysis.student_profile.major:
            value *= self.department_discount

        if self.has_topical_overlap(professor, analysis):
            value *= self.overlap_discount

        return max(value, self.floor)

    def has_topical_overlap(self, professor: ProfessorRecord, analysis: StudentAnalysis) -> bool:
        """True if any research area is clearly similar to any interest."""
        return any(
            similarity(area, interest) > self.overlap_cutoff
            for area in professor.research_areas
            for interest in analysis.student_profile.interests
        )
