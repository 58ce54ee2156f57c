"""Rank candidate professors for a student."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from prof_match.errors import NoMatchError, NotFoundError, ValidationError
from prof_match.models.professor import ScoredCandidate
from prof_match.models.result import MatchResult
from prof_match.processors.explainer import MatchExplainer
from prof_match.scoring.algorithmic import MatchScorer
from prof_match.scoring.threshold import ThresholdPolicy

if TYPE_CHECKING:
    from prof_match.models.analysis import StudentAnalysis
    from prof_match.models.professor import ProfessorRecord
    from prof_match.processors.explainer import NarrativeGenerator
    from prof_match.sources import CandidateSource

logger = logging.getLogger(__name__)

MAX_ALTERNATIVES = 2


class ProfessorMatcher:
    """Score, filter and rank professors, then explain the best match.

    Flow:
    1. Check the analysis has interests and a target field
    2. Score every candidate and compute its threshold
    3. Keep candidates whose score reaches their threshold
    4. Sort by score (stable), take the best and up to two alternates
    5. Explain the best match, falling back to a template
    """

    def __init__(
        self,
        candidate_source: CandidateSource | None = None,
        narrative_generator: NarrativeGenerator | None = None,
        scorer: MatchScorer | None = None,
        threshold_policy: ThresholdPolicy | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            candidate_source: Directory used by ``match``. Not needed for ``rank``.
            narrative_generator: Writes the match reason. Without one the
                template reason is always used.
            scorer: Match scorer, default weights if omitted.
            threshold_policy: Threshold policy, default constants if omitted.
        """
        self.candidate_source = candidate_source
        self.explainer = MatchExplainer(narrative_generator)
        self.scorer = scorer or MatchScorer()
        self.threshold_policy = threshold_policy or ThresholdPolicy()

    def match(self, analysis: StudentAnalysis) -> MatchResult:
        """Fetch a fresh candidate pool and rank it."""
        if self.candidate_source is None:
            raise RuntimeError("ProfessorMatcher.match requires a candidate_source")
        # Validate before fetching so a bad analysis never costs a directory read
        self.validate_analysis(analysis)
        pool = self.candidate_source.fetch_all()
        logger.info(f"Fetched {len(pool)} candidate professors")
        return self._build_result(pool, analysis)

    def rank(
        self,
        candidate_pool: Sequence[ProfessorRecord],
        analysis: StudentAnalysis,
    ) -> MatchResult:
        """Rank the pool and build the match result.

        Raises:
            ValidationError: Analysis lacks interests or a target field.
            NotFoundError: The pool is empty.
            NoMatchError: No candidate reached its threshold.
        """
        self.validate_analysis(analysis)
        return self._build_result(candidate_pool, analysis)

    def _build_result(
        self,
        candidate_pool: Sequence[ProfessorRecord],
        analysis: StudentAnalysis,
    ) -> MatchResult:
        """Rank an already validated analysis against the pool."""
        if not candidate_pool:
            raise NotFoundError("No candidates: the professor pool is empty")

        ranked = self.rank_candidates(candidate_pool, analysis)
        if not ranked:
            raise NoMatchError("No suitable candidate: nobody reached their match threshold")

        best = ranked[0]
        alternatives = ranked[1 : 1 + MAX_ALTERNATIVES]
        logger.info(
            f"Best match {best.professor_id} ({best.match_score}) "
            f"with {len(alternatives)} alternatives out of {len(ranked)} qualified"
        )

        reason = self.explainer.explain(best, analysis)
        return MatchResult(
            professor=best,
            match_reason=reason.text,
            reason_source=reason.source,
            alternative_matches=alternatives,
        )

    def rank_candidates(
        self,
        candidate_pool: Sequence[ProfessorRecord],
        analysis: StudentAnalysis,
    ) -> list[ScoredCandidate]:
        """Score every candidate, drop those under threshold, sort by score."""
        scored: list[ScoredCandidate] = []
        for record in candidate_pool:
            outcome = self.scorer.evaluate(record, analysis)
            threshold = self.threshold_policy.threshold(record, analysis)
            scored.append(
                ScoredCandidate.from_record(
                    record,
                    match_score=outcome.match_score,
                    threshold=threshold,
                    score_breakdown=outcome.breakdown,
                )
            )

        qualified = [candidate for candidate in scored if candidate.qualifies]
        dropped = len(scored) - len(qualified)
        if dropped:
            logger.debug(f"{dropped} candidates fell below their threshold")

        # sorted() is stable, so ties keep pool order
        return sorted(qualified, key=lambda c: c.match_score, reverse=True)

    @staticmethod
    def validate_analysis(analysis: StudentAnalysis) -> None:
        """Check the fields matching cannot work without."""
        missing: list[str] = []
        if not analysis.student_profile.interests:
            missing.append("studentProfile.interests")
        if not analysis.career_goals.target_field:
            missing.append("careerGoals.targetField")
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
