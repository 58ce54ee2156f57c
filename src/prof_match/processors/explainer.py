"""Narrative explanation of the best match."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from prof_match.models.result import MatchReason
from prof_match.prompts.matching import MATCH_REASON_PROMPT

if TYPE_CHECKING:
    from prof_match.llm.base import LLMProvider
    from prof_match.models.analysis import StudentAnalysis
    from prof_match.models.professor import ScoredCandidate

logger = logging.getLogger(__name__)


class NarrativeGenerator(Protocol):
    """Anything that can write a match rationale."""

    def generate(self, candidate: ScoredCandidate, analysis: StudentAnalysis) -> str: ...


def _join(items: list[str]) -> str:
    return ", ".join(items) if items else "not specified"


def fallback_reason(candidate: ScoredCandidate) -> str:
    """Deterministic explanation used when no narrative can be generated."""
    return (
        f"{candidate.name} is an expert in {', '.join(candidate.research_areas)}, "
        "showing strong relevance to the student's interests and goals."
    )


class LLMNarrativeGenerator:
    """Write the rationale with a chat model."""

    def __init__(self, llm_provider: LLMProvider):
        self.llm_provider = llm_provider
        self.prompt = ChatPromptTemplate.from_template(MATCH_REASON_PROMPT)

    def generate(self, candidate: ScoredCandidate, analysis: StudentAnalysis) -> str:
        """Generate a 3-4 sentence rationale.

        Args:
            candidate: The best scored professor.
            analysis: Structured student analysis.

        Returns:
            The model's reply, stripped.
        """
        profile = analysis.student_profile
        goals = analysis.career_goals

        chain = self.prompt | self.llm_provider.get_chat_model() | StrOutputParser()
        reply = chain.invoke({
            "year": profile.year if profile.year is not None else "unknown",
            "major": profile.major or "unknown",
            "gpa": profile.gpa if profile.gpa is not None else "unknown",
            "interests": _join(profile.interests),
            "path_type": goals.path_type or "not specified",
            "target_field": goals.target_field or "not specified",
            "preparation": _join(goals.preparation),
            "main_purpose": analysis.consulting_needs.main_purpose or "not specified",
            "name": candidate.name,
            "department": candidate.department,
            "position": candidate.position,
            "research_areas": _join(candidate.research_areas),
            "match_score": candidate.match_score,
        })
        return reply.strip()


class MatchExplainer:
    """Explain a match, falling back to a template if the generator fails."""

    def __init__(self, generator: NarrativeGenerator | None = None):
        self.generator = generator

    def explain(self, candidate: ScoredCandidate, analysis: StudentAnalysis) -> MatchReason:
        """Return a generated rationale, or the deterministic template.

        Never raises: generator errors, timeouts and empty replies all
        produce a ``fallback`` reason.
        """
        if self.generator is None:
            return MatchReason(text=fallback_reason(candidate), source="fallback")

        try:
            text = self.generator.generate(candidate, analysis)
            if not isinstance(text, str) or not text.strip():
                raise ValueError("Narrative generator returned an empty response")
        except Exception as e:
            logger.warning(f"Match reason generation failed, using template: {e}")
            return MatchReason(
                text=fallback_reason(candidate),
                source="fallback",
                error=str(e) or type(e).__name__,
            )

        return MatchReason(text=text.strip(), source="generated")
