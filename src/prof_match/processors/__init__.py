"""Matching and explanation processors."""

from prof_match.processors.explainer import LLMNarrativeGenerator, MatchExplainer
from prof_match.processors.matcher import ProfessorMatcher

__all__ = ["LLMNarrativeGenerator", "MatchExplainer", "ProfessorMatcher"]
