"""Data models for Prof Match."""

from prof_match.models.analysis import (
    CareerGoals,
    ConsultingNeeds,
    RecommendedFocus,
    StudentAnalysis,
    StudentProfile,
)
from prof_match.models.professor import ProfessorRecord, ScoredCandidate
from prof_match.models.result import MatchReason, MatchResult

__all__ = [
    "CareerGoals",
    "ConsultingNeeds",
    "MatchReason",
    "MatchResult",
    "ProfessorRecord",
    "RecommendedFocus",
    "ScoredCandidate",
    "StudentAnalysis",
    "StudentProfile",
]
