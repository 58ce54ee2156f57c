"""Deterministic professor match scoring.

- Token-overlap similarity between free-text phrases
- Weighted research/career/department/availability scoring
- Per-professor acceptance thresholds
"""

from prof_match.scoring.algorithmic import MatchScorer, rescale
from prof_match.scoring.models import ScoreBreakdown, ScoreOutcome
from prof_match.scoring.similarity import similarity, tokenize
from prof_match.scoring.threshold import ThresholdPolicy

__all__ = [
    "MatchScorer",
    "ScoreBreakdown",
    "ScoreOutcome",
    "ThresholdPolicy",
    "rescale",
    "similarity",
    "tokenize",
]
