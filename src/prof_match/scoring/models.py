"""Pydantic models for professor match scoring."""

from pydantic import BaseModel, Field


class ScoreBreakdown(BaseModel):
    """Weighted sub-scores for one professor (already multiplied by weight)."""

    research: float = Field(ge=0)  # Research area vs. interests, up to 40
    career: float = Field(ge=0)  # Research area vs. career goals, up to 30
    department: float = Field(ge=0)  # Department equals major, 0 or 20
    availability: float = Field(ge=0)  # Has open advising slots, 0 or 10

    # Sum of the four components, before rescaling
    raw_total: float = Field(ge=0)


class ScoreOutcome(BaseModel):
    """Result of scoring one professor.

    ``fallback`` is set when the computation failed and the neutral score
    was substituted; ``breakdown`` is then ``None``.
    """

    match_score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown | None = None
    fallback: bool = False
    error: str | None = None
