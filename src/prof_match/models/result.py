"""Match result models."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from prof_match.models.professor import ScoredCandidate

DEFAULT_NEXT_STEPS = [
    "Visit the department office to request an advising appointment",
    "Prepare your transcript and related materials",
    "Email a list of questions in advance",
]


class MatchReason(BaseModel):
    """Narrative explaining a match, and where it came from."""

    text: str
    source: Literal["generated", "fallback"]
    error: str | None = None


class MatchResult(BaseModel):
    """Outcome of one matching run: the best professor and up to two alternates."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    professor: ScoredCandidate
    match_reason: str
    reason_source: Literal["generated", "fallback"] = "fallback"
    alternative_matches: list[ScoredCandidate] = Field(default_factory=list, max_length=2)
    next_steps: list[str] = Field(default_factory=lambda: list(DEFAULT_NEXT_STEPS))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
