"""Professor directory models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from prof_match.models._coercion import coerce_to_list, coerce_to_text
from prof_match.scoring.models import ScoreBreakdown


class ProfessorRecord(BaseModel):
    """Read-only snapshot of one professor from the directory."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    professor_id: str
    name: str = ""
    department: str = ""
    position: str = ""
    email: str = ""
    location: str = ""
    research_areas: list[str] = Field(default_factory=list)
    available_slots: int = Field(default=0, ge=0)

    @field_validator(
        "professor_id", "name", "department", "position", "email", "location", mode="before"
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return coerce_to_text(v)

    @field_validator("research_areas", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return coerce_to_list(v)

    @field_validator("available_slots", mode="before")
    @classmethod
    def coerce_slots(cls, v: Any) -> Any:
        if v is None or v == "":
            return 0
        # Negative counts mean no open slot
        if isinstance(v, (int, float)) and not isinstance(v, bool) and v < 0:
            return 0
        return v


class ScoredCandidate(ProfessorRecord):
    """A professor together with the score it earned for one student."""

    match_score: int = Field(ge=0, le=100)
    threshold: float
    score_breakdown: ScoreBreakdown | None = None

    @classmethod
    def from_record(
        cls,
        record: ProfessorRecord,
        match_score: int,
        threshold: float,
        score_breakdown: ScoreBreakdown | None = None,
    ) -> "ScoredCandidate":
        """Attach scoring results to a directory record."""
        return cls(
            **record.model_dump(),
            match_score=match_score,
            threshold=threshold,
            score_breakdown=score_breakdown,
        )

    @property
    def qualifies(self) -> bool:
        """Whether the candidate cleared its own threshold."""
        return self.match_score >= self.threshold
