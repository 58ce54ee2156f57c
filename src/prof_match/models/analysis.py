"""Structured student analysis models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from prof_match.models._coercion import (
    CAMEL_CONFIG,
    coerce_to_list,
    coerce_to_number,
    coerce_to_text,
)


class StudentProfile(BaseModel):
    """Academic background of the student."""

    model_config = CAMEL_CONFIG

    year: int | None = None
    major: str = ""
    gpa: float | None = None
    interests: list[str] = Field(default_factory=list)

    @field_validator("year", mode="before")
    @classmethod
    def coerce_year(cls, v: Any) -> int | None:
        number = coerce_to_number(v)
        return int(number) if number is not None else None

    @field_validator("gpa", mode="before")
    @classmethod
    def coerce_gpa(cls, v: Any) -> float | None:
        return coerce_to_number(v)

    @field_validator("major", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return coerce_to_text(v)

    @field_validator("interests", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return coerce_to_list(v)


class CareerGoals(BaseModel):
    """What the student wants to do after graduating."""

    model_config = CAMEL_CONFIG

    path_type: str = ""
    target_field: str = ""
    preparation: list[str] = Field(default_factory=list)

    @field_validator("path_type", "target_field", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return coerce_to_text(v)

    @field_validator("preparation", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return coerce_to_list(v)


class ConsultingNeeds(BaseModel):
    """Why the student is asking for advising."""

    model_config = CAMEL_CONFIG

    main_purpose: str = ""
    specific_questions: list[str] = Field(default_factory=list)
    current_challenges: list[str] = Field(default_factory=list)

    @field_validator("main_purpose", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return coerce_to_text(v)

    @field_validator("specific_questions", "current_challenges", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return coerce_to_list(v)


class RecommendedFocus(BaseModel):
    """Advising focus suggested by the extractor. Not used for scoring."""

    model_config = CAMEL_CONFIG

    strengths: list[str] = Field(default_factory=list)
    areas_to_improve: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)

    @field_validator("strengths", "areas_to_improve", "next_steps", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return coerce_to_list(v)


class StudentAnalysis(BaseModel):
    """Facts extracted from an advising conversation.

    Every field has a well-typed default, so downstream code can rely on
    total presence once a payload has been validated into this model.
    """

    model_config = CAMEL_CONFIG

    student_profile: StudentProfile = Field(default_factory=StudentProfile)
    career_goals: CareerGoals = Field(default_factory=CareerGoals)
    consulting_needs: ConsultingNeeds = Field(default_factory=ConsultingNeeds)
    recommended_focus: RecommendedFocus = Field(default_factory=RecommendedFocus)

    @field_validator(
        "student_profile", "career_goals", "consulting_needs", "recommended_focus", mode="before"
    )
    @classmethod
    def coerce_missing_section(cls, v: Any) -> Any:
        return {} if v is None else v
