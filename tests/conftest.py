"""Pytest configuration and fixtures."""

import pytest

from prof_match.models.analysis import (
    CareerGoals,
    ConsultingNeeds,
    StudentAnalysis,
    StudentProfile,
)
from prof_match.models.professor import ProfessorRecord


@pytest.fixture
def sample_analysis() -> StudentAnalysis:
    """A third-year CS student interested in machine learning."""
    return StudentAnalysis(
        student_profile=StudentProfile(
            year=3,
            major="Computer Science",
            gpa=3.8,
            interests=["machine learning"],
        ),
        career_goals=CareerGoals(
            path_type="graduate school",
            target_field="AI research",
            preparation=["undergraduate research", "online courses"],
        ),
        consulting_needs=ConsultingNeeds(
            main_purpose="Choosing a research lab",
            specific_questions=["Which lab fits my interests?"],
            current_challenges=["No research experience yet"],
        ),
    )


@pytest.fixture
def ml_professor() -> ProfessorRecord:
    """Same department, research matches the student's interest.

    Scores research 60, career 0, department 20, availability 10:
    raw 90, presented 87, threshold 21.6.
    """
    return ProfessorRecord(
        professor_id="p-ml",
        name="Dr. Kim",
        department="Computer Science",
        position="Associate Professor",
        email="kim@example.edu",
        location="Engineering Hall 301",
        research_areas=["Machine Learning", "Robotics"],
        available_slots=2,
    )


@pytest.fixture
def data_professor() -> ProfessorRecord:
    """Other department, research overlaps the target field only.

    Scores research 0, career 22.5, department 0, availability 10:
    raw 32.5, presented 70, threshold 30.
    """
    return ProfessorRecord(
        professor_id="p-data",
        name="Dr. Lee",
        department="Statistics",
        position="Professor",
        email="lee@example.edu",
        research_areas=["Data Science", "AI Ethics"],
        available_slots=1,
    )


@pytest.fixture
def bio_professor() -> ProfessorRecord:
    """No overlap at all and no open slots: raw 0, presented 60, threshold 30."""
    return ProfessorRecord(
        professor_id="p-bio",
        name="Dr. Park",
        department="Biology",
        position="Assistant Professor",
        research_areas=["Genomics"],
        available_slots=0,
    )


@pytest.fixture
def candidate_pool(
    bio_professor: ProfessorRecord,
    data_professor: ProfessorRecord,
    ml_professor: ProfessorRecord,
) -> list[ProfessorRecord]:
    """Pool in an order different from the expected ranking."""
    return [bio_professor, data_professor, ml_professor]
