"""Where candidate professors come from."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

import pydantic

from prof_match.models.professor import ProfessorRecord

logger = logging.getLogger(__name__)


class CandidateSource(Protocol):
    """A professor directory. Each call returns a fresh snapshot."""

    def fetch_all(self) -> list[ProfessorRecord]: ...


def parse_records(items: Iterable[Any]) -> list[ProfessorRecord]:
    """Validate directory entries one by one, skipping the malformed ones."""
    records: list[ProfessorRecord] = []
    for index, item in enumerate(items):
        try:
            records.append(ProfessorRecord.model_validate(item))
        except pydantic.ValidationError as e:
            logger.warning(
                f"Skipping malformed professor record #{index}: "
                f"{e.error_count()} validation errors"
            )
    return records


class StaticCandidateSource:
    """Serve a fixed, in-memory list of professors."""

    def __init__(self, records: Iterable[ProfessorRecord]):
        self._records = list(records)

    def fetch_all(self) -> list[ProfessorRecord]:
        return list(self._records)


class JsonFileCandidateSource:
    """Read professors from a JSON array on disk, re-reading on every fetch."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_all(self) -> list[ProfessorRecord]:
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{self.path} must contain a JSON array of professors")
        return parse_records(data)
