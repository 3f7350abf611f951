"""JSON roster file loading and writing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pendulum
import structlog

from . import __version__
from .core import AddressBook, Interview, InterviewSchedule, ModelManager, TrackerError
from .schemas import Candidate
from .session import parse_datetime


class RosterLoadError(ValueError):
    """Raised when a roster file contains invalid or inconsistent records."""

    def __init__(self, errors: list[str], partial: ModelManager):
        super().__init__("Roster loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Roster loading failed: {self.errors}"


class RosterRepository:
    """Read and write the roster document at ``path``.

    The document holds ``candidates`` and ``interviews``; interviews refer to
    their candidate by student ID and name.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ModelManager:
        if not self._path.exists():
            self._logger.info("roster.missing", path=str(self._path))
            return ModelManager()

        with self._path.open("r", encoding="utf-8") as handle:
            try:
                document = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid roster JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise ValueError("Roster document must be a JSON object")

        errors: list[str] = []
        address_book = AddressBook()
        for idx, record in enumerate(_section(document, "candidates", errors), start=1):
            try:
                address_book.add_candidate(Candidate.model_validate(record))
            except TrackerError as exc:
                errors.append(f"candidate {idx}: {exc}")
            except ValueError as exc:
                errors.append(f"candidate {idx}: invalid record ({exc})")

        schedule = InterviewSchedule()
        for idx, record in enumerate(_section(document, "interviews", errors), start=1):
            try:
                schedule.add_interview(self._interview_from_record(record, address_book))
            except (TrackerError, KeyError, ValueError) as exc:
                errors.append(f"interview {idx}: {exc}")

        model = ModelManager(address_book, schedule)
        if errors:
            raise RosterLoadError(errors, model)
        self._logger.info(
            "roster.loaded",
            path=str(self._path),
            candidates=len(address_book),
            interviews=len(schedule),
        )
        return model

    def save(self, model: ModelManager) -> None:
        candidates = model.address_book.candidates
        interviews = model.interview_schedule.interviews
        payload = {
            "metadata": {
                "candidate_count": len(candidates),
                "interview_count": len(interviews),
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "candidates": [candidate.model_dump(mode="json") for candidate in candidates],
            "interviews": [_interview_to_record(interview) for interview in interviews],
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        self._logger.info("roster.saved", path=str(self._path), candidates=len(candidates))

    @staticmethod
    def _interview_from_record(record: Any, address_book: AddressBook) -> Interview:
        if not isinstance(record, dict):
            raise ValueError(f"expected an object, got {type(record).__name__}")
        student_id = record["student_id"]
        name = record["name"]
        if not isinstance(record["start"], str):
            raise ValueError("start must be a date-time string")
        start = parse_datetime(record["start"])
        for candidate in address_book.candidates:
            if candidate.student_id == student_id and candidate.name == name:
                return Interview(candidate=candidate, start=start)
        raise KeyError(f"unknown candidate {name!r} ({student_id})")


def _section(document: dict[str, Any], key: str, errors: list[str]) -> list[Any]:
    records = document.get(key, [])
    if not isinstance(records, list):
        errors.append(f"{key}: expected a list, got {type(records).__name__}")
        return []
    return records


def _interview_to_record(interview: Interview) -> dict[str, str]:
    return {
        "student_id": interview.candidate.student_id,
        "name": interview.candidate.name,
        "start": interview.start.isoformat(timespec="minutes"),
    }
