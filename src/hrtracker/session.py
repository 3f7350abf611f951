"""Command-level operations over the roster and schedule."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Callable, Iterable, Iterator

import pendulum
import structlog

from .core import (
    PREDICATE_SHOW_ALL,
    Interview,
    InvalidDateTimeError,
    ModelManager,
    TrackerError,
    is_valid_datetime,
)
from .core.predicates import interview_on_date, name_contains_keywords
from .schemas import Candidate
from .sorting import sort_key


class InvalidIndexError(TrackerError, IndexError):
    default_message = "The index provided is not in the displayed list"


class NoCandidatesError(TrackerError):
    default_message = "There are no candidates in the system"


def local_now() -> datetime:
    """Current wall-clock time without timezone information."""
    return pendulum.now().naive()


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-like date-time string such as ``2022-12-23T10:00``."""
    try:
        parsed = pendulum.parse(value, exact=True, tz=None)
    except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
        raise ValueError(f"Invalid date-time: {value!r}") from exc
    if not isinstance(parsed, datetime):
        raise ValueError(f"Expected a date and a time, got {value!r}")
    if parsed.tzinfo is not None:
        raise ValueError(f"Date-times are local; drop the UTC offset from {value!r}")
    return datetime.combine(parsed.date(), parsed.time())


def parse_date(value: str) -> date:
    try:
        parsed = pendulum.parse(value, exact=True)
    except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
        raise ValueError(f"Invalid date: {value!r}") from exc
    if isinstance(parsed, datetime) or not isinstance(parsed, date):
        raise ValueError(f"Expected a date, got {value!r}")
    return date(parsed.year, parsed.month, parsed.day)


class TrackerSession:
    """Translate one user command into model calls and log the outcome.

    Indices are one-based and refer to the list currently displayed by the
    model's filtered views.
    """

    def __init__(
        self,
        *,
        model: ModelManager,
        now_provider: Callable[[], datetime] | None = None,
    ) -> None:
        self._model = model
        self._now_provider = now_provider or local_now
        self._logger = structlog.get_logger(__name__)

    @property
    def model(self) -> ModelManager:
        return self._model

    # Candidates

    def add_candidate(self, candidate: Candidate) -> Candidate:
        with self._reporting("candidate.add", student_id=candidate.student_id):
            self._model.add_candidate(candidate)
        self._logger.info("candidate.added", student_id=candidate.student_id, name=candidate.name)
        return candidate

    def edit_candidate(self, index: int, **changes: Any) -> Candidate:
        target = self._candidate_at(index)
        replacement = target.with_changes(**changes)
        with self._reporting("candidate.edit", student_id=target.student_id):
            self._model.set_candidate(target, replacement)
        self._logger.info(
            "candidate.edited",
            student_id=replacement.student_id,
            fields=sorted(changes),
        )
        return replacement

    def delete_candidate(self, index: int) -> Candidate:
        target = self._candidate_at(index)
        with self._reporting("candidate.delete", student_id=target.student_id):
            self._model.delete_candidate(target)
        self._logger.info("candidate.deleted", student_id=target.student_id)
        return target

    def list_candidates(self) -> tuple[Candidate, ...]:
        self._model.update_filtered_candidate_list(PREDICATE_SHOW_ALL)
        return self._model.filtered_candidates

    def find_candidates(self, keywords: Iterable[str]) -> tuple[Candidate, ...]:
        keywords = list(keywords)
        self._model.update_filtered_candidate_list(name_contains_keywords(keywords))
        found = self._model.filtered_candidates
        self._logger.info("candidate.find", keywords=keywords, matches=len(found))
        return found

    def sort_candidates(self, key: str, *, reverse: bool = False) -> tuple[Candidate, ...]:
        self._model.sort_candidates(sort_key(key), reverse=reverse)
        self._logger.info("candidate.sorted", key=key, reverse=reverse)
        return self._model.filtered_candidates

    # Interviews

    def schedule_interview(self, index: int, start: datetime) -> Interview:
        candidate = self._candidate_at(index)
        now = self._now_provider()
        if not is_valid_datetime(start, now):
            self._logger.warning(
                "interview.schedule.rejected",
                student_id=candidate.student_id,
                reason=InvalidDateTimeError.__name__,
                start=start.isoformat(),
            )
            raise InvalidDateTimeError(item=start)
        interview = Interview(candidate=candidate, start=start)
        with self._reporting("interview.schedule", student_id=candidate.student_id):
            self._model.add_interview(interview)
        self._logger.info(
            "interview.scheduled",
            student_id=candidate.student_id,
            start=interview.start.isoformat(),
            end=interview.end.isoformat(),
        )
        return interview

    def unschedule_interview(self, index: int) -> Interview:
        interviews = self._model.filtered_interviews
        if not 1 <= index <= len(interviews):
            raise InvalidIndexError(item=index)
        interview = interviews[index - 1]
        self._model.delete_interview(interview)
        self._logger.info("interview.cancelled", student_id=interview.candidate.student_id)
        return interview

    def list_interviews(self, on: date | None = None) -> tuple[Interview, ...]:
        predicate = interview_on_date(on) if on is not None else PREDICATE_SHOW_ALL
        self._model.update_filtered_interview_list(predicate)
        return self._model.filtered_interviews

    def _candidate_at(self, index: int) -> Candidate:
        if self._model.has_no_candidates:
            raise NoCandidatesError()
        candidates = self._model.filtered_candidates
        if not 1 <= index <= len(candidates):
            raise InvalidIndexError(item=index)
        return candidates[index - 1]

    @contextmanager
    def _reporting(self, event: str, **fields: Any) -> Iterator[None]:
        try:
            yield
        except TrackerError as exc:
            self._logger.warning(
                f"{event}.rejected",
                reason=type(exc).__name__,
                message=str(exc),
                **fields,
            )
            raise
