"""Interview bookings guarded against duplicate candidates and overlaps."""

from __future__ import annotations

from typing import Iterable, Iterator

from ..schemas import Candidate
from .errors import (
    ConflictingInterviewError,
    DuplicateCandidateInterviewError,
    InterviewNotFoundError,
)
from .interview import Interview
from .unique_list import UniqueList


class InterviewSchedule:
    """Collection of interviews, at most one per candidate, none overlapping."""

    def __init__(self, interviews: Iterable[Interview] | None = None) -> None:
        self._interviews: UniqueList[Interview] = UniqueList(
            Interview.is_same_interview_candidate,
            duplicate_error=DuplicateCandidateInterviewError,
            not_found_error=InterviewNotFoundError,
        )
        if interviews is not None:
            self.set_interviews(interviews)

    @property
    def interviews(self) -> tuple[Interview, ...]:
        return self._interviews.view()

    def has_interview(self, interview: Interview) -> bool:
        return interview in self._interviews.view()

    def has_same_candidate_interview(self, interview: Interview) -> bool:
        return self._interviews.contains(interview)

    def has_conflicting_interview(self, interview: Interview) -> bool:
        return any(existing.conflicts_with(interview) for existing in self._interviews)

    def find_by_candidate(self, candidate: Candidate) -> Interview | None:
        for interview in self._interviews:
            if interview.candidate.is_same_candidate(candidate):
                return interview
        return None

    def add_interview(self, interview: Interview) -> None:
        """Book ``interview``.

        The same-candidate check runs first, so rebooking a candidate into the
        slot they already hold reports a duplicate rather than a conflict.
        """
        if self.has_same_candidate_interview(interview):
            raise DuplicateCandidateInterviewError(item=interview)
        if self.has_conflicting_interview(interview):
            raise ConflictingInterviewError(item=interview)
        self._interviews.add(interview)

    def remove_interview(self, interview: Interview) -> None:
        if not self.has_interview(interview):
            raise InterviewNotFoundError(item=interview)
        self._interviews.remove(interview)

    def set_interviews(self, interviews: Iterable[Interview]) -> None:
        """Replace every booking; nothing changes if any booking is rejected."""
        staged = InterviewSchedule()
        for interview in interviews:
            staged.add_interview(interview)
        self._interviews.set_all(staged.interviews)

    def __iter__(self) -> Iterator[Interview]:
        return iter(self._interviews)

    def __len__(self) -> int:
        return len(self._interviews)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterviewSchedule):
            return NotImplemented
        return self._interviews == other._interviews

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{len(self)} interviews"
