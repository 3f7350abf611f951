"""Query layer exposing filtered views over the roster and schedule."""

from __future__ import annotations

from typing import Any, Callable

from ..schemas import Candidate
from .address_book import AddressBook
from .interview import Interview
from .interview_schedule import InterviewSchedule
from .predicates import CandidatePredicate, InterviewPredicate


def PREDICATE_SHOW_ALL(_: Any) -> bool:
    return True


def PREDICATE_SHOW_EMPTY(_: Any) -> bool:
    return False


class ModelManager:
    """Holds the roster, the schedule and the active filter for each.

    Filtered lists are recomputed on every read, so they always reflect the
    committed state of the underlying collections and the current predicate.
    """

    def __init__(
        self,
        address_book: AddressBook | None = None,
        interview_schedule: InterviewSchedule | None = None,
    ) -> None:
        self._address_book = address_book if address_book is not None else AddressBook()
        self._interview_schedule = (
            interview_schedule if interview_schedule is not None else InterviewSchedule()
        )
        self._candidate_predicate: CandidatePredicate = PREDICATE_SHOW_ALL
        self._interview_predicate: InterviewPredicate = PREDICATE_SHOW_ALL

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    @property
    def interview_schedule(self) -> InterviewSchedule:
        return self._interview_schedule

    # Filtered views

    @property
    def filtered_candidates(self) -> tuple[Candidate, ...]:
        predicate = self._candidate_predicate
        return tuple(c for c in self._address_book.candidates if predicate(c))

    @property
    def filtered_interviews(self) -> tuple[Interview, ...]:
        predicate = self._interview_predicate
        return tuple(i for i in self._interview_schedule.interviews if predicate(i))

    def update_filtered_candidate_list(self, predicate: CandidatePredicate) -> None:
        self._candidate_predicate = predicate

    def update_filtered_interview_list(self, predicate: InterviewPredicate) -> None:
        self._interview_predicate = predicate

    @property
    def has_no_candidates(self) -> bool:
        """True when the roster itself is empty, regardless of any filter."""
        return len(self._address_book) == 0

    # Roster

    def set_address_book(self, address_book: AddressBook) -> None:
        """Replace the roster, keeping only bookings whose candidate is still in it."""
        kept = []
        for interview in self._interview_schedule.interviews:
            match = next(
                (c for c in address_book.candidates if c.is_same_candidate(interview.candidate)),
                None,
            )
            if match is not None:
                kept.append(interview.with_candidate(match))
        self._address_book.reset_data(address_book)
        self._interview_schedule.set_interviews(kept)

    def has_candidate(self, candidate: Candidate) -> bool:
        return self._address_book.has_candidate(candidate)

    def add_candidate(self, candidate: Candidate) -> None:
        self._address_book.add_candidate(candidate)
        self.update_filtered_candidate_list(PREDICATE_SHOW_ALL)

    def set_candidate(self, target: Candidate, replacement: Candidate) -> None:
        """Replace ``target`` and move its booking, if any, to ``replacement``."""
        booking = self._interview_schedule.find_by_candidate(target)
        self._address_book.set_candidate(target, replacement)
        if booking is None:
            return
        # The roster already rejected a replacement matching another candidate,
        # so the rebound schedule has no duplicates and the same windows.
        self._interview_schedule.set_interviews(
            interview.with_candidate(replacement) if interview == booking else interview
            for interview in self._interview_schedule.interviews
        )

    def delete_candidate(self, candidate: Candidate) -> None:
        """Remove ``candidate`` and cancel their booking."""
        self._address_book.remove_candidate(candidate)
        booking = self._interview_schedule.find_by_candidate(candidate)
        if booking is not None:
            self._interview_schedule.remove_interview(booking)

    def sort_candidates(self, key: Callable[[Candidate], Any], *, reverse: bool = False) -> None:
        self._address_book.sort_candidates(key, reverse=reverse)

    # Schedule

    def has_interview(self, interview: Interview) -> bool:
        return self._interview_schedule.has_interview(interview)

    def interview_for(self, candidate: Candidate) -> Interview | None:
        return self._interview_schedule.find_by_candidate(candidate)

    def add_interview(self, interview: Interview) -> None:
        self._interview_schedule.add_interview(interview)
        self.update_filtered_interview_list(PREDICATE_SHOW_ALL)

    def delete_interview(self, interview: Interview) -> None:
        self._interview_schedule.remove_interview(interview)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._interview_schedule == other._interview_schedule
            and self.filtered_candidates == other.filtered_candidates
            and self.filtered_interviews == other.filtered_interviews
        )

    __hash__ = None  # type: ignore[assignment]
