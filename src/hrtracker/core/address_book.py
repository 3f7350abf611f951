"""Candidate roster without duplicate candidates."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..schemas import Candidate
from .errors import (
    CandidateNotFoundError,
    DuplicateCandidateError,
    DuplicateCandidatesError,
)
from .unique_list import UniqueList


class AddressBook:
    """Roster of candidates; duplicates are detected with ``is_same_candidate``."""

    def __init__(self, candidates: Iterable[Candidate] | None = None) -> None:
        self._candidates: UniqueList[Candidate] = UniqueList(
            Candidate.is_same_candidate,
            duplicate_error=DuplicateCandidateError,
            duplicates_error=DuplicateCandidatesError,
            not_found_error=CandidateNotFoundError,
        )
        if candidates is not None:
            self.set_candidates(candidates)

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates.view()

    def set_candidates(self, candidates: Iterable[Candidate]) -> None:
        """Replace the roster; ``candidates`` must not contain duplicates."""
        self._candidates.set_all(candidates)

    def reset_data(self, other: AddressBook) -> None:
        self.set_candidates(other.candidates)

    def sort_candidates(
        self,
        key: Callable[[Candidate], Any],
        *,
        reverse: bool = False,
    ) -> None:
        """Reorder the roster by ``key``.

        Sorting works on a copy, then swaps it in whole. The reordered list holds
        the same candidates, so uniqueness still holds.
        """
        ordered = sorted(self._candidates.view(), key=key, reverse=reverse)
        self._candidates.set_all(ordered)

    def has_candidate(self, candidate: Candidate) -> bool:
        return self._candidates.contains(candidate)

    def add_candidate(self, candidate: Candidate) -> None:
        self._candidates.add(candidate)

    def set_candidate(self, target: Candidate, replacement: Candidate) -> None:
        self._candidates.set_item(target, replacement)

    def remove_candidate(self, candidate: Candidate) -> None:
        self._candidates.remove(candidate)

    def __len__(self) -> int:
        return len(self._candidates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._candidates == other._candidates

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{len(self)} candidates"
