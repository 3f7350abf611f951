"""Errors raised by the roster and interview schedule."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base exception for all tracker errors."""

    default_message = "Operation failed"

    def __init__(self, message: str | None = None, *, item: Any = None) -> None:
        super().__init__(message or self.default_message)
        self.item = item


class DuplicateItemError(TrackerError):
    default_message = "Operation would result in duplicate items"


class DuplicateItemsError(DuplicateItemError):
    """Raised when a bulk replacement contains duplicates among its own items."""

    default_message = "Items must not contain duplicates"


class ItemNotFoundError(TrackerError):
    default_message = "Item not found"


class DuplicateCandidateError(DuplicateItemError):
    default_message = "This candidate already exists in the roster"


class DuplicateCandidatesError(DuplicateItemsError, DuplicateCandidateError):
    default_message = "Candidate list must not contain the same candidate twice"


class CandidateNotFoundError(ItemNotFoundError):
    default_message = "Candidate not found in the roster"


class DuplicateCandidateInterviewError(DuplicateItemError):
    default_message = "This candidate already has a scheduled interview"


class ConflictingInterviewError(TrackerError):
    default_message = "Another interview is already scheduled within this time slot"


class InterviewNotFoundError(ItemNotFoundError):
    default_message = "Interview not found in the schedule"


class InvalidDateTimeError(TrackerError):
    default_message = "Interview date and time must be in the future"


__all__ = [
    "CandidateNotFoundError",
    "ConflictingInterviewError",
    "DuplicateCandidateError",
    "DuplicateCandidateInterviewError",
    "DuplicateCandidatesError",
    "DuplicateItemError",
    "DuplicateItemsError",
    "InterviewNotFoundError",
    "InvalidDateTimeError",
    "ItemNotFoundError",
    "TrackerError",
]
