"""Candidate roster and interview schedule components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .address_book import AddressBook
from .errors import (
    CandidateNotFoundError,
    ConflictingInterviewError,
    DuplicateCandidateError,
    DuplicateCandidateInterviewError,
    DuplicateCandidatesError,
    DuplicateItemError,
    DuplicateItemsError,
    InterviewNotFoundError,
    InvalidDateTimeError,
    ItemNotFoundError,
    TrackerError,
)
from .interview import INTERVIEW_DURATION, Interview, is_valid_datetime, windows_overlap
from .interview_schedule import InterviewSchedule
from .model_manager import PREDICATE_SHOW_ALL, PREDICATE_SHOW_EMPTY, ModelManager
from .unique_list import UniqueList

__all__ = [
    "AddressBook",
    "CandidateNotFoundError",
    "ConflictingInterviewError",
    "DuplicateCandidateError",
    "DuplicateCandidateInterviewError",
    "DuplicateCandidatesError",
    "DuplicateItemError",
    "DuplicateItemsError",
    "INTERVIEW_DURATION",
    "Interview",
    "InterviewNotFoundError",
    "InterviewSchedule",
    "InvalidDateTimeError",
    "ItemNotFoundError",
    "ModelManager",
    "PREDICATE_SHOW_ALL",
    "PREDICATE_SHOW_EMPTY",
    "TrackerError",
    "UniqueList",
    "is_valid_datetime",
    "windows_overlap",
]
