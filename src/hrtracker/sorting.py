"""Sort keys for reordering the candidate roster."""

from __future__ import annotations

from typing import Any, Callable

from .schemas import Candidate

SortKey = Callable[[Candidate], Any]

_STATUS_ORDER = {"pending": 0, "accepted": 1, "rejected": 2}
_INTERVIEW_ORDER = {"not_scheduled": 0, "scheduled": 1, "completed": 2}

SORT_KEYS: dict[str, SortKey] = {
    "name": lambda candidate: (candidate.name.casefold(), candidate.student_id),
    "student_id": lambda candidate: candidate.student_id.casefold(),
    "course": lambda candidate: (candidate.course.casefold(), candidate.name.casefold()),
    "application_status": lambda candidate: (
        _STATUS_ORDER[candidate.application_status.value],
        candidate.name.casefold(),
    ),
    "interview_status": lambda candidate: (
        _INTERVIEW_ORDER[candidate.interview_status.value],
        candidate.name.casefold(),
    ),
}


def sort_key(name: str) -> SortKey:
    try:
        return SORT_KEYS[name]
    except KeyError as exc:
        supported = ", ".join(sorted(SORT_KEYS))
        raise KeyError(f"Unsupported sort key: {name!r} (expected one of {supported})") from exc
