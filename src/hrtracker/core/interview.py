"""Interview bookings and the time-window conflict rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from ..schemas import Candidate

INTERVIEW_DURATION = timedelta(minutes=30)


def windows_overlap(
    start_a: datetime,
    end_a: datetime,
    start_b: datetime,
    end_b: datetime,
) -> bool:
    """Return True when half-open windows ``[start, end)`` intersect.

    A window ending exactly when the other begins does not overlap it.
    """
    return start_a < end_b and start_b < end_a


def is_valid_datetime(value: datetime, now: datetime) -> bool:
    """Return True when ``value`` is strictly after ``now``."""
    return now < value


@dataclass(frozen=True, slots=True)
class Interview:
    """A candidate booked for a fixed-length interview starting at ``start``."""

    candidate: Candidate
    start: datetime
    end: datetime = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.candidate, Candidate):
            raise TypeError("Interview requires a candidate")
        if not isinstance(self.start, datetime):
            raise TypeError("Interview requires a start date-time")
        object.__setattr__(self, "end", self.start + INTERVIEW_DURATION)

    @property
    def date(self) -> date:
        return self.start.date()

    @property
    def start_time(self) -> time:
        return self.start.time()

    def is_same_interview_candidate(self, other: Interview | None) -> bool:
        if other is self:
            return True
        return other is not None and self.candidate.is_same_candidate(other.candidate)

    def conflicts_with(self, other: Interview) -> bool:
        return windows_overlap(self.start, self.end, other.start, other.end)

    def with_candidate(self, candidate: Candidate) -> Interview:
        return Interview(candidate=candidate, start=self.start)

    def __str__(self) -> str:
        return (
            f"{self.candidate.name} {self.candidate.student_id} "
            f"{self.date.isoformat()} {self.start_time.strftime('%H:%M')}"
        )
