from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from hrtracker.core import (
    ConflictingInterviewError,
    DuplicateCandidateInterviewError,
    Interview,
    InterviewNotFoundError,
    InterviewSchedule,
)
from hrtracker.schemas import Candidate

ALICE = Candidate(name="Alice Pauline", student_id="A0001")
BOB = Candidate(name="Bob Choo", student_id="A0002")
CARL = Candidate(name="Carl Kurz", student_id="A0003")
DANIEL = Candidate(name="Daniel Meier", student_id="A0004")

DAY = datetime(2022, 12, 23)


def at(hour: int, minute: int = 0) -> datetime:
    return DAY.replace(hour=hour, minute=minute)


def test_add_and_retrieve_interviews():
    schedule = InterviewSchedule()
    bookings = [
        Interview(candidate=ALICE, start=at(9)),
        Interview(candidate=BOB, start=at(9, 30)),
        Interview(candidate=CARL, start=at(10)),
    ]

    for booking in bookings:
        schedule.add_interview(booking)

    assert len(schedule) == 3
    assert schedule.interviews == tuple(bookings)
    assert all(schedule.has_interview(booking) for booking in bookings)


def test_same_candidate_rejected_even_at_different_time():
    schedule = InterviewSchedule([Interview(candidate=ALICE, start=at(10))])

    with pytest.raises(DuplicateCandidateInterviewError):
        schedule.add_interview(Interview(candidate=ALICE, start=at(14)))

    assert len(schedule) == 1


def test_duplicate_check_runs_before_conflict_check():
    schedule = InterviewSchedule([Interview(candidate=ALICE, start=at(10))])

    with pytest.raises(DuplicateCandidateInterviewError):
        schedule.add_interview(Interview(candidate=ALICE, start=at(10)))


def test_overlapping_window_rejected():
    schedule = InterviewSchedule([Interview(candidate=BOB, start=at(10))])

    with pytest.raises(ConflictingInterviewError):
        schedule.add_interview(Interview(candidate=CARL, start=at(10, 15)))

    schedule.add_interview(Interview(candidate=CARL, start=at(10, 30)))
    assert len(schedule) == 2


def test_interview_one_minute_before_end_conflicts():
    schedule = InterviewSchedule([Interview(candidate=BOB, start=at(10))])

    with pytest.raises(ConflictingInterviewError):
        schedule.add_interview(Interview(candidate=CARL, start=at(9, 31)))

    schedule.add_interview(Interview(candidate=CARL, start=at(9, 30)))


def test_remove_interview_requires_full_match():
    booking = Interview(candidate=ALICE, start=at(10))
    schedule = InterviewSchedule([booking])

    with pytest.raises(InterviewNotFoundError):
        schedule.remove_interview(Interview(candidate=ALICE, start=at(11)))

    schedule.remove_interview(booking)
    assert len(schedule) == 0


def test_rescheduling_is_remove_then_add():
    booking = Interview(candidate=ALICE, start=at(10))
    schedule = InterviewSchedule([booking, Interview(candidate=BOB, start=at(11))])

    schedule.remove_interview(booking)
    with pytest.raises(ConflictingInterviewError):
        schedule.add_interview(Interview(candidate=ALICE, start=at(11, 10)))
    schedule.add_interview(Interview(candidate=ALICE, start=at(12)))

    assert schedule.find_by_candidate(ALICE).start == at(12)


def test_set_interviews_is_all_or_nothing():
    schedule = InterviewSchedule([Interview(candidate=DANIEL, start=at(8))])

    with pytest.raises(ConflictingInterviewError):
        schedule.set_interviews(
            [
                Interview(candidate=ALICE, start=at(10)),
                Interview(candidate=BOB, start=at(10, 20)),
            ]
        )

    assert schedule.interviews == (Interview(candidate=DANIEL, start=at(8)),)


def test_query_helpers():
    schedule = InterviewSchedule([Interview(candidate=ALICE, start=at(10))])

    assert schedule.has_same_candidate_interview(Interview(candidate=ALICE, start=at(15)))
    assert schedule.has_conflicting_interview(Interview(candidate=BOB, start=at(10) + timedelta(minutes=5)))
    assert schedule.find_by_candidate(BOB) is None
