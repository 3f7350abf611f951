"""Predicate factories for filtering candidates and interviews."""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable

from ..schemas import ApplicationStatus, Candidate
from .interview import Interview

CandidatePredicate = Callable[[Candidate], bool]
InterviewPredicate = Callable[[Interview], bool]


def name_contains_keywords(keywords: Iterable[str]) -> CandidatePredicate:
    """Match candidates whose name contains any keyword as a whole word."""
    wanted = {keyword.lower() for keyword in keywords if keyword.strip()}

    def predicate(candidate: Candidate) -> bool:
        words = {word.lower() for word in candidate.name.split()}
        return bool(words & wanted)

    return predicate


def has_tag(label: str) -> CandidatePredicate:
    def predicate(candidate: Candidate) -> bool:
        return any(tag.label == label for tag in candidate.tags)

    return predicate


def has_application_status(status: ApplicationStatus | str) -> CandidatePredicate:
    status = ApplicationStatus(status)

    def predicate(candidate: Candidate) -> bool:
        return candidate.application_status == status

    return predicate


def interview_on_date(day: date) -> InterviewPredicate:
    def predicate(interview: Interview) -> bool:
        return interview.date == day

    return predicate


def interview_of_candidate(candidate: Candidate) -> InterviewPredicate:
    def predicate(interview: Interview) -> bool:
        return interview.candidate.is_same_candidate(candidate)

    return predicate
