"""Candidate value objects and identity policy."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class InterviewStatus(str, Enum):
    NOT_SCHEDULED = "not_scheduled"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


class Tag(BaseModel):
    """Free-form label attached to a candidate."""

    label: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __str__(self) -> str:
        return self.label


class Candidate(BaseModel):
    """Immutable candidate record.

    Two notions of equality exist. ``==`` compares every field, while
    :meth:`is_same_candidate` compares identity fields only and is what the
    roster uses to reject duplicates.
    """

    name: str = Field(min_length=1)
    student_id: str = Field(min_length=1)
    phone: str = ""
    email: str = ""
    course: str = ""
    application_status: ApplicationStatus = ApplicationStatus.PENDING
    interview_status: InterviewStatus = InterviewStatus.NOT_SCHEDULED
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name", "student_id", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, (str, Tag, dict)):
            value = [value]
        return [Tag(label=item) if isinstance(item, str) else item for item in value]

    @field_serializer("tags")
    def _serialize_tags(self, tags: frozenset[Tag]) -> list[str]:
        return sorted(tag.label for tag in tags)

    def is_same_candidate(self, other: Candidate | None) -> bool:
        """Return True when ``other`` has the same student ID and name."""
        if other is self:
            return True
        return (
            other is not None
            and other.student_id == self.student_id
            and other.name == self.name
        )

    def with_changes(self, **changes: Any) -> Candidate:
        """Return a validated copy with ``changes`` applied."""
        payload = self.model_dump(mode="python")
        payload.update(changes)
        return Candidate.model_validate(payload)

    def tag_labels(self) -> list[str]:
        return sorted(tag.label for tag in self.tags)

    def __str__(self) -> str:
        return f"{self.name} ({self.student_id})"
