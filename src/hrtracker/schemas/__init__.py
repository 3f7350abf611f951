"""Pydantic schema definitions for roster records and configuration."""

from __future__ import annotations

from .candidate import (
    ApplicationStatus,
    Candidate,
    InterviewStatus,
    Tag,
)
from .config import AppConfig, load_config

__all__ = [
    "AppConfig",
    "ApplicationStatus",
    "Candidate",
    "InterviewStatus",
    "Tag",
    "load_config",
]
