"""Recruitment candidate roster and interview scheduling."""

__version__ = "0.1.0"
