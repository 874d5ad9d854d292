from __future__ import annotations


class InvalidDateError(ValueError):
    """Raised when a reference or event date cannot be normalized into a calendar date."""
