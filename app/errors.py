"""Domain errors raised by the course lifecycle and its stores.

Each error carries the HTTP status the router maps it to, so callers outside
the HTTP layer can still tell the three failure kinds apart.
"""
from __future__ import annotations
from typing import Optional


class CourseError(Exception):
    """Base class for course lifecycle failures."""

    status_code = 500


class InvalidArgumentError(CourseError):
    """Raised when a course name or status fails validation."""

    status_code = 400


class CourseNotFoundError(CourseError):
    """Raised when a course record could not be located."""

    status_code = 404

    def __init__(self, pk: int, message: Optional[str] = None):
        super().__init__(message or f"No course found with ID {pk}")
        self.pk = pk


class CourseGoneError(CourseError):
    """Raised when a course exists but has been soft-deleted."""

    status_code = 410

    def __init__(self, pk: int, message: Optional[str] = None):
        super().__init__(message or f"Course with ID ({pk}) was already deleted")
        self.pk = pk
