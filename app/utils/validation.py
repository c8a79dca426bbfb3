"""
Course validation utilities

Business rules for course input live here rather than in the Pydantic
payload models, so the lifecycle manager can report them with its own
messages and status codes.
"""

from typing import Optional

from ..errors import InvalidArgumentError
from ..models.course import VALID_STATUSES, CourseInput


def is_valid_status(status: Optional[str]) -> bool:
    """Return True if ``status`` is one of the enumerated course statuses."""
    return status in VALID_STATUSES


def validate_course_input(course: CourseInput, failure_prefix: str) -> None:
    """
    Check a candidate course before it is written.

    Args:
        course: Fields supplied by the client
        failure_prefix: Leading text for error messages, e.g.
            ``"Creation failed."``

    Raises:
        InvalidArgumentError: If the name is missing/empty or the status is
            not one of ``scheduled``, ``in_production``, ``available``
    """
    if course.name is None or course.name == "":
        raise InvalidArgumentError(f"{failure_prefix} Course name is required.")

    if not is_valid_status(course.status):
        raise InvalidArgumentError(
            f"{failure_prefix} {course.status} is not a valid status"
        )
