"""
Course lifecycle service

Validates and mutates course records on top of a ``CourseStore``. A course is
either active (``deleted_at`` is NULL) or soft-deleted; deleted courses are
hidden from listings, answer 410 on lookup and can no longer be replaced.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List

from app.errors import CourseGoneError
from app.models.course import Course, CourseInput
from app.repositories.course_repo import CourseStore
from app.utils.validation import validate_course_input

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CourseLifecycleManager:
    """Course create/list/get/replace/delete rules"""

    def __init__(self, store: CourseStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    async def create(self, course: CourseInput) -> Course:
        """
        Validate and persist a new course.

        Raises:
            InvalidArgumentError: If the name is empty or the status invalid
        """
        logger.info("Attempting to create new course")
        validate_course_input(course, "Creation failed.")

        now = self.clock()
        created = await self.store.create(
            Course(
                name=course.name,
                status=course.status,
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(
            f"Course {created.name} ({created.id}) created with status {created.status}"
        )
        return created

    async def list(self) -> List[Course]:
        """Active courses, oldest first."""
        logger.info("Listing non-deleted courses, oldest to newest")
        return await self.store.find(include_deleted=False)

    async def get_by_id(self, pk: int) -> Course:
        """
        Fetch an active course.

        Raises:
            CourseNotFoundError: If no course has this id
            CourseGoneError: If the course was soft-deleted
        """
        logger.info(f"Attempting to find course {pk}")
        course = await self.store.get(pk)
        if course.is_deleted:
            raise CourseGoneError(pk)
        return course

    async def replace_by_id(self, pk: int, course: CourseInput) -> None:
        """
        Replace the name and status of an active course and refresh
        ``updated_at``. ``id``, ``created_at`` and ``deleted_at`` are kept.

        Raises:
            InvalidArgumentError: If the name is empty or the status invalid
            CourseNotFoundError: If no course has this id
            CourseGoneError: If the course was soft-deleted
        """
        logger.info(f"Attempting to replace course {pk}")
        validate_course_input(course, f"Update of Course ({pk}) failed.")

        current = await self.store.get(pk)
        replacement = current.evolve(
            name=course.name,
            status=course.status,
            updated_at=self.clock(),
        )
        if not await self.store.replace(pk, replacement):
            raise CourseGoneError(pk)
        logger.info(
            f"Course {replacement.name} ({pk}) updated with status {replacement.status}"
        )

    async def delete_by_id(self, pk: int) -> None:
        """
        Soft-delete a course by stamping ``deleted_at``.

        A second delete of the same course raises ``CourseGoneError``.
        """
        course = await self.get_by_id(pk)

        now = self.clock()
        tombstone = course.evolve(deleted_at=now, updated_at=now)
        validate_course_input(
            CourseInput(name=tombstone.name, status=tombstone.status),
            f"Delete of Course ({pk}) failed.",
        )
        if not await self.store.replace(pk, tombstone):
            # Another request deleted it between our read and write
            raise CourseGoneError(
                pk,
                f"Delete failed. Course {course.name} (ID: {pk}) was deleted concurrently",
            )
        logger.info(f"Course {course.name} ({pk}) deleted at {now.isoformat()}")
