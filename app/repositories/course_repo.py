"""Repository layer for Course persistence.

``CourseStore`` is the interface the lifecycle manager depends on. Two
adapters implement it: ``CourseRepository`` over an async SQLAlchemy session
and ``InMemoryCourseRepository``, a dict-backed fake for tests and for running
without a database.
"""
from __future__ import annotations
from typing import Dict, List, Protocol, runtime_checkable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.errors import CourseNotFoundError
from app.models.course import Course
from app.models.persisted_course import CourseRecord


@runtime_checkable
class CourseStore(Protocol):
    """Persistence operations required by the course lifecycle."""

    async def create(self, course: Course) -> Course:
        """Persist a new course and return it with its assigned id."""
        ...

    async def find(self, include_deleted: bool = False) -> List[Course]:
        """Return courses ordered by creation time, oldest first."""
        ...

    async def get(self, pk: int) -> Course:
        """Return the course with id ``pk`` or raise CourseNotFoundError."""
        ...

    async def replace(self, pk: int, course: Course) -> bool:
        """Overwrite the mutable fields of an active course.

        Raises CourseNotFoundError when ``pk`` does not exist. Returns False,
        writing nothing, when the stored course is already soft-deleted.
        """
        ...


class CourseRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    # CREATE -----------------------------------------------------------------
    async def create(self, course: Course) -> Course:
        record = CourseRecord.from_domain(course)
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record.to_domain()

    # READ -------------------------------------------------------------------
    async def find(self, include_deleted: bool = False) -> List[Course]:
        stmt = select(CourseRecord)
        if not include_deleted:
            stmt = stmt.where(CourseRecord.deleted_at.is_(None))
        stmt = stmt.order_by(CourseRecord.created_at.asc(), CourseRecord.id.asc())
        result = await self.session.execute(stmt)
        return [record.to_domain() for record in result.scalars().all()]

    async def get(self, pk: int) -> Course:
        result = await self.session.execute(
            select(CourseRecord)
            .where(CourseRecord.id == pk)
            .execution_options(populate_existing=True)
        )
        record = result.scalar_one_or_none()
        if not record:
            raise CourseNotFoundError(pk)
        return record.to_domain()

    # UPDATE -----------------------------------------------------------------
    async def replace(self, pk: int, course: Course) -> bool:
        # Conditional on the row still being active, so two racing soft
        # deletes cannot both apply.
        result = await self.session.execute(
            update(CourseRecord)
            .where(CourseRecord.id == pk, CourseRecord.deleted_at.is_(None))
            .values(
                name=course.name,
                status=course.status,
                updated_at=course.updated_at,
                deleted_at=course.deleted_at,
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        if result.rowcount:
            return True
        # Nothing matched: either the id is unknown or the row is deleted
        await self.get(pk)
        return False


class InMemoryCourseRepository:
    """Dict-backed ``CourseStore``. Records are copied in and out."""

    def __init__(self):
        self._records: Dict[int, Course] = {}
        self._next_id = 1

    async def create(self, course: Course) -> Course:
        stored = course.evolve(id=self._next_id)
        self._records[stored.id] = stored
        self._next_id += 1
        return stored.evolve()

    async def find(self, include_deleted: bool = False) -> List[Course]:
        courses = [
            c for c in self._records.values()
            if include_deleted or not c.is_deleted
        ]
        courses.sort(key=lambda c: (c.created_at, c.id))
        return [c.evolve() for c in courses]

    async def get(self, pk: int) -> Course:
        record = self._records.get(pk)
        if record is None:
            raise CourseNotFoundError(pk)
        return record.evolve()

    async def replace(self, pk: int, course: Course) -> bool:
        current = self._records.get(pk)
        if current is None:
            raise CourseNotFoundError(pk)
        if current.is_deleted:
            return False
        self._records[pk] = current.evolve(
            name=course.name,
            status=course.status,
            updated_at=course.updated_at,
            deleted_at=course.deleted_at,
        )
        return True
