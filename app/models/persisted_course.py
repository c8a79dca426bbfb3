"""SQLAlchemy ORM models for persisted entities.

Separate from the dataclass and Pydantic models in course.py. This layer
manages persistence concerns only.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, declarative_base
from sqlalchemy import String, DateTime, Text

from app.models.course import Course

Base = declarative_base()


class CourseRecord(Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow
    )
    # NULL while the course is active
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, index=True
    )

    def to_domain(self) -> Course:
        return Course(
            id=self.id,
            name=self.name,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
            deleted_at=self.deleted_at,
        )

    @classmethod
    def from_domain(cls, course: Course) -> "CourseRecord":
        return cls(
            name=course.name,
            status=course.status,
            created_at=course.created_at,
            updated_at=course.updated_at,
            deleted_at=course.deleted_at,
        )
