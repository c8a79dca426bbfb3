"""
Course Data Models

The ``Course`` dataclass is the record the lifecycle manager and the stores
exchange. The Pydantic models below only describe the HTTP payloads; they do
not enforce business rules (see ``app/utils/validation.py``), so invalid names
and statuses reach the manager and are reported as 400s rather than 422s.
"""

from dataclasses import dataclass, replace as dataclass_replace
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

VALID_STATUSES = ("scheduled", "in_production", "available")


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass
class Course:
    """A course record as stored. ``id`` is ``None`` until the store assigns it."""

    name: str
    status: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
    id: Optional[int] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def evolve(self, **changes) -> "Course":
        """Return a copy with ``changes`` applied."""
        return dataclass_replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "deletedAt": _iso(self.deleted_at),
        }


@dataclass
class CourseInput:
    """Client-supplied fields for create and replace."""

    name: Optional[str]
    status: Optional[str]


# API Request/Response Models
class CourseIn(BaseModel):
    """Request body for POST and PUT /courses.

    Other keys (``id``, ``createdAt``, ``deletedAt``...) are ignored; those
    fields are owned by the server.
    """
    name: Optional[str] = Field(None, description="Course name")
    status: Optional[str] = Field(
        None, description="One of scheduled, in_production, available"
    )

    def to_input(self) -> CourseInput:
        return CourseInput(name=self.name, status=self.status)


class CourseOut(BaseModel):
    id: int
    name: str
    status: str
    createdAt: str
    updatedAt: str
    deletedAt: Optional[str] = None


class CourseSummary(BaseModel):
    """Listing projection."""
    id: int
    name: str


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Error message")
    timestamp: str = Field(..., description="Time the error was produced")
    path: str = Field(..., description="Request URL")


class HealthCheckResponse(BaseModel):
    """Health check response model"""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Current environment")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    uptime: Optional[float] = Field(None, description="Uptime in seconds")
