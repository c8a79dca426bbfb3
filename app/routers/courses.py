"""Courses router providing CRUD endpoints with soft delete.

Handlers stay thin: they translate HTTP payloads into ``CourseInput`` and the
lifecycle manager's errors into ``HTTPException``.
"""
from __future__ import annotations
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.config import get_session
from app.errors import CourseError
from app.models.course import CourseIn, CourseOut, CourseSummary, ErrorResponse
from app.repositories.course_repo import CourseRepository
from app.services.course_lifecycle import CourseLifecycleManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["Courses"])

# Helpers ------------------------------------------------------------------


async def _get_manager(
    session: AsyncSession = Depends(get_session),
) -> CourseLifecycleManager:
    return CourseLifecycleManager(CourseRepository(session))


def _http_error(exc: CourseError) -> HTTPException:
    logger.warning(f"Course request rejected ({exc.status_code}): {exc}")
    return HTTPException(status_code=exc.status_code, detail=str(exc))


def _errors(*codes: int) -> dict:
    return {code: {"model": ErrorResponse} for code in codes}

# Routes -------------------------------------------------------------------


@router.post(
    "",
    response_model=CourseOut,
    status_code=status.HTTP_200_OK,
    responses=_errors(400),
)
async def create_course(
    payload: CourseIn,
    response: Response,
    manager: CourseLifecycleManager = Depends(_get_manager),
):
    try:
        course = await manager.create(payload.to_input())
    except CourseError as exc:
        raise _http_error(exc)
    response.headers["Location"] = f"/courses/{course.id}"
    return course.to_dict()


@router.get("", response_model=List[CourseSummary])
async def list_courses(manager: CourseLifecycleManager = Depends(_get_manager)):
    courses = await manager.list()
    return [{"id": c.id, "name": c.name} for c in courses]


@router.get("/{course_id}", response_model=CourseOut, responses=_errors(404, 410))
async def get_course(
    course_id: int, manager: CourseLifecycleManager = Depends(_get_manager)
):
    try:
        course = await manager.get_by_id(course_id)
    except CourseError as exc:
        raise _http_error(exc)
    return course.to_dict()


@router.put(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_errors(400, 404, 410),
)
async def replace_course(
    course_id: int,
    payload: CourseIn,
    manager: CourseLifecycleManager = Depends(_get_manager),
):
    try:
        await manager.replace_by_id(course_id, payload.to_input())
    except CourseError as exc:
        raise _http_error(exc)
    return None


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_errors(404, 410),
)
async def delete_course(
    course_id: int, manager: CourseLifecycleManager = Depends(_get_manager)
):
    try:
        await manager.delete_by_id(course_id)
    except CourseError as exc:
        raise _http_error(exc)
    return None
