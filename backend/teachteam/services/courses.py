"""Course Service — listing and admin management of courses.

Invariants:
    - Public listings include only active courses, ordered by code
    - Course codes are unique across active AND inactive courses
    - Delete is soft (is_active = False); rows are never removed
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.errors import CourseCodeTakenError, ResourceNotFoundError
from teachteam.models.course import Course
from teachteam.schemas.course import CourseCreate, CourseUpdate
from teachteam.services.lookups import get_or_404

logger = logging.getLogger(__name__)


class CourseService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_active(self) -> list[Course]:
        result = await self.db.execute(
            select(Course).where(Course.is_active.is_(True)).order_by(Course.code),
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[Course]:
        result = await self.db.execute(select(Course).order_by(Course.code))
        return list(result.scalars().all())

    async def get(self, course_id: str | UUID) -> Course:
        return await get_or_404(self.db, Course, course_id, "Course")

    async def get_active(self, course_id: str | UUID) -> Course:
        course = await self.get(course_id)
        if not course.is_active:
            raise ResourceNotFoundError("Course", str(course_id))
        return course

    async def _find_by_code(self, code: str) -> Course | None:
        result = await self.db.execute(select(Course).where(Course.code == code))
        return result.scalar_one_or_none()

    async def create(self, data: CourseCreate) -> Course:
        if await self._find_by_code(data.code):
            raise CourseCodeTakenError(data.code)
        course = Course(
            code=data.code, name=data.name,
            semester=data.semester, year=data.year,
        )
        self.db.add(course)
        await self.db.commit()
        logger.info(f"Course {course.code} created", extra={"course_id": course.id})
        return course

    async def update(self, course_id: str | UUID, data: CourseUpdate) -> Course:
        course = await self.get(course_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        new_code = changes.get("code")
        if new_code and new_code != course.code:
            existing = await self._find_by_code(new_code)
            if existing is not None and existing.id != course.id:
                raise CourseCodeTakenError(new_code)
        for field_name, value in changes.items():
            setattr(course, field_name, value)
        await self.db.commit()
        logger.info(f"Course {course.code} updated", extra={"course_id": course.id})
        return course

    async def soft_delete(self, course_id: str | UUID) -> Course:
        course = await self.get(course_id)
        course.is_active = False
        await self.db.commit()
        logger.info(f"Course {course.code} deactivated", extra={"course_id": course.id})
        return course
