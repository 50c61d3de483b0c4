"""Lecturer Service — lecturer listing and lecturer ↔ course assignment.

Invariants:
    - Only active courses can be assigned
    - Assigning an already-assigned course raises CourseAlreadyAssignedError (single add)
      but is skipped silently in bulk assignment
    - Assignment is written only through Lecturer.courses
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.errors import CourseAlreadyAssignedError, ResourceNotFoundError
from teachteam.models.lecturer import Lecturer
from teachteam.services.courses import CourseService
from teachteam.services.lookups import get_or_404

logger = logging.getLogger(__name__)


class LecturerService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, lecturer_id: str | UUID) -> Lecturer:
        return await get_or_404(self.db, Lecturer, lecturer_id, "Lecturer")

    async def list_all(self) -> list[Lecturer]:
        result = await self.db.execute(select(Lecturer).order_by(Lecturer.created_at))
        return list(result.scalars().all())

    async def assign_course(self, lecturer: Lecturer, course_id: str | UUID) -> None:
        course = await CourseService(self.db).get_active(course_id)
        if lecturer.teaches(course.id):
            raise CourseAlreadyAssignedError()
        lecturer.courses = [*lecturer.courses, course]
        await self.db.commit()
        logger.info(
            f"Course {course.code} assigned to lecturer",
            extra={"lecturer_id": lecturer.id, "course_id": course.id},
        )

    async def assign_courses(
        self, lecturer: Lecturer, course_ids: list[str | UUID],
    ) -> int:
        """Assign several courses at once. Returns how many were newly assigned."""
        courses = CourseService(self.db)
        added = []
        for course_id in course_ids:
            course = await courses.get_active(course_id)
            if not lecturer.teaches(course.id) and course not in added:
                added.append(course)
        if added:
            lecturer.courses = [*lecturer.courses, *added]
            await self.db.commit()
        logger.info(
            f"{len(added)} course(s) assigned to lecturer",
            extra={"lecturer_id": lecturer.id},
        )
        return len(added)

    async def remove_course(self, lecturer: Lecturer, course_id: str | UUID) -> None:
        course = await CourseService(self.db).get(course_id)
        if not lecturer.teaches(course.id):
            raise ResourceNotFoundError("Course assignment", str(course.id))
        lecturer.courses = [c for c in lecturer.courses if c.id != course.id]
        await self.db.commit()
        logger.info(
            f"Course {course.code} removed from lecturer",
            extra={"lecturer_id": lecturer.id, "course_id": course.id},
        )
