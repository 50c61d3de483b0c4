"""Statistics Service — fetches applications and hands them to core.statistics.

Invariants:
    - Lecturer statistics cover only courses assigned to that lecturer
    - A lecturer with no courses gets zeroed statistics, not an error
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.domain_types import ApplicationStatus
from teachteam.core.statistics import (
    compute_course_statistics, compute_lecturer_statistics,
    empty_lecturer_statistics,
)
from teachteam.models.application import CandidateApplication
from teachteam.models.candidate import Candidate
from teachteam.models.course import Course
from teachteam.models.lecturer import Lecturer
from teachteam.services.courses import CourseService
from teachteam.services.presenters import to_record

TOP_COURSES_LIMIT = 5


class StatisticsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _records_for_courses(self, course_ids) -> list:
        result = await self.db.execute(
            select(CandidateApplication)
            .where(CandidateApplication.course_id.in_(course_ids))
            .order_by(CandidateApplication.created_at),
        )
        return [to_record(app) for app in result.scalars().all()]

    async def lecturer_statistics(self, lecturer: Lecturer) -> dict:
        if not lecturer.course_ids:
            return empty_lecturer_statistics()
        records = await self._records_for_courses(lecturer.course_ids)
        return compute_lecturer_statistics(records)

    async def course_statistics(self, course_id: str | UUID) -> dict:
        course = await CourseService(self.db).get(course_id)
        records = await self._records_for_courses([course.id])
        return {
            "course": {"id": str(course.id), "code": course.code, "name": course.name},
            **compute_course_statistics(records),
        }

    async def _count(self, model) -> int:
        result = await self.db.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    async def system_statistics(self) -> dict:
        status_rows = await self.db.execute(
            select(CandidateApplication.status, func.count())
            .group_by(CandidateApplication.status),
        )
        top_rows = await self.db.execute(
            select(Course.id, Course.code, Course.name, func.count(CandidateApplication.id))
            .join(CandidateApplication, CandidateApplication.course_id == Course.id)
            .group_by(Course.id, Course.code, Course.name)
            .order_by(func.count(CandidateApplication.id).desc(), Course.code)
            .limit(TOP_COURSES_LIMIT),
        )
        counts = dict(status_rows.all())
        return {
            "totalCandidates": await self._count(Candidate),
            "totalCourses": await self._count(Course),
            "totalLecturers": await self._count(Lecturer),
            "totalApplications": sum(counts.values()),
            "selectedCount": counts.get(ApplicationStatus.SELECTED.value, 0),
            "pendingCount": counts.get(ApplicationStatus.PENDING.value, 0),
            "rejectedCount": counts.get(ApplicationStatus.REJECTED.value, 0),
            "topCourses": [
                {"id": str(cid), "code": code, "name": name, "applicationCount": count}
                for cid, code, name, count in top_rows.all()
            ],
        }

