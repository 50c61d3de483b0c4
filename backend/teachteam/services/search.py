"""Lecturer Search Service — filtered application search scoped to a lecturer's courses.

Invariants:
    - Only applications for courses assigned to the lecturer are ever returned
    - The name filter is a literal substring match (LIKE wildcards are escaped)
    - Name, availability, session type and id filters run in SQL; skill matching
      runs in Python (JSON column, case-insensitive any-match)
    - Without a recognised sort key results are newest first
    - get_applications preserves the requested id order and skips unknown ids
"""

import logging
from uuid import UUID

from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.domain_types import SearchSortKey, SortDirection
from teachteam.core.search import SearchCriteria, matches_any_skill
from teachteam.models.application import CandidateApplication
from teachteam.models.candidate import Candidate
from teachteam.models.course import Course
from teachteam.models.lecturer import Lecturer
from teachteam.models.user import User
from teachteam.services.presenters import applicant_display

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SearchSortKey.COURSE_NAME: Course.name,
    SearchSortKey.CANDIDATE_NAME: User.name,
}


class LecturerSearchService:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _scoped_query(self, lecturer: Lecturer):
        return (
            select(CandidateApplication)
            .join(Course, CandidateApplication.course_id == Course.id)
            .join(Candidate, CandidateApplication.candidate_id == Candidate.id)
            .join(User, Candidate.user_id == User.id)
            .where(CandidateApplication.course_id.in_(lecturer.course_ids))
        )

    async def search(self, lecturer: Lecturer, criteria: SearchCriteria) -> list[str]:
        if not lecturer.course_ids:
            return []

        query = self._scoped_query(lecturer)
        if criteria.application_ids:
            query = query.where(CandidateApplication.id.in_(
                [UUID(str(i)) for i in criteria.application_ids],
            ))
        if criteria.name:
            query = query.where(
                func.lower(User.name).contains(criteria.name, autoescape=True),
            )
        if criteria.availability:
            query = query.where(
                CandidateApplication.availability == criteria.availability.value,
            )
        if criteria.session_type:
            query = query.where(
                CandidateApplication.session_type == criteria.session_type.value,
            )

        if criteria.sort_by:
            direction = desc if criteria.sort_direction == SortDirection.DESC else asc
            query = query.order_by(
                direction(_SORT_COLUMNS[criteria.sort_by]),
                CandidateApplication.created_at.desc(),
            )
        else:
            query = query.order_by(CandidateApplication.created_at.desc())

        result = await self.db.execute(query)
        matches = [
            app for app in result.scalars().all()
            if matches_any_skill(app.skills or [], criteria.skills)
        ]
        logger.info(
            f"Lecturer search matched {len(matches)} application(s)",
            extra={"lecturer_id": lecturer.id},
        )
        return [str(app.id) for app in matches]

    async def get_applications(
        self, lecturer: Lecturer, application_ids: list[UUID],
    ) -> list[dict]:
        if not lecturer.course_ids:
            return []
        result = await self.db.execute(
            self._scoped_query(lecturer)
            .where(CandidateApplication.id.in_(application_ids)),
        )
        by_id = {app.id: app for app in result.scalars().all()}
        return [
            applicant_display(by_id[app_id])
            for app_id in application_ids if app_id in by_id
        ]
