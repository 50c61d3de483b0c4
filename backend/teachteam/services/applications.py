"""Application Service — candidate submissions and lecturer review actions.

Invariants:
    - One application per (candidate, course, session_type); duplicates raise 409
      before the unique constraint is ever hit
    - Only active courses accept applications
    - Candidates may withdraw only their own Pending applications
    - Lecturers may act only on applications for courses assigned to them (403)
    - comments / skills JSON lists are reassigned, never mutated in place
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.domain_types import ApplicationStatus
from teachteam.core.errors import (
    ApplicationNotPendingError, DuplicateApplicationError,
    PermissionDeniedError, ResourceNotFoundError,
)
from teachteam.models.academic_credential import AcademicCredential
from teachteam.models.application import CandidateApplication
from teachteam.models.candidate import Candidate
from teachteam.models.lecturer import Lecturer
from teachteam.models.previous_role import PreviousRole
from teachteam.schemas.application import ApplicationSubmit
from teachteam.services.courses import CourseService
from teachteam.services.lookups import get_or_404

logger = logging.getLogger(__name__)


class ApplicationService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Candidate side ─────────────────────────────────────────

    async def _exists(
        self, candidate_id: UUID, course_id: UUID, session_type: str,
    ) -> bool:
        result = await self.db.execute(
            select(CandidateApplication.id).where(
                CandidateApplication.candidate_id == candidate_id,
                CandidateApplication.course_id == course_id,
                CandidateApplication.session_type == session_type,
            ),
        )
        return result.first() is not None

    async def submit(
        self, candidate: Candidate, body: ApplicationSubmit,
    ) -> CandidateApplication:
        course = await CourseService(self.db).get_active(body.course_id)
        if await self._exists(candidate.id, course.id, body.session_type.value):
            raise DuplicateApplicationError()

        for cred in body.academic_credentials:
            candidate.academic_credentials.append(AcademicCredential(
                degree=cred.degree, institution=cred.institution,
                year=cred.year, gpa=cred.gpa,
            ))
        for role in body.previous_roles:
            candidate.previous_roles.append(PreviousRole(
                position=role.position, organisation=role.organisation,
                start_date=role.start_date, end_date=role.end_date,
                description=role.description,
            ))
        candidate.skills = list(body.skills)
        candidate.availability = body.availability.value

        application = CandidateApplication(
            candidate=candidate,
            course=course,
            session_type=body.session_type.value,
            skills=list(body.skills),
            availability=body.availability.value,
            status=ApplicationStatus.PENDING.value,
            comments=[],
        )
        self.db.add(application)
        await self.db.commit()
        logger.info(
            f"Application submitted for {course.code}",
            extra={
                "application_id": application.id,
                "candidate_id": candidate.id,
                "course_id": course.id,
            },
        )
        return application

    async def list_for_candidate(self, candidate: Candidate) -> list[CandidateApplication]:
        result = await self.db.execute(
            select(CandidateApplication)
            .where(CandidateApplication.candidate_id == candidate.id)
            .order_by(CandidateApplication.created_at.desc()),
        )
        return list(result.scalars().all())

    async def withdraw(self, candidate: Candidate, application_id: str | UUID) -> None:
        application = await get_or_404(
            self.db, CandidateApplication, application_id, "Application",
        )
        if application.candidate_id != candidate.id:
            raise PermissionDeniedError("You can only withdraw your own applications")
        if application.status != ApplicationStatus.PENDING.value:
            raise ApplicationNotPendingError(application.status)
        await self.db.delete(application)
        await self.db.commit()
        logger.info(
            "Application withdrawn",
            extra={"application_id": application.id, "candidate_id": candidate.id},
        )

    # ─── Lecturer side ──────────────────────────────────────────

    async def list_for_lecturer(self, lecturer: Lecturer) -> list[CandidateApplication]:
        course_ids = lecturer.course_ids
        if not course_ids:
            return []
        result = await self.db.execute(
            select(CandidateApplication)
            .where(CandidateApplication.course_id.in_(course_ids))
            .order_by(CandidateApplication.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get_for_lecturer(
        self, lecturer: Lecturer, application_id: str | UUID,
    ) -> CandidateApplication:
        application = await get_or_404(
            self.db, CandidateApplication, application_id, "Application",
        )
        if not lecturer.teaches(application.course_id):
            logger.warning(
                "Lecturer attempted to act on an unassigned course",
                extra={"lecturer_id": lecturer.id, "application_id": application.id},
            )
            raise PermissionDeniedError(
                "You can only review applications for your assigned courses",
            )
        return application

    async def update_status(
        self, lecturer: Lecturer, application_id: str | UUID, status: ApplicationStatus,
    ) -> CandidateApplication:
        application = await self.get_for_lecturer(lecturer, application_id)
        application.status = status.value
        await self.db.commit()
        logger.info(
            f"Application status set to {status.value}",
            extra={"application_id": application.id, "lecturer_id": lecturer.id},
        )
        return application

    async def add_comment(
        self, lecturer: Lecturer, application_id: str | UUID, comment: str,
    ) -> CandidateApplication:
        application = await self.get_for_lecturer(lecturer, application_id)
        application.add_comment(comment)
        await self.db.commit()
        return application

    async def remove_comment(
        self, lecturer: Lecturer, application_id: str | UUID, comment: str,
    ) -> CandidateApplication:
        application = await self.get_for_lecturer(lecturer, application_id)
        if not application.remove_comment(comment):
            raise ResourceNotFoundError("Comment")
        await self.db.commit()
        return application

    async def set_ranking(
        self, lecturer: Lecturer, application_id: str | UUID, ranking: int,
    ) -> CandidateApplication:
        application = await self.get_for_lecturer(lecturer, application_id)
        application.ranking = ranking
        await self.db.commit()
        return application
