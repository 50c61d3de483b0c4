"""Candidate Admin Service — candidate listing, blocking and unavailability handling.

Invariants:
    - Blocking sets is_blocked with reason/by/at; unblocking clears all four together
    - toggle_status flips User.is_active only (blocking is a separate flag)
    - mark_unavailable is one transaction: block the user, reject Pending applications
      with an explanatory comment, then publish exactly one notification after commit
    - Selected applications are reported as affected but never changed

Design Decisions:
    - Notification published only after a successful commit so subscribers never
      see an event for a rolled-back change
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.domain_types import ApplicationStatus
from teachteam.core.errors import ResourceNotFoundError, ValidationFailedError
from teachteam.core.notifications import (
    CandidateUnavailableEvent, affected_course_label, is_affected,
    should_reject, unavailable_comment,
)
from teachteam.infrastructure.notifier import CandidateNotifier
from teachteam.models.application import CandidateApplication
from teachteam.models.candidate import Candidate
from teachteam.services.lookups import get_or_404, parse_uuid

logger = logging.getLogger(__name__)

ADMIN_ACTOR = "admin"


class CandidateAdminService:
    def __init__(self, db: AsyncSession, notifier: CandidateNotifier | None = None):
        self.db = db
        self.notifier = notifier

    async def list_all(self) -> list[Candidate]:
        result = await self.db.execute(select(Candidate).order_by(Candidate.created_at))
        return list(result.scalars().all())

    async def get(self, candidate_id: str | UUID) -> Candidate:
        return await get_or_404(self.db, Candidate, candidate_id, "Candidate")

    async def resolve(self, candidate_or_user_id: str | UUID) -> Candidate:
        """Find a candidate by Candidate id, falling back to its User id."""
        key = parse_uuid(candidate_or_user_id, "Candidate")
        candidate = await self.db.get(Candidate, key)
        if candidate is None:
            result = await self.db.execute(
                select(Candidate).where(Candidate.user_id == key),
            )
            candidate = result.scalar_one_or_none()
        if candidate is None:
            raise ResourceNotFoundError("Candidate", str(candidate_or_user_id))
        return candidate

    async def block(self, candidate_id: str | UUID, reason: str | None = None) -> Candidate:
        candidate = await self.get(candidate_id)
        candidate.user.block(reason, ADMIN_ACTOR)
        await self.db.commit()
        logger.info("Candidate blocked", extra={"candidate_id": candidate.id})
        return candidate

    async def unblock(self, candidate_id: str | UUID) -> Candidate:
        candidate = await self.get(candidate_id)
        candidate.user.unblock()
        await self.db.commit()
        logger.info("Candidate unblocked", extra={"candidate_id": candidate.id})
        return candidate

    async def toggle_status(self, candidate_id: str | UUID) -> bool:
        """Flip the candidate's account active flag. Returns the new value."""
        candidate = await self.get(candidate_id)
        candidate.user.is_active = not candidate.user.is_active
        await self.db.commit()
        logger.info(
            f"Candidate active flag set to {candidate.user.is_active}",
            extra={"candidate_id": candidate.id},
        )
        return candidate.user.is_active

    async def mark_unavailable(
        self, candidate_or_user_id: str | UUID, reason: str,
    ) -> CandidateUnavailableEvent:
        reason = (reason or "").strip()
        if not reason:
            raise ValidationFailedError("A reason is required")

        candidate = await self.resolve(candidate_or_user_id)
        result = await self.db.execute(
            select(CandidateApplication)
            .where(CandidateApplication.candidate_id == candidate.id)
            .order_by(CandidateApplication.created_at),
        )
        applications = [app for app in result.scalars().all() if is_affected(app.status)]
        affected_courses = [
            affected_course_label(
                app.course.code, app.course.name, app.course.semester, app.course.year,
            )
            for app in applications
        ]

        candidate.user.block(reason, ADMIN_ACTOR)
        rejected = 0
        for app in applications:
            if should_reject(app.status):
                app.status = ApplicationStatus.REJECTED.value
                app.add_comment(unavailable_comment(reason))
                rejected += 1
        await self.db.commit()

        event = CandidateUnavailableEvent(
            candidate_id=str(candidate.id),
            candidate_name=candidate.user.name,
            candidate_email=candidate.user.email,
            reason=reason,
            timestamp=datetime.now(timezone.utc),
            affected_courses=affected_courses,
            notified_by=ADMIN_ACTOR,
        )
        logger.info(
            f"Candidate marked unavailable, {rejected} pending application(s) rejected",
            extra={"candidate_id": candidate.id},
        )
        if self.notifier is not None:
            self.notifier.publish(event)
        return event
