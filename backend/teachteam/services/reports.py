"""Report Service — admin reports built from every application in the system.

Invariants:
    - All three reports read the same snapshot (one query per report call)
    - Grouping and thresholds live in core.reports; this module only fetches
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.application_record import ApplicationRecord
from teachteam.core.reports import (
    build_course_selection_report, build_multiple_course_report,
    build_unselected_report,
)
from teachteam.models.application import CandidateApplication
from teachteam.services.presenters import to_record


class ReportService:
    def __init__(self, db: AsyncSession, multiple_course_threshold: int = 3):
        self.db = db
        self.multiple_course_threshold = multiple_course_threshold

    async def _records(self) -> list[ApplicationRecord]:
        result = await self.db.execute(
            select(CandidateApplication).order_by(CandidateApplication.created_at),
        )
        return [to_record(app) for app in result.scalars().all()]

    async def course_application_reports(self) -> list[dict]:
        return build_course_selection_report(await self._records())

    async def candidates_with_multiple_courses(self) -> list[dict]:
        return build_multiple_course_report(
            await self._records(), self.multiple_course_threshold,
        )

    async def unselected_candidates(self) -> list[dict]:
        return build_unselected_report(await self._records())
