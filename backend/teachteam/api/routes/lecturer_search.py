"""Lecturer Search Routes — filtered search and bulk applicant display lookup."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.api.dependencies import get_current_lecturer
from teachteam.core.search import build_search_criteria
from teachteam.infrastructure.database import get_db
from teachteam.models.lecturer import Lecturer
from teachteam.schemas.lecturer import ApplicationIdsRequest, SearchRequest
from teachteam.services.search import LecturerSearchService

router = APIRouter(prefix="/api/lecturer", tags=["lecturer-search"])


@router.post("/search")
async def search_applications(
    body: SearchRequest,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    criteria = build_search_criteria(
        application_ids=body.application_ids,
        name=body.name,
        availability=body.availability,
        skills=body.skills,
        session_type=body.session_type,
        sort_by=body.sort_by,
        sort_direction=body.sort_direction,
    )
    ids = await LecturerSearchService(db).search(lecturer, criteria)
    return {"success": True, "application_ids": ids}


@router.post("/applications")
async def applications_by_id(
    body: ApplicationIdsRequest,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    applications = await LecturerSearchService(db).get_applications(
        lecturer, body.application_ids,
    )
    return {"success": True, "applications": applications}
