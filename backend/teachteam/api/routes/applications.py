"""Application Routes — candidate submissions and lecturer review actions.

Invariants:
    - Candidate routes resolve the Candidate row from the session user
    - Lecturer routes resolve the Lecturer row; course ownership is enforced in
      ApplicationService (403 for unassigned courses)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.api.dependencies import get_current_candidate, get_current_lecturer
from teachteam.infrastructure.database import get_db
from teachteam.models.candidate import Candidate
from teachteam.models.lecturer import Lecturer
from teachteam.schemas.application import (
    ApplicationSubmit, CommentRequest, RankingUpdate, StatusUpdate,
)
from teachteam.services.applications import ApplicationService
from teachteam.services.presenters import applicant_display, application_to_dict

router = APIRouter(prefix="/api/applications", tags=["applications"])


# ─── Candidate ───────────────────────────────────────────────────

@router.post("/submit", status_code=status.HTTP_201_CREATED)
async def submit_application(
    body: ApplicationSubmit,
    candidate: Candidate = Depends(get_current_candidate),
    db: AsyncSession = Depends(get_db),
):
    application = await ApplicationService(db).submit(candidate, body)
    return {
        "success": True,
        "message": "Application submitted successfully",
        "application": application_to_dict(application),
    }


@router.get("/my-applications")
async def my_applications(
    candidate: Candidate = Depends(get_current_candidate),
    db: AsyncSession = Depends(get_db),
):
    applications = await ApplicationService(db).list_for_candidate(candidate)
    return {
        "success": True,
        "applications": [application_to_dict(a) for a in applications],
    }


@router.get("/for-review")
async def applications_for_review(
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    applications = await ApplicationService(db).list_for_lecturer(lecturer)
    return {
        "success": True,
        "applications": [applicant_display(a) for a in applications],
    }


@router.delete("/{application_id}")
async def withdraw_application(
    application_id: UUID,
    candidate: Candidate = Depends(get_current_candidate),
    db: AsyncSession = Depends(get_db),
):
    await ApplicationService(db).withdraw(candidate, application_id)
    return {"success": True, "message": "Application withdrawn successfully"}


# ─── Lecturer ────────────────────────────────────────────────────

@router.put("/{application_id}/status")
async def update_status(
    application_id: UUID,
    body: StatusUpdate,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    application = await ApplicationService(db).update_status(
        lecturer, application_id, body.status,
    )
    return {
        "success": True,
        "message": f"Application status updated to {application.status}",
        "application": applicant_display(application),
    }


@router.post("/{application_id}/comment")
async def add_comment(
    application_id: UUID,
    body: CommentRequest,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    application = await ApplicationService(db).add_comment(
        lecturer, application_id, body.comment,
    )
    return {
        "success": True,
        "message": "Comment added successfully",
        "comments": list(application.comments),
    }


@router.delete("/{application_id}/comment")
async def remove_comment(
    application_id: UUID,
    body: CommentRequest,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    application = await ApplicationService(db).remove_comment(
        lecturer, application_id, body.comment,
    )
    return {
        "success": True,
        "message": "Comment removed successfully",
        "comments": list(application.comments),
    }


@router.put("/{application_id}/ranking")
async def update_ranking(
    application_id: UUID,
    body: RankingUpdate,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    application = await ApplicationService(db).set_ranking(
        lecturer, application_id, body.ranking,
    )
    return {
        "success": True,
        "message": "Ranking updated successfully",
        "ranking": application.ranking,
    }
