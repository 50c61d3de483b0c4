"""Statistics Routes — lecturer, course and system-wide applicant statistics.

Invariants:
    - A lecturer may only read their own statistics; admins may read any
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.api.dependencies import require_role
from teachteam.core.domain_types import UserRole
from teachteam.core.errors import PermissionDeniedError
from teachteam.infrastructure.database import get_db
from teachteam.models.user import User
from teachteam.services.lecturers import LecturerService
from teachteam.services.statistics import StatisticsService

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("/lecturer/{lecturer_id}")
async def lecturer_statistics(
    lecturer_id: UUID,
    user: User = Depends(require_role(UserRole.LECTURER, UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    lecturer = await LecturerService(db).get(lecturer_id)
    if user.role == UserRole.LECTURER.value and lecturer.user_id != user.id:
        raise PermissionDeniedError("You can only view your own statistics")
    statistics = await StatisticsService(db).lecturer_statistics(lecturer)
    return {"success": True, "statistics": statistics}


@router.get("/course/{course_id}")
async def course_statistics(
    course_id: UUID,
    _: User = Depends(require_role(UserRole.LECTURER, UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    statistics = await StatisticsService(db).course_statistics(course_id)
    return {"success": True, "statistics": statistics}


@router.get("/system")
async def system_statistics(
    _: User = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    statistics = await StatisticsService(db).system_statistics()
    return {"success": True, "statistics": statistics}
