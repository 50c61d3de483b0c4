"""Course Routes — public listing, admin create/update/soft-delete."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.api.dependencies import require_role
from teachteam.core.domain_types import UserRole
from teachteam.infrastructure.database import get_db
from teachteam.schemas.course import CourseCreate, CourseUpdate
from teachteam.services.courses import CourseService

router = APIRouter(prefix="/api/courses", tags=["courses"])

admin_only = require_role(UserRole.ADMIN)


@router.get("")
async def list_courses(db: AsyncSession = Depends(get_db)):
    courses = await CourseService(db).list_active()
    return {"success": True, "courses": [c.to_dict() for c in courses]}


@router.get("/{course_id}")
async def get_course(course_id: UUID, db: AsyncSession = Depends(get_db)):
    course = await CourseService(db).get(course_id)
    return {"success": True, "course": course.to_dict()}


@router.post(
    "", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_only)],
)
async def create_course(body: CourseCreate, db: AsyncSession = Depends(get_db)):
    course = await CourseService(db).create(body)
    return {
        "success": True,
        "message": "Course created successfully",
        "course": course.to_dict(),
    }


@router.put("/{course_id}", dependencies=[Depends(admin_only)])
async def update_course(
    course_id: UUID, body: CourseUpdate, db: AsyncSession = Depends(get_db),
):
    course = await CourseService(db).update(course_id, body)
    return {
        "success": True,
        "message": "Course updated successfully",
        "course": course.to_dict(),
    }


@router.delete("/{course_id}", dependencies=[Depends(admin_only)])
async def delete_course(course_id: UUID, db: AsyncSession = Depends(get_db)):
    await CourseService(db).soft_delete(course_id)
    return {"success": True, "message": "Course deleted successfully"}
