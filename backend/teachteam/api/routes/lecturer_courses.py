"""Lecturer Course Routes — a lecturer managing their own course assignments."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.api.dependencies import get_current_lecturer
from teachteam.infrastructure.database import get_db
from teachteam.models.lecturer import Lecturer
from teachteam.schemas.lecturer import CourseAssignmentRequest
from teachteam.services.courses import CourseService
from teachteam.services.lecturers import LecturerService

router = APIRouter(prefix="/api/lecturer-courses", tags=["lecturer-courses"])


@router.get("/my-courses")
async def my_courses(lecturer: Lecturer = Depends(get_current_lecturer)):
    return {"success": True, "courses": [c.to_dict() for c in lecturer.courses]}


@router.get("/available")
async def available_courses(
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    courses = await CourseService(db).list_active()
    return {
        "success": True,
        "courses": [
            {**c.to_dict(), "assigned": lecturer.teaches(c.id)} for c in courses
        ],
    }


@router.post("/add")
async def add_course(
    body: CourseAssignmentRequest,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    await LecturerService(db).assign_course(lecturer, body.course_id)
    return {"success": True, "message": "Course added successfully"}


@router.post("/remove")
async def remove_course(
    body: CourseAssignmentRequest,
    lecturer: Lecturer = Depends(get_current_lecturer),
    db: AsyncSession = Depends(get_db),
):
    await LecturerService(db).remove_course(lecturer, body.course_id)
    return {"success": True, "message": "Course removed successfully"}
