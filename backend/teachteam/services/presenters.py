"""Presenters — ORM rows to response dicts and to core ApplicationRecords.

Invariants:
    - Applications passed here have candidate (+ user, credentials, roles) and
      course loaded; presenters never trigger IO
    - "Applicant display" keys match what the lecturer UI consumes (tutorName, role, ...)
"""

from teachteam.core.application_record import ApplicationRecord
from teachteam.models.application import CandidateApplication


def _iso(value):
    return value.isoformat() if value else None


def to_record(application: CandidateApplication) -> ApplicationRecord:
    candidate = application.candidate
    course = application.course
    return ApplicationRecord(
        application_id=str(application.id),
        candidate_id=str(candidate.id),
        candidate_name=candidate.user.name,
        candidate_email=candidate.user.email,
        course_id=str(course.id),
        course_code=course.code,
        course_name=course.name,
        session_type=application.session_type,
        availability=application.availability,
        status=application.status,
        ranking=application.ranking,
        skills=tuple(application.skills or ()),
        created_at=application.created_at,
    )


def application_to_dict(application: CandidateApplication) -> dict:
    """Candidate-facing view of one of their own applications."""
    return {
        "id": str(application.id),
        "course": application.course.to_dict(),
        "session_type": application.session_type,
        "skills": list(application.skills or []),
        "availability": application.availability,
        "status": application.status,
        "ranking": application.ranking,
        "comments": list(application.comments or []),
        "created_at": _iso(application.created_at),
        "updated_at": _iso(application.updated_at),
    }


def applicant_display(application: CandidateApplication) -> dict:
    """Flattened lecturer-facing view of an application and its candidate profile."""
    candidate = application.candidate
    course = application.course
    return {
        "id": str(application.id),
        "candidateId": str(candidate.id),
        "tutorName": candidate.user.name,
        "tutorEmail": candidate.user.email,
        "courseId": str(course.id),
        "courseCode": course.code,
        "courseName": course.name,
        "role": application.session_type,
        "skills": list(application.skills or []),
        "availability": application.availability,
        "status": application.status,
        "ranking": application.ranking,
        "comments": list(application.comments or []),
        "academicCredentials": [c.to_dict() for c in candidate.academic_credentials],
        "previousRoles": [r.to_dict() for r in candidate.previous_roles],
        "createdAt": _iso(application.created_at),
    }
