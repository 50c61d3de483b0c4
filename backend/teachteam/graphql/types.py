"""GraphQL Object Types — admin-facing views of users, courses, lecturers,
candidates, reports and notifications.

Invariants:
    - from_model / from_dict never trigger IO; callers pass fully loaded rows
    - Field names are snake_case here and camelCase on the wire (Strawberry default)
"""

from datetime import datetime

import strawberry

from teachteam.core.notifications import CandidateUnavailableEvent
from teachteam.models.candidate import Candidate
from teachteam.models.course import Course
from teachteam.models.lecturer import Lecturer
from teachteam.models.user import User


@strawberry.type
class UserType:
    id: strawberry.ID
    name: str
    email: str
    role: str
    is_active: bool
    is_blocked: bool
    blocked_reason: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            email=user.email,
            role=user.role,
            is_active=user.is_active,
            is_blocked=user.is_blocked,
            blocked_reason=user.blocked_reason,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@strawberry.type
class CourseType:
    id: strawberry.ID
    code: str
    name: str
    semester: str
    year: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, course: Course) -> "CourseType":
        return cls(
            id=strawberry.ID(str(course.id)),
            code=course.code,
            name=course.name,
            semester=course.semester,
            year=course.year,
            is_active=course.is_active,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )


@strawberry.type
class LecturerType:
    id: strawberry.ID
    user: UserType
    department: str | None
    courses: list[CourseType]
    created_at: datetime

    @classmethod
    def from_model(cls, lecturer: Lecturer) -> "LecturerType":
        return cls(
            id=strawberry.ID(str(lecturer.id)),
            user=UserType.from_model(lecturer.user),
            department=lecturer.department,
            courses=[CourseType.from_model(c) for c in lecturer.courses],
            created_at=lecturer.created_at,
        )


@strawberry.type
class CandidateType:
    id: strawberry.ID
    user: UserType
    availability: str
    skills: list[str]
    created_at: datetime

    @classmethod
    def from_model(cls, candidate: Candidate) -> "CandidateType":
        return cls(
            id=strawberry.ID(str(candidate.id)),
            user=UserType.from_model(candidate.user),
            availability=candidate.availability,
            skills=list(candidate.skills or []),
            created_at=candidate.created_at,
        )


@strawberry.type
class AuthPayload:
    success: bool
    message: str
    user: UserType | None = None


@strawberry.type
class CourseAssignmentResult:
    success: bool
    message: str


# ─── Reports ────────────────────────────────────────────────────

@strawberry.type
class SelectedCandidate:
    candidate_id: strawberry.ID
    candidate_name: str
    candidate_email: str
    session_type: str
    ranking: int | None


@strawberry.type
class CourseApplicationReport:
    course_id: strawberry.ID
    course_code: str
    course_name: str
    selected_candidates: list[SelectedCandidate]

    @classmethod
    def from_dict(cls, entry: dict) -> "CourseApplicationReport":
        return cls(
            course_id=strawberry.ID(entry["courseId"]),
            course_code=entry["courseCode"],
            course_name=entry["courseName"],
            selected_candidates=[
                SelectedCandidate(
                    candidate_id=strawberry.ID(c["candidateId"]),
                    candidate_name=c["candidateName"],
                    candidate_email=c["candidateEmail"],
                    session_type=c["sessionType"],
                    ranking=c["ranking"],
                )
                for c in entry["selectedCandidates"]
            ],
        )


@strawberry.type
class CandidateReport:
    id: strawberry.ID
    candidate_name: str
    candidate_email: str
    course_count: int
    courses: list[str]

    @classmethod
    def from_dict(cls, entry: dict) -> "CandidateReport":
        return cls(
            id=strawberry.ID(entry["id"]),
            candidate_name=entry["candidateName"],
            candidate_email=entry["candidateEmail"],
            course_count=entry["courseCount"],
            courses=list(entry["courses"]),
        )


@strawberry.type
class UnselectedCandidate:
    id: strawberry.ID
    candidate_name: str
    candidate_email: str
    application_count: int
    applied_courses: list[str]

    @classmethod
    def from_dict(cls, entry: dict) -> "UnselectedCandidate":
        return cls(
            id=strawberry.ID(entry["id"]),
            candidate_name=entry["candidateName"],
            candidate_email=entry["candidateEmail"],
            application_count=entry["applicationCount"],
            applied_courses=list(entry["appliedCourses"]),
        )


# ─── Notifications ──────────────────────────────────────────────

@strawberry.type
class CandidateUnavailableNotification:
    candidate_id: strawberry.ID
    candidate_name: str
    candidate_email: str
    reason: str
    timestamp: str
    affected_courses: list[str]
    notified_by: str

    @classmethod
    def from_event(cls, event: CandidateUnavailableEvent) -> "CandidateUnavailableNotification":
        return cls(
            candidate_id=strawberry.ID(event.candidate_id),
            candidate_name=event.candidate_name,
            candidate_email=event.candidate_email,
            reason=event.reason,
            timestamp=event.timestamp.isoformat(),
            affected_courses=list(event.affected_courses),
            notified_by=event.notified_by,
        )


@strawberry.type
class MarkCandidateUnavailableResponse:
    success: bool
    message: str
    affected_courses: list[str]
