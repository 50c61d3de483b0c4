"""Domain Types — enums shared by the ORM, the REST schemas and the GraphQL schema.

Invariants:
    - All valid states encoded as Enums, no raw string matching
    - ApplicationStatus has exactly one casing: Pending / Selected / Rejected

Design Decisions:
    - str Enums: stored as plain strings in the DB and serialized to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
CandidateId = NewType("CandidateId", UUID)
LecturerId = NewType("LecturerId", UUID)
CourseId = NewType("CourseId", UUID)
ApplicationId = NewType("ApplicationId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """Account role. Exactly one role-specific record exists per user."""
    CANDIDATE = "candidate"
    LECTURER = "lecturer"
    ADMIN = "admin"


class Availability(str, Enum):
    """Candidate working availability."""
    FULLTIME = "fulltime"
    PARTTIME = "parttime"


class SessionType(str, Enum):
    """Position a candidate applies for."""
    TUTOR = "tutor"
    LAB_ASSISTANT = "lab_assistant"


class ApplicationStatus(str, Enum):
    """Lecturer decision on an application."""
    PENDING = "Pending"
    SELECTED = "Selected"
    REJECTED = "Rejected"


class SearchSortKey(str, Enum):
    """Sort keys accepted by the lecturer search."""
    COURSE_NAME = "courseName"
    CANDIDATE_NAME = "candidateName"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Department assigned to role-specific records created at signup
DEFAULT_DEPARTMENTS: dict[UserRole, str] = {
    UserRole.LECTURER: "School of Computer Science",
    UserRole.ADMIN: "IT Administration",
}
