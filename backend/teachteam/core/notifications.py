"""Candidate Unavailability — notification payload and the rules applied when
an admin marks a candidate unavailable.

Invariants:
    - Pending applications become Rejected; Selected ones are reported but unchanged
    - affected courses = Pending + Selected applications, labelled "CODE - Name (Semester Year)"
    - The rejection comment always carries the admin-supplied reason
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime

from teachteam.core.domain_types import ApplicationStatus

AFFECTED_STATUSES = (ApplicationStatus.PENDING.value, ApplicationStatus.SELECTED.value)
UNAVAILABLE_COMMENT_PREFIX = "Candidate became unavailable: "


@dataclass(frozen=True)
class CandidateUnavailableEvent:
    candidate_id: str
    candidate_name: str
    candidate_email: str
    reason: str
    timestamp: datetime
    affected_courses: list[str] = field(default_factory=list)
    notified_by: str = "admin"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


def affected_course_label(code: str, name: str, semester: str, year: int) -> str:
    return f"{code} - {name} ({semester} {year})"


def is_affected(status: str) -> bool:
    return status in AFFECTED_STATUSES


def should_reject(status: str) -> bool:
    return status == ApplicationStatus.PENDING.value


def unavailable_comment(reason: str) -> str:
    return f"{UNAVAILABLE_COMMENT_PREFIX}{reason}"
