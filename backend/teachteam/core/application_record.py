"""Application Record — flat, ORM-free view of one application for pure aggregation.

Invariants:
    - Built by the shell from ORM rows; core never sees SQLAlchemy objects
    - Frozen: aggregation functions cannot mutate their input
"""

from dataclasses import dataclass, field
from datetime import datetime

from teachteam.core.domain_types import ApplicationStatus


@dataclass(frozen=True)
class ApplicationRecord:
    application_id: str
    candidate_id: str
    candidate_name: str
    candidate_email: str
    course_id: str
    course_code: str
    course_name: str
    session_type: str
    availability: str
    status: str
    ranking: int | None = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    created_at: datetime | None = None

    @property
    def is_selected(self) -> bool:
        return self.status == ApplicationStatus.SELECTED.value
