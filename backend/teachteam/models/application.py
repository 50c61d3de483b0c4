"""CandidateApplication ORM — one candidate applying for one course in one session type.

Invariants:
    - Unique per (candidate_id, course_id, session_type)
    - status is one of ApplicationStatus values (Pending / Selected / Rejected)
    - ranking is None or a positive integer
    - comments is a JSON list of strings; reassign the list so changes are detected
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Integer, DateTime, ForeignKey, JSON, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from teachteam.db.base import Base


class CandidateApplication(Base):
    __tablename__ = "candidate_applications"
    __table_args__ = (
        UniqueConstraint(
            "candidate_id", "course_id", "session_type",
            name="uq_application_candidate_course_session",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    candidate_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    course_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("courses.id"),
        nullable=False, index=True,
    )
    session_type: Mapped[str] = mapped_column(String(20), nullable=False)
    skills: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    availability: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Pending", index=True,
    )
    ranking: Mapped[int | None] = mapped_column(Integer, nullable=True)
    comments: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    candidate: Mapped["Candidate"] = relationship("Candidate", lazy="selectin")
    course: Mapped["Course"] = relationship("Course", lazy="selectin")

    def add_comment(self, comment: str) -> None:
        self.comments = [*(self.comments or []), comment]

    def remove_comment(self, comment: str) -> bool:
        """Remove every occurrence of comment. Returns False if none existed."""
        remaining = [c for c in (self.comments or []) if c != comment]
        if len(remaining) == len(self.comments or []):
            return False
        self.comments = remaining
        return True
