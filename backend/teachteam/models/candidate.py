"""Candidate ORM — role record for tutor / lab-assistant applicants.

Invariants:
    - Exactly one Candidate per candidate User (user_id unique)
    - skills is a JSON list of strings; reassign the list (never mutate in place)
      so SQLAlchemy detects the change
    - Credentials and previous roles belong to the candidate profile, not to an application
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from teachteam.db.base import Base


class Candidate(Base):
    __tablename__ = "candidates"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    availability: Mapped[str] = mapped_column(
        String(20), nullable=False, default="parttime",
    )
    skills: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User", lazy="selectin")
    academic_credentials: Mapped[list["AcademicCredential"]] = relationship(
        "AcademicCredential", back_populates="candidate",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="AcademicCredential.year.desc()",
    )
    previous_roles: Mapped[list["PreviousRole"]] = relationship(
        "PreviousRole", back_populates="candidate",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="PreviousRole.start_date.desc()",
    )
    applications: Mapped[list["CandidateApplication"]] = relationship(
        "CandidateApplication", viewonly=True, lazy="raise",
    )
