"""AcademicCredential ORM — a degree listed on a candidate profile."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from teachteam.db.base import Base


class AcademicCredential(Base):
    __tablename__ = "academic_credentials"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    candidate_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    degree: Mapped[str] = mapped_column(String(200), nullable=False)
    institution: Mapped[str] = mapped_column(String(200), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    gpa: Mapped[float | None] = mapped_column(
        Numeric(3, 2, asdecimal=False), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    candidate: Mapped["Candidate"] = relationship(
        "Candidate", back_populates="academic_credentials",
    )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "degree": self.degree,
            "institution": self.institution,
            "year": self.year,
            "gpa": self.gpa,
        }
