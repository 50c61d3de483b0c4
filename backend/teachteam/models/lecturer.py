"""Lecturer ORM — role record for users who review applications for their courses.

Invariants:
    - Exactly one Lecturer per lecturer User (user_id unique)
    - lecturer_courses is the only source of lecturer ↔ course assignment
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from teachteam.db.base import Base

lecturer_courses = Table(
    "lecturer_courses",
    Base.metadata,
    Column(
        "lecturer_id", UUID(as_uuid=True),
        ForeignKey("lecturers.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "course_id", UUID(as_uuid=True),
        ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True,
    ),
)


class Lecturer(Base):
    __tablename__ = "lecturers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    department: Mapped[str | None] = mapped_column(String(150), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User", lazy="selectin")
    courses: Mapped[list["Course"]] = relationship(
        "Course", secondary=lecturer_courses, lazy="selectin",
        order_by="Course.code",
    )

    @property
    def course_ids(self) -> set[uuid.UUID]:
        return {course.id for course in self.courses}

    def teaches(self, course_id: uuid.UUID) -> bool:
        return course_id in self.course_ids
