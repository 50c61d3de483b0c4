"""Initial schema — users, role records, courses, applications, candidate profile.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(150), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="candidate"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("is_blocked", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("blocked_reason", sa.Text, nullable=True),
        sa.Column("blocked_by", sa.String(100), nullable=True),
        sa.Column("blocked_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "courses",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("semester", sa.String(50), nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        *_timestamps(),
    )
    op.create_index("ix_courses_code", "courses", ["code"], unique=True)

    for table in ("candidates", "lecturers", "admins"):
        columns = [
            sa.Column("id", UUID(as_uuid=True), primary_key=True),
            sa.Column(
                "user_id", UUID(as_uuid=True),
                sa.ForeignKey("users.id", ondelete="CASCADE"),
                nullable=False, unique=True,
            ),
        ]
        if table == "candidates":
            columns += [
                sa.Column("availability", sa.String(20), nullable=False, server_default="parttime"),
                sa.Column("skills", sa.JSON, nullable=False),
            ]
        else:
            columns.append(sa.Column("department", sa.String(150), nullable=True))
        columns.append(
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
        op.create_table(table, *columns)

    op.create_table(
        "lecturer_courses",
        sa.Column(
            "lecturer_id", UUID(as_uuid=True),
            sa.ForeignKey("lecturers.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "course_id", UUID(as_uuid=True),
            sa.ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True,
        ),
    )

    op.create_table(
        "candidate_applications",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "candidate_id", UUID(as_uuid=True),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("course_id", UUID(as_uuid=True), sa.ForeignKey("courses.id"), nullable=False),
        sa.Column("session_type", sa.String(20), nullable=False),
        sa.Column("skills", sa.JSON, nullable=False),
        sa.Column("availability", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("ranking", sa.Integer, nullable=True),
        sa.Column("comments", sa.JSON, nullable=False),
        *_timestamps(),
        sa.UniqueConstraint(
            "candidate_id", "course_id", "session_type",
            name="uq_application_candidate_course_session",
        ),
    )
    op.create_index("ix_candidate_applications_candidate_id", "candidate_applications", ["candidate_id"])
    op.create_index("ix_candidate_applications_course_id", "candidate_applications", ["course_id"])
    op.create_index("ix_candidate_applications_status", "candidate_applications", ["status"])

    op.create_table(
        "academic_credentials",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "candidate_id", UUID(as_uuid=True),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("degree", sa.String(200), nullable=False),
        sa.Column("institution", sa.String(200), nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("gpa", sa.Numeric(3, 2), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_academic_credentials_candidate_id", "academic_credentials", ["candidate_id"])

    op.create_table(
        "previous_roles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "candidate_id", UUID(as_uuid=True),
            sa.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("position", sa.String(200), nullable=False),
        sa.Column("organisation", sa.String(200), nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_previous_roles_candidate_id", "previous_roles", ["candidate_id"])


def downgrade() -> None:
    for table in (
        "previous_roles", "academic_credentials", "candidate_applications",
        "lecturer_courses", "admins", "lecturers", "candidates", "courses", "users",
    ):
        op.drop_table(table)
