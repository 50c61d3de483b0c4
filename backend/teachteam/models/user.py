"""User ORM — account shared by every role; role-specific data lives in
candidates / lecturers / admins.

Invariants:
    - email is unique
    - password_hash only ever holds a passlib hash
    - can_sign_in is False when the account is deactivated OR blocked
    - blocked_* fields are all set together and cleared together
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from teachteam.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(150), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default="candidate",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    is_blocked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    blocked_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    blocked_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    blocked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )

    @property
    def can_sign_in(self) -> bool:
        return self.is_active and not self.is_blocked

    def block(self, reason: str | None, blocked_by: str) -> None:
        self.is_blocked = True
        self.blocked_reason = reason
        self.blocked_by = blocked_by
        self.blocked_at = _now()

    def unblock(self) -> None:
        self.is_blocked = False
        self.blocked_reason = None
        self.blocked_by = None
        self.blocked_at = None

    def to_public_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
