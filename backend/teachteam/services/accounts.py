"""Account Service — signup, signin, and admin bootstrap login.

Invariants:
    - Signup creates the User and exactly one role record in one transaction
    - Unknown email and wrong password are indistinguishable (InvalidCredentialsError)
    - Blocked or deactivated users never authenticate (AccountBlockedError)
    - Passwords are only ever compared through passlib

Design Decisions:
    - Password checked before the blocked flag so a wrong password never reveals
      that an account exists and is blocked
    - Bootstrap admin credentials come from settings; the matching User row is
      created on first successful adminLogin
"""

import logging
import secrets

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.config import Settings
from teachteam.core.domain_types import DEFAULT_DEPARTMENTS, UserRole
from teachteam.core.errors import (
    AccountBlockedError, EmailAlreadyRegisteredError, InvalidCredentialsError,
)
from teachteam.infrastructure.security import hash_password, verify_password
from teachteam.models.admin import Admin
from teachteam.models.candidate import Candidate
from teachteam.models.lecturer import Lecturer
from teachteam.models.user import User
from teachteam.schemas.auth import SignupRequest
from teachteam.services.lookups import (
    find_admin_by_user, find_candidate_by_user, find_lecturer_by_user,
)

logger = logging.getLogger(__name__)


def _role_record(role: UserRole, user: User):
    if role == UserRole.CANDIDATE:
        return Candidate(user=user, availability="parttime", skills=[])
    if role == UserRole.LECTURER:
        return Lecturer(user=user, department=DEFAULT_DEPARTMENTS[role])
    return Admin(user=user, department=DEFAULT_DEPARTMENTS[role])


class AccountService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email.strip().lower()),
        )
        return result.scalar_one_or_none()

    async def signup(self, body: SignupRequest) -> User:
        if await self.find_by_email(body.email):
            raise EmailAlreadyRegisteredError()

        user = User(
            name=body.name,
            email=body.email,
            password_hash=hash_password(body.password),
            role=body.role.value,
        )
        self.db.add(user)
        self.db.add(_role_record(body.role, user))
        await self.db.commit()
        logger.info(
            "User registered",
            extra={"user_id": user.id, "role": user.role},
        )
        return user

    async def authenticate(self, email: str, password: str) -> User:
        user = await self.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed sign-in attempt")
            raise InvalidCredentialsError()
        if not user.can_sign_in:
            logger.warning("Blocked user attempted sign-in", extra={"user_id": user.id})
            raise AccountBlockedError()
        return user

    async def role_specific_id(self, user: User) -> str | None:
        """Id of the Candidate / Lecturer / Admin row belonging to user."""
        finders = {
            UserRole.CANDIDATE.value: find_candidate_by_user,
            UserRole.LECTURER.value: find_lecturer_by_user,
            UserRole.ADMIN.value: find_admin_by_user,
        }
        finder = finders.get(user.role)
        record = await finder(self.db, user.id) if finder else None
        return str(record.id) if record else None

    async def admin_login(self, username: str, password: str, settings: Settings) -> User:
        """Authenticate an admin by email/password or by the bootstrap credentials."""
        if (
            secrets.compare_digest(username, settings.admin_username)
            and secrets.compare_digest(password, settings.admin_password)
        ):
            return await self._ensure_bootstrap_admin(settings)

        user = await self.authenticate(username, password)
        if user.role != UserRole.ADMIN.value:
            raise InvalidCredentialsError()
        return user

    async def _ensure_bootstrap_admin(self, settings: Settings) -> User:
        user = await self.find_by_email(settings.admin_email)
        if user is not None:
            if user.role != UserRole.ADMIN.value:
                raise InvalidCredentialsError()
            if not user.can_sign_in:
                raise AccountBlockedError()
            return user

        user = User(
            name=settings.admin_name,
            email=settings.admin_email.lower(),
            password_hash=hash_password(settings.admin_password),
            role=UserRole.ADMIN.value,
        )
        self.db.add(user)
        self.db.add(_role_record(UserRole.ADMIN, user))
        await self.db.commit()
        logger.info("Bootstrap admin account created", extra={"user_id": user.id})
        return user
