"""Auth Dependencies — session-cookie authentication and role guards for REST routes.

Invariants:
    - The session stores only the user id and role; the user row is reloaded on
      every request so blocking takes effect immediately
    - A blocked, deactivated or deleted user has their session cleared (401)
    - Role mismatch is 403, missing session is 401
"""

import logging
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.domain_types import UserRole
from teachteam.core.errors import (
    AccountBlockedError, AuthenticationRequiredError, PermissionDeniedError,
)
from teachteam.infrastructure.database import get_db
from teachteam.models.candidate import Candidate
from teachteam.models.lecturer import Lecturer
from teachteam.models.user import User
from teachteam.services.lookups import require_candidate, require_lecturer

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"
SESSION_ROLE_KEY = "role"


def start_session(request: Request, user: User) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = str(user.id)
    request.session[SESSION_ROLE_KEY] = user.role


def end_session(request: Request) -> None:
    request.session.clear()


async def load_session_user(request: Request, db: AsyncSession) -> User | None:
    """Reload the signed-in user, clearing the session if it is no longer valid."""
    raw_id = request.session.get(SESSION_USER_KEY)
    if not raw_id:
        return None
    try:
        user_id = UUID(raw_id)
    except ValueError:
        end_session(request)
        return None
    user = await db.get(User, user_id)
    if user is None:
        end_session(request)
        return None
    if not user.can_sign_in:
        logger.warning("Session rejected for blocked user", extra={"user_id": user.id})
        end_session(request)
        raise AccountBlockedError()
    return user


async def get_current_user(
    request: Request, db: AsyncSession = Depends(get_db),
) -> User:
    user = await load_session_user(request, db)
    if user is None:
        raise AuthenticationRequiredError()
    return user


def require_role(*roles: UserRole):
    """Dependency factory: current user must hold one of roles."""
    allowed = {role.value for role in roles}

    async def _require_role(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            logger.warning(
                f"Role {user.role} denied, requires {sorted(allowed)}",
                extra={"user_id": user.id, "role": user.role},
            )
            raise PermissionDeniedError()
        return user

    return _require_role


async def get_current_candidate(
    user: User = Depends(require_role(UserRole.CANDIDATE)),
    db: AsyncSession = Depends(get_db),
) -> Candidate:
    return await require_candidate(db, user.id)


async def get_current_lecturer(
    user: User = Depends(require_role(UserRole.LECTURER)),
    db: AsyncSession = Depends(get_db),
) -> Lecturer:
    return await require_lecturer(db, user.id)
