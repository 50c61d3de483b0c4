"""Entity Lookups — fetch-or-raise helpers and role record resolution.

Invariants:
    - Malformed ids are reported as not found (same as unknown ids)
    - get_or_404 never returns None
"""

from typing import TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teachteam.core.errors import ResourceNotFoundError
from teachteam.models.admin import Admin
from teachteam.models.candidate import Candidate
from teachteam.models.lecturer import Lecturer

T = TypeVar("T")


def parse_uuid(value: str | UUID, resource_type: str) -> UUID:
    """Coerce a client-supplied id (GraphQL sends strings) to UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise ResourceNotFoundError(resource_type, str(value))


async def get_or_404(
    db: AsyncSession, model: type[T], entity_id: str | UUID, resource_type: str,
) -> T:
    entity = await db.get(model, parse_uuid(entity_id, resource_type))
    if entity is None:
        raise ResourceNotFoundError(resource_type, str(entity_id))
    return entity


async def find_candidate_by_user(db: AsyncSession, user_id: UUID) -> Candidate | None:
    result = await db.execute(select(Candidate).where(Candidate.user_id == user_id))
    return result.scalar_one_or_none()


async def find_lecturer_by_user(db: AsyncSession, user_id: UUID) -> Lecturer | None:
    result = await db.execute(select(Lecturer).where(Lecturer.user_id == user_id))
    return result.scalar_one_or_none()


async def find_admin_by_user(db: AsyncSession, user_id: UUID) -> Admin | None:
    result = await db.execute(select(Admin).where(Admin.user_id == user_id))
    return result.scalar_one_or_none()


async def require_candidate(db: AsyncSession, user_id: UUID) -> Candidate:
    candidate = await find_candidate_by_user(db, user_id)
    if candidate is None:
        raise ResourceNotFoundError("Candidate profile")
    return candidate


async def require_lecturer(db: AsyncSession, user_id: UUID) -> Lecturer:
    lecturer = await find_lecturer_by_user(db, user_id)
    if lecturer is None:
        raise ResourceNotFoundError("Lecturer profile")
    return lecturer
