"""Database Session Manager — rollback and error mapping.

Tests:
    - IntegrityError inside a session surfaces as ConflictError (409)
    - TeachTeamError passes through unchanged
    - health_check reports connectivity
"""

import pytest

from teachteam.core.errors import ConflictError, ResourceNotFoundError
from teachteam.db.base import Base
from teachteam.infrastructure.database import DatabaseSessionManager
from teachteam.models import Course


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'teachteam.db'}")
    async with mgr.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield mgr
    await mgr.dispose()


def _course(code="COSC1000"):
    return Course(code=code, name="Programming", semester="Semester 1", year=2025)


async def test_integrity_error_becomes_conflict(manager):
    async with manager.session() as db:
        db.add(_course())
        await db.commit()

    with pytest.raises(ConflictError):
        async with manager.session() as db:
            db.add(_course())
            await db.commit()


async def test_domain_error_passes_through(manager):
    with pytest.raises(ResourceNotFoundError):
        async with manager.session():
            raise ResourceNotFoundError("Course")


async def test_health_check(manager):
    assert await manager.health_check() is True
