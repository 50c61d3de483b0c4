"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Unique/foreign-key violations surface as ConflictError (409), never as raw IntegrityError
    - Other SQLAlchemy exceptions are mapped to DatabaseError (503)
    - TeachTeamError raised by services passes through untouched (after rollback)

Design Decisions:
    - Singleton db_manager initialized on startup by the FastAPI lifespan
    - expire_on_commit=False: ORM objects stay readable after commit in async code
    - SQLite URLs skip pool sizing arguments (used by local development and tests)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from teachteam.core.errors import ConflictError, DatabaseError, TeachTeamError

logger = logging.getLogger(__name__)


def _engine_kwargs(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 10, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url, **_engine_kwargs(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except TeachTeamError:
            await session.rollback()
            raise
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"DB integrity error: {e.orig}")
            raise ConflictError(
                "Operation conflicts with existing data", "INTEGRITY_CONFLICT",
            )
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
