"""GraphQL Context — per-request database session plus the Starlette request."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from teachteam.infrastructure.database import get_db


class TeachTeamContext(BaseContext):
    def __init__(self, db: AsyncSession):
        super().__init__()
        self.db = db


async def get_context(db: AsyncSession = Depends(get_db)) -> TeachTeamContext:
    return TeachTeamContext(db)
