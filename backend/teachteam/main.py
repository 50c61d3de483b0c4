"""TeachTeam API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TeachTeamError → structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - REST (/api/*) and the admin GraphQL API (/graphql) share one app,
      one database pool and one session cookie

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - CORS added last so it wraps SessionMiddleware; every route (REST and
      GraphQL) sees request.session
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from teachteam.api.error_handlers import register_error_handlers
from teachteam.api.routes import (
    applications, auth, courses, health, lecturer_courses, lecturer_search,
    statistics,
)
from teachteam.config import get_settings
from teachteam.graphql.router import graphql_router
from teachteam.infrastructure import database
from teachteam.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("TeachTeam API started")
    yield
    await manager.dispose()
    logger.info("TeachTeam API shutting down")


app = FastAPI(title="TeachTeam API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
    https_only=settings.session_https_only,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(courses.router)
app.include_router(applications.router)
app.include_router(lecturer_courses.router)
app.include_router(lecturer_search.router)
app.include_router(statistics.router)
app.include_router(graphql_router, prefix="/graphql")

register_error_handlers(app)
