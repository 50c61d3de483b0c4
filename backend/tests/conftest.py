"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Environment configured before any teachteam import (settings are cached)
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB through DatabaseSessionManager,
      so error mapping (IntegrityError → 409) matches production
    - Cookies persist on the client, so sign_in() authenticates later requests

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, no external dependency
    - Users created directly in the DB (make_user) instead of through /signup to keep
      route tests focused; auth tests exercise /signup itself
    - Low bcrypt cost factor: hashing dominates test time otherwise
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import teachteam.infrastructure.database as db_module  # noqa: E402
from teachteam.core.domain_types import DEFAULT_DEPARTMENTS, UserRole  # noqa: E402
from teachteam.db.base import Base  # noqa: E402
from teachteam.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from teachteam.infrastructure.notifier import get_notifier  # noqa: E402
from teachteam.infrastructure.security import hash_password  # noqa: E402
from teachteam.main import app  # noqa: E402
from teachteam.models import (  # noqa: E402
    Admin, Candidate, CandidateApplication, Course, Lecturer, User,
)

DEFAULT_PASSWORD = "Password1"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture(autouse=True)
def fresh_notifier():
    """Each test sees its own notifier (get_notifier is process-cached)."""
    get_notifier.cache_clear()
    yield get_notifier()
    get_notifier.cache_clear()


@pytest.fixture
def make_user(test_db):
    """Create a user plus its role record. Returns (user, role_record)."""

    async def _make_user(
        role: UserRole = UserRole.CANDIDATE,
        name: str = "Test User",
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
    ):
        user = User(
            name=name,
            email=(email or f"{name.lower().replace(' ', '.')}@example.com"),
            password_hash=hash_password(password),
            role=role.value,
        )
        if role == UserRole.CANDIDATE:
            record = Candidate(
                user=user, availability="parttime", skills=[],
                academic_credentials=[], previous_roles=[],
            )
        elif role == UserRole.LECTURER:
            record = Lecturer(
                user=user, department=DEFAULT_DEPARTMENTS[role], courses=[],
            )
        else:
            record = Admin(user=user, department=DEFAULT_DEPARTMENTS[role])
        test_db.add_all([user, record])
        await test_db.commit()
        return user, record

    return _make_user


@pytest.fixture
def make_course(test_db):
    async def _make_course(
        code: str = "COSC2758", name: str = "Full Stack Development",
        semester: str = "Semester 1", year: int = 2025, is_active: bool = True,
    ) -> Course:
        course = Course(
            code=code, name=name, semester=semester, year=year, is_active=is_active,
        )
        test_db.add(course)
        await test_db.commit()
        return course

    return _make_course


@pytest.fixture
def make_application(test_db):
    async def _make_application(
        candidate: Candidate, course: Course, session_type: str = "tutor",
        status: str = "Pending", skills: list[str] | None = None,
        availability: str = "parttime", ranking: int | None = None,
    ) -> CandidateApplication:
        application = CandidateApplication(
            candidate_id=candidate.id,
            course_id=course.id,
            session_type=session_type,
            skills=skills if skills is not None else ["Python"],
            availability=availability,
            status=status,
            ranking=ranking,
            comments=[],
        )
        test_db.add(application)
        await test_db.commit()
        return application

    return _make_application


@pytest.fixture
def assign_course(test_db):
    async def _assign(lecturer: Lecturer, *courses: Course) -> None:
        lecturer.courses = [*lecturer.courses, *courses]
        await test_db.commit()

    return _assign


@pytest.fixture
def sign_in(client):
    async def _sign_in(user: User, password: str = DEFAULT_PASSWORD):
        res = await client.post(
            "/api/auth/signin", json={"email": user.email, "password": password},
        )
        assert res.status_code == 200, res.text
        return res

    return _sign_in
