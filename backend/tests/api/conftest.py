"""API test fixtures — ready-made accounts and courses for route tests.

Invariants:
    - Account fixtures return (User, role record) tuples
    - Nothing is signed in by default; tests call sign_in() explicitly
"""

import pytest

from teachteam.core.domain_types import UserRole


@pytest.fixture
async def candidate_account(make_user):
    return await make_user(UserRole.CANDIDATE, "Alice Candidate")


@pytest.fixture
async def other_candidate_account(make_user):
    return await make_user(UserRole.CANDIDATE, "Bob Candidate")


@pytest.fixture
async def lecturer_account(make_user):
    return await make_user(UserRole.LECTURER, "Laura Lecturer")


@pytest.fixture
async def other_lecturer_account(make_user):
    return await make_user(UserRole.LECTURER, "Oscar Lecturer")


@pytest.fixture
async def admin_account(make_user):
    return await make_user(UserRole.ADMIN, "Ada Admin")


@pytest.fixture
async def course(make_course):
    return await make_course("COSC2758", "Full Stack Development")


@pytest.fixture
async def other_course(make_course):
    return await make_course("COSC1111", "Algorithms")


def submission(course, **overrides) -> dict:
    body = {
        "course_id": str(course.id),
        "session_type": "tutor",
        "skills": ["Python", "React"],
        "availability": "fulltime",
        "academic_credentials": [
            {"degree": "BSc Computer Science", "institution": "RMIT", "year": 2020, "gpa": 3.5},
        ],
        "previous_roles": [
            {"position": "Tutor", "organisation": "RMIT", "start_date": "2021-02-01"},
        ],
    }
    body.update(overrides)
    return body


@pytest.fixture
def submission_body():
    return submission
