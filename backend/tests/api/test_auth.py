"""Auth Routes — signup, signin, session lifecycle and blocking.

Tests:
    - Signup creates the user plus exactly one role record; duplicate email → 409
    - Invalid signup fields → 400 with field-level errors
    - Signin sets the session cookie and returns roleSpecificId
    - Wrong password / unknown email → 401 with the same message
    - Blocked users cannot sign in, and lose access on their next request
"""

from sqlalchemy import select

from teachteam.models import Candidate, Lecturer, User


async def test_signup_creates_user_and_role_record(client, test_db):
    res = await client.post("/api/auth/signup", json={
        "name": "Laura Lecturer", "email": "Laura@Example.com",
        "password": "Password1", "role": "lecturer",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["user"]["email"] == "laura@example.com"
    assert "password" not in str(body)

    user = (await test_db.execute(
        select(User).where(User.email == "laura@example.com"),
    )).scalar_one()
    assert user.password_hash != "Password1"
    lecturer = (await test_db.execute(
        select(Lecturer).where(Lecturer.user_id == user.id),
    )).scalar_one()
    assert lecturer.department == "School of Computer Science"
    candidates = (await test_db.execute(
        select(Candidate).where(Candidate.user_id == user.id),
    )).scalars().all()
    assert candidates == []


async def test_signup_duplicate_email_conflicts(client, candidate_account):
    user, _ = candidate_account
    res = await client.post("/api/auth/signup", json={
        "name": "Someone", "email": user.email, "password": "Password1",
    })
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "EMAIL_ALREADY_REGISTERED"


async def test_signup_validation_errors(client):
    res = await client.post("/api/auth/signup", json={
        "name": "A", "email": "not-an-email", "password": "weak", "role": "superuser",
    })
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    fields = {e["field"] for e in body["errors"]}
    assert {"name", "email", "password", "role"} <= fields
    assert not any(e["message"].startswith("Value error") for e in body["errors"])


async def test_signin_sets_session_and_returns_role_id(client, candidate_account):
    user, candidate = candidate_account
    res = await client.post(
        "/api/auth/signin", json={"email": user.email, "password": "Password1"},
    )
    assert res.status_code == 200
    assert res.json()["user"]["roleSpecificId"] == str(candidate.id)

    profile = await client.get("/api/auth/profile")
    assert profile.status_code == 200
    assert profile.json()["user"]["id"] == str(user.id)

    check = await client.get("/api/auth/check")
    assert check.json()["authenticated"] is True


async def test_signin_wrong_password_and_unknown_email_look_the_same(
    client, candidate_account,
):
    user, _ = candidate_account
    wrong = await client.post(
        "/api/auth/signin", json={"email": user.email, "password": "Wrong1234"},
    )
    unknown = await client.post(
        "/api/auth/signin", json={"email": "nobody@example.com", "password": "Password1"},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json()["message"] == unknown.json()["message"] == "Invalid email or password"


async def test_blocked_user_cannot_sign_in(client, test_db, candidate_account):
    user, _ = candidate_account
    user.block("Misconduct", "admin")
    await test_db.commit()

    res = await client.post(
        "/api/auth/signin", json={"email": user.email, "password": "Password1"},
    )
    assert res.status_code == 401
    assert res.json()["message"].startswith("Account is blocked")


async def test_deactivated_user_cannot_sign_in(client, test_db, candidate_account):
    user, _ = candidate_account
    user.is_active = False
    await test_db.commit()

    res = await client.post(
        "/api/auth/signin", json={"email": user.email, "password": "Password1"},
    )
    assert res.status_code == 401


async def test_user_blocked_after_sign_in_loses_access(
    client, test_db, sign_in, candidate_account,
):
    user, _ = candidate_account
    await sign_in(user)
    user.block("Unavailable", "admin")
    await test_db.commit()

    res = await client.get("/api/auth/profile")
    assert res.status_code == 401
    check = await client.get("/api/auth/check")
    assert check.json() == {"authenticated": False, "user": None}


async def test_logout_clears_session(client, sign_in, candidate_account):
    user, _ = candidate_account
    await sign_in(user)
    assert (await client.post("/api/auth/logout")).status_code == 200

    res = await client.get("/api/auth/profile")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_signup_rejects_values_longer_than_their_columns(client, test_db):
    res = await client.post("/api/auth/signup", json={
        "name": "N" * 101, "email": f"{'e' * 140}@example.com", "password": "Password1",
    })
    assert res.status_code == 400
    errors = {e["field"]: e["message"] for e in res.json()["errors"]}
    assert errors == {
        "name": "Name must not exceed 100 characters",
        "email": "Email must not exceed 150 characters",
    }
    assert (await test_db.execute(select(User))).scalars().all() == []
