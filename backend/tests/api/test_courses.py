"""Course Routes — public listing and admin management.

Tests:
    - Listing is public, active-only, ordered by code
    - Create/update/delete require an admin (401 anonymous, 403 other roles)
    - Course code format and uniqueness enforced (400 / 409)
    - Delete is soft: the course disappears from listings but still exists
"""


async def test_list_is_public_active_only_and_sorted(client, make_course):
    await make_course("MATH1000", "Calculus")
    await make_course("COSC1000", "Programming")
    await make_course("ARTS1000", "Drawing", is_active=False)

    res = await client.get("/api/courses")
    assert res.status_code == 200
    assert [c["code"] for c in res.json()["courses"]] == ["COSC1000", "MATH1000"]


async def test_get_unknown_course_is_404(client):
    res = await client.get("/api/courses/00000000-0000-0000-0000-000000000000")
    assert res.status_code == 404


async def test_create_requires_admin(client, sign_in, lecturer_account):
    body = {"code": "COSC3000", "name": "Networks", "semester": "Semester 2", "year": 2025}
    assert (await client.post("/api/courses", json=body)).status_code == 401

    await sign_in(lecturer_account[0])
    assert (await client.post("/api/courses", json=body)).status_code == 403


async def test_admin_creates_course(client, sign_in, admin_account):
    await sign_in(admin_account[0])
    res = await client.post("/api/courses", json={
        "code": "COSC3000", "name": "Networks", "semester": "Semester 2", "year": 2025,
    })
    assert res.status_code == 201
    course = res.json()["course"]
    assert course["code"] == "COSC3000"
    assert course["is_active"] is True


async def test_create_rejects_bad_code_and_duplicates(client, sign_in, admin_account, course):
    await sign_in(admin_account[0])
    bad = await client.post("/api/courses", json={
        "code": "cs101", "name": "Networks", "semester": "Semester 2", "year": 2025,
    })
    assert bad.status_code == 400
    assert bad.json()["errors"][0]["field"] == "code"

    duplicate = await client.post("/api/courses", json={
        "code": course.code, "name": "Another", "semester": "Semester 2", "year": 2025,
    })
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "COURSE_CODE_TAKEN"


async def test_create_rejects_overlong_name(client, sign_in, admin_account):
    await sign_in(admin_account[0])
    res = await client.post("/api/courses", json={
        "code": "COSC3001", "name": "N" * 201, "semester": "Semester 2", "year": 2025,
    })
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "name"


async def test_update_is_partial_and_checks_code_uniqueness(
    client, sign_in, admin_account, course, other_course,
):
    await sign_in(admin_account[0])
    res = await client.put(f"/api/courses/{course.id}", json={"name": "Full Stack Dev"})
    assert res.status_code == 200
    updated = res.json()["course"]
    assert updated["name"] == "Full Stack Dev"
    assert updated["code"] == course.code

    clash = await client.put(f"/api/courses/{course.id}", json={"code": other_course.code})
    assert clash.status_code == 409


async def test_delete_is_soft(client, sign_in, admin_account, course):
    await sign_in(admin_account[0])
    res = await client.delete(f"/api/courses/{course.id}")
    assert res.status_code == 200

    listing = await client.get("/api/courses")
    assert listing.json()["courses"] == []
    detail = await client.get(f"/api/courses/{course.id}")
    assert detail.status_code == 200
    assert detail.json()["course"]["is_active"] is False
