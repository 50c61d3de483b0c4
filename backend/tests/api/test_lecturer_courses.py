"""Lecturer Course Routes — a lecturer managing their own assignments."""


async def test_add_list_and_remove_course(client, sign_in, lecturer_account, course):
    await sign_in(lecturer_account[0])

    added = await client.post("/api/lecturer-courses/add", json={"course_id": str(course.id)})
    assert added.status_code == 200

    mine = await client.get("/api/lecturer-courses/my-courses")
    assert [c["code"] for c in mine.json()["courses"]] == [course.code]

    again = await client.post("/api/lecturer-courses/add", json={"course_id": str(course.id)})
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "COURSE_ALREADY_ASSIGNED"

    removed = await client.post(
        "/api/lecturer-courses/remove", json={"course_id": str(course.id)},
    )
    assert removed.status_code == 200
    mine = await client.get("/api/lecturer-courses/my-courses")
    assert mine.json()["courses"] == []


async def test_available_marks_assigned_courses(
    client, sign_in, lecturer_account, course, other_course, assign_course,
):
    await assign_course(lecturer_account[1], course)
    await sign_in(lecturer_account[0])

    res = await client.get("/api/lecturer-courses/available")
    assigned = {c["code"]: c["assigned"] for c in res.json()["courses"]}
    assert assigned == {other_course.code: False, course.code: True}


async def test_removing_unassigned_course_is_404(client, sign_in, lecturer_account, course):
    await sign_in(lecturer_account[0])
    res = await client.post("/api/lecturer-courses/remove", json={"course_id": str(course.id)})
    assert res.status_code == 404


async def test_candidates_cannot_manage_lecturer_courses(client, sign_in, candidate_account):
    await sign_in(candidate_account[0])
    assert (await client.get("/api/lecturer-courses/my-courses")).status_code == 403
