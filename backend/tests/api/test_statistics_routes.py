"""Statistics Routes — lecturer, course and system statistics with access rules."""

import pytest


@pytest.fixture
async def stats_setup(
    lecturer_account, candidate_account, other_candidate_account, course,
    assign_course, make_application,
):
    await assign_course(lecturer_account[1], course)
    await make_application(candidate_account[1], course, status="Selected")
    await make_application(
        candidate_account[1], course, session_type="lab_assistant", availability="fulltime",
    )
    await make_application(other_candidate_account[1], course, status="Rejected")


async def test_lecturer_reads_own_statistics(client, sign_in, lecturer_account, stats_setup):
    user, lecturer = lecturer_account
    await sign_in(user)
    res = await client.get(f"/api/statistics/lecturer/{lecturer.id}")
    assert res.status_code == 200
    stats = res.json()["statistics"]
    assert stats["totalApplicants"] == 3
    assert stats["selectedCount"] == 1
    assert stats["mostSelected"]["name"] == "Alice Candidate"
    assert [u["name"] for u in stats["unselectedApplicants"]] == ["Bob Candidate"]


async def test_lecturer_cannot_read_another_lecturers_statistics(
    client, sign_in, lecturer_account, other_lecturer_account,
):
    await sign_in(other_lecturer_account[0])
    res = await client.get(f"/api/statistics/lecturer/{lecturer_account[1].id}")
    assert res.status_code == 403


async def test_admin_reads_any_lecturer_statistics(
    client, sign_in, admin_account, lecturer_account, stats_setup,
):
    await sign_in(admin_account[0])
    res = await client.get(f"/api/statistics/lecturer/{lecturer_account[1].id}")
    assert res.status_code == 200


async def test_course_statistics(client, sign_in, lecturer_account, course, stats_setup):
    await sign_in(lecturer_account[0])
    res = await client.get(f"/api/statistics/course/{course.id}")
    assert res.status_code == 200
    stats = res.json()["statistics"]
    assert stats["tutorCount"] == 2
    assert stats["labAssistantCount"] == 1
    assert stats["fullTimeApplicants"] == 1
    assert stats["partTimeApplicants"] == 2


async def test_system_statistics_admin_only(
    client, sign_in, admin_account, lecturer_account, course, stats_setup,
):
    await sign_in(lecturer_account[0])
    assert (await client.get("/api/statistics/system")).status_code == 403

    await sign_in(admin_account[0])
    res = await client.get("/api/statistics/system")
    stats = res.json()["statistics"]
    assert stats["totalApplications"] == 3
    assert stats["totalCandidates"] == 2
    assert stats["topCourses"][0]["code"] == course.code
    assert stats["topCourses"][0]["applicationCount"] == 3
