"""Statistics — pure tallies over ApplicationRecords.

Tests:
    - Status counts and totals
    - Most/least selected ignore unselected candidates; ties go to the later candidate
    - Unselected applicants listed once each
    - Course breakdown by session type and availability
"""

from teachteam.core.application_record import ApplicationRecord
from teachteam.core.statistics import (
    compute_course_statistics, compute_lecturer_statistics,
    count_by_status, empty_lecturer_statistics,
)


def _record(candidate: str, status: str = "Pending", course: str = "c1", **kwargs):
    return ApplicationRecord(
        application_id=f"{candidate}-{course}-{kwargs.get('session_type', 'tutor')}",
        candidate_id=candidate,
        candidate_name=candidate.title(),
        candidate_email=f"{candidate}@example.com",
        course_id=course,
        course_code="COSC1000",
        course_name="Programming",
        session_type=kwargs.get("session_type", "tutor"),
        availability=kwargs.get("availability", "parttime"),
        status=status,
    )


def test_count_by_status():
    counts = count_by_status([
        _record("ann", "Selected"), _record("bob"), _record("cat", "Rejected"),
        _record("dan"),
    ])
    assert counts == {
        "totalApplicants": 4, "selectedCount": 1,
        "pendingCount": 2, "rejectedCount": 1,
    }


def test_most_and_least_selected_use_selection_counts():
    records = [
        _record("ann", "Selected", "c1"),
        _record("ann", "Selected", "c2"),
        _record("bob", "Selected", "c1"),
        _record("cat", "Rejected", "c1"),
    ]
    stats = compute_lecturer_statistics(records)
    assert stats["mostSelected"]["id"] == "ann"
    assert stats["mostSelected"]["count"] == 2
    assert stats["leastSelected"]["id"] == "bob"
    assert stats["unselectedApplicants"] == [
        {"id": "cat", "name": "Cat", "email": "cat@example.com"},
    ]


def test_ties_resolve_to_candidate_seen_later():
    records = [
        _record("ann", "Selected", "c1"),
        _record("bob", "Selected", "c1"),
    ]
    stats = compute_lecturer_statistics(records)
    assert stats["mostSelected"]["id"] == "bob"
    assert stats["leastSelected"]["id"] == "bob"


def test_no_selections_means_no_most_or_least():
    stats = compute_lecturer_statistics([_record("ann"), _record("ann", course="c2")])
    assert stats["mostSelected"] is None
    assert stats["leastSelected"] is None
    assert len(stats["unselectedApplicants"]) == 1


def test_empty_lecturer_statistics_is_zeroed():
    stats = empty_lecturer_statistics()
    assert stats["totalApplicants"] == 0
    assert stats["unselectedApplicants"] == []


def test_course_statistics_breakdown():
    stats = compute_course_statistics([
        _record("ann", session_type="tutor", availability="fulltime"),
        _record("bob", session_type="lab_assistant", availability="parttime"),
        _record("cat", "Selected", session_type="lab_assistant", availability="parttime"),
    ])
    assert stats["tutorCount"] == 1
    assert stats["labAssistantCount"] == 2
    assert stats["fullTimeApplicants"] == 1
    assert stats["partTimeApplicants"] == 2
    assert stats["selectedCount"] == 1
