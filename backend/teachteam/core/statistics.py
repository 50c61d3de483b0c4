"""Statistics — pure tallies over already-fetched application records, no IO.

Invariants:
    - Input order is significant only for tie-breaking: most/least selected ties
      resolve to the candidate seen later
    - mostSelected / leastSelected consider only candidates selected at least once
    - Candidates are identified by candidate_id; name/email come from their first record
"""

from collections import Counter
from typing import Iterable

from teachteam.core.application_record import ApplicationRecord
from teachteam.core.domain_types import (
    ApplicationStatus, Availability, SessionType,
)


def count_by_status(records: Iterable[ApplicationRecord]) -> dict:
    """Return totalApplicants plus per-status counts."""
    counts = Counter(r.status for r in records)
    return {
        "totalApplicants": sum(counts.values()),
        "selectedCount": counts.get(ApplicationStatus.SELECTED.value, 0),
        "pendingCount": counts.get(ApplicationStatus.PENDING.value, 0),
        "rejectedCount": counts.get(ApplicationStatus.REJECTED.value, 0),
    }


def tally_selections(records: Iterable[ApplicationRecord]) -> list[dict]:
    """Selection count per candidate, in first-seen order."""
    tallies: dict[str, dict] = {}
    for record in records:
        entry = tallies.setdefault(record.candidate_id, {
            "id": record.candidate_id,
            "name": record.candidate_name,
            "email": record.candidate_email,
            "count": 0,
        })
        if record.is_selected:
            entry["count"] += 1
    return list(tallies.values())


def _pick(candidates: list[dict], prefer_higher: bool) -> dict | None:
    best = None
    for current in candidates:
        if best is None:
            best = current
            continue
        keep_best = (
            best["count"] > current["count"] if prefer_higher
            else best["count"] < current["count"]
        )
        if not keep_best:
            best = current
    return best


def compute_lecturer_statistics(records: list[ApplicationRecord]) -> dict:
    """Applicant statistics across all courses assigned to one lecturer."""
    tallies = tally_selections(records)
    selected = [t for t in tallies if t["count"] > 0]
    most = _pick(selected, prefer_higher=True)
    least = _pick(selected, prefer_higher=False)
    return {
        **count_by_status(records),
        "mostSelected": dict(most) if most else None,
        "leastSelected": dict(least) if least else None,
        "unselectedApplicants": [
            {"id": t["id"], "name": t["name"], "email": t["email"]}
            for t in tallies if t["count"] == 0
        ],
    }


def compute_course_statistics(records: list[ApplicationRecord]) -> dict:
    """Status, role, and availability breakdown for one course."""
    return {
        **count_by_status(records),
        "tutorCount": sum(
            1 for r in records if r.session_type == SessionType.TUTOR.value
        ),
        "labAssistantCount": sum(
            1 for r in records if r.session_type == SessionType.LAB_ASSISTANT.value
        ),
        "fullTimeApplicants": sum(
            1 for r in records if r.availability == Availability.FULLTIME.value
        ),
        "partTimeApplicants": sum(
            1 for r in records if r.availability == Availability.PARTTIME.value
        ),
    }


def empty_lecturer_statistics() -> dict:
    return compute_lecturer_statistics([])
