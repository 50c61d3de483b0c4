"""Admin Reports — pure grouping of application records into the three admin reports.

Invariants:
    - Course report lists only Selected applications, courses ordered by code,
      candidates ordered by ranking (unranked last) then name
    - Multiple-course report counts DISTINCT courses a candidate was selected for,
      and includes a candidate only when that count exceeds the threshold
    - Unselected report includes candidates with >= 1 application and 0 selections
"""

from typing import Iterable

from teachteam.core.application_record import ApplicationRecord


def course_label(code: str, name: str) -> str:
    return f"{code} - {name}"


def _ranking_key(record: ApplicationRecord) -> tuple:
    return (
        record.ranking is None,
        record.ranking if record.ranking is not None else 0,
        record.candidate_name.lower(),
    )


def build_course_selection_report(records: Iterable[ApplicationRecord]) -> list[dict]:
    """Selected candidates grouped per course."""
    by_course: dict[str, list[ApplicationRecord]] = {}
    for record in records:
        if record.is_selected:
            by_course.setdefault(record.course_id, []).append(record)

    report = []
    for course_records in by_course.values():
        first = course_records[0]
        report.append({
            "courseId": first.course_id,
            "courseCode": first.course_code,
            "courseName": first.course_name,
            "selectedCandidates": [
                {
                    "candidateId": r.candidate_id,
                    "candidateName": r.candidate_name,
                    "candidateEmail": r.candidate_email,
                    "sessionType": r.session_type,
                    "ranking": r.ranking,
                }
                for r in sorted(course_records, key=_ranking_key)
            ],
        })
    return sorted(report, key=lambda entry: entry["courseCode"])


def build_multiple_course_report(
    records: Iterable[ApplicationRecord], threshold: int,
) -> list[dict]:
    """Candidates selected for more than `threshold` distinct courses."""
    selections: dict[str, dict] = {}
    for record in records:
        if not record.is_selected:
            continue
        entry = selections.setdefault(record.candidate_id, {
            "id": record.candidate_id,
            "candidateName": record.candidate_name,
            "candidateEmail": record.candidate_email,
            "courses": {},
        })
        entry["courses"].setdefault(
            record.course_id, course_label(record.course_code, record.course_name),
        )

    report = [
        {
            "id": entry["id"],
            "candidateName": entry["candidateName"],
            "candidateEmail": entry["candidateEmail"],
            "courseCount": len(entry["courses"]),
            "courses": sorted(entry["courses"].values()),
        }
        for entry in selections.values()
        if len(entry["courses"]) > threshold
    ]
    return sorted(report, key=lambda e: (-e["courseCount"], e["candidateName"].lower()))


def build_unselected_report(records: Iterable[ApplicationRecord]) -> list[dict]:
    """Candidates who applied at least once and were never selected."""
    candidates: dict[str, dict] = {}
    for record in records:
        entry = candidates.setdefault(record.candidate_id, {
            "id": record.candidate_id,
            "candidateName": record.candidate_name,
            "candidateEmail": record.candidate_email,
            "applicationCount": 0,
            "appliedCourses": [],
            "selected": False,
        })
        entry["applicationCount"] += 1
        label = course_label(record.course_code, record.course_name)
        if label not in entry["appliedCourses"]:
            entry["appliedCourses"].append(label)
        if record.is_selected:
            entry["selected"] = True

    return sorted(
        (
            {k: v for k, v in entry.items() if k != "selected"}
            for entry in candidates.values() if not entry["selected"]
        ),
        key=lambda e: e["candidateName"].lower(),
    )
