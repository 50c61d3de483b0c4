"""Lecturer Search Rules — filter normalization and in-memory skill matching.

Invariants:
    - Unknown availability / session type / sort key values are dropped, never raise
    - Skill matching is any-match and case-insensitive
    - Blank name filters are treated as absent
"""

from dataclasses import dataclass, field
from typing import Iterable

from teachteam.core.domain_types import (
    Availability, SearchSortKey, SessionType, SortDirection,
)


@dataclass(frozen=True)
class SearchCriteria:
    """Normalized lecturer search filters. None means 'do not filter'."""
    application_ids: tuple[str, ...] = field(default_factory=tuple)
    name: str | None = None
    availability: Availability | None = None
    skills: tuple[str, ...] = field(default_factory=tuple)
    session_type: SessionType | None = None
    sort_by: SearchSortKey | None = None
    sort_direction: SortDirection = SortDirection.ASC


def _enum_or_none(enum_cls, value):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def build_search_criteria(
    application_ids: Iterable[str] | None = None,
    name: str | None = None,
    availability: str | None = None,
    skills: Iterable[str] | None = None,
    session_type: str | None = None,
    sort_by: str | None = None,
    sort_direction: str | None = None,
) -> SearchCriteria:
    """Normalize raw request filters into SearchCriteria."""
    cleaned_name = name.strip().lower() if name and name.strip() else None
    return SearchCriteria(
        application_ids=tuple(application_ids or ()),
        name=cleaned_name,
        availability=_enum_or_none(Availability, availability),
        skills=tuple(s.strip().lower() for s in (skills or ()) if s and s.strip()),
        session_type=_enum_or_none(SessionType, session_type),
        sort_by=_enum_or_none(SearchSortKey, sort_by),
        sort_direction=(
            SortDirection.DESC if sort_direction == SortDirection.DESC.value
            else SortDirection.ASC
        ),
    )


def matches_any_skill(
    application_skills: Iterable[str], wanted: Iterable[str],
) -> bool:
    """True when no skills are wanted, or any wanted skill is present."""
    wanted_set = {w.lower() for w in wanted}
    if not wanted_set:
        return True
    return any(s.lower() in wanted_set for s in application_skills)
