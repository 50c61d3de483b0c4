"""Lecturer Schemas — course assignment, search filters and bulk application lookup.

Invariants:
    - Search filters are raw strings; unknown enum values are dropped later
      by core.search.build_search_criteria, never rejected here
    - ApplicationIdsRequest requires at least one id
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CourseAssignmentRequest(BaseModel):
    course_id: UUID


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    application_ids: list[UUID] | None = Field(None, alias="applicationIds")
    name: str | None = None
    availability: str | None = None
    skills: list[str] | None = None
    session_type: str | None = Field(None, alias="sessionType")
    sort_by: str | None = None
    sort_direction: str | None = None


class ApplicationIdsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    application_ids: list[UUID] = Field(alias="applicationIds", min_length=1)
