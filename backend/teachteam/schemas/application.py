"""Application Schemas — candidate submission and lecturer review bodies.

Invariants:
    - At least one non-blank skill per submission
    - Credential year bounded by the current calendar year at request time
    - Role end_date, when given, is not before start_date
    - Comments are 3..500 chars after strip; rankings are >= 1
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from teachteam.core.domain_types import ApplicationStatus, Availability, SessionType
from teachteam.core.validation import (
    check_comment, check_credential_year, check_gpa, check_role_dates,
    normalize_skills,
)


MAX_PROFILE_TEXT_LENGTH = 200


def _required_text(v: str, label: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{label} is required")
    if len(v) > MAX_PROFILE_TEXT_LENGTH:
        raise ValueError(f"{label} must not exceed {MAX_PROFILE_TEXT_LENGTH} characters")
    return v


class AcademicCredentialInput(BaseModel):
    degree: str
    institution: str
    year: int
    gpa: float | None = None

    @field_validator("degree")
    @classmethod
    def validate_degree(cls, v: str) -> str:
        return _required_text(v, "Degree")

    @field_validator("institution")
    @classmethod
    def validate_institution(cls, v: str) -> str:
        return _required_text(v, "Institution")

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        error = check_credential_year(v, date.today().year)
        if error:
            raise ValueError(error)
        return v

    @field_validator("gpa")
    @classmethod
    def validate_gpa(cls, v: float | None) -> float | None:
        error = check_gpa(v)
        if error:
            raise ValueError(error)
        return v


class PreviousRoleInput(BaseModel):
    position: str
    organisation: str
    start_date: date
    end_date: date | None = None
    description: str | None = Field(None, max_length=2000)

    @field_validator("position")
    @classmethod
    def validate_position(cls, v: str) -> str:
        return _required_text(v, "Position")

    @field_validator("organisation")
    @classmethod
    def validate_organisation(cls, v: str) -> str:
        return _required_text(v, "Organisation")

    @model_validator(mode="after")
    def check_dates(self) -> "PreviousRoleInput":
        error = check_role_dates(self.start_date, self.end_date)
        if error:
            raise ValueError(error)
        return self


class ApplicationSubmit(BaseModel):
    course_id: UUID
    session_type: SessionType
    skills: list[str]
    availability: Availability
    academic_credentials: list[AcademicCredentialInput] = Field(default_factory=list)
    previous_roles: list[PreviousRoleInput] = Field(default_factory=list)

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v: list[str]) -> list[str]:
        skills = normalize_skills(v)
        if not skills:
            raise ValueError("At least one skill is required")
        return skills


class StatusUpdate(BaseModel):
    status: ApplicationStatus


class CommentRequest(BaseModel):
    comment: str

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, v: str) -> str:
        error = check_comment(v)
        if error:
            raise ValueError(error)
        return v.strip()


class RankingUpdate(BaseModel):
    ranking: int = Field(ge=1)
