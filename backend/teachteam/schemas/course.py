"""Course Schemas — admin create/update bodies, shared by REST and GraphQL.

Invariants:
    - code matches four capital letters + four digits after strip
    - CourseUpdate is partial: only fields explicitly set are applied
"""

from pydantic import BaseModel, Field, field_validator

from teachteam.core.validation import check_course_code, check_course_name


def _validated_code(v: str) -> str:
    error = check_course_code(v)
    if error:
        raise ValueError(error)
    return v.strip()


def _validated_name(v: str) -> str:
    error = check_course_name(v)
    if error:
        raise ValueError(error)
    return v.strip()


class CourseCreate(BaseModel):
    code: str
    name: str
    semester: str = Field(min_length=1, max_length=50)
    year: int = Field(ge=2000, le=2100)

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        return _validated_code(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validated_name(v)


class CourseUpdate(BaseModel):
    code: str | None = None
    name: str | None = None
    semester: str | None = Field(None, min_length=1, max_length=50)
    year: int | None = Field(None, ge=2000, le=2100)
    is_active: bool | None = None

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str | None) -> str | None:
        return _validated_code(v) if v is not None else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return _validated_name(v) if v is not None else v
