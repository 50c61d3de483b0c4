"""GraphQL Inputs — input types and their conversion to the shared Pydantic schemas.

Invariants:
    - GraphQL inputs are validated by the same Pydantic models as REST bodies
    - Pydantic failures surface as ValidationFailedError with field-level messages
"""

from typing import TypeVar

import strawberry
from pydantic import BaseModel, ValidationError

from teachteam.api.error_handlers import build_validation_error_response
from teachteam.core.errors import ValidationFailedError

M = TypeVar("M", bound=BaseModel)


@strawberry.input
class CourseInput:
    code: str
    name: str
    semester: str
    year: int


@strawberry.input
class CourseUpdateInput:
    code: str | None = None
    name: str | None = None
    semester: str | None = None
    year: int | None = None
    is_active: bool | None = None


@strawberry.input
class LecturerCourseAssignmentInput:
    lecturer_id: strawberry.ID
    course_id: strawberry.ID


@strawberry.input
class LecturerMultipleCoursesInput:
    lecturer_id: strawberry.ID
    course_ids: list[strawberry.ID]


@strawberry.input
class MarkCandidateUnavailableInput:
    candidate_id: strawberry.ID
    reason: str


def to_model(model_cls: type[M], data: object, *, partial: bool = False) -> M:
    """Validate a Strawberry input with a Pydantic model."""
    fields = {
        key: value for key, value in vars(data).items()
        if not (partial and value is None)
    }
    try:
        return model_cls(**fields)
    except ValidationError as exc:
        errors = build_validation_error_response(exc.errors())["errors"]
        raise ValidationFailedError(
            "; ".join(f"{e['field']}: {e['message']}" for e in errors),
            [e["message"] for e in errors],
        )
