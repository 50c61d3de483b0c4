"""Error Hierarchy — HTTP status, codes and REST envelope."""

import pytest

from teachteam.core.errors import (
    AccountBlockedError, ApplicationNotPendingError, ConflictError,
    DatabaseError, DuplicateApplicationError, ErrorCategory,
    InvalidCredentialsError, PermissionDeniedError, ResourceNotFoundError,
    TeachTeamError, ValidationFailedError,
)


@pytest.mark.parametrize("error, status", [
    (ValidationFailedError("bad"), 400),
    (InvalidCredentialsError(), 401),
    (AccountBlockedError(), 401),
    (PermissionDeniedError(), 403),
    (ResourceNotFoundError("Course", "x"), 404),
    (DuplicateApplicationError(), 409),
    (ApplicationNotPendingError("Selected"), 409),
    (DatabaseError("down", "query"), 503),
])
def test_http_status_per_error(error, status):
    assert isinstance(error, TeachTeamError)
    assert error.http_status == status


def test_conflict_specialisations_share_category():
    error = DuplicateApplicationError()
    assert isinstance(error, ConflictError)
    assert error.category == ErrorCategory.CONFLICT
    assert error.message == "You have already applied for this position"


def test_to_response_envelope():
    body = ResourceNotFoundError("Course", "abc").to_response()
    assert body["success"] is False
    assert body["message"] == "Course 'abc' not found"
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["category"] == "resource_not_found"
    assert "timestamp" in body["error"]


def test_validation_error_lists_messages():
    body = ValidationFailedError("Invalid", ["a", "b"]).to_response()
    assert body["errors"] == ["a", "b"]
    assert ValidationFailedError("only").errors == ["only"]
