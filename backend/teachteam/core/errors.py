"""Error Hierarchy — typed, categorized exceptions for all TeachTeam failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope {success: false, message, error: {...}}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TeachTeamError base: FastAPI global handler and GraphQL
      resolvers share the same exceptions
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class TeachTeamError(Exception):
    """Base exception for all TeachTeam errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "success": False,
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(TeachTeamError):
    """Input failed a business validation rule."""
    def __init__(
        self, message: str, errors: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = errors or [message]

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = list(self.errors)
        return response


class AuthenticationRequiredError(TeachTeamError):
    """No signed-in user on the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required. Please sign in.",
            "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialsError(TeachTeamError):
    """Unknown email or wrong password (indistinguishable to the caller)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid email or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AccountBlockedError(TeachTeamError):
    """Account is blocked or deactivated by an administrator."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Account is blocked. Please contact administrator.",
            "ACCOUNT_BLOCKED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(TeachTeamError):
    """Signed-in user lacks the role or ownership required."""
    def __init__(
        self, message: str = "Forbidden. You do not have permission to access this resource.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "PERMISSION_DENIED", ErrorCategory.PERMISSION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(TeachTeamError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        message = (
            f"{resource_type} '{resource_id}' not found"
            if resource_id else f"{resource_type} not found"
        )
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type


class ConflictError(TeachTeamError):
    """Operation conflicts with existing state."""
    def __init__(
        self, message: str, code: str = "CONFLICT",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class EmailAlreadyRegisteredError(ConflictError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User with this email already exists",
            "EMAIL_ALREADY_REGISTERED", context,
        )


class CourseCodeTakenError(ConflictError):
    def __init__(self, code: str, context: ErrorContext | None = None):
        super().__init__(
            f"Course with code {code} already exists",
            "COURSE_CODE_TAKEN", context,
        )


class DuplicateApplicationError(ConflictError):
    """Candidate already applied for this course and session type."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "You have already applied for this position",
            "DUPLICATE_APPLICATION", context,
        )


class CourseAlreadyAssignedError(ConflictError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Course already assigned to lecturer",
            "COURSE_ALREADY_ASSIGNED", context,
        )


class ApplicationNotPendingError(ConflictError):
    """Withdrawal attempted after a lecturer decision."""
    def __init__(self, status: str, context: ErrorContext | None = None):
        super().__init__(
            f"Only pending applications can be withdrawn (current status: {status})",
            "APPLICATION_NOT_PENDING", context,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TeachTeamError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
