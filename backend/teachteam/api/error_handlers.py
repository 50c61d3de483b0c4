"""Error Handlers — global exception handlers for the TeachTeam API.

Invariants:
    - TeachTeamError → {success: false, message, error: {code, category, severity, timestamp}}
    - RequestValidationError → 400 {success: false, message, errors: [{field, message}]}
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TeachTeamError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the entry point only wires components together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from teachteam.core.errors import TeachTeamError, ErrorSeverity

logger = logging.getLogger(__name__)

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TeachTeamError)
    async def teachteam_error_handler(request: Request, exc: TeachTeamError):
        """Handle all TeachTeam domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"TeachTeamError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "An unexpected error occurred",
                "error": {
                    "code": "INTERNAL_ERROR",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def _clean_message(message: str) -> str:
    if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        return message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
    return message


def build_validation_error_response(errors) -> dict:
    """Build the 400 body from pydantic error dicts (also used by GraphQL input parsing)."""
    return {
        "success": False,
        "message": "Validation failed",
        "errors": [
            {"field": _field_name(e["loc"]), "message": _clean_message(e["msg"])}
            for e in errors
        ],
    }
