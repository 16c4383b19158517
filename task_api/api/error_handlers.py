"""Error Handlers — global exception handlers for the Task API.

Invariants:
    - TaskApiError → structured JSON with msg, error code, severity
    - RequestValidationError → 400 with field-level error details
    - Unknown route (404) → {"msg": "Not Found <url>"}
    - Other HTTP errors (405, ...) → msg + error envelope, code HTTP_<status>
    - Exception (catch-all) → never leaks internal details
    - Every envelope carries a UTC timestamp
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_api.core.errors import TaskApiError, ErrorSeverity, ErrorCategory

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_task_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_task_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TaskApiError)
    async def task_api_error_handler(request: Request, exc: TaskApiError):
        """Handle all Task API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"TaskApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
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
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes keep the bare msg body; the rest get the envelope."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(
                f"Route not found: {request.method} {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"msg": f"Not Found {request.url}"},
            )
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_build_http_error_response(exc),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "msg": "An unexpected error occurred",
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                    "timestamp": _now_iso(),
                },
            },
        )


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _build_http_error_response(exc: StarletteHTTPException) -> dict:
    """Envelope for framework-raised HTTP errors such as 405."""
    message = str(exc.detail)
    return {
        "msg": message,
        "error": {
            "code": f"HTTP_{exc.status_code}",
            "message": message,
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.WARNING.value,
            "timestamp": _now_iso(),
        },
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "msg": "Invalid request data",
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "timestamp": _now_iso(),
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
