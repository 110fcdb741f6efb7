"""Error Handlers: global exception handlers producing the failure envelope.

Invariants:
    - ClubError -> its own http_status, {success: false, error: public_message}
    - RequestValidationError (bad JSON, wrong field types) -> 400
    - HTTPException (unknown route, wrong method) -> its status, same envelope
    - Exception (catch-all) -> 500 with a fixed message, never leaks internals

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Client errors logged at WARNING, storage and unexpected errors at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from practice_feedback.api.envelope import failure
from practice_feedback.core.errors import ClubError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_club_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_club_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ClubError)
    async def club_error_handler(request: Request, exc: ClubError):
        """Handle all domain and storage errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(f"ClubError: {exc.message}", extra=extra)
        else:
            logger.warning(f"ClubError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors (malformed body, wrong types)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=failure(_describe_validation_error(exc)),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content=failure(str(exc.detail)),
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
            content=failure(INTERNAL_ERROR_MESSAGE),
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """First error as 'Invalid request data: <field>: <message>'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request data"
    first = errors[0]
    location = ".".join(
        str(part) for part in first.get("loc", ()) if part != "body"
    )
    if location:
        return f"Invalid request data: {location}: {first.get('msg')}"
    return f"Invalid request data: {first.get('msg')}"
