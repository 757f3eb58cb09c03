"""Global exception handlers: every error leaves as {success: false, error: "..."}.

Handlers, most specific first:
    AppError               -> its own status and message
    RequestValidationError -> 400 naming the fields that failed
    HTTPException          -> its status (unknown route, wrong method)
    SQLAlchemyError        -> 500 StoreError, details only in the log
    Exception              -> 500, details only in the log
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AppError, StoreError
from app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict:
    return ErrorResponse(error=message).model_dump()


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s on %s", exc.message, request.url.path)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(describe_validation_errors(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error on %s: %s", request.url.path, exc, exc_info=exc)
        err = StoreError(cause=exc)
        return JSONResponse(status_code=err.status_code, content=error_body(err.message))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )


def describe_validation_errors(exc: RequestValidationError) -> str:
    """One-line message listing each failing field, e.g. 'Invalid or missing field(s): title (Field required)'."""
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        parts.append(f"{field} ({err.get('msg', 'invalid')})")
    return "Invalid or missing field(s): " + ", ".join(parts)
