"""Exception handlers for converting domain and store exceptions to HTTP responses.

This is the only place where an error kind becomes a status code. Every
error body carries ``message``; validation failures also carry ``field``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from splice_reports.domain.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid ID"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "field": exc.field},
    )


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle errors FastAPI raises before an endpoint runs.

    A path parameter that does not parse as an integer becomes
    ``{"message": "Invalid ID"}``. A body that is not valid JSON has no
    offending field, so ``field`` is null; its loc holds a character offset.
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = tuple(first.get("loc", ()))

    if loc and loc[0] == "path":
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_ID_MESSAGE},
        )

    if first.get("type") == "json_invalid":
        field = None
    else:
        field = ".".join(str(part) for part in loc[1:]) or None
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": first.get("msg", "Invalid request"), "field": field},
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Opaque 500 for any persistence failure; logged with its traceback."""
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
