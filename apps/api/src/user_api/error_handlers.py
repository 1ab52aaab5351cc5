"""Global exception handlers for the User Store API.

All errors are answered with the ``{message, data}`` envelope:
    - UserStoreError -> its own status code and message
    - HTTPException (unknown route, wrong method) -> its status code and detail
    - RequestValidationError -> 400
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from user_common.errors import UserStoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_store_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_store_error_handler(app: FastAPI) -> None:
    @app.exception_handler(UserStoreError)
    async def user_store_error_handler(request: Request, exc: UserStoreError) -> JSONResponse:
        """Handle domain errors raised by the store or request parsing."""
        logger.warning(
            "%s on %s %s: %s",
            exc.code,
            request.method,
            request.url.path,
            exc.message,
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Wrap framework HTTP errors in the response envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail), "data": None},
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        errors = exc.errors()
        logger.warning("Validation error on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(errors), "data": None},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected failures."""
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error", "data": None},
        )


def _validation_message(errors: list[dict]) -> str:
    """Pick the client message for a list of validation errors."""
    if any(error.get("loc", ("",))[0] == "body" for error in errors):
        return "Invalid payload"
    return "Invalid query params"
