"""Translation of exceptions into ``{code, message}`` error responses."""

import logging
from http import HTTPStatus
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cre_mock.exceptions import CreMockError

logger = logging.getLogger(__name__)

SERVER_ERROR_CODE = "SERVER_ERROR"
SERVER_ERROR_MESSAGE = "An unexpected error occurred."
INVALID_REQUEST_CODE = "INVALID_REQUEST"


def error_response(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error body shared by every failing endpoint."""
    return JSONResponse(
        status_code=status_code,
        content={"code": code, "message": message},
        headers=headers,
    )


def status_code_name(status_code: int) -> str:
    """``404`` -> ``NOT_FOUND``; unknown statuses become ``HTTP_<status>``."""
    try:
        return HTTPStatus(status_code).phrase.upper().replace(" ", "_").replace("-", "_")
    except ValueError:
        return f"HTTP_{status_code}"


async def handle_domain_error(request: Request, exc: CreMockError) -> JSONResponse:
    """Known errors carry their own HTTP status and stable code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(exc.status_code, exc.code, str(exc))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors raised by the framework (unknown path, wrong method)."""
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return error_response(
        exc.status_code,
        status_code_name(exc.status_code),
        message,
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request parameters the framework could not bind."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    return error_response(400, INVALID_REQUEST_CODE, f"Invalid request parameters: {details}")


async def catch_unexpected_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Turn any unhandled exception into a generic 500.

    The exception is logged here once and not re-raised, so the server
    does not log the same traceback again and the response still passes
    through the CORS middleware.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, SERVER_ERROR_CODE, SERVER_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers and the catch-all middleware on ``app``.

    Call before adding the CORS middleware so that CORS wraps the
    catch-all and error responses carry CORS headers.
    """
    app.add_exception_handler(CreMockError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.middleware("http")(catch_unexpected_errors)
