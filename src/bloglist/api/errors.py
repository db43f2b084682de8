"""Boundary error handlers.

Learn: Services and auth raise AppError subclasses; FastAPI, Starlette
and SQLAlchemy raise their own. Everything is translated here into a
status code and an {"error": message} body. Unexpected exceptions are
logged with their traceback and answered with a bare 500, and clients
never see a stack trace.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist.errors import AppError

logger = structlog.get_logger()

INTERNAL_ERROR = "internal server error"


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid input"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "path", "query"))
    msg = first.get("msg", "invalid value")
    return f"{field}: {msg}" if field else msg


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error(exc.status_code, exc.message, headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, _validation_message(exc))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        return _error(404, "unknown endpoint")
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.unhandled_error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return _error(500, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
