"""Centralized exception definitions and handlers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a path or resource does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, status_code=404)


class AIRequestError(AppError):
    """Raised when the chat-completions vendor rejects a request.

    ``upstream_status`` and ``body`` keep the vendor's reply for diagnostics.
    """

    def __init__(self, upstream_status: int, body: str) -> None:
        super().__init__(message=f"AI provider error ({upstream_status}): {body}", status_code=502)
        self.upstream_status = upstream_status
        self.body = body


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    """Render typed application exceptions as JSON responses."""

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler for non-domain errors."""

    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach exception handlers once during startup."""

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
