"""Error Handlers — the single translator from exceptions to HTTP responses.

Invariants:
    - NewsApiError → its http_status + {"message": ...}
    - RequestValidationError (bad path param, malformed body) → 400 {"message": "Bad Request"}
    - Starlette HTTPException (unmatched route, wrong method) → its status + {"message": detail}
    - Exception (catch-all) → 500 {"message": "Internal Server Error"}, never leaks internals
    - Every error body has exactly one key: message

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Extracted from main.py so tests can mount it on a throwaway app
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import BadRequestError, InternalError, NewsApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_news_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_news_api_error_handler(app: FastAPI) -> None:
    """Register classified domain/infrastructure error handler."""

    @app.exception_handler(NewsApiError)
    async def news_api_error_handler(request: Request, exc: NewsApiError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"NewsApiError: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "method": request.method, "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={
                "error_code": "BAD_REQUEST", "path": request.url.path,
                "method": request.method, "status_code": 400,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=BadRequestError().to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unmatched path, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={
                "status_code": exc.status_code, "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "path": request.url.path, "method": request.method,
                "status_code": 500,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalError().to_response(),
        )
