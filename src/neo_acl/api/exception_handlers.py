"""
Exception handlers for FastAPI applications serving dispatched routes.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import ErrorCodeTable, NeoAclError, RouteNotFoundError
from .responses import CORS_HEADERS, build_error_response

logger = logging.getLogger(__name__)


def register_exception_handlers(
    app: FastAPI,
    error_codes: Optional[ErrorCodeTable] = None,
    is_production: bool = True,
) -> None:
    """Register neo-acl exception handlers on an application.

    Args:
        app: FastAPI application instance
        error_codes: Error-code table used for status and message lookup
        is_production: Hide unexpected exception messages from clients
    """
    table = error_codes or ErrorCodeTable.default()

    @app.exception_handler(NeoAclError)
    async def neo_acl_exception_handler(request: Request, exc: NeoAclError):
        logger.info(f"{request.method} {request.url.path} failed: {exc.error_code} {exc.message}")
        return build_error_response(exc, table)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unmatched path or method: no route for (resource, method)
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            error = RouteNotFoundError(
                f"No route for {request.method} {request.url.path}",
                details={"resource": request.url.path, "method": request.method},
            )
            logger.info(f"{request.method} {request.url.path} failed: {error.error_code} {error.message}")
            return build_error_response(error, table)

        headers = dict(CORS_HEADERS)
        headers.update(exc.headers or {})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": NeoAclError.default_error_code, "message": str(exc.detail), "data": None},
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        message = "An unexpected error occurred" if is_production else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": NeoAclError.default_error_code, "message": message, "data": None},
            headers=dict(CORS_HEADERS),
        )
