from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

error_logger = logging.getLogger("letshang.error")

INTERNAL_ERROR_BODY = {"error": "Internal server error"}
NOT_FOUND_ERROR = "Route not found"
AVAILABLE_ROUTES = ["/", "/health", "/api/test", "/api/users"]

# Answer for OPTIONS requests that are not CORS preflights.
OPTIONS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD,PUT,PATCH,POST,DELETE",
    "Vary": "Access-Control-Request-Headers",
}


class StoreError(Exception):
    """A query against the database failed.

    ``context`` is a short label for server-side logs; it is never sent to
    the client.
    """

    def __init__(self, context: str):
        super().__init__(context)
        self.context = context


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=dict(INTERNAL_ERROR_BODY),
    )


def route_not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_ERROR, "availableRoutes": list(AVAILABLE_ROUTES)},
    )


def options_response() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=dict(OPTIONS_HEADERS))


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        error_logger.error(
            exc.context,
            exc_info=exc.__cause__ or exc,
            extra={"method": request.method, "path": request.url.path},
        )
        return internal_error_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        unmatched = exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)
        # CORS preflights never get here; CORSMiddleware answers them first.
        if unmatched and request.method == "OPTIONS":
            return options_response()
        # Unknown paths and other unsupported methods on known paths both
        # fall through to the catch-all.
        if unmatched:
            return route_not_found_response()
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )
