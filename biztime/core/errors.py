"""
Error taxonomy and the single place it is turned into HTTP responses.

Every failure leaves the API as::

    {"error": {"message": "...", "status": 404}}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    status = 404


class ConflictError(ApiError):
    status = 409


class RequestValidationFailed(ApiError):
    status = 400


class InternalError(ApiError):
    status = 500


def error_response(message: str, status: int) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": {"message": message, "status": status}},
    )


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def install_error_handlers(app: FastAPI, debug: bool = False) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status, exc.message)
        else:
            logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status, exc.message)
        return error_response(exc.message, exc.status)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        # Unique, foreign-key, not-null and check violations all land here
        detail = str(exc.orig) if exc.orig is not None else str(exc)
        logger.warning("%s %s -> constraint violation: %s", request.method, request.url.path, detail)
        return error_response(f"Constraint violation: {detail}", ConflictError.status)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation(exc)
        logger.warning("%s %s -> invalid request: %s", request.method, request.url.path, message)
        return error_response(message, RequestValidationFailed.status)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        message = str(exc) if debug else "An internal error occurred"
        return error_response(message, InternalError.status)
