"""
Terminal error handling.

Every failure leaves the API in the same envelope:

    {"success": false, "message": "...", "errors": [...]?, "stack": "..."?}

Operational errors are raised as `HTTPException` with an explicit status
(400 validation, 401 authentication, 403 authorization, 404 not found).
Anything else becomes a 500; the traceback is only included outside
production.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import config

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    *,
    errors: list[dict[str, Any]] | None = None,
    stack: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    if stack is not None:
        body["stack"] = stack
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _field_name(loc: tuple[Any, ...] | list[Any]) -> str:
    # First element is the source ("body", "query", "path"); drop it when a field follows.
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in {"body", "query", "path", "header"}:
        parts = parts[1:]
    return ".".join(parts)


def validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {"field": _field_name(err.get("loc", ())), "message": str(err.get("msg", "Invalid value"))}
        for err in exc.errors()
    ]


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail)
    if exc.status_code >= 500:
        logger.error("http_error status=%s method=%s path=%s", exc.status_code, request.method, request.url.path)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = validation_errors(exc)
    logger.debug("validation_failed method=%s path=%s errors=%s", request.method, request.url.path, errors)
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors=errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    stack = None
    if not config.is_production():
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", stack=stack)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
