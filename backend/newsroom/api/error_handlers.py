"""
Exception handlers mapping every failure onto the error envelope.

- ``AppError`` subclasses keep their own status, message and issues
- malformed request bodies become 400 "Validation failed"
- framework HTTP errors (unknown route, wrong method) keep their status
- anything else is a 500 with a generic message; details stay in the log
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsroom.api.responses import error_response
from newsroom.api.validation import format_issues
from newsroom.core.errors import AppError
from newsroom.core.logging_config import get_client_ip

logger = logging.getLogger(__name__)


def _log_error(request: Request, exc: Exception, status_code: int, message: str) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} failed with {status_code}: {message}",
        exc_info=exc,
        extra={
            "status": status_code,
            "error_message": message,
            "request_method": request.method,
            "request_path": request.url.path,
            "ip_address": get_client_ip(request),
        },
    )


async def app_error_handler(request: Request, exc: AppError):
    _log_error(request, exc, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = "Validation failed"
    _log_error(request, exc, 400, message)
    return error_response(400, message, format_issues(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    _log_error(request, exc, exc.status_code, message)
    return error_response(exc.status_code, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    _log_error(request, exc, 500, str(exc))
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
