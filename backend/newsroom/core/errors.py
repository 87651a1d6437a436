"""
Domain errors raised by services and validators.

Each error carries the HTTP status and message the API reports for it; the
exception handlers in ``newsroom.api.error_handlers`` turn them into the error
envelope.
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for errors that map to a client-visible response."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Input did not match the expected shape; ``errors`` lists ``{path, message}`` issues."""

    status_code = 400

    def __init__(self, errors: List[Dict[str, Any]], message: str = "Validation failed"):
        super().__init__(message, errors=errors)


class NotFoundError(AppError):
    status_code = 404


class BadRequestError(AppError):
    """Valid input that the current state of the data does not allow."""

    status_code = 400
