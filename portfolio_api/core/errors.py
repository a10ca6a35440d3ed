"""
Application error types

Every error carries the HTTP status it maps to; the handlers in
``portfolio_api.main`` turn them into the ``{success: false, error}`` envelope.
"""

from typing import Any, List, Optional


class AppError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Any]] = None):
        super().__init__(message)
        self.details = details


class AuthenticationError(AppError):
    status_code = 401
    default_message = "Access token required"


class AuthorizationError(AppError):
    status_code = 403
    default_message = "Insufficient permissions"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = 400
    default_message = "Resource already exists"


class InternalError(AppError):
    status_code = 500


class NotInitializedError(RuntimeError):
    """Store used before initialize() or after close()"""


class RowDecodeError(RuntimeError):
    """A stored row does not match its entity schema"""

    def __init__(self, table: str, row_id: Any, reason: str):
        self.table = table
        self.row_id = row_id
        super().__init__(f"Cannot decode {table} row {row_id!r}: {reason}")
