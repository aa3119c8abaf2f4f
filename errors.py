"""
Application error taxonomy. Each error carries the HTTP status it maps to;
handlers in main.py turn them into {"error": message} bodies.
"""
from __future__ import annotations


class AppError(Exception):
    """Base application error with a client-facing message."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Missing or empty required field."""

    status_code = 400


class InvalidReference(AppError):
    """Opportunity id that does not decode to a source and numeric id."""

    status_code = 400

    def __init__(self, message: str = "Invalid opportunity id"):
        super().__init__(message)


class NotFound(AppError):
    status_code = 404


class ConflictError(AppError):
    """Duplicate value for a unique key."""

    status_code = 409


class DependencyError(AppError):
    """Database unreachable, pool exhausted or an unexpected driver failure."""

    status_code = 500
