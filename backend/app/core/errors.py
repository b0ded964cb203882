# app/core/errors.py
"""
Domain errors raised by services and the access gate.

Each class carries the HTTP status and machine-readable code it maps to;
``app.main`` renders them as ``{"error": code, "message": message}``. Messages
are deliberately generic for credential and token failures so responses never
reveal whether an account exists or why a token was rejected.
"""
from __future__ import annotations


class AppError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class Unauthorized(AppError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Invalid credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class Unauthenticated(Unauthorized):
    default_message = "No token provided"


class InvalidToken(Unauthorized):
    # Covers malformed, tampered and expired tokens alike.
    default_message = "Invalid token"


class Forbidden(AppError):
    status_code = 403
    code = "FORBIDDEN"
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Not found"


class Conflict(AppError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Conflict"


class InternalError(AppError):
    pass
