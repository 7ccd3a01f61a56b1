# docmanager/shared/errors.py
"""
Domain errors raised by the services.

Each carries the HTTP status it maps to and a short, user-facing message.
The front door turns them into ``{"error": message}`` responses, so the
message must never contain database text or internal details.
"""


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input"


class AuthError(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Conflict"


class StorageError(AppError):
    status_code = 500
    default_message = "Database error"
