"""
Application error taxonomy.
Each error carries the HTTP status and machine-readable code rendered in the
response envelope by the handlers registered in main.create_app().
"""

from fastapi import status


class AppError(Exception):
    """Base for expected failures. `field` names the offending input, if any."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, *, field: str | None = None, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        error = {"message": self.message, "code": self.code}
        if self.field:
            error["field"] = self.field
        return error


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class Conflict(AppError):
    """Duplicate unique value (DUPLICATE_ENTRY) or delete blocked by a reference (CONFLICT)."""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class InternalError(AppError):
    pass
