from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that are safe to show to API clients.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code, stable across releases
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "BAD_REQUEST"
    default_message = "Invalid input"


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"
    default_message = "Not found"


class ConflictError(AppError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_code = "CONFLICT"
    default_message = "Conflict"


class UnauthorizedError(AppError):
    """Raised when authentication or authorization fails."""

    http_status = 401
    default_code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class InternalError(AppError):
    """Raised when the backing store or another collaborator fails unexpectedly."""
