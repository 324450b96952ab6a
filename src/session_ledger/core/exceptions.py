"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR", status_code: int = 400):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when request input fails validation.

    ``issues`` is a list of ``{"path": [...], "message": str}`` entries.
    """

    def __init__(self, issues: list[dict], message: Optional[str] = None):
        self.issues = issues
        super().__init__(
            message or "Request validation failed",
            code="VALIDATION_ERROR",
            status_code=400,
        )


class UnsupportedMediaTypeError(AppError):
    """Raised when a write request does not carry a JSON body."""

    def __init__(self, message: str = "Content-Type must be application/json"):
        super().__init__(message, code="UNSUPPORTED_MEDIA_TYPE", status_code=415)


class AuthorizationError(AppError):
    """Raised when a read request carries no usable session credential."""

    def __init__(self, message: str = "Session ID is missing"):
        super().__init__(message, code="UNAUTHORIZED", status_code=401)


class SummaryOverflowError(AppError):
    """Raised when a session's running balance overflows a float."""

    def __init__(self, message: str = "Session balance is out of range"):
        super().__init__(message, code="SUMMARY_OVERFLOW", status_code=422)


class StoreError(Exception):
    """Raised when the durable transaction store fails."""


class CacheError(Exception):
    """Raised when the summary cache backend fails."""
