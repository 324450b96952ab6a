"""Core utilities and shared functionality."""

from session_ledger.core.exceptions import (
    AppError,
    ValidationError,
    UnsupportedMediaTypeError,
    AuthorizationError,
    StoreError,
    CacheError,
    SummaryOverflowError,
)

__all__ = [
    "AppError",
    "ValidationError",
    "UnsupportedMediaTypeError",
    "AuthorizationError",
    "StoreError",
    "CacheError",
    "SummaryOverflowError",
]
