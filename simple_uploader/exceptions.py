"""Custom exception hierarchy for the uploader."""

from __future__ import annotations

from typing import Any


class UploaderError(Exception):
    """Base exception for all uploader-specific errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(UploaderError):
    """Raised when configuration is invalid or missing."""
    pass


class ValidationError(UploaderError):
    """Raised when a provider rejects the given file."""
    pass


class UnsupportedOperation(UploaderError, AttributeError):
    """Raised when an unrecognized chained method is called on an uploader."""
    pass


class StorageError(UploaderError):
    """Raised when a storage disk cannot be initialized."""
    pass


__all__ = [
    "UploaderError",
    "ConfigurationError",
    "ValidationError",
    "UnsupportedOperation",
    "StorageError",
]
