"""Simple Uploader - fluent single-file uploads to configurable disks."""

from .exceptions import (
    ConfigurationError,
    StorageError,
    UnsupportedOperation,
    UploaderError,
    ValidationError,
)
from .manager import UploaderManager, get_manager
from .uploader import UploadOutcome, Uploader, UploadRequest

__all__ = [
    "Uploader",
    "UploadRequest",
    "UploadOutcome",
    "UploaderManager",
    "get_manager",
    "UploaderError",
    "ConfigurationError",
    "ValidationError",
    "UnsupportedOperation",
    "StorageError",
]
