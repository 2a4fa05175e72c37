"""Storage abstraction (S3/MinIO or local filesystem disks)."""

from __future__ import annotations

from typing import Protocol


class ObjectStorage(Protocol):
    def put(self, key: str, contents: bytes, visibility: str | None = None) -> bool:
        ...


class BlobStore(Protocol):
    def put(self, disk: str | None, key: str, contents: bytes, visibility: str | None = None) -> bool:
        ...


from .local import LocalStorage  # noqa: E402
from .manager import StorageManager  # noqa: E402
from .s3 import S3Storage  # noqa: E402

__all__ = ["ObjectStorage", "BlobStore", "LocalStorage", "S3Storage", "StorageManager"]
