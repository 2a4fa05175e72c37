"""Fluent uploader that validates a file through a provider and writes it to a disk.

Typical use::

    uploader = Uploader(storage, LocalFileProvider())
    uploader.upload_to("s3").to_folder("avatars").rename_to("profile").upload(
        "/tmp/me.png", lambda key: print(key)
    )

``upload_to_<disk>()`` (or ``uploadTo<Disk>()``) is shorthand for
``upload_to("<disk>")``. An uploader holds per-upload configuration, so build
one instance per upload and do not share it between threads.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional
from uuid import uuid4

from simple_uploader.exceptions import UnsupportedOperation, ValidationError
from simple_uploader.logging_config import get_logger
from simple_uploader.providers.base import Provider
from simple_uploader.storage import BlobStore

logger = get_logger(__name__)

# Acronym runs stay together: uploadToFTPBackup targets disk "ftp_backup"
DYNAMIC_PREFIXES = ("upload_to_", "uploadTo")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snake_case(value: str) -> str:
    return _CAMEL_BOUNDARY_RE.sub("_", value).replace("-", "_").lower()


def generate_unique_name() -> str:
    """Return an opaque 32 character hex token."""
    return uuid4().hex


def _describe(file: Any, limit: int = 120) -> str:
    text = str(file)
    return text if len(text) <= limit else f"{text[:limit]}..."


@dataclass(frozen=True)
class UploadOutcome:
    success: bool
    key: str | None = None

    def __bool__(self) -> bool:
        return self.success


class UploadRequest:
    """Mutable builder holding the destination of a single upload."""

    def __init__(self) -> None:
        self.disk: str | None = None
        self.folder: str = ""
        self.filename: str | None = None
        self.visibility: str | None = None

    def upload_to(self, disk: str) -> "UploadRequest":
        self.disk = disk
        return self

    def to_folder(self, folder: str) -> "UploadRequest":
        self.folder = folder
        return self

    def rename_to(self, name: str) -> "UploadRequest":
        self.filename = name
        return self

    def set_visibility(self, visibility: str | None) -> "UploadRequest":
        self.visibility = visibility
        return self

    def full_key(self, extension: str) -> str:
        """Compose ``folder/filename.extension``, generating a name when unset."""
        folder = f"{self.folder.rstrip('/')}/" if self.folder else ""
        filename = self.filename or generate_unique_name()
        # No extension means no trailing dot
        extension = (extension or "").lstrip(".")
        return f"{folder}{filename}.{extension}" if extension else f"{folder}{filename}"

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        for prefix in DYNAMIC_PREFIXES:
            if name.startswith(prefix) and len(name) > len(prefix):
                disk = snake_case(name[len(prefix):])
                return lambda: self.upload_to(disk)
        raise UnsupportedOperation(
            f"Call to undefined method {type(self).__name__}.{name}()",
            {"method": name},
        )


class Uploader(UploadRequest):
    """Runs uploads with an injected provider and blob store."""

    def __init__(self, storage: BlobStore, provider: Provider) -> None:
        super().__init__()
        self.storage = storage
        self.provider = provider

    def upload(self, file: Any, callback: Optional[Callable[[str], Any]] = None) -> bool:
        """Upload ``file`` and call ``callback`` with the stored key on success.

        Raises:
            ValidationError: If the provider rejects the file.
        """
        outcome = self.store(file)
        if not outcome.success:
            return False
        if callback is not None:
            callback(outcome.key)
        return True

    def store(self, file: Any) -> UploadOutcome:
        self.provider.set_file(file)
        if not self.provider.is_valid():
            logger.warning("Rejected invalid file {file}", file=_describe(file))
            raise ValidationError(
                f"Given file [{_describe(file)}] is not valid.",
                {"file": _describe(file)},
            )

        key = self.full_key(self.provider.get_extension())
        if self.storage.put(self.disk, key, self.provider.get_contents(), self.visibility):
            logger.info("Uploaded {key} to disk {disk}", key=key, disk=self.disk or "default")
            return UploadOutcome(success=True, key=key)

        logger.warning("Storage rejected {key} on disk {disk}", key=key, disk=self.disk or "default")
        return UploadOutcome(success=False)


__all__ = [
    "UploadRequest",
    "Uploader",
    "UploadOutcome",
    "generate_unique_name",
    "snake_case",
]
