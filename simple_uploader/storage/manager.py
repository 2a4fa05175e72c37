"""Disk registry that resolves disk names to storage backends."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError

from simple_uploader.exceptions import ConfigurationError, StorageError
from simple_uploader.logging_config import get_logger
from simple_uploader.settings import DiskSettings, StorageSettings
from simple_uploader.storage.local import LocalStorage
from simple_uploader.storage.s3 import S3Storage

logger = get_logger(__name__)


class StorageManager:
    """Builds disks lazily from settings and writes to them by name.

    A ``None`` disk name selects the configured default disk. Unknown disk
    names raise :class:`ConfigurationError`; write failures come back as
    ``False`` from :meth:`put`.
    """

    def __init__(self, settings: StorageSettings) -> None:
        self.settings = settings
        self._disks: dict[str, Any] = {}

    @property
    def default_disk(self) -> str:
        return self.settings.default

    def disk(self, name: str | None = None) -> Any:
        name = name or self.default_disk
        if name not in self._disks:
            config = self.settings.disks.get(name)
            if config is None:
                raise ConfigurationError(
                    f"Disk [{name}] does not have a configured driver.",
                    {"disk": name},
                )
            try:
                self._disks[name] = self._create(config)
            except (OSError, BotoCoreError) as exc:
                raise StorageError(
                    f"Disk [{name}] could not be initialized: {exc}",
                    {"disk": name, "driver": config.driver},
                ) from exc
            logger.debug("Created {driver} disk {name}", driver=config.driver, name=name)
        return self._disks[name]

    def set_disk(self, name: str, storage: Any) -> None:
        """Register an already built backend under ``name``."""
        self._disks[name] = storage

    def put(self, disk: str | None, key: str, contents: bytes, visibility: str | None = None) -> bool:
        name = disk or self.default_disk
        storage = self.disk(name)
        if visibility is None:
            config = self.settings.disks.get(name)
            visibility = config.visibility if config else None
        return bool(storage.put(key, contents, visibility))

    def _create(self, config: DiskSettings) -> Any:
        if config.driver == "local":
            return LocalStorage(Path(config.root or "."))
        if config.driver == "s3":
            return S3Storage(
                bucket=config.bucket or "",
                prefix=config.prefix,
                region=config.region,
                endpoint_url=config.endpoint_url,
            )
        raise ConfigurationError(f"Driver [{config.driver}] is not supported.", {"driver": config.driver})


__all__ = ["StorageManager"]
