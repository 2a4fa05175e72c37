"""Factory for uploaders bound to a named provider and the shared disks."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

from simple_uploader.exceptions import ConfigurationError
from simple_uploader.providers import Base64Provider, LocalFileProvider, Provider, UrlProvider
from simple_uploader.settings import ProviderSettings, Settings, get_settings
from simple_uploader.storage import BlobStore, StorageManager
from simple_uploader.uploader import Uploader

ProviderFactory = Callable[[ProviderSettings], Provider]


def _file_provider(settings: ProviderSettings) -> Provider:
    return LocalFileProvider(settings.allowed_extensions)


def _url_provider(settings: ProviderSettings) -> Provider:
    return UrlProvider(settings.allowed_extensions, timeout=settings.url_timeout_seconds)


def _base64_provider(settings: ProviderSettings) -> Provider:
    return Base64Provider(settings.allowed_extensions)


class UploaderManager:
    def __init__(self, settings: Settings, storage: BlobStore | None = None) -> None:
        self.settings = settings
        self.storage = storage or StorageManager(settings.storage)
        self._factories: dict[str, ProviderFactory] = {
            "file": _file_provider,
            "url": _url_provider,
            "base64": _base64_provider,
        }

    def extend(self, name: str, factory: ProviderFactory) -> None:
        self._factories[name] = factory

    def provider(self, name: str | None = None) -> Provider:
        name = name or self.settings.providers.default
        factory = self._factories.get(name)
        if factory is None:
            raise ConfigurationError(f"Provider [{name}] is not supported.", {"provider": name})
        return factory(self.settings.providers)

    def make(self, provider: str | None = None) -> Uploader:
        """Return a fresh uploader preset to the default disk."""
        uploader = Uploader(self.storage, self.provider(provider))
        uploader.upload_to(self.settings.storage.default)
        return uploader

    def from_provider(self, name: str) -> Uploader:
        return self.make(name)


@lru_cache(maxsize=1)
def get_manager() -> UploaderManager:
    return UploaderManager(get_settings())


__all__ = ["UploaderManager", "ProviderFactory", "get_manager"]
