"""File providers that validate a reference and expose its bytes."""

from .base import BaseProvider, Provider
from .data_uri import Base64Provider
from .local import LocalFileProvider
from .url import UrlProvider

__all__ = [
    "Provider",
    "BaseProvider",
    "LocalFileProvider",
    "UrlProvider",
    "Base64Provider",
]
