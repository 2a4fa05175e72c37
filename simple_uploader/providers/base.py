from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Protocol


class Provider(Protocol):
    def set_file(self, file: Any) -> None:
        ...

    def is_valid(self) -> bool:
        ...

    def get_contents(self) -> bytes:
        ...

    def get_extension(self) -> str:
        ...


class BaseProvider(ABC):
    """Shared state and extension allow-list for the bundled providers.

    Subclasses implement ``_is_readable``, ``get_contents`` and
    ``get_extension``. An empty allow-list accepts every extension.
    """

    def __init__(self, allowed_extensions: Iterable[str] | None = None) -> None:
        self.allowed_extensions = {ext.lstrip(".").lower() for ext in (allowed_extensions or [])}
        self.file: Any = None

    def set_file(self, file: Any) -> None:
        self.file = file
        self._reset()

    def is_valid(self) -> bool:
        if self.file is None or not self._is_readable():
            return False
        if not self.allowed_extensions:
            return True
        return self.get_extension().lower() in self.allowed_extensions

    def _reset(self) -> None:
        pass

    @abstractmethod
    def _is_readable(self) -> bool:
        ...

    @abstractmethod
    def get_contents(self) -> bytes:
        ...

    @abstractmethod
    def get_extension(self) -> str:
        ...
