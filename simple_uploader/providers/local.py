from __future__ import annotations

from pathlib import Path

from simple_uploader.logging_config import get_logger
from simple_uploader.providers.base import BaseProvider

logger = get_logger(__name__)


class LocalFileProvider(BaseProvider):
    """Reads files from the local filesystem, once per ``set_file``."""

    def __init__(self, allowed_extensions=None) -> None:
        super().__init__(allowed_extensions)
        self._contents: bytes | None = None

    @property
    def path(self) -> Path:
        return Path(self.file)

    def _reset(self) -> None:
        self._contents = None

    def _is_readable(self) -> bool:
        try:
            if not self.path.is_file():
                return False
            self._contents = self.path.read_bytes()
        except TypeError:
            return False
        except OSError as exc:
            logger.warning("Failed to read {path}: {error}", path=str(self.file), error=str(exc))
            return False
        return True

    def get_contents(self) -> bytes:
        if self._contents is None:
            self._contents = self.path.read_bytes()
        return self._contents

    def get_extension(self) -> str:
        return self.path.suffix.lstrip(".")
