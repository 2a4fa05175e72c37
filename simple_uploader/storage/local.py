from __future__ import annotations

import os
from pathlib import Path

from simple_uploader.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PERMISSIONS = {
    "public": 0o644,
    "private": 0o600,
}


class LocalStorage:
    def __init__(self, root: Path, permissions: dict[str, int] | None = None) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.permissions = {**DEFAULT_PERMISSIONS, **(permissions or {})}

    def path(self, key: str) -> Path:
        return self.root / key.lstrip("/")

    def put(self, key: str, contents: bytes, visibility: str | None = None) -> bool:
        path = self.path(key)
        root = self.root.resolve()
        if not path.resolve().is_relative_to(root):
            logger.warning("Refusing to write outside storage root: {key}", key=key, root=str(root))
            return False
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(contents)
            mode = self.permissions.get(visibility) if visibility else None
            if mode is not None:
                os.chmod(path, mode)
        except OSError as exc:
            logger.warning("Local write failed for {key}: {error}", key=key, error=str(exc))
            return False
        return True


__all__ = ["LocalStorage", "DEFAULT_PERMISSIONS"]
