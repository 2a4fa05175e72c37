from __future__ import annotations

import mimetypes
from http.client import HTTPException
from pathlib import PurePosixPath
from urllib.error import URLError
from urllib.parse import urlparse
from urllib.request import urlopen

from simple_uploader.logging_config import get_logger
from simple_uploader.providers.base import BaseProvider

logger = get_logger(__name__)


def extension_for_mime(mime: str | None) -> str:
    if not mime:
        return ""
    mime = mime.split(";", 1)[0].strip().lower()
    guessed = mimetypes.guess_extension(mime) or ""
    return guessed.lstrip(".")


class UrlProvider(BaseProvider):
    """Downloads the file from an http(s) URL, once per ``set_file``."""

    def __init__(self, allowed_extensions=None, timeout: float = 30.0) -> None:
        super().__init__(allowed_extensions)
        self.timeout = timeout
        self._fetched = False
        self._contents: bytes | None = None
        self._content_type: str | None = None

    def _reset(self) -> None:
        self._fetched = False
        self._contents = None
        self._content_type = None

    def _fetch(self) -> None:
        if self._fetched:
            return
        self._fetched = True
        try:
            with urlopen(str(self.file), timeout=self.timeout) as resp:
                self._contents = resp.read()
                self._content_type = resp.headers.get("Content-Type")
        except (URLError, HTTPException, OSError, ValueError) as exc:
            logger.warning("Failed to fetch {url}: {error}", url=str(self.file), error=str(exc))
            self._contents = None

    def _is_readable(self) -> bool:
        parsed = urlparse(str(self.file))
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            return False
        self._fetch()
        return self._contents is not None

    def get_contents(self) -> bytes:
        self._fetch()
        return self._contents or b""

    def get_extension(self) -> str:
        suffix = PurePosixPath(urlparse(str(self.file)).path).suffix.lstrip(".")
        if suffix:
            return suffix
        self._fetch()
        return extension_for_mime(self._content_type)
