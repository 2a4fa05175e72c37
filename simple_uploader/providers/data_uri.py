from __future__ import annotations

import base64
import binascii
import re

from simple_uploader.providers.base import BaseProvider
from simple_uploader.providers.url import extension_for_mime

DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,;]*)*;base64,(?P<payload>.*)$", re.DOTALL)


class Base64Provider(BaseProvider):
    """Decodes ``data:`` URIs or raw base64 strings."""

    def __init__(self, allowed_extensions=None) -> None:
        super().__init__(allowed_extensions)
        self._mime: str | None = None
        self._contents: bytes | None = None

    def _reset(self) -> None:
        self._mime = None
        self._contents = None
        if not isinstance(self.file, str):
            return
        payload = self.file.strip()
        match = DATA_URI_RE.match(payload)
        if match:
            self._mime = match.group("mime")
            payload = match.group("payload")
        try:
            self._contents = base64.b64decode("".join(payload.split()), validate=True)
        except (binascii.Error, ValueError):
            self._contents = None

    def _is_readable(self) -> bool:
        return bool(self._contents)

    def get_contents(self) -> bytes:
        return self._contents or b""

    def get_extension(self) -> str:
        return extension_for_mime(self._mime)
