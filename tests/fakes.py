from __future__ import annotations


class FakeProvider:
    def __init__(self, valid: bool = True, contents: bytes = b"data", extension: str = "png") -> None:
        self.valid = valid
        self.contents = contents
        self.extension = extension
        self.files: list[object] = []

    def set_file(self, file: object) -> None:
        self.files.append(file)

    def is_valid(self) -> bool:
        return self.valid

    def get_contents(self) -> bytes:
        return self.contents

    def get_extension(self) -> str:
        return self.extension


class RecordingStore:
    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[tuple] = []

    def put(self, disk, key, contents, visibility=None) -> bool:
        self.calls.append((disk, key, contents, visibility))
        return self.result
