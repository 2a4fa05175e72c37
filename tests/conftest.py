from __future__ import annotations

from pathlib import Path

import pytest

from simple_uploader.settings import Settings
from tests.fakes import FakeProvider, RecordingStore


@pytest.fixture()
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        storage={
            "default": "local",
            "disks": {
                "local": {"driver": "local", "root": str(tmp_path / "local")},
                "public": {"driver": "local", "root": str(tmp_path / "public"), "visibility": "public"},
                "s3": {"driver": "s3", "bucket": "uploads", "region": "us-east-1"},
            },
        },
        providers={"default": "file"},
    )


@pytest.fixture()
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
