import base64

import pytest

from simple_uploader.exceptions import ConfigurationError, ValidationError
from simple_uploader.manager import UploaderManager
from simple_uploader.providers import Base64Provider, LocalFileProvider, UrlProvider

from tests.fakes import FakeProvider


def test_make_returns_fresh_uploader_on_default_disk(settings, store):
    manager = UploaderManager(settings, storage=store)

    first = manager.make()
    second = manager.make()

    assert first is not second
    assert first.provider is not second.provider
    assert first.disk == "local"
    assert isinstance(first.provider, LocalFileProvider)


@pytest.mark.parametrize(
    ("name", "provider_type"),
    [("file", LocalFileProvider), ("url", UrlProvider), ("base64", Base64Provider)],
)
def test_from_provider(settings, store, name, provider_type):
    uploader = UploaderManager(settings, storage=store).from_provider(name)
    assert isinstance(uploader.provider, provider_type)


def test_url_provider_uses_configured_timeout(settings, store):
    settings.providers.url_timeout_seconds = 7.5
    uploader = UploaderManager(settings, storage=store).make("url")
    assert uploader.provider.timeout == 7.5


def test_unknown_provider_raises(settings, store):
    with pytest.raises(ConfigurationError) as excinfo:
        UploaderManager(settings, storage=store).make("ftp")
    assert excinfo.value.details == {"provider": "ftp"}


def test_extend_registers_custom_provider(settings, store):
    manager = UploaderManager(settings, storage=store)
    manager.extend("fake", lambda provider_settings: FakeProvider(extension="txt"))

    uploader = manager.make("fake").rename_to("notes")
    assert uploader.upload("anything") is True
    assert store.calls == [("local", "notes.txt", b"data", None)]


def test_end_to_end_local_upload(settings, tmp_path):
    source = tmp_path / "avatar.png"
    source.write_bytes(b"png-bytes")
    manager = UploaderManager(settings)
    stored = []

    ok = manager.make().to_folder("avatars").rename_to("profile").upload(str(source), stored.append)

    assert ok is True
    assert stored == ["avatars/profile.png"]
    assert (tmp_path / "local" / "avatars" / "profile.png").read_bytes() == b"png-bytes"


def test_end_to_end_base64_to_public_disk(settings, tmp_path):
    data_uri = "data:image/png;base64," + base64.b64encode(b"pixels").decode()
    stored = []

    ok = UploaderManager(settings).make("base64").upload_to_public().upload(data_uri, stored.append)

    assert ok is True
    assert stored[0].endswith(".png")
    assert (tmp_path / "public" / stored[0]).read_bytes() == b"pixels"


def test_end_to_end_rejects_disallowed_extension(settings, tmp_path):
    settings.providers.allowed_extensions = ["png"]
    source = tmp_path / "script.sh"
    source.write_text("echo hi")

    with pytest.raises(ValidationError):
        UploaderManager(settings).make().upload(str(source))
    assert not (tmp_path / "local").exists() or not any((tmp_path / "local").iterdir())
