"""
Tests for File operations: unlink, writes, copy, save and open_item.

Date: 2026-10-18
"""

from __future__ import annotations

import asyncio

import pytest

from livefile.config import SAVE_DIALOG_FILTERS
from livefile.core.file.context import FileContext
from livefile.core.file.errors import FileNotAvailableError
from livefile.core.file.local_file import File
from livefile.services.filesystem_service import FilesystemService
from livefile.services.metadata_service import MetadataService
from livefile.utils.filesystem.data_url import encode_data_url
from livefile.utils.filesystem.path_normalizer import normalize_path
from tests.mocks import metadata_for, record_events


@pytest.fixture
def photo(context, photo_path, fake_storage):
    """An existing, loaded photo backed by the in-memory storage."""
    fake_storage.files[photo_path] = b"jpeg-bytes"
    return File.from_metadata(
        metadata_for(photo_path, exists=True, size=10, mimetype="image/jpeg"),
        {"watch": False},
        context,
    )


class TestUnlink:
    def test_deletes_and_emits(self, photo, photo_path, fake_storage) -> None:
        events = record_events(photo)

        assert photo.unlink() is photo
        assert photo_path not in fake_storage.files
        assert events == ["deleted"]

    def test_fields_wait_for_reload(self, photo) -> None:
        photo.unlink()
        assert photo.exists is True

    def test_noop_when_missing(self, context, photo_path, fake_storage) -> None:
        file = File(photo_path, {"watch": False}, context)
        events = record_events(file)

        file.unlink()

        assert events == []
        assert fake_storage.calls == []


class TestWrites:
    def test_write_data_url(self, photo, photo_path, fake_storage) -> None:
        events = record_events(photo)

        photo.write_data_url(encode_data_url(b"new", "image/png"))

        assert fake_storage.files[photo_path] == b"new"
        assert events == ["written"]

    def test_write_raw_content(self, photo, photo_path, fake_storage) -> None:
        photo.write("text")
        assert fake_storage.files[photo_path] == b"text"

    def test_write_file_copies_other(self, context, photo, photo_path, fake_storage, tmp_path) -> None:
        target = File(str(tmp_path / "target.jpg"), {"watch": False}, context)
        events = record_events(target)

        assert target.write_file(photo) is target
        assert ("copy", photo_path, target.path) in fake_storage.calls
        assert fake_storage.files[target.path] == b"jpeg-bytes"
        assert events == ["written"]

    def test_write_on_missing_file_still_writes(self, context, photo_path, fake_storage) -> None:
        file = File(photo_path, {"watch": False}, context)
        file.write(b"x")
        assert fake_storage.files[photo_path] == b"x"


class TestCopy:
    def test_copies_and_emits(self, photo, photo_path, fake_storage, tmp_path) -> None:
        destination = normalize_path(tmp_path / "copy.jpg")
        events = record_events(photo)

        assert photo.copy(destination) is photo
        assert fake_storage.files[destination] == b"jpeg-bytes"
        assert events == ["copied"]

    def test_noop_when_missing(self, context, photo_path, fake_storage, tmp_path) -> None:
        file = File(photo_path, {"watch": False}, context)
        events = record_events(file)

        file.copy(str(tmp_path / "copy.jpg"))

        assert events == []
        assert fake_storage.calls == []


class TestSave:
    def test_missing_file_raises_before_dialog(self, photo, photo_path, fake_storage, fake_dialog) -> None:
        del fake_storage.files[photo_path]

        with pytest.raises(FileNotAvailableError) as excinfo:
            photo.save()

        assert excinfo.value.title == "The photo no longer exists."
        assert fake_dialog.calls == []

    def test_cancelled_dialog_copies_nothing(self, photo, fake_dialog) -> None:
        events = record_events(photo)

        assert photo.save("/suggested.jpg") is photo

        assert fake_dialog.calls == [("/suggested.jpg", SAVE_DIALOG_FILTERS)]
        assert events == []

    def test_chosen_path_receives_copy(self, photo, fake_dialog, fake_storage, tmp_path) -> None:
        chosen = normalize_path(tmp_path / "saved.png")
        fake_dialog.result = chosen
        events = record_events(photo)

        photo.save()

        assert fake_storage.files[chosen] == b"jpeg-bytes"
        assert events == ["copied"]


class TestOpenItem:
    def test_opens_with_shell(self, photo, photo_path, fake_shell) -> None:
        photo.open_item()
        assert fake_shell.opened == [photo_path]

    def test_missing_file_raises(self, photo, photo_path, fake_storage, fake_shell) -> None:
        del fake_storage.files[photo_path]

        with pytest.raises(FileNotAvailableError, match="Could not open the photo"):
            photo.open_item()
        assert fake_shell.opened == []


class TestRealFilesystem:
    """Operations against the real filesystem service."""

    def test_write_reload_copy_unlink(self, tmp_path, fake_watcher) -> None:
        context = FileContext(
            storage=FilesystemService(), metadata=MetadataService(), watcher=fake_watcher
        )
        path = str(tmp_path / "nested" / "photo.png")

        file = File(path, {"watch": False}, context)
        file.write_data_url(encode_data_url(b"\x89PNG", "image/png"))
        asyncio.run(file.reload())

        assert file.exists is True
        assert file.size == 4
        assert file.mime_type == "image/png"
        file.validate_as_photo()

        copy_path = tmp_path / "copy.png"
        file.copy(str(copy_path))
        assert copy_path.read_bytes() == b"\x89PNG"

        file.unlink()
        assert not (tmp_path / "nested" / "photo.png").exists()

        asyncio.run(file.reload())
        assert file.exists is False
        with pytest.raises(FileNotAvailableError):
            file.save()
