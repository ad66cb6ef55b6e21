"""
Module: conftest.py

Date: 2026-10-18

Global pytest configuration and fixtures for the livefile test suite.
"""

import os
import sys

# Add project root to sys.path so 'livefile' and 'tests' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from livefile.core.file.context import FileContext
from tests.mocks import (
    FakeDialog,
    FakeDownloader,
    FakeMetadataProvider,
    FakeShell,
    FakeStorage,
    FakeWatchService,
)


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def fake_metadata():
    return FakeMetadataProvider()


@pytest.fixture
def fake_watcher():
    return FakeWatchService()


@pytest.fixture
def fake_dialog():
    return FakeDialog()


@pytest.fixture
def fake_shell():
    return FakeShell()


@pytest.fixture
def fake_downloader(tmp_path):
    return FakeDownloader(str(tmp_path / "downloads" / "remote.png"))


@pytest.fixture
def context(fake_storage, fake_metadata, fake_watcher, fake_dialog, fake_shell, fake_downloader, tmp_path):
    """FileContext wired entirely with fakes."""
    return FileContext(
        storage=fake_storage,
        metadata=fake_metadata,
        watcher=fake_watcher,
        dialog=fake_dialog,
        shell=fake_shell,
        downloader=fake_downloader,
        download_directory=str(tmp_path / "downloads"),
    )


@pytest.fixture
def photo_path(tmp_path):
    """Normalized path of a photo inside tmp_path (not created)."""
    from livefile.utils.filesystem.path_normalizer import normalize_path

    return normalize_path(tmp_path / "photo.jpg")
