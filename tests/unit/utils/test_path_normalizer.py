"""
Tests for path normalization helpers.

Date: 2026-10-18
"""

from __future__ import annotations

import os

from livefile.utils.filesystem.path_normalizer import (
    is_same_path,
    join_path,
    native_path,
    normalize_path,
    to_slash,
)


class TestToSlash:
    def test_backslashes(self) -> None:
        assert to_slash("C:\\photos\\a.jpg") == "C:/photos/a.jpg"

    def test_extended_length_prefix_untouched(self) -> None:
        path = "\\\\?\\C:\\very\\long"
        assert to_slash(path) == path


class TestNormalizePath:
    def test_empty(self) -> None:
        assert normalize_path("") == ""
        assert normalize_path(None) == ""

    def test_absolute_and_collapsed(self, tmp_path) -> None:
        result = normalize_path(tmp_path / "a" / ".." / "b.txt")

        assert result == to_slash(os.path.join(str(tmp_path), "b.txt"))
        assert os.path.isabs(result)

    def test_relative_resolves_against_cwd(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert normalize_path("x.png") == to_slash(os.path.join(os.getcwd(), "x.png"))

    def test_does_not_touch_case(self, tmp_path) -> None:
        assert normalize_path(tmp_path / "Photo.JPG").endswith("/Photo.JPG")


class TestJoinAndCompare:
    def test_join_path(self) -> None:
        assert join_path("/d", "x.png") == "/d/x.png"
        assert join_path("/d/sub/..", "x.png") == "/d/x.png"

    def test_native_path_round_trip(self, tmp_path) -> None:
        path = normalize_path(tmp_path / "a.txt")
        assert normalize_path(native_path(path)) == path

    def test_is_same_path(self, tmp_path) -> None:
        assert is_same_path(tmp_path / "a.txt", str(tmp_path / "." / "a.txt"))
        assert not is_same_path(tmp_path / "a.txt", tmp_path / "b.txt")
