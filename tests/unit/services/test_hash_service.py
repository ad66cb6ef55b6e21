"""
Tests for HashService.

Date: 2026-10-18
"""

from __future__ import annotations

import hashlib
import os
import zlib

import pytest

from livefile.services.hash_service import HashService


class TestHashService:
    """Test HashService functionality."""

    def test_md5_is_default(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"hello world")

        assert HashService().compute_hash(path) == hashlib.md5(b"hello world").hexdigest()

    @pytest.mark.parametrize("algorithm", ["sha1", "sha256"])
    def test_hashlib_algorithms(self, tmp_path, algorithm) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"content")

        expected = hashlib.new(algorithm, b"content").hexdigest()
        assert HashService().compute_hash(path, algorithm) == expected

    def test_crc32_format(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"content")

        result = HashService().compute_hash(path, "crc32")

        assert result == f"{zlib.crc32(b'content') & 0xFFFFFFFF:08x}"
        assert len(result) == 8

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty"
        path.write_bytes(b"")
        assert HashService().compute_hash(path) == hashlib.md5(b"").hexdigest()

    def test_missing_file_returns_none(self, tmp_path) -> None:
        assert HashService().compute_hash(tmp_path / "missing") is None

    def test_directory_returns_none(self, tmp_path) -> None:
        assert HashService().compute_hash(tmp_path) is None

    def test_unsupported_algorithm(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"x")

        assert HashService().compute_hash(path, "md4") is None
        with pytest.raises(ValueError, match="Unsupported algorithm"):
            HashService(default_algorithm="md4")

    def test_cache_hit(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"x")
        service = HashService()

        service.compute_hash(path)
        service.compute_hash(path)

        assert service.get_cache_size() == 1
        service.clear_cache()
        assert service.get_cache_size() == 0

    def test_changed_file_is_hashed_again(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"first")
        service = HashService()
        first = service.compute_hash(path)

        path.write_bytes(b"second content")
        os.utime(path, ns=(0, 10**9))

        assert service.compute_hash(path) == hashlib.md5(b"second content").hexdigest()
        assert service.compute_hash(path) != first

    def test_rewrites_keep_one_entry_per_file(self, tmp_path) -> None:
        path = tmp_path / "watched.bin"
        service = HashService()

        for i in range(50):
            content = f"revision {i}".encode()
            path.write_bytes(content)
            os.utime(path, ns=(0, (i + 1) * 10**9))
            assert service.compute_hash(path) == hashlib.md5(content).hexdigest()

        assert service.get_cache_size() == 1

    def test_one_entry_per_algorithm(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"x")
        service = HashService()

        service.compute_hash(path, "md5")
        service.compute_hash(path, "crc32")
        path.write_bytes(b"xy")
        service.compute_hash(path, "md5")

        assert service.get_cache_size() == 2

    def test_deleted_file_is_evicted(self, tmp_path) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"x")
        service = HashService()
        service.compute_hash(path)

        path.unlink()

        assert service.compute_hash(path) is None
        assert service.get_cache_size() == 0

    def test_large_file(self, tmp_path) -> None:
        path = tmp_path / "big.bin"
        path.write_bytes(b"a" * 200_000)

        result = HashService(use_cache=False).compute_hash(path)

        assert result == hashlib.md5(b"a" * 200_000).hexdigest()

    def test_buffer_sizes(self) -> None:
        service = HashService()

        assert service._get_optimal_buffer_size(100) == 1024
        assert service._get_optimal_buffer_size(32 * 1024) == 8 * 1024
        assert service._get_optimal_buffer_size(1024 * 1024) == 64 * 1024
        assert service._get_optimal_buffer_size(20 * 1024 * 1024) == 256 * 1024
