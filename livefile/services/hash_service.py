"""File hashing service implementation.

Date: 2026-10-18

Concrete hashing service used by the metadata provider to compute content
digests. Supports several algorithms with adaptive read buffers and a
cache holding one digest per (path, algorithm). An entry remembers the
size and modification time it was computed for; when the file changes on
disk it is hashed again and the entry is replaced.

Usage:
    from livefile.services.hash_service import HashService

    service = HashService()
    md5 = service.compute_hash(Path("/path/to/file.jpg"))
    crc = service.compute_hash(Path("/path/to/file.jpg"), algorithm="crc32")
"""

from __future__ import annotations

import hashlib
import threading
import zlib
from collections.abc import Iterator
from pathlib import Path

from livefile.config import CONTENT_HASH_ALGORITHM
from livefile.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Supported hash algorithms
SUPPORTED_ALGORITHMS = {"crc32", "md5", "sha256", "sha1"}


class HashService:
    """File hashing service with multiple algorithm support.

    Thread-safe: the metadata provider calls it from executor threads.
    """

    def __init__(
        self,
        default_algorithm: str = CONTENT_HASH_ALGORITHM,
        use_cache: bool = True,
    ) -> None:
        """Initialize the hash service.

        Args:
            default_algorithm: Algorithm used when none is given.
            use_cache: Whether to cache computed hashes.

        Raises:
            ValueError: If the algorithm is not supported.

        """
        if default_algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unsupported algorithm: {default_algorithm}. Supported: {SUPPORTED_ALGORITHMS}"
            )
        self._default_algorithm = default_algorithm
        self._use_cache = use_cache
        # (path, algorithm) -> (size, mtime_ns, digest)
        self._cache: dict[tuple[str, str], tuple[int, int, str]] = {}
        self._lock = threading.Lock()

    @property
    def default_algorithm(self) -> str:
        return self._default_algorithm

    def compute_hash(self, path: Path, algorithm: str | None = None) -> str | None:
        """Compute the hash of a single file.

        Args:
            path: Path to the file to hash.
            algorithm: 'crc32', 'md5', 'sha256' or 'sha1'; defaults to the
                service's default algorithm.

        Returns:
            Hex digest, or None if the file cannot be read.

        """
        algorithm = algorithm or self._default_algorithm
        if algorithm not in SUPPORTED_ALGORITHMS:
            logger.error("[HashService] Unsupported hash algorithm: %s", algorithm)
            return None

        try:
            stat = path.stat()
        except FileNotFoundError:
            logger.debug("[HashService] File not found: %s", path, extra={"dev_only": True})
            self._forget(path, algorithm)
            return None
        except OSError as e:
            logger.error("[HashService] Cannot stat %s: %s", path, e)
            return None

        if not path.is_file():
            logger.warning("[HashService] Path is not a file: %s", path)
            return None

        cache_key = (str(path), algorithm)
        if self._use_cache:
            with self._lock:
                cached = self._cache.get(cache_key)
            if cached and cached[:2] == (stat.st_size, stat.st_mtime_ns):
                logger.debug("[HashService] Cache hit for %s", path.name, extra={"dev_only": True})
                return cached[2]

        try:
            if algorithm == "crc32":
                result = self._compute_crc32(path, stat.st_size)
            else:
                result = self._compute_hashlib(path, algorithm, stat.st_size)
        except PermissionError:
            logger.error("[HashService] Permission denied accessing file: %s", path)
            return None
        except OSError as e:
            logger.error("[HashService] OS error reading file %s: %s", path, e)
            return None

        if self._use_cache:
            with self._lock:
                self._cache[cache_key] = (stat.st_size, stat.st_mtime_ns, result)
        return result

    def _forget(self, path: Path, algorithm: str) -> None:
        if self._use_cache:
            with self._lock:
                self._cache.pop((str(path), algorithm), None)

    def _compute_crc32(self, path: Path, file_size: int) -> str:
        crc = 0
        for chunk in self._iter_chunks(path, file_size):
            crc = zlib.crc32(chunk, crc)

        # Unsigned 32-bit, 8-char hex
        return f"{crc & 0xFFFFFFFF:08x}"

    def _compute_hashlib(self, path: Path, algorithm: str, file_size: int) -> str:
        hasher = hashlib.new(algorithm)
        for chunk in self._iter_chunks(path, file_size):
            hasher.update(chunk)
        return hasher.hexdigest()

    def _iter_chunks(self, path: Path, file_size: int) -> Iterator[memoryview]:
        """Yield memoryview chunks of the file using an adaptive buffer."""
        buffer = bytearray(self._get_optimal_buffer_size(file_size))
        mv = memoryview(buffer)

        with path.open("rb") as f:
            while True:
                bytes_read = f.readinto(buffer)
                if not bytes_read:
                    break
                yield mv[:bytes_read]

    def _get_optimal_buffer_size(self, file_size: int) -> int:
        """Determine buffer size based on file size."""
        if file_size < 64 * 1024:  # Files < 64KB
            return max(min(file_size, 8 * 1024), 1024)
        elif file_size < 10 * 1024 * 1024:  # Files < 10MB
            return 64 * 1024
        else:  # Large files >= 10MB
            return 256 * 1024

    def clear_cache(self) -> None:
        """Clear the hash cache."""
        with self._lock:
            self._cache.clear()
        logger.debug("[HashService] Hash cache cleared", extra={"dev_only": True})

    def get_cache_size(self) -> int:
        """Number of cached hashes."""
        return len(self._cache)
