"""
Summary: Content-hash cache recording which source artwork was processed.
Why: Let downstream regeneration steps skip artwork whose bytes are unchanged.
"""

from __future__ import annotations

import hashlib
import threading
from collections.abc import Iterator
from pathlib import Path

from brandfork.config.file_ops import append_lines, read_lines
from brandfork.config.settings import FILE_HASH_CHUNK_SIZE


def calculate_file_hash(file_path: Path) -> str:
    """Calculate SHA-256 hash of a file."""

    sha256_hash = hashlib.sha256()
    with open(file_path, "rb") as handle:
        for byte_block in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            sha256_hash.update(byte_block)
    return sha256_hash.hexdigest()


class ContentHashCache:
    """Append-only set of content hashes, optionally backed by a line file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._hashes: dict[str, None] = {}
        self._pending: list[str] = []
        self._lock = threading.Lock()
        if path is not None:
            for line in read_lines(path):
                digest = line.strip()
                if digest:
                    self._hashes[digest] = None

    def __contains__(self, digest: object) -> bool:
        return digest in self._hashes

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._hashes))

    def __len__(self) -> int:
        return len(self._hashes)

    def add_hash(self, digest: str) -> bool:
        """Record ``digest``; return ``False`` when it was already present."""

        with self._lock:
            if digest in self._hashes:
                return False
            self._hashes[digest] = None
            self._pending.append(digest)
            return True

    def add_file(self, file_path: Path) -> str:
        """Hash ``file_path``, record the digest and return it."""

        digest = calculate_file_hash(file_path)
        _ = self.add_hash(digest)
        return digest

    def is_processed(self, file_path: Path) -> bool:
        """Return whether the exact contents of ``file_path`` were recorded before."""

        return calculate_file_hash(file_path) in self._hashes

    def save(self) -> None:
        """Append digests recorded since the last save to the backing file."""

        if self._path is None:
            return
        with self._lock:
            pending, self._pending = self._pending, []
        append_lines(self._path, pending)


__all__ = ["ContentHashCache", "calculate_file_hash"]
