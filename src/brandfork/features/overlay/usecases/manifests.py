"""
Summary: Line-oriented manifests kept at the root of the destination tree.
Why: Track ignored and tool-owned paths without duplicating lines across runs.
"""

from __future__ import annotations

from pathlib import Path

from brandfork.config.file_ops import append_lines, read_lines


class LineManifest:
    """A text file of unique lines that only ever grows.

    Lines are buffered by ``add`` and appended to disk by ``save``; a line
    already present in the file or buffer is never written twice.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lines: set[str] = set(read_lines(path))
        self._pending: list[str] = []

    def __contains__(self, line: object) -> bool:
        return line in self._lines

    def add(self, line: str) -> bool:
        """Record ``line``; return ``False`` when it was already listed."""

        if line in self._lines:
            return False
        self._lines.add(line)
        self._pending.append(line)
        return True

    def save(self) -> None:
        pending, self._pending = self._pending, []
        append_lines(self.path, pending)


class IgnoreManifest(LineManifest):
    """Version-control exclusion file listing materialized overlay paths."""


class OwnershipManifest(LineManifest):
    """Paths in the destination tree that this tool projected and may overwrite."""

    def owns(self, relative_path: str) -> bool:
        return relative_path in self


__all__ = ["IgnoreManifest", "LineManifest", "OwnershipManifest"]
