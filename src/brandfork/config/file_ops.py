"""Utility helpers for configuration and manifest file persistence."""

from __future__ import annotations

from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Persist textual content ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")


def read_lines(path: Path) -> list[str]:
    """Return the lines of ``path`` without line endings, or an empty list if absent."""

    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def append_lines(path: Path, lines: list[str]) -> None:
    """Append ``lines`` to ``path`` so each lands on its own line."""

    if not lines:
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    existing = path.read_bytes() if path.exists() else b""
    prefix = "\n" if existing and not existing.endswith(b"\n") else ""
    with open(path, "a", encoding="utf-8") as handle:
        _ = handle.write(prefix + "".join(f"{line}\n" for line in lines))


__all__ = ["append_lines", "read_lines", "write_text_file"]
