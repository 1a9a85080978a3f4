"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from pathlib import Path, PurePosixPath


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = path.parent
    return ensure_directory(parent)


def ensure_empty(directory: Path) -> Path:
    """Delete ``directory`` when present and recreate it empty."""

    if directory.is_symlink() or directory.is_file():
        directory.unlink()
    elif directory.exists():
        shutil.rmtree(directory)
    directory.mkdir(parents=True)
    return directory


def remove_path(path: Path) -> None:
    """Remove a file, link or directory tree at ``path`` if anything is there."""

    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def walk_files(root: Path, *, excluded_dirs: frozenset[str] = frozenset()) -> Iterator[PurePosixPath]:
    """Yield regular files beneath ``root`` as POSIX paths relative to ``root``.

    Directory listings are sorted so repeated walks over the same tree yield
    the same order. Directories named in ``excluded_dirs`` are not entered.
    """

    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in excluded_dirs)
        current_path = Path(current)
        for name in sorted(filenames):
            candidate = current_path / name
            if not candidate.is_file():
                continue
            yield PurePosixPath(candidate.relative_to(root).as_posix())


__all__ = [
    "ensure_directory",
    "ensure_empty",
    "ensure_parent_directory",
    "remove_path",
    "walk_files",
]
