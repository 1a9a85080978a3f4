"""Copy extra artwork shipped in a brand directory straight into its output."""

from __future__ import annotations

import shutil
from pathlib import Path

from brandfork.config.settings import CONTENT_DIR_NAME
from brandfork.platform.filesystem import ensure_directory
from brandfork.platform.logging import logger

from ..domain.models import BrandLayout


def _copy_files(source_dir: Path, destination_dir: Path) -> list[Path]:
    copied: list[Path] = []
    for source in sorted(source_dir.iterdir()):
        if not source.is_file():
            continue
        destination = destination_dir / source.name
        logger.info("Copying %s to %s", source.name, destination_dir)
        _ = ensure_directory(destination_dir)
        _ = shutil.copyfile(source, destination)
        copied.append(destination)
    return copied


def copy_optional_icons(layout: BrandLayout) -> list[Path]:
    """Copy top-level files and ``content/`` files of the brand directory verbatim."""

    copied = _copy_files(layout.source_dir, layout.output_dir)

    content_dir = layout.source_dir / CONTENT_DIR_NAME
    if content_dir.is_dir():
        copied.extend(_copy_files(content_dir, layout.output_dir / CONTENT_DIR_NAME))
    return copied


__all__ = ["copy_optional_icons"]
