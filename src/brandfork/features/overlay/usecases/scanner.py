"""
Summary: List overlay files under a root and group them by first path segment.
Why: Materialization and reporting both work per patch group.
"""

from __future__ import annotations

import logging
from pathlib import Path

from brandfork.config.settings import EXCLUDED_DIR_NAMES, PATCH_SUFFIX
from brandfork.platform.filesystem import walk_files
from brandfork.platform.logging import logger
from brandfork.shared.errors import ScanError

from ..domain.models import OverlayEntry, OverlayEvent, OverlayGroup


def is_overlay_file(relative_name: str) -> bool:
    """Return whether a file name is a whole-file overlay rather than a diff."""

    return not relative_name.endswith(PATCH_SUFFIX)


def scan(root: Path) -> list[OverlayGroup]:
    """Scan ``root`` recursively and return overlay groups in first-seen order.

    Files beneath dependency-manager directories and diff patches are skipped.

    Raises:
        ScanError: If ``root`` does not exist or is not a directory.
    """

    if not root.is_dir():
        raise ScanError(root)

    groups: dict[str, OverlayGroup] = {}
    for relative_path in walk_files(root, excluded_dirs=EXCLUDED_DIR_NAMES):
        if not is_overlay_file(relative_path.name):
            continue
        entry = OverlayEntry(relative_path)
        groups.setdefault(entry.group, OverlayGroup(name=entry.group)).entries.append(entry)

    logger.log(
        logging.DEBUG,
        "Scanned overlay [root=%s, groups=%d, files=%d]",
        root,
        len(groups),
        sum(len(group) for group in groups.values()),
        extra={"processing_event": OverlayEvent.SCAN_COMPLETE},
    )
    return list(groups.values())


__all__ = ["is_overlay_file", "scan"]
