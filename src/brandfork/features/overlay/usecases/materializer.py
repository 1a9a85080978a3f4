"""
Summary: Project overlay files into the destination tree by symlink or copy.
Why: The engine tree must see overlay files at their paths while git ignores them.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from logging import Logger
from pathlib import Path

from brandfork.config.config import MAX_WORKERS_DEFAULT
from brandfork.config.settings import IGNORE_MANIFEST_NAME, OWNERSHIP_MANIFEST_NAME
from brandfork.platform.filesystem import ensure_parent_directory, remove_path
from brandfork.platform.logging import logger as app_logger

from ..domain.models import (
    MaterializationFailure,
    MaterializationReport,
    MaterializationStrategy,
    OverlayEntry,
    OverlayEvent,
    OverlayGroup,
)
from .manifests import IgnoreManifest, OwnershipManifest


class OverlayMaterializer:
    """Project overlay entries from ``source_root`` into ``dest_root``.

    The destination tree is treated as owned by this tool for every overlay
    path: whatever sits at such a path and is not a projection recorded in
    the ownership manifest is deleted without diffing. A managed copy is
    rewritten on every run, so manual edits to it are lost.
    """

    def __init__(
        self,
        *,
        source_root: Path,
        dest_root: Path,
        strategy: MaterializationStrategy,
        max_workers: int = MAX_WORKERS_DEFAULT,
        logger: Logger | None = None,
    ) -> None:
        self.source_root = source_root.resolve()
        self.dest_root = dest_root
        self.strategy = strategy
        self.max_workers = max(1, max_workers)
        self.ignore = IgnoreManifest(dest_root / IGNORE_MANIFEST_NAME)
        self.ownership = OwnershipManifest(dest_root / OWNERSHIP_MANIFEST_NAME)
        self._logger = logger or app_logger

    def materialize(self, entry: OverlayEntry) -> None:
        """Project one entry and record it in both manifests.

        Raises:
            OSError: If the filesystem operation fails.
        """

        self._project(entry)
        self._record(entry)
        self._save_manifests()

    def materialize_all(self, groups: Iterable[OverlayGroup]) -> MaterializationReport:
        """Project every entry of ``groups``, collecting failures instead of aborting."""

        entries = [entry for group in groups for entry in group.entries]
        report = MaterializationReport(strategy=self.strategy)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            outcomes = list(executor.map(self._try_project, entries))

        for entry, error in zip(entries, outcomes):
            if error is None:
                self._record(entry)
                report.materialized.append(entry)
            else:
                report.failures.append(MaterializationFailure(entry=entry, error=error))

        self._save_manifests()
        self._logger.info(
            "Materialized overlay [strategy=%s, files=%d, failed=%d]",
            self.strategy.value,
            len(report.materialized),
            len(report.failures),
            extra={"processing_event": OverlayEvent.BATCH_COMPLETE},
        )
        return report

    def _try_project(self, entry: OverlayEntry) -> str | None:
        try:
            self._project(entry)
        except OSError as exc:
            error_message = str(exc) if str(exc) else type(exc).__name__
            self._log(
                logging.ERROR,
                OverlayEvent.ENTRY_ERROR,
                "Error materializing overlay file [group=%s, error=%s]",
                entry,
                error_message,
            )
            return error_message
        return None

    def _project(self, entry: OverlayEntry) -> None:
        source = self.source_root / entry.relative_path
        dest = self.dest_root / entry.relative_path

        if not source.is_file():
            raise FileNotFoundError(f"Overlay file missing: {source}")

        managed = self._is_managed(entry, source, dest)
        if managed and self.strategy is MaterializationStrategy.SYMLINK:
            self._log(logging.DEBUG, OverlayEvent.ENTRY_UNCHANGED, "Overlay link up to date [group=%s]", entry)
            return

        if not managed and (dest.exists() or dest.is_symlink()):
            self._log(logging.DEBUG, OverlayEvent.ENTRY_REPLACE, "Replacing unmanaged path [group=%s]", entry)
            remove_path(dest)

        _ = ensure_parent_directory(dest)
        if self.strategy is MaterializationStrategy.COPY:
            _ = shutil.copyfile(source, dest)
            self._log(logging.DEBUG, OverlayEvent.ENTRY_COPY, "Copied overlay file [group=%s]", entry)
        else:
            dest.symlink_to(source)
            self._log(logging.DEBUG, OverlayEvent.ENTRY_LINK, "Linked overlay file [group=%s]", entry)

    def _is_managed(self, entry: OverlayEntry, source: Path, dest: Path) -> bool:
        """Return whether ``dest`` is a projection of ``source`` this tool recorded."""

        if not self.ownership.owns(entry.manifest_line):
            return False
        if self.strategy is MaterializationStrategy.SYMLINK:
            return dest.is_symlink() and Path(os.readlink(dest)) == source
        return dest.is_file() and not dest.is_symlink()

    def _record(self, entry: OverlayEntry) -> None:
        _ = self.ownership.add(entry.manifest_line)
        _ = self.ignore.add(entry.manifest_line)

    def _save_manifests(self) -> None:
        _ = self.ignore.add(OWNERSHIP_MANIFEST_NAME)
        self.dest_root.mkdir(parents=True, exist_ok=True)
        self.ownership.save()
        self.ignore.save()

    def _log(self, level: int, event: OverlayEvent, message: str, entry: OverlayEntry, *args: object) -> None:
        self._logger.log(
            level,
            message,
            entry.group,
            *args,
            extra={
                "processing_event": event,
                "source_path": self.source_root / entry.relative_path,
                "source_base_path": self.source_root,
                "target_path": self.dest_root / entry.relative_path,
                "target_base_path": self.dest_root,
            },
        )


def materialize(
    entry: OverlayEntry,
    source_root: Path,
    dest_root: Path,
    strategy: MaterializationStrategy,
) -> None:
    """Project a single overlay entry into ``dest_root``."""

    OverlayMaterializer(source_root=source_root, dest_root=dest_root, strategy=strategy).materialize(entry)


__all__ = ["OverlayMaterializer", "materialize"]
