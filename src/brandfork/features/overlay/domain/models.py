"""
Summary: Data structures describing overlay files and their projection outcome.
Why: Keep scanner and materializer exchanging typed records instead of raw paths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from pathlib import PurePosixPath

from brandfork.shared.errors import MaterializationError


class OverlayEvent(StrEnum):
    """Structured event identifiers for overlay materialization logs."""

    SCAN_COMPLETE = "overlay.scan.complete"
    ENTRY_REPLACE = "overlay.entry.replace"
    ENTRY_LINK = "overlay.entry.link"
    ENTRY_COPY = "overlay.entry.copy"
    ENTRY_UNCHANGED = "overlay.entry.unchanged"
    ENTRY_ERROR = "overlay.entry.error"
    BATCH_COMPLETE = "overlay.batch.complete"


class MaterializationStrategy(str, Enum):
    """How an overlay file is projected into the destination tree."""

    SYMLINK = "symlink"
    COPY = "copy"

    @staticmethod
    def from_user_input(value: str) -> "MaterializationStrategy":
        """Translate raw CLI input into the matching strategy."""

        normalized = value.strip().lower()
        for strategy in MaterializationStrategy:
            if strategy.value == normalized:
                return strategy
        valid = ", ".join(s.value for s in MaterializationStrategy)
        msg = f"Unsupported materialization strategy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


def select_strategy(platform: str, *, windows_use_symbolic_links: bool = False) -> MaterializationStrategy:
    """Pick the strategy for a whole run on ``platform``.

    Windows accounts cannot create symbolic links without extra privileges,
    so copying is forced there unless the fork opts in explicitly.
    """

    if platform.startswith("win") and not windows_use_symbolic_links:
        return MaterializationStrategy.COPY
    return MaterializationStrategy.SYMLINK


@dataclass(slots=True, frozen=True)
class OverlayEntry:
    """A single overlay file, addressed relative to its overlay root."""

    relative_path: PurePosixPath

    @property
    def group(self) -> str:
        """First path segment, naming the patch group the file belongs to."""

        return self.relative_path.parts[0]

    @property
    def manifest_line(self) -> str:
        return self.relative_path.as_posix()


@dataclass(slots=True)
class OverlayGroup:
    """Overlay entries sharing the same first path segment."""

    name: str
    entries: list[OverlayEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(slots=True, frozen=True)
class MaterializationFailure:
    """An overlay entry that could not be projected and why."""

    entry: OverlayEntry
    error: str


@dataclass(slots=True)
class MaterializationReport:
    """Outcome of projecting a batch of overlay entries."""

    strategy: MaterializationStrategy
    materialized: list[OverlayEntry] = field(default_factory=list)
    failures: list[MaterializationFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise ``MaterializationError`` listing every failed entry, if any."""

        if self.failures:
            raise MaterializationError(self.failures)


__all__ = [
    "MaterializationFailure",
    "MaterializationReport",
    "MaterializationStrategy",
    "OverlayEntry",
    "OverlayEvent",
    "OverlayGroup",
    "select_strategy",
]
