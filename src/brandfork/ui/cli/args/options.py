"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from brandfork.features.overlay.domain.models import MaterializationStrategy


@final
@dataclass(slots=True)
class OverlayArgs:
    """Command line arguments for the ``overlay`` subcommand."""

    command: Literal["overlay"]
    config_path: Path | None
    strategy: MaterializationStrategy | None
    source_root: Path | None
    dest_root: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class BrandListArgs:
    """Command line arguments for ``brand list``."""

    command: Literal["brand-list"]
    config_path: Path | None


@final
@dataclass(slots=True)
class BrandApplyArgs:
    """Command line arguments for ``brand apply``."""

    command: Literal["brand-apply"]
    config_path: Path | None
    brand_key: str
    platform: str
    compat_mode: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MozconfigArgs:
    """Command line arguments for the ``mozconfig`` subcommand."""

    command: Literal["mozconfig"]
    config_path: Path | None
    brand_key: str
    build_mode: str
    platform: str
    output: Path | None


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    config_path: Path | None
    force: bool


CLIArgs = OverlayArgs | BrandListArgs | BrandApplyArgs | MozconfigArgs | InitConfigArgs

__all__ = [
    "BrandApplyArgs",
    "BrandListArgs",
    "CLIArgs",
    "InitConfigArgs",
    "MozconfigArgs",
    "OverlayArgs",
]
