"""
Summary: Exception hierarchy raised by overlay and branding use cases.
Why: Let the CLI tell validation failures apart from unexpected crashes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brandfork.features.overlay.domain.models import MaterializationFailure


class BrandforkError(Exception):
    """Base exception for every failure surfaced by brandfork."""


class ScanError(BrandforkError):
    """Raised when an overlay root cannot be scanned."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Overlay root does not exist: {root}")
        self.root = root


class MaterializationError(BrandforkError):
    """Raised after a batch when one or more overlay entries failed."""

    def __init__(self, failures: Sequence["MaterializationFailure"]) -> None:
        listed = ", ".join(str(failure.entry.relative_path) for failure in failures)
        super().__init__(f"Failed to materialize {len(failures)} overlay file(s): {listed}")
        self.failures = list(failures)


class BrandError(BrandforkError):
    """Base exception for brand validation failures."""


class MissingBrandError(BrandError):
    """Raised when a brand has no source directory in the brand store."""

    def __init__(self, key: str, path: Path) -> None:
        super().__init__(f"Branding {key} does not exist ({path})")
        self.key = key
        self.path = path


class IncompleteBrandError(BrandError):
    """Raised when required brand files are missing."""

    def __init__(self, key: str, missing: Iterable[Path]) -> None:
        self.key = key
        self.missing = list(missing)
        listed = ", ".join(str(path) for path in self.missing)
        super().__init__(f"Missing some of the required files for {key}: {listed}")


class AssetGenerationError(BrandforkError):
    """Raised when an intermediate image needed for the icon set is unavailable."""

    def __init__(self, message: str, missing: Iterable[PurePath] = ()) -> None:
        super().__init__(message)
        self.missing = list(missing)


class TemplateConsistencyError(BrandforkError):
    """Raised when the installer branding script is absent or duplicated."""

    def __init__(self, name: str, matches: Sequence[Path]) -> None:
        super().__init__(
            f"Expected exactly one {name} in the inherited branding, found {len(matches)}"
        )
        self.name = name
        self.matches = list(matches)


class ConfigError(BrandforkError):
    """Raised when the configuration document is malformed."""


__all__ = [
    "AssetGenerationError",
    "BrandError",
    "BrandforkError",
    "ConfigError",
    "IncompleteBrandError",
    "MaterializationError",
    "MissingBrandError",
    "ScanError",
    "TemplateConsistencyError",
]
