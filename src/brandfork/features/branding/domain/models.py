"""Where: src/brandfork/features/branding/domain/models.py
What: Brand definition, artifact kinds and the on-disk layout of a brand's files.
Why: Give every pipeline step the same typed view of one resolved brand.
Assumptions: - Brand tables use the camelCase keys of the engine's branding templates.
Trade-offs: - Unknown keys are kept loosely typed in ``extra`` for template use.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path, PurePosixPath
from typing import Any

from brandfork.config.settings import (
    ABOUT_LOGO_SIZES,
    APPLICATION_DESCRIPTOR_PARTS,
    BASE_BRANDING_NAME,
    BRANDING_STORE_PARTS,
    CONTENT_DIR_NAME,
    DEFAULT_DISPLAY_VERSION,
    ICNS_NAME,
    PROFILE_PREFS_PARTS,
)


_KNOWN_FIELDS: tuple[str, ...] = (
    "brandFullName",
    "brandShortName",
    "brandShorterName",
    "brandingVendor",
    "brandingGenericName",
    "backgroundColor",
    "release",
)


def merge_layers(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge partial records left to right; later layers win field by field.

    The merge is shallow: a nested table in a later layer replaces the whole
    table of an earlier one.
    """

    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


@dataclass(slots=True, frozen=True)
class ReleaseInfo:
    """Release metadata of a brand; the brand key doubles as update channel."""

    display_version: str
    channel: str
    github: Mapping[str, Any] | None = None


@dataclass(slots=True, frozen=True)
class BrandDefinition:
    """A resolved brand with global and default fields already merged in."""

    key: str
    display_name: str
    short_name: str
    shorter_name: str
    vendor: str
    generic_name: str
    background_color: str
    release: ReleaseInfo
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, key: str, merged: Mapping[str, Any]) -> "BrandDefinition":
        """Build a definition from the merged brand table."""

        release = merged.get("release") or {}
        return cls(
            key=key,
            display_name=str(merged["brandFullName"]),
            short_name=str(merged["brandShortName"]),
            shorter_name=str(merged["brandShorterName"]),
            vendor=str(merged["brandingVendor"]),
            generic_name=str(merged["brandingGenericName"]),
            background_color=str(merged["backgroundColor"]),
            release=ReleaseInfo(
                display_version=str(release.get("displayVersion", DEFAULT_DISPLAY_VERSION)),
                channel=key,
                github=release.get("github"),
            ),
            extra={k: v for k, v in merged.items() if k not in _KNOWN_FIELDS},
        )

    def as_template_values(self) -> dict[str, str]:
        """Return the placeholder values used by branding templates."""

        values = {
            str(k): str(v) for k, v in self.extra.items() if isinstance(v, (str, int, float))
        }
        values.update(
            {
                "brandFullName": self.display_name,
                "brandShortName": self.short_name,
                "brandShorterName": self.shorter_name,
                "brandingVendor": self.vendor,
                "brandingGenericName": self.generic_name,
                "backgroundColor": self.background_color,
            }
        )
        return values


class AssetArtifact(StrEnum):
    """Kinds of files the asset pipeline writes into a brand's output directory."""

    RASTER_ICON = "raster_icon"
    PLATFORM_ICON_CONTAINER = "platform_icon_container"
    ABOUT_LOGO = "about_logo"
    LOCALIZED_TEMPLATE = "localized_template"
    INHERITED_FILE = "inherited_file"
    THEMED_CSS = "themed_css"
    INSTALLER_DEFINES = "installer_defines"
    PROFILE_PREFS = "profile_prefs"
    OPTIONAL_ICON = "optional_icon"


@dataclass(slots=True, frozen=True)
class BrandLayout:
    """Deterministic source and destination paths for one brand."""

    key: str
    source_dir: Path
    engine_dir: Path

    @property
    def branding_store(self) -> Path:
        return self.engine_dir.joinpath(*BRANDING_STORE_PARTS)

    @property
    def output_dir(self) -> Path:
        return self.branding_store / self.key

    @property
    def base_branding_dir(self) -> Path:
        """Default branding the output inherits unspecified files from."""
        return self.branding_store / BASE_BRANDING_NAME

    @property
    def application_descriptor(self) -> Path:
        return self.engine_dir.joinpath(*APPLICATION_DESCRIPTOR_PARTS)

    def raster_icon(self, size: int) -> Path:
        return self.output_dir / f"default{size}.png"

    @property
    def icon_container(self) -> Path:
        return self.output_dir / ICNS_NAME

    def about_logos(self) -> dict[Path, int]:
        content = self.output_dir / CONTENT_DIR_NAME
        return {content / name: size for name, size in ABOUT_LOGO_SIZES.items()}

    @property
    def profile_prefs(self) -> Path:
        return self.output_dir.joinpath(*PROFILE_PREFS_PARTS)

    def output_path(self, relative_path: PurePosixPath) -> Path:
        return self.output_dir.joinpath(*relative_path.parts)


@dataclass(slots=True)
class BrandOutputReport:
    """Files written for one brand, grouped by artifact kind."""

    brand: BrandDefinition
    output_dir: Path
    artifacts: dict[AssetArtifact, list[Path]] = field(default_factory=dict)
    content_hashes: list[str] = field(default_factory=list)
    update_descriptor_patched: bool = False

    def add(self, kind: AssetArtifact, path: Path) -> None:
        self.artifacts.setdefault(kind, []).append(path)

    def paths(self, kind: AssetArtifact) -> list[Path]:
        return list(self.artifacts.get(kind, []))

    @property
    def total(self) -> int:
        return sum(len(paths) for paths in self.artifacts.values())


__all__ = [
    "AssetArtifact",
    "BrandDefinition",
    "BrandLayout",
    "BrandOutputReport",
    "ReleaseInfo",
    "merge_layers",
]
