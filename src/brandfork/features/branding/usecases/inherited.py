"""
Summary: Copy base branding files the brand did not generate, theming CSS on the way.
Why: A partial brand must still ship every file the engine's default branding has.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from brandfork.config.file_ops import write_text_file
from brandfork.config.settings import (
    CSS_LEGACY_COLOR_PATTERN,
    CSS_THEME_VARIABLE,
    INSTALLER_SCRIPT_NAME,
)
from brandfork.platform.filesystem import ensure_parent_directory, walk_files
from brandfork.platform.logging import logger
from brandfork.shared.errors import TemplateConsistencyError

from ..domain.models import BrandDefinition, BrandLayout
from .fragments import write_installer_defines


@dataclass(slots=True)
class InheritedMergeResult:
    """Files produced while merging the base branding into a brand output."""

    copied: list[Path] = field(default_factory=list)
    themed_css: list[Path] = field(default_factory=list)
    installer_defines: Path | None = None


def find_installer_script(base_dir: Path) -> PurePosixPath:
    """Locate the single installer branding script in the base branding.

    Raises:
        TemplateConsistencyError: If the script is missing or appears more than once.
    """

    matches = (
        [path for path in walk_files(base_dir) if path.name == INSTALLER_SCRIPT_NAME]
        if base_dir.is_dir()
        else []
    )
    if len(matches) != 1:
        raise TemplateConsistencyError(
            INSTALLER_SCRIPT_NAME, [base_dir.joinpath(*match.parts) for match in matches]
        )
    return matches[0]


def theme_css(contents: str, background_color: str) -> str:
    """Swap legacy background colours for the theme variable and bind it once."""

    themed = CSS_LEGACY_COLOR_PATTERN.sub(f"var({CSS_THEME_VARIABLE})", contents)
    if themed and not themed.endswith("\n"):
        themed += "\n"
    return themed + f":root {{ {CSS_THEME_VARIABLE}: {background_color} }}\n"


def merge_inherited(
    layout: BrandLayout,
    brand: BrandDefinition,
    installer_script: PurePosixPath,
) -> InheritedMergeResult:
    """Bring base branding files into the output without overriding generated ones.

    Must run after the brand's own files are generated: presence in the
    output directory is what marks a file as overridden.
    """

    result = InheritedMergeResult()
    base_dir = layout.base_branding_dir

    for relative_path in walk_files(base_dir):
        if relative_path == installer_script:
            continue

        destination = layout.output_path(relative_path)
        if destination.exists():
            continue

        source = base_dir.joinpath(*relative_path.parts)
        if relative_path.suffix == ".css":
            contents = source.read_text(encoding="utf-8")
            write_text_file(destination, theme_css(contents, brand.background_color))
            result.themed_css.append(destination)
            continue

        _ = ensure_parent_directory(destination)
        _ = shutil.copyfile(source, destination)
        result.copied.append(destination)

    result.installer_defines = write_installer_defines(layout.output_path(installer_script), brand)
    logger.debug(
        "Inherited %d file(s) and themed %d stylesheet(s) from %s",
        len(result.copied),
        len(result.themed_css),
        base_dir,
    )
    return result


__all__ = ["InheritedMergeResult", "find_installer_script", "merge_inherited", "theme_css"]
