"""
Summary: Render brand artwork into raster icons, icon bundles and about logos.
Why: The engine build expects fixed icon names and sizes in the branding directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from brandfork.config.settings import ICNS_SIZES, ICONSET_SCRATCH_NAME, MAC_LOGO, MASTER_LOGO, RASTER_ICON_SIZES
from brandfork.platform.imaging import save_square_png, verify_image, write_icns
from brandfork.platform.logging import logger
from brandfork.shared.errors import AssetGenerationError
from brandfork.shared.hash_cache import ContentHashCache

from ..domain.models import BrandLayout


@dataclass(slots=True, frozen=True)
class RasterIconPlan:
    """Source image chosen for every raster icon size."""

    sources: Mapping[int, Path]


def plan_raster_icons(source_dir: Path) -> RasterIconPlan:
    """Pick a source for each raster size and verify every source decodes.

    A brand may ship a hand-tuned ``logo<size>.png``; otherwise the master
    logo is resampled. Nothing is written here, so a failure leaves the
    output directory untouched.

    Raises:
        AssetGenerationError: If a source for any size is missing or unreadable.
    """

    sources: dict[int, Path] = {}
    for size in RASTER_ICON_SIZES:
        tuned = source_dir / f"logo{size}.png"
        sources[size] = tuned if tuned.is_file() else source_dir / MASTER_LOGO

    unusable: list[Path] = []
    for source in sorted(set(sources.values())):
        try:
            _ = verify_image(source)
        except OSError as exc:
            logger.error("Unusable icon source %s: %s", source, exc)
            unusable.append(source)

    if unusable:
        sizes = [size for size, source in sources.items() if source in unusable]
        raise AssetGenerationError(
            f"Missing icon sources for sizes {', '.join(str(s) for s in sizes)}",
            missing=unusable,
        )
    return RasterIconPlan(sources=sources)


def generate_raster_icons(plan: RasterIconPlan, layout: BrandLayout, *, max_workers: int) -> list[Path]:
    """Write ``default<size>.png`` for every planned size."""

    logger.debug("Generating icons")

    def _render(size: int) -> Path:
        return save_square_png(plan.sources[size], size, layout.raster_icon(size))

    try:
        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
            written = list(executor.map(_render, sorted(plan.sources)))
    except OSError as exc:
        raise AssetGenerationError(f"Failed to render raster icons: {exc}") from exc
    return written


def generate_icon_bundle(layout: BrandLayout, scratch_root: Path) -> Path:
    """Convert the macOS logo into the multi-resolution icon container."""

    source = layout.source_dir / MAC_LOGO
    logger.debug("Generating Mac icons from %s into %s", source, layout.output_dir)
    try:
        return write_icns(
            source,
            layout.icon_container,
            ICNS_SIZES,
            scratch_root / ICONSET_SCRATCH_NAME,
        )
    except OSError as exc:
        raise AssetGenerationError(f"Failed to build icon bundle: {exc}", missing=[source]) from exc


def generate_about_logos(layout: BrandLayout, cache: ContentHashCache | None = None) -> list[Path]:
    """Render the master logo at the about-dialog sizes and register its hash."""

    master = layout.source_dir / MASTER_LOGO
    written: list[Path] = []
    try:
        for destination, size in layout.about_logos().items():
            written.append(save_square_png(master, size, destination))
    except OSError as exc:
        raise AssetGenerationError(f"Failed to render about logos: {exc}", missing=[master]) from exc

    if cache is not None:
        _ = cache.add_file(master)
    return written


__all__ = [
    "RasterIconPlan",
    "generate_about_logos",
    "generate_icon_bundle",
    "generate_raster_icons",
    "plan_raster_icons",
]
