"""
Summary: Orchestrate brand validation, artwork generation and config fragments.
Why: Output must be regenerated from scratch, and only after every check passed.
"""

from __future__ import annotations

import sys
from logging import Logger
from pathlib import Path

from brandfork.config.config import Config
from brandfork.config.paths import default_tmp_dir
from brandfork.config.settings import ICON_BUNDLE_PLATFORM, OPTIONAL_BRANDING_TEMPLATE_DIR
from brandfork.platform.filesystem import ensure_empty
from brandfork.platform.logging import logger as app_logger
from brandfork.shared.hash_cache import ContentHashCache

from ..domain.models import AssetArtifact, BrandOutputReport
from . import fragments, icons
from .inherited import find_installer_script, merge_inherited
from .locale_templates import expand_templates
from .optional_icons import copy_optional_icons
from .resolver import BrandResolver


class BrandAssetPipeline:
    """Materialize one brand into the engine's branding directory.

    Validation (brand files, icon sources, installer script uniqueness) runs
    before anything is written; afterwards the output directory is emptied
    and every artifact is regenerated.
    """

    def __init__(
        self,
        config: Config,
        *,
        platform: str | None = None,
        compat_mode: bool = False,
        hash_cache: ContentHashCache | None = None,
        scratch_dir: Path | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._config = config
        self.platform = platform or sys.platform
        self.compat_mode = compat_mode
        self.hash_cache = hash_cache if hash_cache is not None else ContentHashCache()
        self._scratch_dir = scratch_dir
        self._resolver = BrandResolver(config)
        self._logger = logger or app_logger

    @property
    def resolver(self) -> BrandResolver:
        return self._resolver

    def apply(self, brand_key: str) -> BrandOutputReport:
        """Regenerate every branding artifact for ``brand_key``.

        Raises:
            MissingBrandError: If the brand directory does not exist.
            IncompleteBrandError: If required brand files are missing.
            AssetGenerationError: If icon sources are unusable or rendering fails.
            TemplateConsistencyError: If the base installer script is not unique.
            ConfigError: If the configured brand table has the wrong shape.
        """

        brand = self._resolver.resolve(brand_key)
        layout = self._resolver.layout(brand_key)
        raster_plan = icons.plan_raster_icons(layout.source_dir)
        installer_script = find_installer_script(layout.base_branding_dir)

        self._logger.info("Applying brand %s into %s", brand_key, layout.output_dir)
        _ = ensure_empty(layout.output_dir)
        report = BrandOutputReport(brand=brand, output_dir=layout.output_dir)
        max_workers = self._config.max_workers

        for path in icons.generate_raster_icons(raster_plan, layout, max_workers=max_workers):
            report.add(AssetArtifact.RASTER_ICON, path)

        if self.platform == ICON_BUNDLE_PLATFORM:
            scratch = self._scratch_dir or default_tmp_dir()
            report.add(
                AssetArtifact.PLATFORM_ICON_CONTAINER,
                icons.generate_icon_bundle(layout, scratch),
            )

        known_hashes = set(self.hash_cache)
        for path in icons.generate_about_logos(layout, self.hash_cache):
            report.add(AssetArtifact.ABOUT_LOGO, path)
        report.content_hashes = [digest for digest in self.hash_cache if digest not in known_hashes]

        template_dir = self._config.templates_path / OPTIONAL_BRANDING_TEMPLATE_DIR
        for path in expand_templates(template_dir, layout.output_dir, brand.as_template_values()):
            report.add(AssetArtifact.LOCALIZED_TEMPLATE, path)

        merged = merge_inherited(layout, brand, installer_script)
        for path in merged.copied:
            report.add(AssetArtifact.INHERITED_FILE, path)
        for path in merged.themed_css:
            report.add(AssetArtifact.THEMED_CSS, path)
        if merged.installer_defines is not None:
            report.add(AssetArtifact.INSTALLER_DEFINES, merged.installer_defines)
        report.add(AssetArtifact.PROFILE_PREFS, fragments.write_profile_prefs(layout.profile_prefs))

        for path in copy_optional_icons(layout):
            report.add(AssetArtifact.OPTIONAL_ICON, path)

        suffix = fragments.update_url_suffix(compat_mode=self.compat_mode, platform=self.platform)
        report.update_descriptor_patched = fragments.write_update_url(layout.application_descriptor, suffix)

        self._logger.info("Brand %s ready: %d artifact(s)", brand_key, report.total)
        return report


def apply(
    brand_key: str,
    config: Config,
    *,
    platform: str | None = None,
    compat_mode: bool = False,
    hash_cache: ContentHashCache | None = None,
) -> BrandOutputReport:
    """Run the asset pipeline for ``brand_key`` with a fresh pipeline instance."""

    pipeline = BrandAssetPipeline(
        config,
        platform=platform,
        compat_mode=compat_mode,
        hash_cache=hash_cache,
    )
    return pipeline.apply(brand_key)


__all__ = ["BrandAssetPipeline", "apply"]
