"""Brand commands for the CLI."""

from __future__ import annotations

from typing import final

from rich.console import Console

from brandfork.config.config import Config
from brandfork.config.paths import default_hash_cache_file
from brandfork.features.branding import BrandAssetPipeline, BrandOutputReport, BrandResolver
from brandfork.shared.hash_cache import ContentHashCache
from brandfork.ui.cli.args.options import BrandApplyArgs, BrandListArgs
from brandfork.ui.cli.display.brand_result import BrandResultDisplay


@final
class BrandListCommand:
    """List the brands available in the brand store."""

    def __init__(self, args: BrandListArgs) -> None:
        self.args = args
        self.config = Config.load(args.config_path)
        self.console = Console()

    def execute(self) -> list[str]:
        brands = BrandResolver(self.config).list_brands()
        if not brands:
            self.console.print(f"[yellow]No brands found in {self.config.branding_dir}[/yellow]")
        for key in brands:
            self.console.print(key)
        return brands


@final
class BrandApplyCommand:
    """Regenerate the engine branding directory for one brand."""

    def __init__(self, args: BrandApplyArgs) -> None:
        self.args = args
        self.config = Config.load(args.config_path)
        self.hash_cache = ContentHashCache(default_hash_cache_file())
        self.display = BrandResultDisplay()

    def execute(self) -> BrandOutputReport:
        """Execute the brand apply command."""

        pipeline = BrandAssetPipeline(
            self.config,
            platform=self.args.platform,
            compat_mode=self.args.compat_mode,
            hash_cache=self.hash_cache,
        )
        report = pipeline.apply(self.args.brand_key)
        self.hash_cache.save()
        self.display.show_report(report, quiet=self.args.quiet, verbose=self.args.verbose)
        return report
