"""Display utilities for brand asset pipeline results."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from brandfork.features.branding import AssetArtifact, BrandOutputReport


@final
class BrandResultDisplay:
    """Render the artifacts written for a brand."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_report(self, report: BrandOutputReport, *, quiet: bool = False, verbose: bool = False) -> None:
        if quiet:
            return

        brand = report.brand
        self.console.print(
            f"\n[bold]{brand.display_name}[/bold] ({brand.key}) → {report.output_dir}"
        )

        table = Table(show_header=True)
        table.add_column("Artifact", style="cyan")
        table.add_column("Files", justify="right")
        for kind in AssetArtifact:
            paths = report.paths(kind)
            if paths:
                table.add_row(kind.value, str(len(paths)))
        self.console.print(table)

        if not report.update_descriptor_patched:
            self.console.print("[yellow]Update URL not patched: application descriptor missing[/yellow]")

        if verbose:
            for kind, paths in report.artifacts.items():
                for path in paths:
                    self.console.print(f"  {kind.value}: {path.relative_to(report.output_dir.parent)}")
