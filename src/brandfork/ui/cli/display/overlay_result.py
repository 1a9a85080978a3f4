"""Display utilities for overlay materialization results."""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table

from brandfork.features.overlay import MaterializationReport, OverlayGroup


@final
class OverlayResultDisplay:
    """Render overlay groups and materialization outcomes in the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_groups(self, root: Path, groups: list[OverlayGroup], *, quiet: bool = False) -> None:
        """Print one row per overlay group in scan order."""

        if quiet:
            return

        table = Table(title=f"Overlay groups in {root}")
        table.add_column("Group", style="cyan")
        table.add_column("Files", justify="right")
        for group in groups:
            table.add_row(group.name, str(len(group)))
        self.console.print(table)

    def show_results(self, reports: list[MaterializationReport], *, quiet: bool = False) -> None:
        """Print a summary of materialization results; failures always print."""

        materialized = sum(len(report.materialized) for report in reports)
        failures = [failure for report in reports for failure in report.failures]

        if not quiet:
            self.console.print("\n[bold]Overlay Summary:[/bold]")
            if reports:
                self.console.print(f"Strategy: {reports[0].strategy.value}")
            self.console.print(f"[green]Materialized: {materialized}[/green]")

        if failures:
            self.console.print(f"[red]Failed: {len(failures)}[/red]")
            for failure in failures:
                self.console.print(f"[red]  • {failure.entry.relative_path}: {failure.error}[/red]")
