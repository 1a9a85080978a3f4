"""Overlay command implementation for the CLI."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import final

from brandfork.config.config import Config
from brandfork.config.settings import TESTS_OVERLAY_DESTINATION
from brandfork.features.overlay import (
    MaterializationReport,
    MaterializationStrategy,
    OverlayMaterializer,
    scan,
    select_strategy,
)
from brandfork.ui.cli.args.options import OverlayArgs
from brandfork.ui.cli.display.overlay_result import OverlayResultDisplay


@final
class OverlayCommand:
    """Scan the overlay tree(s) and project them into the engine tree."""

    def __init__(self, args: OverlayArgs) -> None:
        self.args = args
        self.config = Config.load(args.config_path)
        self.display = OverlayResultDisplay()

    def _strategy(self) -> MaterializationStrategy:
        if self.args.strategy is not None:
            return self.args.strategy
        return select_strategy(
            sys.platform,
            windows_use_symbolic_links=self.config.build_options.windows_use_symbolic_links,
        )

    def _run(self, source_root: Path, dest_root: Path, strategy: MaterializationStrategy) -> MaterializationReport:
        groups = scan(source_root)
        self.display.show_groups(source_root, groups, quiet=self.args.quiet)
        materializer = OverlayMaterializer(
            source_root=source_root,
            dest_root=dest_root,
            strategy=strategy,
            max_workers=self.config.max_workers,
        )
        return materializer.materialize_all(groups)

    def execute(self) -> list[MaterializationReport]:
        """Execute the overlay command."""

        strategy = self._strategy()
        dest_root = self.args.dest_root or self.config.engine_path
        reports = [self._run(self.args.source_root or self.config.src_path, dest_root, strategy)]

        tests_root = self.config.tests_path
        if self.args.source_root is None and tests_root is not None and tests_root.is_dir():
            tests_dest = dest_root / TESTS_OVERLAY_DESTINATION / tests_root.name
            reports.append(self._run(tests_root, tests_dest, strategy))

        self.display.show_results(reports, quiet=self.args.quiet)
        return reports
