"""Write a default configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import final

from brandfork.config.config import Config
from brandfork.config.paths import default_config_path
from brandfork.platform.logging import logger
from brandfork.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Create ``brandfork.toml`` with documented defaults."""

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> Path | None:
        target = self.args.config_path or default_config_path()
        if target.exists() and not self.args.force:
            logger.warning("Configuration already exists at %s (use --force to overwrite)", target)
            return None
        return Config(root=target.parent.parent).save(target)
