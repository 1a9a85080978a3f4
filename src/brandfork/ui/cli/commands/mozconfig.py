"""Mozconfig command implementation for the CLI."""

from __future__ import annotations

import os
import sys
from typing import final

from brandfork.config.config import Config
from brandfork.config.file_ops import write_text_file
from brandfork.features.branding import render_mozconfig
from brandfork.platform.logging import logger
from brandfork.ui.cli.args.options import MozconfigArgs

_PROFILE_GENERATION_ENV = "BRANDFORK_GENERATE_PROFILE"


@final
class MozconfigCommand:
    """Render the internal build configuration for a brand."""

    def __init__(self, args: MozconfigArgs) -> None:
        self.args = args
        self.config = Config.load(args.config_path)

    def execute(self) -> str:
        content = render_mozconfig(
            self.args.brand_key,
            self.args.build_mode,
            self.args.platform,
            self.config.update_hostname,
            profile_generation=os.environ.get(_PROFILE_GENERATION_ENV) == "1",
        )
        if self.args.output is None:
            _ = sys.stdout.write(content)
        else:
            write_text_file(self.args.output, content)
            logger.info("Build configuration written to %s", self.args.output)
        return content
