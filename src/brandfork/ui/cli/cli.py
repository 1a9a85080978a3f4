"""Command line interface for brandfork."""

import sys
from typing import final

from brandfork.platform.logging import logger
from brandfork.shared.errors import BrandforkError
from brandfork.ui.cli.args import ArgumentParser
from brandfork.ui.cli.args.options import (
    BrandApplyArgs,
    BrandListArgs,
    CLIArgs,
    InitConfigArgs,
    MozconfigArgs,
    OverlayArgs,
)
from brandfork.ui.cli.commands import (
    BrandApplyCommand,
    BrandListCommand,
    InitConfigCommand,
    MozconfigCommand,
    OverlayCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, OverlayArgs):
                reports = OverlayCommand(args).execute()
                if any(not report.success for report in reports):
                    sys.exit(1)
                return

            if isinstance(args, BrandListArgs):
                _ = BrandListCommand(args).execute()
                return

            if isinstance(args, BrandApplyArgs):
                _ = BrandApplyCommand(args).execute()
                return

            if isinstance(args, MozconfigArgs):
                _ = MozconfigCommand(args).execute()
                return

            assert isinstance(args, InitConfigArgs)
            _ = InitConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except BrandforkError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
