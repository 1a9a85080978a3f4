"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from brandfork.config.config import Config
from brandfork.features.branding.usecases.mozconfig import BuildMode
from brandfork.features.overlay.domain.models import MaterializationStrategy
from brandfork.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from brandfork.ui.cli.args.options import (
    BrandApplyArgs,
    BrandListArgs,
    CLIArgs,
    InitConfigArgs,
    MozconfigArgs,
    OverlayArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="brandfork",
            description="brandfork - project an overlay and brand assets onto a vendored engine tree.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to brandfork.toml (defaults to <repo>/config/brandfork.toml)",
            metavar="CONFIG_PATH",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        overlay_parser = subparsers.add_parser(
            "overlay",
            help="Link or copy overlay files into the engine tree",
        )
        _ = overlay_parser.add_argument(
            "--strategy",
            type=str,
            choices=[strategy.value for strategy in MaterializationStrategy],
            help="Force symlink or copy instead of the platform default",
        )
        _ = overlay_parser.add_argument(
            "--source",
            type=str,
            help="Overlay root (defaults to the configured src_dir)",
            metavar="SOURCE_ROOT",
        )
        _ = overlay_parser.add_argument(
            "--dest",
            type=str,
            help="Destination tree (defaults to the configured engine_dir)",
            metavar="DEST_ROOT",
        )
        ArgumentParser._add_verbosity(overlay_parser)

        brand_parser = subparsers.add_parser("brand", help="Inspect or apply brands")
        brand_subparsers = brand_parser.add_subparsers(dest="brand_command", required=True)
        _ = brand_subparsers.add_parser("list", help="List brands in the brand store")

        apply_parser = brand_subparsers.add_parser(
            "apply",
            help="Regenerate the engine branding directory for a brand",
        )
        _ = apply_parser.add_argument("brand_key", type=str, metavar="BRAND")
        _ = apply_parser.add_argument(
            "--platform",
            type=str,
            default=sys.platform,
            help="Target platform (linux, darwin, win32); defaults to the host",
        )
        _ = apply_parser.add_argument(
            "--compat",
            action="store_true",
            help="Target the ABI-reduced generic build and its update channel",
        )
        ArgumentParser._add_verbosity(apply_parser)

        mozconfig_parser = subparsers.add_parser(
            "mozconfig",
            help="Print the internal build configuration for a brand",
        )
        _ = mozconfig_parser.add_argument("brand_key", type=str, metavar="BRAND")
        _ = mozconfig_parser.add_argument(
            "--build-mode",
            type=str,
            default=BuildMode.DEV.value,
            help="Build mode (dev, debug, release)",
        )
        _ = mozconfig_parser.add_argument(
            "--platform",
            type=str,
            default=sys.platform,
            help="Target platform used for release optimisation flags",
        )
        _ = mozconfig_parser.add_argument(
            "--output",
            type=str,
            help="Write the fragment to a file instead of standard output",
            metavar="FILE",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a default configuration file",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "overlay":
            return OverlayArgs(
                command="overlay",
                config_path=config_path,
                strategy=(
                    MaterializationStrategy.from_user_input(parsed_args.strategy)
                    if parsed_args.strategy
                    else None
                ),
                source_root=Path(parsed_args.source) if parsed_args.source else None,
                dest_root=Path(parsed_args.dest) if parsed_args.dest else None,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "brand" and parsed_args.brand_command == "list":
            return BrandListArgs(command="brand-list", config_path=config_path)

        if command == "brand":
            return BrandApplyArgs(
                command="brand-apply",
                config_path=config_path,
                brand_key=parsed_args.brand_key,
                platform=parsed_args.platform,
                compat_mode=parsed_args.compat,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "mozconfig":
            return MozconfigArgs(
                command="mozconfig",
                config_path=config_path,
                brand_key=parsed_args.brand_key,
                build_mode=parsed_args.build_mode,
                platform=parsed_args.platform,
                output=Path(parsed_args.output) if parsed_args.output else None,
            )

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                config_path=config_path,
                force=parsed_args.force,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
