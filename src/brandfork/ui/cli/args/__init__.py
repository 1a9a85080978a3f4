"""Command line argument handling package."""

from brandfork.ui.cli.args.parser import ArgumentParser
from brandfork.ui.cli.args.options import (
    BrandApplyArgs,
    BrandListArgs,
    CLIArgs,
    InitConfigArgs,
    MozconfigArgs,
    OverlayArgs,
)

__all__ = [
    "ArgumentParser",
    "BrandApplyArgs",
    "BrandListArgs",
    "CLIArgs",
    "InitConfigArgs",
    "MozconfigArgs",
    "OverlayArgs",
]
