"""Command execution package for CLI."""

from brandfork.ui.cli.commands.brand import BrandApplyCommand, BrandListCommand
from brandfork.ui.cli.commands.init_config import InitConfigCommand
from brandfork.ui.cli.commands.mozconfig import MozconfigCommand
from brandfork.ui.cli.commands.overlay import OverlayCommand

__all__ = [
    "BrandApplyCommand",
    "BrandListCommand",
    "InitConfigCommand",
    "MozconfigCommand",
    "OverlayCommand",
]
