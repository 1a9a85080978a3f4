"""Display utilities for CLI output."""

from brandfork.ui.cli.display.brand_result import BrandResultDisplay
from brandfork.ui.cli.display.overlay_result import OverlayResultDisplay

__all__ = ["BrandResultDisplay", "OverlayResultDisplay"]
