"""Overlay domain types."""

from .models import (
    MaterializationFailure,
    MaterializationReport,
    MaterializationStrategy,
    OverlayEntry,
    OverlayEvent,
    OverlayGroup,
    select_strategy,
)

__all__ = [
    "MaterializationFailure",
    "MaterializationReport",
    "MaterializationStrategy",
    "OverlayEntry",
    "OverlayEvent",
    "OverlayGroup",
    "select_strategy",
]
