"""Overlay feature: scan a maintainer-owned tree and project it onto the engine tree."""

from __future__ import annotations

from .domain.models import (
    MaterializationFailure,
    MaterializationReport,
    MaterializationStrategy,
    OverlayEntry,
    OverlayGroup,
    select_strategy,
)
from .usecases.materializer import OverlayMaterializer, materialize
from .usecases.scanner import scan

__all__ = [
    "MaterializationFailure",
    "MaterializationReport",
    "MaterializationStrategy",
    "OverlayEntry",
    "OverlayGroup",
    "OverlayMaterializer",
    "materialize",
    "scan",
    "select_strategy",
]
