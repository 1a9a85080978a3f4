"""Branding domain types."""

from .models import (
    AssetArtifact,
    BrandDefinition,
    BrandLayout,
    BrandOutputReport,
    ReleaseInfo,
    merge_layers,
)

__all__ = [
    "AssetArtifact",
    "BrandDefinition",
    "BrandLayout",
    "BrandOutputReport",
    "ReleaseInfo",
    "merge_layers",
]
