"""Branding feature: turn a brand definition into engine build inputs."""

from __future__ import annotations

from .domain.models import (
    AssetArtifact,
    BrandDefinition,
    BrandLayout,
    BrandOutputReport,
    ReleaseInfo,
    merge_layers,
)
from .usecases.mozconfig import render_mozconfig
from .usecases.pipeline import BrandAssetPipeline, apply
from .usecases.resolver import BrandResolver

__all__ = [
    "AssetArtifact",
    "BrandAssetPipeline",
    "BrandDefinition",
    "BrandLayout",
    "BrandOutputReport",
    "BrandResolver",
    "ReleaseInfo",
    "apply",
    "merge_layers",
    "render_mozconfig",
]
