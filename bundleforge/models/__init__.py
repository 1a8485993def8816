"""Bundleforge data models: all Pydantic v2, all frozen (immutable)."""

from bundleforge.models.assets import (
    AssetDescriptor,
    BundleResult,
    BundleStatus,
    BundleType,
)
from bundleforge.models.manifest import BundleManifest

__all__ = [
    # assets
    "AssetDescriptor",
    "BundleType",
    "BundleStatus",
    "BundleResult",
    # manifest
    "BundleManifest",
]
