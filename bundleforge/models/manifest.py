"""Manifest model: the per-fingerprint record of change markers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from bundleforge.models.assets import BundleType


class BundleManifest(BaseModel):
    """Change markers observed for every input of a bundle at its last build.

    The manifest carries its own ``(bundle_type, fingerprint)`` key so that a
    file copied or renamed into the wrong slot is detected on load.
    """

    model_config = ConfigDict(frozen=True)

    bundle_type: BundleType
    fingerprint: str
    markers: dict[str, str]  # logical path -> change marker

    def matches(self, bundle_type: BundleType, fingerprint: str) -> bool:
        return self.bundle_type is bundle_type and self.fingerprint == fingerprint
