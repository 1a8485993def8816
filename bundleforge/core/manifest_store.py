"""Manifest store: one JSON manifest per (bundle type, fingerprint).

Storage layout: {cache_path}/{bundle_type}_{fingerprint}.json
Manifests are parsed as data, never executed. Stale manifests are kept.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from bundleforge.core.file_writer import AtomicFileWriter
from bundleforge.core.hasher import canonical_json_bytes
from bundleforge.models.assets import BundleType
from bundleforge.models.manifest import BundleManifest

logger = logging.getLogger(__name__)


class ManifestStore:
    """Persists the change markers recorded at each successful build.

    Parameters
    ----------
    cache_path:
        Root directory for manifest files.
    writer:
        Writer used for all saves. Defaults to an ``AtomicFileWriter``.
    """

    def __init__(
        self, cache_path: Path | str, writer: AtomicFileWriter | None = None
    ) -> None:
        self._base = Path(cache_path)
        self._writer = writer or AtomicFileWriter()

    @property
    def cache_path(self) -> Path:
        return self._base

    def path_for(self, bundle_type: BundleType, fingerprint: str) -> Path:
        """Compute the manifest location for a key."""
        return self._base / f"{bundle_type.value}_{fingerprint}.json"

    def load(self, bundle_type: BundleType, fingerprint: str) -> BundleManifest | None:
        """Return the stored manifest, or None if there is no usable one.

        An unparseable manifest, or one recorded under a different key, is
        reported and treated as absent so the bundle gets rebuilt.
        """
        path = self.path_for(bundle_type, fingerprint)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None

        try:
            manifest = BundleManifest.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring unreadable manifest %s: %s", path, exc)
            return None

        if not manifest.matches(bundle_type, fingerprint):
            logger.warning(
                "Ignoring manifest %s recorded for %s_%s",
                path,
                manifest.bundle_type.value,
                manifest.fingerprint,
            )
            return None
        return manifest

    def save(
        self,
        bundle_type: BundleType,
        fingerprint: str,
        markers: Mapping[str, str],
    ) -> BundleManifest:
        """Replace the manifest for a key with *markers*."""
        manifest = BundleManifest(
            bundle_type=bundle_type,
            fingerprint=fingerprint,
            markers=dict(markers),
        )
        path = self.path_for(bundle_type, fingerprint)
        self._writer.write(path, canonical_json_bytes(manifest.model_dump(mode="json")))
        logger.debug("Saved manifest %s (%d entries)", path, len(manifest.markers))
        return manifest

    def exists(self, bundle_type: BundleType, fingerprint: str) -> bool:
        return self.path_for(bundle_type, fingerprint).exists()
